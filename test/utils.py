"""
Utility tests (Unset sentinel, coalesce, ordinal, basename, palette).

Conventions
- Test method names follow CamelCase per project convention.
"""
import copy
import pickle
import sys
import unittest
from unittest import TestCase

from argosy.utils import Unset, UnsetType, coalesce, ordinal, basename, palette


class TestUnset(TestCase):
    """Semantic guarantees of the Unset sentinel."""

    def testSingleton(self):
        self.assertIs(UnsetType(), Unset)

    def testFalsyAndDistinctFromNone(self):
        self.assertFalse(Unset)
        self.assertIsNot(Unset, None)
        self.assertEqual(repr(Unset), "Unset")

    def testCopiesPreserveIdentity(self):
        self.assertIs(copy.copy(Unset), Unset)
        self.assertIs(copy.deepcopy(Unset), Unset)
        self.assertIs(pickle.loads(pickle.dumps(Unset)), Unset)

    def testUnionWithTypes(self):
        self.assertIsInstance(Unset, str | Unset)
        self.assertIsInstance("text", str | Unset)
        self.assertNotIsInstance(3, str | Unset)

    def testSubclassingForbidden(self):
        with self.assertRaises(TypeError):
            type("Derived", (UnsetType,), {})


class TestCoalesce(TestCase):

    def testUnsetReplaced(self):
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")
        self.assertIsNone(coalesce(Unset))

    def testFalseyValuesPreserved(self):
        self.assertIsNone(coalesce(None, "fallback"))
        self.assertEqual(coalesce(0, 1), 0)
        self.assertEqual(coalesce("", "x"), "")


class TestOrdinal(TestCase):

    def testWords(self):
        self.assertEqual(ordinal(1), "first")
        self.assertEqual(ordinal(10), "tenth")

    def testSuffixes(self):
        self.assertEqual(ordinal(11), "11th")
        self.assertEqual(ordinal(12), "12th")
        self.assertEqual(ordinal(21), "21st")
        self.assertEqual(ordinal(22), "22nd")
        self.assertEqual(ordinal(23), "23rd")
        self.assertEqual(ordinal(112), "112th")

    def testInvalid(self):
        with self.assertRaises(ValueError):
            ordinal(0)
        with self.assertRaises(TypeError):
            ordinal("1")


class TestBasename(TestCase):

    def testPath(self):
        self.assertEqual(basename("/usr/local/bin/tool"), "tool")

    def testTrailingSeparator(self):
        self.assertEqual(basename("dir/tool/"), "tool")

    def testBareName(self):
        self.assertEqual(basename("tool"), "tool")


class TestPalette(TestCase):

    def tearDown(self):
        if hasattr(sys.modules["__main__"], "__styles__"):
            del sys.modules["__main__"].__styles__

    def testMissingKeysAreEmpty(self):
        styles = palette({"a": "bold"})
        self.assertEqual(styles["a"], "bold")
        self.assertEqual(styles["missing"], "")

    def testHostOverrides(self):
        sys.modules["__main__"].__styles__ = {"a": "italic"}
        self.assertEqual(palette({"a": "bold"})["a"], "italic")


if __name__ == "__main__":
    unittest.main()
