# python
"""
Arguments module behavioral tests.

Scope
- Validate construction rules (name length, dash count, short option placement).
- Validate the fluent builder: setters return the same instance, getters return stored values.
- Validate action/arity coupling and the destination rules for multi-value arities.
- Validate the destination entry points (defaults, choices, conversion faults).

Conventions
- Test method names follow CamelCase per project convention.
- Configuration mistakes must surface as ConfigurationError subclasses; plain misuse as TypeError/ValueError.
"""

from __future__ import annotations

import enum
import unittest
from unittest import TestCase

from argosy import (
    Argument,
    Action,
    Nargs,
    ShowIn,
    StrDest,
    BoolDest,
    IntDest,
    EnumDest,
    ListDest,
    ConfigurationError,
    MalformedArgumentError,
    InvalidActionError,
    InvalidArityError,
    InvalidDefaultError,
    InvalidChoiceError,
    InvalidValueError,
    FaultCode,
)


class Level(enum.Enum):
    LOW = 1
    HIGH = 2


class TestArgumentConstruction(TestCase):
    """Name validation performed by the constructor."""

    def testEmptyNameRejected(self):
        with self.assertRaises(MalformedArgumentError):
            Argument("")

    def testSingleCharacterNameRejected(self):
        with self.assertRaises(MalformedArgumentError):
            Argument("x")

    def testTooManyDashesRejected(self):
        with self.assertRaises(MalformedArgumentError) as context:
            Argument("---verbose")
        self.assertEqual(context.exception.code, FaultCode.MALFORMED_ARGUMENT)
        self.assertEqual(context.exception.category, "configuration")

    def testDashesOnlyRejected(self):
        with self.assertRaises(MalformedArgumentError):
            Argument("--")

    def testShortOptionWithSingleDashLongNameRejected(self):
        with self.assertRaises(MalformedArgumentError):
            Argument("-v", "-x")

    def testShortOptionOnPositionalRejected(self):
        with self.assertRaises(MalformedArgumentError):
            Argument("file", "-f")

    def testShortOptionShapeValidated(self):
        with self.assertRaises(MalformedArgumentError):
            Argument("--verbose", "--v")
        with self.assertRaises(MalformedArgumentError):
            Argument("--verbose", "-vv")

    def testSingleDashLongOptionAccepted(self):
        argument = Argument("-v")
        self.assertFalse(argument.positional())
        self.assertEqual(argument.option_strings(), ("-v",))

    def testMalformedIsAConfigurationError(self):
        self.assertTrue(issubclass(MalformedArgumentError, ConfigurationError))

    def testNonStringNameRejected(self):
        with self.assertRaises(TypeError):
            Argument(3)

    def testNonDestinationRejected(self):
        with self.assertRaises(TypeError):
            Argument("--jobs", "-j", int)


class TestArgumentDefaults(TestCase):
    """State right after construction."""

    def testPositionalDetection(self):
        self.assertTrue(Argument("file").positional())
        self.assertFalse(Argument("--file").positional())

    def testMetavarIsUpperCasedName(self):
        self.assertEqual(Argument("--output", "-o").metavar(), "OUTPUT")
        self.assertEqual(Argument("input-file").metavar(), "INPUT-FILE")

    def testNameIsDestinationKey(self):
        self.assertEqual(Argument("--dry-run").name, "dry_run")
        self.assertEqual(Argument("source").name, "source")

    def testStoreOneByDefault(self):
        argument = Argument("--output")
        self.assertIs(argument.action(), Action.STORE)
        self.assertIs(argument.nargs(), Nargs.ONE)
        self.assertIsInstance(argument.dest, StrDest)

    def testOptionStrings(self):
        self.assertEqual(Argument("--output", "-o").option_strings(), ("--output", "-o"))
        self.assertEqual(Argument("file").option_strings(), ())

    def testNoDefaultAndNotRequired(self):
        argument = Argument("--output")
        self.assertFalse(argument.default_set())
        self.assertIsNone(argument.default_value())
        self.assertFalse(argument.required())
        self.assertIsNone(argument.help())
        self.assertIs(argument.show_in(), ShowIn.USAGE_AND_DESCRIPTION)

    def testEnumDestinationProvidesChoices(self):
        argument = Argument("--level", "", EnumDest(Level))
        self.assertEqual(argument.choices(), ("low", "high"))


class TestFluentBuilder(TestCase):
    """Setters chain on the same instance; getters read back."""

    def testChainingReturnsSameInstance(self):
        argument = Argument("--output", "-o")
        result = (
            argument
            .help("where to write")
            .metavar("PATH")
            .choices(["a", "b"])
            .required(True)
            .default_value("a")
            .group_name("output")
            .show_in(ShowIn.DESCRIPTION_ONLY)
        )
        self.assertIs(result, argument)
        self.assertEqual(argument.help(), "where to write")
        self.assertEqual(argument.metavar(), "PATH")
        self.assertEqual(argument.choices(), ("a", "b"))
        self.assertTrue(argument.required())
        self.assertEqual(argument.default_value(), "a")
        self.assertTrue(argument.default_set())
        self.assertEqual(argument.group_name(), "output")
        self.assertIs(argument.show_in(), ShowIn.DESCRIPTION_ONLY)

    def testPositionalAlwaysRequired(self):
        argument = Argument("file").required(False)
        self.assertTrue(argument.required())

    def testHelpMustBeNonEmpty(self):
        with self.assertRaises(ValueError):
            Argument("--output").help("   ")

    def testChoicesRejectDuplicates(self):
        with self.assertRaises(ValueError):
            Argument("--mode").choices(["fast", "safe", "fast"])

    def testChoicesRejectPlainString(self):
        with self.assertRaises(TypeError):
            Argument("--mode").choices("fast")

    def testDefaultMustMatchChoices(self):
        with self.assertRaises(InvalidDefaultError) as context:
            Argument("--mode").choices(["fast", "safe"]).default_value("slow")
        self.assertEqual(context.exception.code, FaultCode.INVALID_DEFAULT)
        self.assertEqual(context.exception.category, "configuration")

    def testDefaultMustParse(self):
        with self.assertRaises(InvalidDefaultError) as context:
            Argument("--jobs", "-j", IntDest()).default_value("many")
        self.assertEqual(context.exception.input, "many")

    def testChoicesRecheckStoredDefault(self):
        argument = Argument("--mode").default_value("slow")
        with self.assertRaises(InvalidDefaultError):
            argument.choices(["fast", "safe"])
        self.assertEqual(argument.choices(), ())

    def testBooleanActionRechecksStoredDefault(self):
        argument = Argument("--verbose").default_value("maybe")
        with self.assertRaises(InvalidDefaultError):
            argument.action(Action.STORE_TRUE)
        self.assertIs(argument.action(), Action.STORE)
        self.assertIs(argument.nargs(), Nargs.ONE)
        self.assertIsInstance(argument.dest, StrDest)

    def testBooleanActionKeepsFittingDefault(self):
        argument = Argument("--verbose").default_value("yes").action(Action.STORE_TRUE)
        argument.set_dest_to_default()
        self.assertIs(argument.value, True)

    def testUnusableDefaultFailsOnReset(self):
        argument = Argument("--tags", "", ListDest()).nargs("*").default_value(5)
        with self.assertRaises(InvalidDefaultError):
            argument.set_dest_to_default()

    def testShowInRequiresMember(self):
        with self.assertRaises(TypeError):
            Argument("--output").show_in("usage")


class TestActionAndArity(TestCase):
    """Action/arity coupling."""

    def testStoreTrueForcesZero(self):
        argument = Argument("--verbose", "-v").action(Action.STORE_TRUE)
        self.assertIs(argument.nargs(), Nargs.ZERO)
        self.assertIsInstance(argument.dest, BoolDest)
        self.assertIs(argument.value, False)

    def testStoreFalseStartsTrue(self):
        argument = Argument("--no-color").action(Action.STORE_FALSE)
        self.assertIs(argument.nargs(), Nargs.ZERO)
        self.assertIs(argument.value, True)

    def testStoreForcesOne(self):
        argument = Argument("--verbose").action(Action.STORE_TRUE).action(Action.STORE)
        self.assertIs(argument.nargs(), Nargs.ONE)
        self.assertIsInstance(argument.dest, StrDest)

    def testActionAcceptsValueSpelling(self):
        self.assertIs(Argument("--verbose").action("store_true").action(), Action.STORE_TRUE)

    def testUnknownActionRejected(self):
        with self.assertRaises(InvalidActionError) as context:
            Argument("--verbose").action("append")
        self.assertEqual(context.exception.code, FaultCode.INVALID_ACTION)

    def testPositionalCannotBeBoolean(self):
        with self.assertRaises(InvalidActionError):
            Argument("file").action(Action.STORE_TRUE)

    def testExplicitDestinationKeptForBooleanActions(self):
        dest = StrDest()
        argument = Argument("--verbose", "", dest).action(Action.STORE_TRUE)
        self.assertIs(argument.dest, dest)

    def testNargsInconsistentWithStoreTrue(self):
        argument = Argument("--verbose").action(Action.STORE_TRUE)
        with self.assertRaises(InvalidArityError):
            argument.nargs("1")

    def testNargsZeroInconsistentWithStore(self):
        with self.assertRaises(InvalidArityError):
            Argument("--output").nargs("0")

    def testUnknownNargsRejected(self):
        with self.assertRaises(InvalidArityError):
            Argument("--output").nargs("2")

    def testNargsAcceptsIntegersAndMembers(self):
        argument = Argument("--output")
        self.assertIs(argument.nargs(1).nargs(), Nargs.ONE)
        self.assertIs(argument.nargs(Nargs.OPTIONAL).nargs(), Nargs.OPTIONAL)

    def testMultiValueNeedsListDestination(self):
        with self.assertRaises(InvalidArityError):
            Argument("--tags").nargs("*")
        argument = Argument("--tags", "", ListDest()).nargs("+")
        self.assertIs(argument.nargs(), Nargs.ONE_OR_MORE)

    def testPositionalTakesExactlyOne(self):
        with self.assertRaises(InvalidArityError):
            Argument("file").nargs("?")

    def testArityBounds(self):
        self.assertEqual(Nargs.ZERO.bounds, (0, 0))
        self.assertEqual(Nargs.ONE.bounds, (1, 1))
        self.assertEqual(Nargs.OPTIONAL.bounds, (0, 1))
        self.assertEqual(Nargs.ZERO_OR_MORE.bounds, (0, None))
        self.assertEqual(Nargs.ONE_OR_MORE.bounds, (1, None))


class TestDestinationEntryPoints(TestCase):
    """set_dest_to_default / set_dest_to_value_from_str / set_dest_to_values_from_strs."""

    def testValueFromString(self):
        argument = Argument("--jobs", "-j", IntDest())
        argument.set_dest_to_value_from_str("8")
        self.assertEqual(argument.value, 8)

    def testDefaultApplied(self):
        argument = Argument("--jobs", "-j", IntDest()).default_value("3")
        argument.set_dest_to_value_from_str("8")
        argument.set_dest_to_default()
        self.assertEqual(argument.value, 3)

    def testDefaultWithoutValueClears(self):
        argument = Argument("--jobs", "-j", IntDest(1))
        argument.set_dest_to_value_from_str("8")
        argument.set_dest_to_default()
        self.assertEqual(argument.value, 1)

    def testChoicesEnforced(self):
        argument = Argument("--mode").choices(["fast", "safe"])
        argument.set_dest_to_value_from_str("safe")
        self.assertEqual(argument.value, "safe")
        with self.assertRaises(InvalidChoiceError) as context:
            argument.set_dest_to_value_from_str("slow")
        self.assertEqual(context.exception.input, "slow")
        self.assertIs(context.exception.argument, argument)
        self.assertEqual(context.exception.category, "input")
        self.assertEqual(argument.value, "safe")

    def testConversionFailure(self):
        argument = Argument("--jobs", "-j", IntDest())
        with self.assertRaises(InvalidValueError) as context:
            argument.set_dest_to_value_from_str("many")
        self.assertEqual(context.exception.code, FaultCode.INVALID_VALUE)
        self.assertIn("--jobs", str(context.exception))

    def testValuesFromStrings(self):
        argument = Argument("--ports", "-p", ListDest(IntDest())).nargs("*")
        argument.set_dest_to_values_from_strs(["80", "443"])
        self.assertEqual(argument.value, [80, 443])

    def testEnumChoicesIgnoreCase(self):
        argument = Argument("--level", "", EnumDest(Level)).default_value("Low")
        argument.set_dest_to_value_from_str("HIGH")
        self.assertIs(argument.value, Level.HIGH)
        argument.set_dest_to_default()
        self.assertIs(argument.value, Level.LOW)
        with self.assertRaises(InvalidChoiceError):
            argument.set_dest_to_value_from_str("medium")

    def testExplicitChoicesAreExact(self):
        argument = Argument("--level", "", EnumDest(Level)).choices(["low"])
        argument.set_dest_to_value_from_str("low")
        self.assertIs(argument.value, Level.LOW)
        with self.assertRaises(InvalidChoiceError):
            argument.set_dest_to_value_from_str("LOW")

    def testValuesCheckEveryChoice(self):
        argument = Argument("--modes", "", ListDest()).nargs("+").choices(["a", "b"])
        with self.assertRaises(InvalidChoiceError):
            argument.set_dest_to_values_from_strs(["a", "c"])


class TestRepresentation(TestCase):

    def testReprMentionsIdentity(self):
        text = repr(Argument("--output", "-o"))
        self.assertTrue(text.startswith("argument("))
        self.assertIn("'--output'", text)
        self.assertIn("'-o'", text)


if __name__ == "__main__":
    unittest.main()
