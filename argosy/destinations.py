"""
Argosy destinations: typed storage bound to an argument.

An Argument never stores its own value. It owns a destination, and the parser reaches
the destination through the Argument's mutation entry points only:

    argument.set_dest_to_default()             -> destination.reset(default) / destination.clear()
    argument.set_dest_to_value_from_str(text)  -> destination.assign(text)
    argument.set_dest_to_values_from_strs(seq) -> destination.extend(seq)

Capabilities (Destination)
- parse(text): convert one raw token, raising ValueError when it cannot.
- assign(text): parse and store a single value.
- extend(texts): parse and store a sequence (ListDest only; scalars raise TypeError).
- reset(default): apply a default; strings are parsed, other objects are stored as-is.
- clear(): restore the value the destination was created with.

Concrete destinations
- StrDest, BoolDest, IntDest, FloatDest: scalar conversions.
- EnumDest: members of an enum.Enum, addressed by name (case-insensitive); exposes choices.
- ListDest: a list of items parsed by an inner scalar destination; required by "*" and "+" arities.

Example
    >>> jobs = IntDest(1)
    >>> jobs.assign("8"); jobs.value
    8
    >>> jobs.clear(); jobs.value
    1
"""
import copy
import enum
from abc import ABC, abstractmethod


class Destination(ABC):
    """
    Base destination. Subclasses only implement parse(); storage rules live here.
    """
    multiple = False
    typename = "value"

    def __init__(self, initial=None, /):
        self._initial = initial
        self.value = copy.copy(initial)

    @property
    def initial(self):
        return self._initial

    @property
    def choices(self):
        """
        Allowed raw spellings, when the destination itself is a closed set (empty otherwise).
        """
        return ()

    @abstractmethod
    def parse(self, text, /):
        raise NotImplementedError

    def assign(self, text, /):
        self.value = self.parse(text)

    def extend(self, texts, /):
        raise TypeError(f"{type(self).__name__} holds a single {self.typename}, not a sequence")

    def reset(self, default, /):
        self.value = self.parse(default) if isinstance(default, str) else copy.copy(default)

    def clear(self):
        self.value = copy.copy(self._initial)

    def __repr__(self):
        return f"{type(self).__name__}(value={self.value!r})"

    def __rich_repr__(self):
        yield "value", self.value


class StrDest(Destination):
    typename = "string"

    def parse(self, text, /):
        return str(text)


class BoolDest(Destination):
    typename = "boolean"

    truthy = frozenset(("true", "yes", "on", "1"))
    falsy = frozenset(("false", "no", "off", "0"))

    def __init__(self, initial=False, /):
        super().__init__(initial)

    def parse(self, text, /):
        if (lowered := text.strip().lower()) in self.truthy:
            return True
        if lowered in self.falsy:
            return False
        raise ValueError(f"expected a boolean, got {text!r}")


class IntDest(Destination):
    typename = "integer"

    def parse(self, text, /):
        # Plain decimal first ("08" is valid), then prefixed literals ("0x10", "0b11").
        for base in (10, 0):
            try:
                return int(text, base)
            except ValueError:
                continue
        raise ValueError(f"expected an integer, got {text!r}")


class FloatDest(Destination):
    typename = "number"

    def parse(self, text, /):
        try:
            return float(text)
        except ValueError:
            raise ValueError(f"expected a number, got {text!r}") from None


class EnumDest(Destination):
    """
    Store members of an enum.Enum. Raw tokens name the member (case-insensitive).
    """
    typename = "choice"

    def __init__(self, enumeration, initial=None, /):
        if not isinstance(enumeration, type) or not issubclass(enumeration, enum.Enum):
            raise TypeError("EnumDest() first argument must be an enum.Enum subclass")
        self._enumeration = enumeration
        super().__init__(initial)

    @property
    def enumeration(self):
        return self._enumeration

    @property
    def choices(self):
        return tuple(name.lower() for name in self._enumeration.__members__)

    def parse(self, text, /):
        for name, member in self._enumeration.__members__.items():
            if name.lower() == text.strip().lower():
                return member
        raise ValueError(f"expected one of {', '.join(map(repr, self.choices))}, got {text!r}")


class ListDest(Destination):
    """
    Store a list of values, each parsed by an inner scalar destination (StrDest by default).
    """
    multiple = True
    typename = "list"

    def __init__(self, item=None, initial=(), /):
        if item is None:
            item = StrDest()
        if not isinstance(item, Destination) or item.multiple:
            raise TypeError("ListDest() item must be a scalar destination")
        self._item = item
        super().__init__(list(initial))

    @property
    def item(self):
        return self._item

    @property
    def choices(self):
        return self._item.choices

    def parse(self, text, /):
        return self._item.parse(text)

    def assign(self, text, /):
        self.value = [self.parse(text)]

    def extend(self, texts, /):
        self.value = [self.parse(text) for text in texts]

    def reset(self, default, /):
        if isinstance(default, str):
            self.value = [self.parse(default)]
        else:
            self.value = [self.parse(item) if isinstance(item, str) else item for item in default]


__all__ = (
    "Destination",
    "StrDest",
    "BoolDest",
    "IntDest",
    "FloatDest",
    "EnumDest",
    "ListDest",
)
