r"""
Argosy argument specifications.

Overview
- Argument: one registered option ("-o", "--output") or positional ("file").
- Action: what matching an option does (store a following value, or store a boolean).
- Nargs: how many value tokens an option consumes ("0", "1", "?", "*", "+").
- ShowIn: where an argument is displayed in help (usage line and listing, or listing only).

Fluent configuration
- Every configurable field is a single method acting as both getter and setter:
  • argument.help("text") stores and returns the same Argument (chainable).
  • argument.help() returns the stored value.
  The Unset sentinel marks “no argument given”, so None stays a usable value.
- Mutators validate immediately and fail fast:
  • MalformedArgumentError for bad names (raised by the constructor).
  • InvalidActionError for unknown actions or actions a positional cannot take.
  • InvalidArityError for nargs values that contradict the action or the destination.
  • InvalidDefaultError for defaults the destination (or the choices) cannot accept.
  • TypeError/ValueError for plain misuse (wrong types, empty strings, duplicate choices).

Names
- long name: at least two characters, at most two leading dashes, non-empty after the dashes.
  No dash means positional ("file"); one or two dashes mean option ("-long", "--long").
- short name: optional "-x" alias, options only, and not allowed next to a single-dash long
  name (the two spellings would compete for the same form).

Destinations
- Values never live on the Argument itself; they live in a Destination (see argosy.destinations).
  When no destination is given a StrDest is created, and it is swapped for a BoolDest when
  the action becomes STORE_TRUE/STORE_FALSE.

Quick example:
    >>> from argosy import Argument, Action, IntDest
    >>> jobs = Argument("--jobs", "-j", IntDest(1)).help("parallel jobs").metavar("N")
    >>> verbose = Argument("--verbose", "-v").action(Action.STORE_TRUE)
    >>> verbose.nargs()
    <Nargs.ZERO: '0'>
"""
import enum

from rich.text import Text

from .destinations import Destination, StrDest, BoolDest
from .faults import (
    MalformedArgumentError,
    InvalidActionError,
    InvalidArityError,
    InvalidDefaultError,
    InvalidChoiceError,
    InvalidValueError,
)
from .tokens import split_leading_dashes, is_option
from .utils import Unset, coalesce


class Action(enum.Enum):
    """
    Effect of matching an option.
    """
    STORE = "store"
    STORE_TRUE = "store_true"
    STORE_FALSE = "store_false"


class Nargs(enum.StrEnum):
    """
    Arity codes. bounds gives (minimum, maximum) value tokens; maximum None is unbounded.
    """
    ZERO = "0"
    ONE = "1"
    OPTIONAL = "?"
    ZERO_OR_MORE = "*"
    ONE_OR_MORE = "+"

    @property
    def bounds(self):
        return {
            "0": (0, 0),
            "1": (1, 1),
            "?": (0, 1),
            "*": (0, None),
            "+": (1, None),
        }[self.value]

    @property
    def multiple(self):
        return self in (Nargs.ZERO_OR_MORE, Nargs.ONE_OR_MORE)


class ShowIn(enum.Enum):
    """
    Help placement: usage line and argument listing, or argument listing only.
    """
    USAGE_AND_DESCRIPTION = "usage-and-description"
    DESCRIPTION_ONLY = "description-only"


class Argument:
    """
    One option or positional, its display metadata, and its bound destination.

    Construction
    - Argument(long_name, short_name="", dest=Unset)
      • long_name: "file" (positional), "-name" or "--name" (option).
      • short_name: "" or a "-x" alias (options only).
      • dest: a Destination instance; a StrDest is created when omitted.

    Defaults after construction
    - action STORE, nargs "1", metavar = upper-cased name, required False, no default,
      choices taken from the destination (EnumDest exposes its member names),
      show_in USAGE_AND_DESCRIPTION.

    Identity (read-only)
    - long_name, short_name, name (destination key: "--dry-run" -> "dry_run"),
      dest, value (current destination value).
    """

    def __init__(self, long_name, short_name="", dest=Unset, /):
        if not isinstance(long_name, str):
            raise TypeError("argument long name must be a string")
        if not isinstance(short_name, str):
            raise TypeError("argument short name must be a string")
        if not isinstance(dest, Destination | Unset):
            raise TypeError("argument destination must be a Destination instance")

        long_name, short_name = long_name.strip(), short_name.strip()
        dashes, name = split_leading_dashes(long_name)

        if len(long_name) < 2:
            raise MalformedArgumentError(
                "argument name %r must be at least two characters long" % long_name,
                input=long_name,
                hint="use a longer name such as 'file' or '--file'",
            )
        if len(dashes) > 2:
            raise MalformedArgumentError(
                "more than two dashes in argument name %r" % long_name,
                input=long_name,
                hint="use '-' or '--' as prefix (for example: --%s)" % name,
            )
        if not name:
            raise MalformedArgumentError(
                "argument name %r has nothing after its dashes" % long_name,
                input=long_name,
                hint="add a name after the dashes (for example: --name)",
            )
        if short_name:
            if not dashes:
                raise MalformedArgumentError(
                    "positional argument %r cannot have a short option %r" % (long_name, short_name),
                    input=short_name,
                    hint="drop the short option or give the argument a dashed name",
                )
            if len(short_name) != 2 or not is_option(short_name):
                raise MalformedArgumentError(
                    "short option %r must be a dash followed by one character" % short_name,
                    input=short_name,
                    hint="use a form like '-v'",
                )
            if len(dashes) == 1:
                raise MalformedArgumentError(
                    "single-dash option %r cannot also have a short option %r" % (long_name, short_name),
                    input=short_name,
                    hint="use a double-dash long name (for example: -%s/--%s)" % (short_name[1:], name),
                )

        self._long_name = long_name
        self._short_name = short_name
        self._implicit = dest is Unset
        self._dest = StrDest() if dest is Unset else dest

        self._action = Action.STORE
        self._nargs = Nargs.ONE
        self._metavar = name.upper()
        self._choices = tuple(self._dest.choices)
        # Destination-supplied choices are matched the way the destination parses them.
        self._folded = bool(self._choices)
        self._required = False
        self._default = Unset
        self._help = None
        self._group_name = None
        self._show_in = ShowIn.USAGE_AND_DESCRIPTION
        self._owner = None  # ArgumentGroup holding this argument

    # --- identity -------------------------------------------------------------

    @property
    def long_name(self):
        return self._long_name

    @property
    def short_name(self):
        return self._short_name

    @property
    def name(self):
        return split_leading_dashes(self._long_name)[1].replace("-", "_")

    @property
    def dest(self):
        return self._dest

    @property
    def value(self):
        return self._dest.value

    def option_strings(self):
        """
        Every spelling that selects this argument on the command line (empty for positionals).
        """
        if self.positional():
            return ()
        return tuple(option for option in (self._long_name, self._short_name) if option)

    def positional(self):
        # Guaranteed by the constructor; kept as a guard for subclasses.
        assert len(self._long_name) > 1
        return self._long_name[0] != "-"

    def required(self, required=Unset, /):
        """
        Positionals are always required; options report the stored flag.
        """
        if required is Unset:
            return True if self.positional() else self._required
        if not isinstance(required, bool):
            raise TypeError("argument 'required' must be a boolean")
        self._required = required
        return self

    def default_set(self):
        return self._default is not Unset

    # --- fluent configuration -----------------------------------------------------

    def help(self, text=Unset, /):
        if text is Unset:
            return self._help
        if not isinstance(text, str | Text):
            raise TypeError("argument 'help' must be a string")
        if isinstance(text, str) and not (text := text.strip()):
            raise ValueError("argument 'help' cannot be empty")
        self._help = text
        return self

    def action(self, action=Unset, /):
        """
        Set the action and force a consistent arity: STORE_TRUE/STORE_FALSE -> "0", STORE -> "1".
        """
        if action is Unset:
            return self._action
        try:
            action = Action(action)
        except ValueError:
            raise InvalidActionError(
                "unrecognized action %r for argument %r" % (action, self._long_name),
                input=self._long_name,
                argument=self,
                hint="use one of: %s" % ", ".join(member.name for member in Action),
            ) from None

        if self.positional() and action is not Action.STORE:
            raise InvalidActionError(
                "positional argument %r only supports the STORE action" % self._long_name,
                input=self._long_name,
                argument=self,
                hint="use a dashed name to declare a boolean flag",
            )

        dest = self._dest
        if self._implicit:
            if action is not Action.STORE:
                dest = BoolDest(action is Action.STORE_FALSE)
            elif isinstance(dest, BoolDest):
                dest = StrDest()
        # A stored default must still fit once the destination changes
        self._check_default(self._default, dest, self._choices)

        self._action = action
        self._dest = dest
        self.nargs(Nargs.ONE if action is Action.STORE else Nargs.ZERO)
        return self

    def nargs(self, nargs=Unset, /):
        if nargs is Unset:
            return self._nargs
        try:
            nargs = Nargs(str(nargs) if isinstance(nargs, int) and not isinstance(nargs, bool) else nargs)
        except ValueError:
            raise InvalidArityError(
                "invalid nargs %r for argument %r (must be one of: %s)" % (
                    nargs, self._long_name, ", ".join(member.value for member in Nargs)
                ),
                input=self._long_name,
                argument=self,
                hint="pick an arity code such as '1' or '?'",
            ) from None

        # Ensure nargs is consistent with the action and the destination
        if self._action in (Action.STORE_TRUE, Action.STORE_FALSE) and nargs is not Nargs.ZERO:
            raise InvalidArityError(
                "%s action requires nargs to be '0' for argument %r" % (self._action.name, self._long_name),
                input=self._long_name,
                argument=self,
                hint="boolean actions never consume values",
            )
        if self._action is Action.STORE and nargs is Nargs.ZERO:
            raise InvalidArityError(
                "STORE action requires at least one possible value for argument %r" % self._long_name,
                input=self._long_name,
                argument=self,
                hint="use STORE_TRUE or STORE_FALSE for options that take no value",
            )
        if self.positional() and nargs is not Nargs.ONE:
            raise InvalidArityError(
                "positional argument %r requires nargs to be '1'" % self._long_name,
                input=self._long_name,
                argument=self,
                hint="positionals consume exactly one token each",
            )
        if nargs.multiple and not self._dest.multiple:
            raise InvalidArityError(
                "nargs %r for argument %r requires a list destination" % (nargs.value, self._long_name),
                input=self._long_name,
                argument=self,
                hint="bind the argument to a ListDest to collect several values",
            )

        self._nargs = nargs
        return self

    def metavar(self, metavar=Unset, /):
        if metavar is Unset:
            return self._metavar
        if not isinstance(metavar, str):
            raise TypeError("argument 'metavar' must be a string")
        if not (metavar := metavar.strip()):
            raise ValueError("argument 'metavar' cannot be empty")
        self._metavar = metavar
        return self

    def choices(self, choices=Unset, /):
        if choices is Unset:
            return self._choices
        if isinstance(choices, str):
            raise TypeError("argument 'choices' must be an iterable of strings, not a string")
        sanitized = []
        for choice in choices:
            if not isinstance(choice, str):
                raise TypeError("argument 'choices' must contain only strings")
            if choice in sanitized:
                raise ValueError("argument 'choices' cannot contain duplicates")
            sanitized.append(choice)
        self._check_default(self._default, self._dest, tuple(sanitized), folded=False)
        self._choices = tuple(sanitized)
        self._folded = False
        return self

    def default_value(self, value=Unset, /):
        """
        Store a fallback applied before every scan. Strings are validated against the
        destination (and choices) right away.
        """
        if value is Unset:
            return coalesce(self._default)
        self._check_default(value, self._dest, self._choices)
        self._default = value
        return self

    def _admits(self, text, choices, folded):
        if folded:
            return text.strip().lower() in choices
        return text in choices

    def _check_default(self, value, dest, choices, *, folded=Unset):
        if not isinstance(value, str):
            return
        if choices and not self._admits(value, choices, coalesce(folded, self._folded)):
            raise InvalidDefaultError(
                "default %r of argument %r is not one of its choices" % (value, self._long_name),
                input=value,
                argument=self,
                hint="choose from %s" % ", ".join(map(repr, choices)),
            )
        try:
            dest.parse(value)
        except ValueError as exception:
            raise InvalidDefaultError(
                "default %r of argument %r does not fit its destination: %s" % (value, self._long_name, exception),
                input=value,
                argument=self,
                hint="pass a %s as default for %s" % (dest.typename, self._metavar),
            ) from None

    def group_name(self, name=Unset, /):
        if name is Unset:
            return self._group_name
        if not isinstance(name, str):
            raise TypeError("argument 'group_name' must be a string")
        if not (name := name.strip()):
            raise ValueError("argument 'group_name' cannot be empty")
        self._group_name = name
        return self

    def show_in(self, show_in=Unset, /):
        if show_in is Unset:
            return self._show_in
        if not isinstance(show_in, ShowIn):
            raise TypeError("argument 'show_in' must be a ShowIn member")
        self._show_in = show_in
        return self

    # --- destination entry points -----------------------------------------------

    def set_dest_to_default(self):
        if self._default is Unset:
            return self._dest.clear()
        try:
            self._dest.reset(self._default)
        except (TypeError, ValueError) as exception:
            raise InvalidDefaultError(
                "default %r of argument %r cannot be applied: %s" % (self._default, self._long_name, exception),
                input=self._default,
                argument=self,
                hint="pass a %s as default for %s" % (self._dest.typename, self._metavar),
            ) from None

    def clear_dest(self):
        self._dest.clear()

    def set_dest_to_value_from_str(self, text, /):
        self._dest.assign(self._validated(text))

    def set_dest_to_values_from_strs(self, texts, /):
        self._dest.extend([self._validated(text) for text in texts])

    def _validated(self, text):
        if self._choices and not self._admits(text, self._choices, self._folded):
            raise InvalidChoiceError(
                "invalid choice %r for argument %r" % (text, self._long_name),
                input=text,
                argument=self,
                hint="choose from %s" % ", ".join(map(repr, self._choices)),
            )
        try:
            self._dest.parse(text)
        except ValueError as exception:
            raise InvalidValueError(
                "invalid value %r for argument %r: %s" % (text, self._long_name, exception),
                input=text,
                argument=self,
                hint="pass a %s for %s" % (self._dest.typename, self._metavar),
            ) from None
        return text

    # --- representation -----------------------------------------------------------

    def __rich_repr__(self):
        yield "long_name", self._long_name
        yield "short_name", self._short_name
        yield "action", self._action
        yield "nargs", self._nargs
        yield "metavar", self._metavar
        yield "choices", self._choices
        yield "required", self.required()
        yield "default", coalesce(self._default)
        yield "group_name", self._group_name
        yield "show_in", self._show_in
        yield "dest", self._dest

    def __repr__(self):
        return "argument(%s)" % ", ".join("%s=%r" % pair for pair in self.__rich_repr__())


__all__ = (
    # Enumerations
    "Action",
    "Nargs",
    "ShowIn",

    # Specification
    "Argument",
)
