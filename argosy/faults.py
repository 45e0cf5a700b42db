"""
Argosy faults (errors) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every failure. Codes are grouped
  by category so logs and searches stay predictable:
  • 21xxx configuration faults (the program registered something inconsistent).
  • 22xxx input faults (the user typed something the parser cannot accept).
- ArgumentParsingError: base type carrying a message plus structured options
  (code, title, hint, input, index, argument, ...) that knows how to render itself.
- ConfigurationError / InputError: the two categories, so callers can branch on the
  kind of failure without matching message text.
- trigger(): central entry point to surface a fault (raise it, or render and exit in shell mode).

UX goals
- Lowercased, one-sentence messages that name the offending token and its position.
- A single actionable hint per fault.
- Styling configurable via __styles__ in __main__; numeric codes relabelled via __codes__.
"""
import sys
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset, coalesce, palette

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping
    - configuration (21xxx)
      • MALFORMED_ARGUMENT, INVALID_ACTION, INVALID_ARITY, INVALID_DEFAULT,
        DUPLICATE_OPTION
    - input (22xxx)
      • UNEXPECTED_TOKEN, MISSING_VALUE, ARITY_VIOLATION, INVALID_CHOICE,
        INVALID_VALUE, MISSING_POSITIONAL, MISSING_OPTION

    spacing leaves room for future additions without reshuffling existing codes.
    """
    # --- configuration faults (21xxx) ---
    MALFORMED_ARGUMENT = 21101
    INVALID_ACTION     = 21102
    INVALID_ARITY      = 21103
    INVALID_DEFAULT    = 21104
    DUPLICATE_OPTION   = 21111

    # --- input faults (22xxx) ---
    UNEXPECTED_TOKEN   = 22101
    MISSING_VALUE      = 22111
    ARITY_VIOLATION    = 22112
    INVALID_CHOICE     = 22113
    INVALID_VALUE      = 22114
    MISSING_POSITIONAL = 22121
    MISSING_OPTION     = 22122

    @property
    def category(self):
        """
        "configuration" for 21xxx codes, "input" for 22xxx codes.
        """
        return "configuration" if self.value // 1000 == 21 else "input"

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class ArgumentParsingError(Exception):
    """
    Base fault: a message plus read-only structured options.

    Well-known options
    - code: FaultCode (defaults to the class-level code)
    - title: short headline (defaults to the class-level title)
    - hint: one actionable sentence
    - input: the offending token or option string
    - index: 1-based position of the offending token
    - argument: the Argument involved, when there is one
    - prog, shell, colorful, fancy: rendering context merged in by the parser
    """
    code = Unset
    title = "argument parsing error"

    def __init__(self, message, /, **options):
        if not isinstance(message, str):
            raise TypeError(f"{type(self).__name__}() message must be a string")
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    def __getattribute__(self, name, /):
        # Structured data lives in options; class defaults fill the gaps.
        if name in ("code", "title", "hint", "input", "index", "argument"):
            options = object.__getattribute__(self, "options")
            if name in options:
                return options[name]
            return object.__getattribute__(self, name) if name in ("code", "title") else None
        return object.__getattribute__(self, name)

    @property
    def category(self):
        """
        "configuration" or "input", derived from the fault code.
        """
        return self.code.category if isinstance(self.code, FaultCode) else None

    def __str__(self):
        return self.message

    def __rich__(self):
        main = __import__("__main__")
        colorful = self.options.get("colorful", False)
        fancy = self.options.get("fancy", False)

        styles = palette({
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        })

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not colorful:
                return Text(str(fragment))
            if isinstance(fragment, Text):
                return fragment
            return Text(str(fragment), styles[style])

        prog = text(getattr(main, "__prog__", self.options.get("prog", "argosy")), "prog-name")
        code = self.code.normalize() if isinstance(self.code, FaultCode) else "-"

        header = Text.assemble(
            "[ ",
            prog,
            " — ",
            text(code, "code"),
            " | ",
            text(self.title.title(), "error-title"),
            " ]"
        )
        message = text(self.message, "error-message")
        renders = [message]
        if self.hint:
            renders.append(Text.assemble(text(" → ", "hint-arrow"), text(self.hint, "hint")))

        if fancy:
            return Panel(Group(*renders), title=header, title_align="left")

        return Group(header, *renders)

    def __trigger__(self):
        if not self.options.get("shell", False):
            raise self from None
        console.print(self)
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class ConfigurationError(ArgumentParsingError):
    """
    The program registered arguments that cannot work together.
    """
    title = "configuration error"


class InputError(ArgumentParsingError):
    """
    The token list handed to the parser does not fit the registered arguments.
    """
    title = "input error"


class MalformedArgumentError(ConfigurationError):
    code = FaultCode.MALFORMED_ARGUMENT
    title = "malformed argument"


class InvalidActionError(ConfigurationError):
    code = FaultCode.INVALID_ACTION
    title = "invalid action"


class InvalidArityError(ConfigurationError):
    code = FaultCode.INVALID_ARITY
    title = "invalid arity"


class InvalidDefaultError(ConfigurationError):
    code = FaultCode.INVALID_DEFAULT
    title = "invalid default"


class DuplicateOptionError(ConfigurationError):
    code = FaultCode.DUPLICATE_OPTION
    title = "duplicate option"


class UnexpectedTokenError(InputError):
    code = FaultCode.UNEXPECTED_TOKEN
    title = "unexpected argument"


class MissingValueError(InputError):
    code = FaultCode.MISSING_VALUE
    title = "missing value"


class ArityViolationError(InputError):
    code = FaultCode.ARITY_VIOLATION
    title = "not enough values"


class InvalidChoiceError(InputError):
    code = FaultCode.INVALID_CHOICE
    title = "invalid choice"


class InvalidValueError(InputError):
    code = FaultCode.INVALID_VALUE
    title = "invalid value"


class MissingPositionalError(InputError):
    code = FaultCode.MISSING_POSITIONAL
    title = "missing positional"


class MissingOptionError(InputError):
    code = FaultCode.MISSING_OPTION
    title = "missing option"


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see ArgumentParsingError).
    - options are merged into the fault via __replace__(**options) before triggering.
    - outside shell mode the fault is raised; in shell mode it is rendered to stderr
      through rich and the process exits with status 1.
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    fault.__replace__(**options).__trigger__()


__all__ = (
    "FaultCode",
    "ArgumentParsingError",
    "ConfigurationError",
    "InputError",
    "MalformedArgumentError",
    "InvalidActionError",
    "InvalidArityError",
    "InvalidDefaultError",
    "DuplicateOptionError",
    "UnexpectedTokenError",
    "MissingValueError",
    "ArityViolationError",
    "InvalidChoiceError",
    "InvalidValueError",
    "MissingPositionalError",
    "MissingOptionError",
    "trigger",
)
