"""
Argosy argument parser: registration, scanning, and help.

What this module provides
- ArgumentParser: owns the program name, description, epilog, an ordered sequence of
  argument groups (one default group named "arguments:"), a formatter, and an output sink.

Parsing (parse_args)
1. reset: every argument with a default gets it; the others are cleared back to their
   destination's initial value, so repeated calls never leak state.
2. lookup: option strings (long and short) map to their argument; two different arguments
   claiming one string is a DuplicateOptionError raised before any token is read.
   Positionals are queued in declaration order.
3. scan, left to right:
   • known option string → recorded as specified, then by action/arity:
       STORE_TRUE/STORE_FALSE bind "true"/"false" and consume nothing;
       nargs "1" consumes the next token, which must exist and must not be option-shaped;
       nargs "?", "*", "+" collect consecutive non-option tokens up to their maximum.
   • anything else → the next queued positional takes it, or UnexpectedTokenError.
4. completion: unfilled positionals (MissingPositionalError) and unspecified required
   options (MissingOptionError) are fatal.
5. the ordered list of specified arguments is returned; repeats are kept, last value wins.

Faults
- Every failure is an ArgumentParsingError subclass raised through faults.trigger(), which
  merges the parser context (prog, shell, colorful, fancy). With shell=True the fault is
  rendered to stderr and the process exits instead.

Quick start
    from argosy import ArgumentParser, Action, IntDest

    parser = ArgumentParser("copy files around")
    parser.add_argument("--jobs", "-j", IntDest(1)).help("parallel jobs").metavar("N")
    parser.add_argument("--dry-run").action(Action.STORE_TRUE)
    parser.add_argument("source")

    specified = parser.parse_args(["-j", "4", "data/"])
    parser.namespace()  # {'jobs': 4, 'dry_run': False, 'source': 'data/'}
"""
import io
import logging
import sys
from collections import deque
from collections.abc import Iterable
from types import MappingProxyType

from rich.console import Console

from .arguments import Action, Nargs
from .faults import *
from .formatters import Formatter, DefaultFormatter
from .groups import ArgumentGroup
from .tokens import is_option
from .utils import Unset, coalesce, ordinal, basename

logger = logging.getLogger(__name__)


class ArgumentParser:
    """
    Command-line parser built from argument groups.

    Parameters
    - description: Unset | str
      Paragraph shown under the usage line.
    - prog: Unset | str
      Program name; defaults to the basename of sys.argv[0].
    - epilog: Unset | str
      Paragraph shown after the argument listings.
    - stream: Unset | file-like
      Output sink for print_help(); defaults to sys.stdout at print time.
    - formatter: Unset | Formatter
      Help renderer; defaults to DefaultFormatter().
    - colorful: bool
      Style help and fault output with the rich palette.
    - fancy: bool
      Render faults inside a panel.
    - shell: bool
      Print faults and exit with status 1 instead of raising them.
    - width: Unset | int
      Fixed console width for help; defaults to the terminal width (80 when not a terminal).
    """

    def __init__(
            self,
            description=Unset,
            /,
            prog=Unset,
            epilog=Unset,
            stream=Unset,
            formatter=Unset,
            *,
            colorful=False,
            fancy=False,
            shell=False,
            width=Unset,
    ):
        if not isinstance(description, str | Unset):
            raise TypeError("parser 'description' must be a string")
        if not isinstance(formatter, Formatter | Unset):
            raise TypeError("parser 'formatter' must be a Formatter instance")
        if not isinstance(width, int | Unset) or isinstance(width, bool):
            raise TypeError("parser 'width' must be an integer")
        if stream is not Unset and not callable(getattr(stream, "write", None)):
            raise TypeError("parser 'stream' must be a writable file-like object")

        self._description = coalesce(description)
        self._prog = None
        self._epilog = None
        self._stream = stream
        self._formatter = DefaultFormatter() if formatter is Unset else formatter
        self._colorful = bool(colorful)
        self._fancy = bool(fancy)
        self._shell = bool(shell)
        self._width = coalesce(width)
        self._argument_groups = [ArgumentGroup("arguments:")]

        self.prog(coalesce(prog, sys.argv[0] if sys.argv and sys.argv[0] else "prog"))
        if epilog is not Unset:
            self.epilog(epilog)

    # --- metadata -----------------------------------------------------------------

    @property
    def colorful(self):
        return self._colorful

    @property
    def fancy(self):
        return self._fancy

    @property
    def shell(self):
        return self._shell

    def prog(self, name=Unset, /, basename_only=True):
        if name is Unset:
            return self._prog
        if not isinstance(name, str):
            raise TypeError("parser 'prog' must be a string")
        if not (name := name.strip()):
            raise ValueError("parser 'prog' cannot be empty")
        self._prog = basename(name) if basename_only else name
        return self

    def description(self):
        return self._description

    def epilog(self, text=Unset, /):
        if text is Unset:
            return self._epilog
        if not isinstance(text, str):
            raise TypeError("parser 'epilog' must be a string")
        self._epilog = text
        return self

    def formatter(self):
        return self._formatter

    # --- registration ---------------------------------------------------------------

    def add_argument_group(self, name, /):
        self._argument_groups.append(group := ArgumentGroup(name))
        return group

    def argument_groups(self):
        return tuple(self._argument_groups)

    def add_argument(self, long_name, short_name="", dest=Unset, /):
        """
        Register an argument in the default "arguments:" group and return it.
        """
        return self._argument_groups[0].add_argument(long_name, short_name, dest)

    def arguments(self):
        """
        All registered arguments, group by group, in insertion order.
        """
        return tuple(argument for group in self._argument_groups for argument in group.arguments())

    def namespace(self):
        """
        Read-only mapping of destination name to current value.
        """
        return MappingProxyType({argument.name: argument.value for argument in self.arguments()})

    # --- parsing ----------------------------------------------------------------------

    def parse_argv(self, argv, /):
        """
        Parse a full argv (program name at index 0, which is skipped).
        """
        if isinstance(argv, str) or not isinstance(argv, Iterable):
            raise TypeError("parse_argv() argument must be an iterable of strings")
        return self.parse_args(list(argv)[1:])

    def parse_args(self, tokens=Unset, /):
        """
        Parse tokens (sys.argv[1:] when omitted) and return the arguments explicitly specified.
        """
        if tokens is Unset:
            tokens = sys.argv[1:]
        if isinstance(tokens, str) or not isinstance(tokens, Iterable):
            raise TypeError("parse_args() argument must be an iterable of strings")
        tokens = list(tokens)
        for token in tokens:
            if not isinstance(token, str):
                raise TypeError("parse_args() argument must be an iterable of strings")

        try:
            return self._parse(tokens)
        except ArgumentParsingError as fault:
            trigger(fault, prog=self._prog, shell=self._shell, colorful=self._colorful, fancy=self._fancy)

    def _parse(self, tokens):
        arguments = self.arguments()
        logger.debug("parsing %d token(s) against %d argument(s)", len(tokens), len(arguments))

        # Reset all the defaults
        for argument in arguments:
            if argument.default_set():
                argument.set_dest_to_default()
                logger.debug("default %r applied to %r", argument.default_value(), argument.long_name)
            else:
                argument.clear_dest()

        # Look-up of option strings and the queue of positionals
        switches = {}
        positionals = deque()
        for argument in arguments:
            if argument.positional():
                positionals.append(argument)
                continue
            for option in argument.option_strings():
                if switches.setdefault(option, argument) is not argument:
                    raise DuplicateOptionError(
                        "option string %r maps to multiple options" % option,
                        input=option,
                        argument=argument,
                        hint="give each option its own long and short names",
                    )

        specified = []
        index = 0
        while index < len(tokens):
            token = tokens[index]

            if (argument := switches.get(token)) is None:
                try:
                    argument = positionals.popleft()
                except IndexError:
                    raise UnexpectedTokenError(
                        "unexpected argument %r at %s position" % (token, ordinal(index + 1)),
                        input=token,
                        index=index + 1,
                        hint="remove this extra value or run '%s --help' to see the expected usage" % self._prog,
                    ) from None
                specified.append(argument)
                argument.set_dest_to_value_from_str(token)
                logger.debug("positional %r bound to %r", argument.long_name, token)
                index += 1
                continue

            specified.append(argument)
            logger.debug("option %r matched at %s position", token, ordinal(index + 1))

            if argument.action() is Action.STORE_TRUE:
                argument.set_dest_to_value_from_str("true")
            elif argument.action() is Action.STORE_FALSE:
                argument.set_dest_to_value_from_str("false")
            else:
                index += self._consume(argument, tokens, index)
            index += 1

        # Missing positionals?
        for argument in positionals:
            raise MissingPositionalError(
                "missing required positional argument %r" % argument.long_name,
                input=argument.long_name,
                argument=argument,
                hint="add a value for %s (run '%s --help' to see the expected order)" % (argument.metavar(), self._prog),
            )

        for argument in arguments:
            if argument.required() and not argument.positional() and argument not in specified:
                raise MissingOptionError(
                    "missing required option %r" % argument.long_name,
                    input=argument.long_name,
                    argument=argument,
                    hint="add %s to the command line" % argument.long_name,
                )

        return specified

    def _consume(self, argument, tokens, index):
        """
        Read the value token(s) following the option at tokens[index]; return how many were read.
        """
        option = tokens[index]
        minimum, maximum = argument.nargs().bounds

        if argument.nargs() is Nargs.ONE and index + 1 >= len(tokens):
            raise MissingValueError(
                "missing expected argument for %r at %s position" % (option, ordinal(index + 1)),
                input=option,
                index=index + 1,
                argument=argument,
                hint="pass a value after it (for example: %s %s)" % (option, argument.metavar()),
            )

        values = []
        for token in tokens[index + 1:]:
            if maximum is not None and len(values) >= maximum:
                break
            if is_option(token):
                break
            values.append(token)

        if len(values) < minimum:
            raise ArityViolationError(
                "expected at least %d value%s for argument %r at %s position" % (
                    minimum, "s" * (minimum != 1), option, ordinal(index + 1)
                ),
                input=option,
                index=index + 1,
                argument=argument,
                hint="pass a value after it (for example: %s %s)" % (option, argument.metavar()),
            )

        if argument.nargs().multiple:
            argument.set_dest_to_values_from_strs(values)
        elif values:
            argument.set_dest_to_value_from_str(values[0])
        return len(values)

    # --- help -------------------------------------------------------------------------

    def _console(self, stream):
        return Console(
            file=stream,
            width=self._width,
            highlight=False,
            no_color=not self._colorful,
        )

    def print_help(self, stream=Unset, /):
        """
        Write usage, description, argument listings and epilog, in that order.
        """
        console = self._console(coalesce(stream, coalesce(self._stream, sys.stdout)))
        self._formatter.set_parser(self)
        for section in (
            self._formatter.format_usage(console),
            self._formatter.format_description(console),
            self._formatter.format_arguments(console),
            self._formatter.format_epilog(console),
        ):
            if section is not None:
                console.print(section, end="", soft_wrap=True)

    def format_help(self):
        """
        Help as a plain string (no styling).
        """
        self.print_help(buffer := io.StringIO())
        return buffer.getvalue()

    def __rich_repr__(self):
        yield "prog", self._prog
        yield "description", self._description
        yield "epilog", self._epilog
        yield "argument_groups", self.argument_groups()

    def __repr__(self):
        return "argument-parser(%s)" % ", ".join("%s=%r" % pair for pair in self.__rich_repr__())


__all__ = (
    "ArgumentParser",
)
