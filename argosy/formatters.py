"""
Argosy help formatters.

A formatter renders a parser's help in four fixed sections, always in this order:

    usage        "usage: prog [-v] [-j N] FILE"
    description  the parser description paragraph
    arguments    one listing per argument group (name column + wrapped help column)
    epilog       the closing paragraph

Each format_* method receives the rich Console being printed to (for width and wrapping)
and returns a rich Text, or None when the section is empty. ArgumentParser.print_help()
calls them in order and writes the results to its output sink.

Palette keys (override through __styles__ in __main__)
- usage-label, program-name, description-section, epilog-section
- group-label, group-epilog, argument-description, default-label
- option-name, positional-name, metavar, choice

When the parser is not colorful, styling is suppressed entirely.
"""
from abc import ABC, abstractmethod
from collections import deque

from rich.containers import Lines
from rich.text import Text

from .arguments import Action, Nargs, ShowIn
from .utils import palette


class Formatter(ABC):
    """
    Base formatter: bound to one parser through set_parser().
    """

    def __init__(self):
        self._parser = None

    @property
    def parser(self):
        if self._parser is None:
            raise RuntimeError("formatter is not bound to a parser")
        return self._parser

    def set_parser(self, parser, /):
        self._parser = parser
        return self

    @abstractmethod
    def format_usage(self, console, /):
        raise NotImplementedError

    @abstractmethod
    def format_description(self, console, /):
        raise NotImplementedError

    @abstractmethod
    def format_arguments(self, console, /):
        raise NotImplementedError

    @abstractmethod
    def format_epilog(self, console, /):
        raise NotImplementedError


class DefaultFormatter(Formatter):
    """
    argparse-like layout with hanging indents.

    - padding: leading spaces before an argument's name column.
    - indent: column where help text starts (and wraps back to).
    """

    def __init__(self, *, padding=2, indent=24):
        super().__init__()
        if not isinstance(padding, int) or not isinstance(indent, int):
            raise TypeError("formatter 'padding' and 'indent' must be integers")
        if padding < 0 or indent <= padding:
            raise ValueError("formatter 'indent' must be greater than 'padding'")
        self._padding = padding
        self._indent = indent
        self._styles = palette({
            # === Head sections ===
            "usage-label": "bold #00E6FF",  # CYAN → signature info color
            "program-name": "bold #FF4D94",  # MAGENTA-PINK → brand pop
            "description-section": "italic #A3A3A3",  # Neutral gray
            "epilog-section": "#737373",  # Dim footer gray

            # === Groups / arguments ===
            "group-label": "bold #FFFFFF",
            "group-epilog": "#737373",
            "argument-description": "#9CA3AF",
            "default-label": "#737373",

            # === Names / metavars ===
            "option-name": "bold #00E6FF",
            "positional-name": "bold #22C55E",
            "metavar": "bold #FFD600",
            "choice": "bold #FF4D94",
        })

    def _text(self, fragment, style=""):
        # Normalize to Text; styles only apply when the parser is colorful.
        if isinstance(fragment, Text):
            return fragment.copy() if self.parser.colorful else Text(fragment.plain)
        return Text(str(fragment), self._styles[style] if self.parser.colorful else "")

    def _arguments(self):
        for group in self.parser.argument_groups():
            yield from group.arguments()

    def _metavar(self, argument):
        if argument.choices():
            return Text.assemble(
                "{", Text(",").join(self._text(choice, "choice") for choice in argument.choices()), "}"
            )
        style = "positional-name" if argument.positional() else "metavar"
        return self._text(argument.metavar(), style)

    def _valueform(self, argument):
        """
        Value placeholder shaped by arity ("N", "[N]", "[N ...]", "N [N ...]"); None for flags.
        """
        if argument.action() is not Action.STORE:
            return None
        metavar = self._metavar(argument)
        match argument.nargs():
            case Nargs.OPTIONAL:
                return Text.assemble("[", metavar, "]")
            case Nargs.ZERO_OR_MORE:
                return Text.assemble("[", metavar, " ...]")
            case Nargs.ONE_OR_MORE:
                return Text.assemble(metavar, " [", metavar.copy(), " ...]")
            case _:
                return metavar

    def _wrap(self, console, text, width):
        return text.wrap(console, max(width, 1)) if text.plain else Lines([text])

    def format_usage(self, console, /):
        usage = Text()
        usage.append(self._text("usage", "usage-label")).append(": ")
        usage.append(self._text(self.parser.prog(), "program-name"))

        offset = len(usage) + 1  # Hanging-indent column for wrapped usage items
        inputs = deque()

        # Options first, then positionals in declaration order
        for argument in filter(lambda x: not x.positional(), self._arguments()):
            if argument.show_in() is not ShowIn.USAGE_AND_DESCRIPTION:
                continue
            item = self._text(argument.short_name or argument.long_name, "option-name")
            if (valueform := self._valueform(argument)) is not None:
                item = Text.assemble(item, " ", valueform)
            inputs.append(item if argument.required() else Text.assemble("[", item, "]"))

        for argument in filter(lambda x: x.positional(), self._arguments()):
            if argument.show_in() is ShowIn.USAGE_AND_DESCRIPTION:
                inputs.append(self._valueform(argument))

        # Wrap usage items across the console width
        lines = Lines()
        while inputs:
            input = inputs.popleft()
            if lines and len(lines[-1]) + 1 + len(input) <= console.width - offset:
                lines[-1].append(" ").append(input)
            else:
                lines.append(input)

        for index, line in enumerate(lines):
            usage.append(" " if index == 0 else "\n" + " " * offset).append(line)

        return usage.append("\n")

    def format_description(self, console, /):
        if not (description := self.parser.description()):
            return None
        return self._text(description, "description-section").append("\n")

    def format_arguments(self, console, /):
        width = console.width
        groups = Text()

        for group in self.parser.argument_groups():
            if not group.arguments():
                continue
            if groups:
                groups.append("\n")
            label = group.name() if group.name().endswith(":") else group.name() + ":"
            groups.append(self._text(label, "group-label")).append("\n")

            for argument in group.arguments():
                section = Text(" " * self._padding)
                if argument.positional():
                    section.append(self._metavar(argument))
                else:
                    names = [self._text(name, "option-name") for name in (argument.short_name, argument.long_name) if name]
                    section.append(Text(", ").join(names))
                    if (valueform := self._valueform(argument)) is not None:
                        section.append(" ").append(valueform)

                descr = Text()
                if argument.help():
                    descr.append(self._text(argument.help(), "argument-description"))
                if argument.default_set() and argument.action() is Action.STORE:
                    if descr:
                        descr.append(" ")
                    descr.append(self._text("(default: %s)" % argument.default_value(), "default-label"))

                if descr:
                    # Break the line when the name column reaches the help column
                    if len(section) >= self._indent - 1:
                        section.append("\n").append(" " * self._indent)
                    else:
                        section.append(" " * (self._indent - len(section)))
                    wrapped = self._wrap(console, descr, width - self._indent)
                    section.append(wrapped[0])
                    for line in wrapped[1:]:
                        section.append("\n").append(" " * self._indent).append(line)

                groups.append(section).append("\n")

            if group.epilog():
                groups.append("\n").append(self._text(group.epilog(), "group-epilog")).append("\n")

        return groups or None

    def format_epilog(self, console, /):
        if not (epilog := self.parser.epilog()):
            return None
        return self._text(epilog, "epilog-section").append("\n")


__all__ = (
    "Formatter",
    "DefaultFormatter",
)
