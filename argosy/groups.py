"""
Argosy argument groups.

An ArgumentGroup is an ordered, named, append-only collection of Arguments. It only
affects how help is laid out; parsing walks every group in order and treats all of
their arguments alike.
"""
from rich.text import Text

from .arguments import Argument
from .utils import Unset


class ArgumentGroup:
    """
    Named collection of arguments with an optional epilog shown under the listing.
    """

    def __init__(self, name, /):
        if not isinstance(name, str):
            raise TypeError("argument group name must be a string")
        if not (name := name.strip()):
            raise ValueError("argument group name cannot be empty")
        self._name = name
        self._epilog = None
        self._arguments = []

    def name(self):
        return self._name

    def epilog(self, text=Unset, /):
        if text is Unset:
            return self._epilog
        if not isinstance(text, str | Text):
            raise TypeError("argument group 'epilog' must be a string")
        self._epilog = text
        return self

    def arguments(self):
        return tuple(self._arguments)

    def add_argument(self, long_name, short_name="", dest=Unset, /):
        """
        Create an Argument, append it to this group and return it for chained configuration.

        An already built Argument can be passed instead of a long name; it belongs to one
        group only.
        """
        if isinstance(long_name, Argument):
            if short_name or dest is not Unset:
                raise TypeError("add_argument() takes no other arguments when given an Argument")
            argument = long_name
            if argument._owner is not None:
                raise ValueError(
                    "argument %r is already registered in group %r" % (argument.long_name, argument._owner.name())
                )
        else:
            argument = Argument(long_name, short_name, dest)
        argument._owner = self
        self._arguments.append(argument)
        return argument

    def __len__(self):
        return len(self._arguments)

    def __iter__(self):
        return iter(tuple(self._arguments))

    def __rich_repr__(self):
        yield "name", self._name
        yield "epilog", self._epilog
        yield "arguments", self.arguments()

    def __repr__(self):
        return "argument-group(%s)" % ", ".join("%s=%r" % pair for pair in self.__rich_repr__())


__all__ = (
    "ArgumentGroup",
)
