"""
Token classification helpers.

Two questions are asked of every raw token during a scan:
- does it start an option (so it must be looked up, and it stops value collection)?
- which part of a declared name is dashes, and which part is the name itself?

Option shape
- short form: exactly two characters, a dash followed by a non-dash ("-v").
- long form: more than two characters, two dashes followed by a non-dash ("--verbose").
- everything else ("-", "--", "---x", "value", "-12x") is a plain value token.
"""


def split_leading_dashes(text, /):
    """
    Split a name into its leading dashes and the remainder.

    >>> split_leading_dashes("--output")
    ('--', 'output')
    >>> split_leading_dashes("file")
    ('', 'file')
    """
    if not isinstance(text, str):
        raise TypeError("split_leading_dashes() argument must be a string")
    name = text.lstrip("-")
    return text[:len(text) - len(name)], name


def is_option(token, /):
    """
    Return True when the token is option-shaped (see module docs for the exact rule).
    """
    if not isinstance(token, str):
        raise TypeError("is_option() argument must be a string")
    if len(token) == 2:
        return token[0] == "-" and token[1] != "-"
    if len(token) > 2:
        return token[0] == "-" and token[1] == "-" and token[2] != "-"
    return False


__all__ = (
    "split_leading_dashes",
    "is_option",
)
