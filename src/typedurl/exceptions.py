"""src/typedurl/exceptions.py

Typedurl Exceptions hierarchy.
"""

from typing import Any, Optional


class TypedUrlError(Exception):
    """Base exception for all Typedurl errors."""

    def __init__(self, message: str, value: Optional[Any] = None):
        super().__init__(message)
        self.value = value


class ParseError(TypedUrlError):
    """
    Base exception for input that cannot become a URL or URL component.
    """


class InvalidLabel(ParseError):
    """A hostname label is empty, too long, or contains forbidden characters."""


class InvalidHost(ParseError):
    """A hostname does not have at least two labels."""


class UnsupportedScheme(ParseError):
    """The scheme text is not one of the supported schemes."""


class MissingScheme(ParseError):
    """The input has no ``://`` scheme separator."""


class InvalidPort(ParseError):
    """The port is outside the 0-65535 range."""


class InvalidPath(ParseError):
    """The path is not absolute."""


class InvalidQuery(ParseError):
    """A query pair has no ``=`` separator."""


class InvalidEncoding(ParseError):
    """
    A percent escape is malformed or truncated, or the decoded
    bytes are not valid UTF-8.
    """
