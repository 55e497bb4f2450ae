"""src/typedurl/url.py

Structured, non-string-based URL value.
"""

# pylint: disable=import-outside-toplevel

from dataclasses import dataclass, field, replace
from typing import Optional

from typedurl.components.host import Host
from typedurl.components.path import Path
from typedurl.components.query import Query
from typedurl.components.scheme import Scheme
from typedurl.exceptions import InvalidPort, UnsupportedScheme
from typedurl.serializer import serialize

__all__ = ["Url", "MAX_PORT"]

MAX_PORT = 65535


@dataclass(frozen=True)
class Url:
    """
    A URL built from validated parts.

    Attributes:
        scheme: The URL scheme, like ``http`` in ``http://example.com/``.
        host: The hostname, like ``example.com``.
        port: Explicit port number, like ``80`` in ``http://example.com:80/``.
        path: The decoded path, like ``/`` in ``http://example.com/``.
        query: Decoded query parameters, like ``a=123`` in ``...?a=123``.
        fragment: Decoded fragment, like ``top`` in ``...#top``.

    Example::

        url = Url(Scheme.HTTPS, Host.parse("example.com"), path=Path(("docs",)))
        str(url)  # 'https://example.com/docs'
    """

    scheme: Scheme
    host: Host
    port: Optional[int] = None
    path: Path = field(default_factory=Path)
    query: Query = field(default_factory=Query)
    fragment: Optional[str] = None

    def __post_init__(self) -> None:
        if isinstance(self.scheme, str):
            object.__setattr__(self, "scheme", Scheme.parse(self.scheme))
        elif not isinstance(self.scheme, Scheme):
            raise UnsupportedScheme(
                f"Unsupported scheme: {self.scheme!r}", value=self.scheme
            )
        if self.port is not None:
            if (
                isinstance(self.port, bool)
                or not isinstance(self.port, int)
                or not 0 <= self.port <= MAX_PORT
            ):
                raise InvalidPort(
                    f"Port must be an integer in 0-{MAX_PORT}: {self.port!r}",
                    value=self.port,
                )
        if isinstance(self.path, str):
            object.__setattr__(self, "path", Path.from_decoded(self.path))
        elif not isinstance(self.path, Path):
            object.__setattr__(self, "path", Path(tuple(self.path)))
        if not isinstance(self.query, Query):
            object.__setattr__(self, "query", Query(self.query))

    @classmethod
    def parse(cls, text: str) -> "Url":
        """Parse ``text``; see :func:`typedurl.parser.parse`."""
        from typedurl.parser import parse

        return parse(text)

    def parent(self) -> "Url":
        """Url whose path is the parent of this one's."""
        return replace(self, path=self.path.parent())

    def __str__(self) -> str:
        return serialize(self)
