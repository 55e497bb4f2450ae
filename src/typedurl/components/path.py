"""src/typedurl/components/path.py

Absolute URL path held as decoded segments.
"""

from dataclasses import dataclass
from typing import Iterator, Tuple

from typedurl.exceptions import InvalidPath
from typedurl.utils.percent import PATH_SEGMENT

__all__ = ["Path"]


@dataclass(frozen=True)
class Path:
    """
    Absolute path as a sequence of decoded segments.

    ``Path(("some", "path"))`` serializes as ``/some/path``. The empty
    sequence is the root ``/``; a trailing empty segment keeps a trailing
    slash. Segments may contain any text, a ``/`` inside a segment is
    escaped on serialization.
    """

    segments: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        segments = tuple(self.segments)
        if segments == ("",):
            segments = ()
        object.__setattr__(self, "segments", segments)

    @classmethod
    def parse(cls, text: str) -> "Path":
        """
        Parse an encoded path such as ``/a/b%20c``.

        Raises:
            InvalidPath: If ``text`` is non-empty and not absolute.
            InvalidEncoding: If a segment holds a malformed escape.
        """
        if not text:
            return cls()
        if not text.startswith("/"):
            raise InvalidPath(f"Path is not absolute: {text!r}", value=text)
        return cls(tuple(PATH_SEGMENT.decode(part) for part in text[1:].split("/")))

    @classmethod
    def from_decoded(cls, text: str) -> "Path":
        """Build a Path from decoded text, splitting on ``/``."""
        if not text:
            return cls()
        if not text.startswith("/"):
            raise InvalidPath(f"Path is not absolute: {text!r}", value=text)
        return cls(tuple(text[1:].split("/")))

    def parent(self) -> "Path":
        """Path without its last segment; the root is its own parent."""
        return Path(self.segments[:-1])

    def join(self, *segments: str) -> "Path":
        """Path with ``segments`` appended."""
        return Path(self.segments + segments)

    def __iter__(self) -> Iterator[str]:
        return iter(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    def __str__(self) -> str:
        return "/" + "/".join(PATH_SEGMENT.encode(segment) for segment in self)
