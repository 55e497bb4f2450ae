"""src/typedurl/serializer.py

Canonical string form of a Url.
"""

from typing import TYPE_CHECKING, List

from typedurl.utils.percent import FRAGMENT

if TYPE_CHECKING:  # pragma: no cover
    from typedurl.url import Url

__all__ = ["serialize", "SCHEME_SEPARATOR"]

SCHEME_SEPARATOR = "://"


def serialize(url: "Url") -> str:
    """
    Render ``url`` as its canonical string.

    Always recomputed from the structured fields. Never fails for a
    Url whose fields are valid.

    Args:
        url: The Url to render.

    Returns:
        ``scheme://host[:port]/path[?query][#fragment]``
    """
    parts: List[str] = [str(url.scheme), SCHEME_SEPARATOR, str(url.host)]
    if url.port is not None:
        parts.append(f":{url.port}")
    parts.append(str(url.path))
    if url.query:
        parts.append("?")
        parts.append(url.query.encode())
    if url.fragment is not None:
        parts.append("#")
        parts.append(FRAGMENT.encode(url.fragment))
    return "".join(parts)
