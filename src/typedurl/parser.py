"""src/typedurl/parser.py

String to Url parser.
"""

import logging
from typing import Optional, Tuple

from typedurl.components.host import Host
from typedurl.components.path import Path
from typedurl.components.query import Query
from typedurl.components.scheme import Scheme
from typedurl.exceptions import InvalidPort, MissingScheme, ParseError
from typedurl.serializer import SCHEME_SEPARATOR
from typedurl.url import MAX_PORT, Url
from typedurl.utils.percent import FRAGMENT

__all__ = ["parse"]

logger = logging.getLogger(__name__)

_AUTHORITY_END = "/?#"
_PATH_END = "?#"
_DIGITS = frozenset("0123456789")


def _find_any(text: str, chars: str, start: int) -> int:
    """Index of the first of ``chars`` at or after ``start``, else ``len(text)``."""
    for i in range(start, len(text)):
        if text[i] in chars:
            return i
    return len(text)


def _parse_authority(authority: str) -> Tuple[Host, Optional[int]]:
    """
    Split ``host[:port]``.

    The port is whatever follows the last ``:`` when that suffix is all
    digits; otherwise the whole authority is host text.
    """
    host_text, sep, port_text = authority.rpartition(":")
    if not sep or not port_text or not all(c in _DIGITS for c in port_text):
        return Host.parse(authority), None

    # length first: int() rejects very long digit strings
    significant = port_text.lstrip("0") or "0"
    port = int(significant) if len(significant) <= len(str(MAX_PORT)) else None
    if port is None or port > MAX_PORT:
        raise InvalidPort(
            f"Port out of range 0-{MAX_PORT}: {port_text[:16]!r}", value=port_text
        )
    return Host.parse(host_text), port


def _parse(text: str) -> Url:
    # scheme://
    sep = text.find(SCHEME_SEPARATOR)
    if sep < 0:
        raise MissingScheme(f"Missing '{SCHEME_SEPARATOR}' in {text!r}", value=text)
    scheme = Scheme.parse(text[:sep])
    pos = sep + len(SCHEME_SEPARATOR)

    # authority
    end = _find_any(text, _AUTHORITY_END, pos)
    host, port = _parse_authority(text[pos:end])
    pos = end

    # path
    end = _find_any(text, _PATH_END, pos)
    path = Path.parse(text[pos:end])
    pos = end

    # ?query
    query = Query()
    if pos < len(text) and text[pos] == "?":
        end = text.find("#", pos + 1)
        if end < 0:
            end = len(text)
        query = Query.parse(text[pos + 1 : end])
        pos = end

    # #fragment
    fragment = None
    if pos < len(text):
        fragment = FRAGMENT.decode(text[pos + 1 :])

    return Url(
        scheme=scheme,
        host=host,
        port=port,
        path=path,
        query=query,
        fragment=fragment,
    )


def parse(text: str) -> Url:
    """
    Parse a URL string into a Url.

    Grammar: ``scheme://host[:port][/path][?query][#fragment]``. The
    first error aborts the parse; nothing is defaulted or recovered.

    Args:
        text: The URL string.

    Returns:
        The parsed Url.

    Raises:
        MissingScheme: No ``://`` separator.
        UnsupportedScheme: Unknown scheme text.
        InvalidLabel: A hostname label is malformed.
        InvalidHost: The hostname has fewer than two labels.
        InvalidPort: The port does not fit 0-65535.
        InvalidPath: The path is not absolute.
        InvalidQuery: A query pair has no ``=``.
        InvalidEncoding: A malformed or truncated percent escape.
    """
    try:
        url = _parse(text)
    except ParseError as exc:
        logger.debug("Rejected URL %r: %s", text, exc)
        raise
    logger.debug("Parsed URL %r", text)
    return url
