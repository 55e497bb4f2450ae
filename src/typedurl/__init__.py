"""src/typedurl/__init__.py

Typedurl - URLs as structured, validated values instead of strings.

A Url is assembled from parts that can only be built through validation
(Label, Host, Scheme) plus decoded Path and Query values. Parsing turns
text into a Url or raises a typed error; serializing always recomputes
the canonical text from the structured fields, so escaping is never
missing or doubled.

Key Features:
    - Strict percent-encoding per RFC 3986, ``+`` is never a space
    - Deterministic query serialization, sorted by key
    - Typed error for every way a URL can be malformed
    - Immutable, hashable values
    - Full type hints (PEP 561)

Example:
    Parsing::

        from typedurl import parse

        url = parse("http://example.com/some/path?a=123")
        url.host.name      # Label('example')
        url.query["a"]     # '123'

    Building::

        from typedurl import Host, Path, Query, Scheme, Url

        url = Url(
            scheme=Scheme.HTTPS,
            host=Host.parse("example.com"),
            path=Path(("search",)),
            query=Query({"q": "a&b"}),
        )
        str(url)  # 'https://example.com/search?q=a%26b'
"""

import logging

from typedurl.components import Host, Label, Path, Query, Scheme
from typedurl.exceptions import (
    InvalidEncoding,
    InvalidHost,
    InvalidLabel,
    InvalidPath,
    InvalidPort,
    InvalidQuery,
    MissingScheme,
    ParseError,
    TypedUrlError,
    UnsupportedScheme,
)
from typedurl.parser import parse
from typedurl.serializer import serialize
from typedurl.url import Url
from typedurl.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Url",
    "Host",
    "Label",
    "Path",
    "Query",
    "Scheme",
    "parse",
    "serialize",
    "TypedUrlError",
    "ParseError",
    "InvalidLabel",
    "InvalidHost",
    "UnsupportedScheme",
    "MissingScheme",
    "InvalidPort",
    "InvalidPath",
    "InvalidQuery",
    "InvalidEncoding",
]
