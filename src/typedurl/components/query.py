"""src/typedurl/components/query.py

Deterministic query-string mapping.
"""

from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple, Union

from typedurl.exceptions import InvalidQuery
from typedurl.utils.percent import QUERY

__all__ = ["Query"]

QueryInput = Union[Mapping[str, str], Iterable[Tuple[str, str]]]


class Query(Mapping[str, str]):
    """
    Immutable mapping of decoded query keys to decoded values.

    Keys are unique: on collision the last pair wins. Iteration is always
    sorted by key regardless of insertion order, so serialization is
    deterministic.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Optional[QueryInput] = None):
        merged: Dict[str, str] = {}
        if items:
            pairs = items.items() if isinstance(items, Mapping) else items
            for key, value in pairs:
                merged[key] = value
        self._items: Dict[str, str] = dict(sorted(merged.items()))

    @classmethod
    def parse(cls, text: str) -> "Query":
        """
        Parse an encoded query string such as ``a=1&b=x%20y``.

        An empty string is the empty query.

        Raises:
            InvalidQuery: If a pair has no ``=``.
            InvalidEncoding: If a key or value holds a malformed escape.
        """
        if not text:
            return cls()

        pairs = []
        for raw_pair in text.split("&"):
            raw_key, sep, raw_value = raw_pair.partition("=")
            if not sep:
                raise InvalidQuery(
                    f"Query pair has no '=': {raw_pair!r}", value=raw_pair
                )
            pairs.append((QUERY.decode(raw_key), QUERY.decode(raw_value)))
        return cls(pairs)

    def encode(self) -> str:
        """Encoded ``key=value`` pairs joined by ``&``, sorted by key."""
        return "&".join(
            f"{QUERY.encode(key)}={QUERY.encode(value)}"
            for key, value in self._items.items()
        )

    def with_item(self, key: str, value: str) -> "Query":
        """Copy of this query with ``key`` set to ``value``."""
        return Query({**self._items, key: value})

    def without(self, key: str) -> "Query":
        """Copy of this query with ``key`` removed, if present."""
        return Query({k: v for k, v in self._items.items() if k != key})

    def __getitem__(self, key: str) -> str:
        return self._items[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __hash__(self) -> int:
        return hash(tuple(self._items.items()))

    def __repr__(self) -> str:
        return f"Query({self._items!r})"

    def __str__(self) -> str:
        return self.encode()
