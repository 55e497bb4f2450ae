"""src/typedurl/utils/percent.py

Context-aware percent-encoding shared by path, query and fragment.
"""

import string
from typing import Dict, FrozenSet, Iterable, Union

from typedurl.exceptions import InvalidEncoding

__all__ = [
    "PercentCodec",
    "PATH_SEGMENT",
    "QUERY",
    "FRAGMENT",
    "percent_encode",
    "percent_decode",
]

UNRESERVED: FrozenSet[str] = frozenset(string.ascii_letters + string.digits + "-._~")
SUB_DELIMS: FrozenSet[str] = frozenset("!$&'()*+,;=")

PATH_SEGMENT_SAFE = UNRESERVED | SUB_DELIMS | frozenset(":@")
FRAGMENT_SAFE = UNRESERVED | SUB_DELIMS | frozenset(":@/?")
# '+' is escaped too so form decoders never read it as a space
QUERY_SAFE = FRAGMENT_SAFE - frozenset("&=+")

_HEX_DIGITS = frozenset(string.hexdigits)


def _make_quote_map(safe_chars: Iterable[str]) -> Dict[int, str]:
    """Map every byte value to itself if safe, to its %XX escape otherwise."""
    safe = {ord(c) for c in safe_chars}
    return {
        byte: chr(byte) if byte in safe else f"%{byte:02X}" for byte in range(256)
    }


class PercentCodec:
    """
    Percent-encoder/decoder bound to one URL context.

    Encoding escapes every byte outside the context's safe set as ``%``
    followed by two uppercase hex digits. Decoding is strict: a ``%``
    must be followed by exactly two hex digits. ``+`` is never a space.
    """

    __slots__ = ("name", "safe", "_quote_map")

    def __init__(self, name: str, safe: FrozenSet[str]):
        self.name = name
        self.safe = safe
        self._quote_map = _make_quote_map(safe)

    def __repr__(self) -> str:
        return f"PercentCodec({self.name!r})"

    def encode(self, data: Union[str, bytes]) -> str:
        """
        Encode text (as UTF-8) or raw bytes.

        Args:
            data: Decoded text or raw bytes.

        Returns:
            ASCII text safe to embed in this context.
        """
        if isinstance(data, str):
            data = data.encode("utf-8")
        return "".join([self._quote_map[byte] for byte in data])

    def decode(self, text: str) -> str:
        """
        Decode percent escapes in ``text``.

        Raises:
            InvalidEncoding: On a malformed or truncated escape, or when
                the decoded bytes are not UTF-8.
        """
        if "%" not in text:
            return text

        decoded = bytearray()
        i = 0
        length = len(text)
        while i < length:
            char = text[i]
            if char != "%":
                decoded += char.encode("utf-8")
                i += 1
                continue

            digits = text[i + 1 : i + 3]
            if len(digits) != 2 or not all(d in _HEX_DIGITS for d in digits):
                raise InvalidEncoding(
                    f"Malformed percent escape at offset {i} in {self.name}: {text!r}",
                    value=text,
                )
            decoded.append(int(digits, 16))
            i += 3

        try:
            return decoded.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidEncoding(
                f"Percent-decoded {self.name} is not valid UTF-8: {text!r}",
                value=text,
            ) from exc


PATH_SEGMENT = PercentCodec("path segment", PATH_SEGMENT_SAFE)
QUERY = PercentCodec("query", QUERY_SAFE)
FRAGMENT = PercentCodec("fragment", FRAGMENT_SAFE)


def percent_encode(data: Union[str, bytes], context: PercentCodec) -> str:
    """Encode ``data`` for the given context."""
    return context.encode(data)


def percent_decode(text: str, context: PercentCodec) -> str:
    """Decode ``text`` escaped for the given context."""
    return context.decode(text)
