"""src/typedurl/components/scheme.py

Supported URL schemes.
"""

import enum

from typedurl.exceptions import UnsupportedScheme

__all__ = ["Scheme"]


@enum.unique
class Scheme(enum.Enum):
    """Closed set of schemes a Url may carry."""

    HTTP = "http"
    HTTPS = "https"
    WS = "ws"
    WSS = "wss"

    @classmethod
    def parse(cls, text: str) -> "Scheme":
        """
        Look up a scheme by name, ignoring case.

        Raises:
            UnsupportedScheme: If ``text`` names no supported scheme.
        """
        try:
            return cls(text.lower())
        except ValueError as exc:
            raise UnsupportedScheme(
                f"Unsupported scheme: {text!r}", value=text
            ) from exc

    def __str__(self) -> str:
        return self.value
