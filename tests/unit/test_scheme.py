"""tests/unit/test_scheme.py"""

import pytest

from typedurl.components.scheme import Scheme
from typedurl.exceptions import UnsupportedScheme


class TestScheme:
    """Tests for Scheme enum."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("http", Scheme.HTTP),
            ("HTTP", Scheme.HTTP),
            ("Https", Scheme.HTTPS),
            ("ws", Scheme.WS),
            ("wss", Scheme.WSS),
            ("WsS", Scheme.WSS),
        ],
    )
    def test_parse_case_insensitive(self, text, expected):
        """Test scheme lookup ignores case."""
        assert Scheme.parse(text) is expected

    @pytest.mark.parametrize("text", ["ftp", "", "http ", "htt", "httpss", "file"])
    def test_parse_unsupported(self, text):
        """Test unknown schemes raise UnsupportedScheme."""
        with pytest.raises(UnsupportedScheme) as exc_info:
            Scheme.parse(text)
        assert exc_info.value.value == text

    def test_serializes_lowercase(self):
        """Test str() is the lowercase name."""
        assert str(Scheme.HTTP) == "http"
        assert str(Scheme.HTTPS) == "https"
        assert str(Scheme.WS) == "ws"
        assert str(Scheme.WSS) == "wss"
