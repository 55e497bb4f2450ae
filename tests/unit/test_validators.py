"""tests/unit/test_validators.py"""

import pytest

from typedurl.utils.validators import is_valid_hostname, is_valid_label, validate_url


@pytest.mark.parametrize(
    "url, expected",
    [
        ("http://example.com", True),
        ("https://example.com/a?b=c#d", True),
        ("ws://example.com", True),
        ("wss://example.com:443", True),
        ("ftp://example.com", False),
        ("http://localhost", False),
        ("http://example.com:70000", False),
        ("invalid", False),
        ("", False),
    ],
)
def test_validate_url(url, expected):
    """Test URL validation utility."""
    assert validate_url(url) is expected


@pytest.mark.parametrize(
    "text, expected",
    [("example", True), ("a-b", True), ("-ab", False), ("a_b", False), ("", False)],
)
def test_is_valid_label(text, expected):
    """Test label validation utility."""
    assert is_valid_label(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [("example.com", True), ("a.b.c", True), ("example", False), ("a..b", False)],
)
def test_is_valid_hostname(text, expected):
    """Test hostname validation utility."""
    assert is_valid_hostname(text) is expected
