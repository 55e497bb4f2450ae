"""utils/validators.py

Validation utilities for Typedurl.
"""

from typedurl.components.host import Host
from typedurl.components.label import Label
from typedurl.exceptions import ParseError
from typedurl.parser import parse


def validate_url(url: str) -> bool:
    """Whether ``url`` parses as a supported URL."""
    try:
        parse(url)
    except ParseError:
        return False
    return True


def is_valid_label(text: str) -> bool:
    """Whether ``text`` is a single valid hostname label."""
    try:
        Label(text)
    except ParseError:
        return False
    return True


def is_valid_hostname(text: str) -> bool:
    """Whether ``text`` is a dotted hostname of at least two labels."""
    try:
        Host.parse(text)
    except ParseError:
        return False
    return True
