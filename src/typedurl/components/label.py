"""src/typedurl/components/label.py

Validated hostname label.
"""

import string

from typedurl.exceptions import InvalidLabel

__all__ = ["Label", "MAX_LABEL_LENGTH"]

MAX_LABEL_LENGTH = 63

_LABEL_CHARS = frozenset(string.ascii_letters + string.digits + "-")


class Label:
    """
    One dot-delimited segment of a hostname, e.g. ``example`` or ``com``.

    The constructor is the only way to obtain a Label, so every instance
    is well-formed: 1-63 ASCII letters, digits or hyphens, not starting
    or ending with a hyphen. Case is preserved.
    """

    __slots__ = ("_value",)

    def __init__(self, value: str):
        if not value:
            raise InvalidLabel("Label is empty", value=value)
        if len(value) > MAX_LABEL_LENGTH:
            raise InvalidLabel(
                f"Label exceeds {MAX_LABEL_LENGTH} characters: {value!r}", value=value
            )
        if any(c not in _LABEL_CHARS for c in value):
            raise InvalidLabel(
                f"Label contains invalid characters: {value!r}", value=value
            )
        if value[0] == "-" or value[-1] == "-":
            raise InvalidLabel(
                f"Label starts or ends with a hyphen: {value!r}", value=value
            )
        self._value = value

    @property
    def value(self) -> str:
        """The validated label text."""
        return self._value

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"Label({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Label):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __len__(self) -> int:
        return len(self._value)
