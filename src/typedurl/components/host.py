"""src/typedurl/components/host.py

Fully-qualified hostname made of validated labels.
"""

from dataclasses import dataclass
from typing import Iterator, Tuple

from typedurl.components.label import Label
from typedurl.exceptions import InvalidHost, InvalidLabel

__all__ = ["Host"]


def _as_label(value: object) -> Label:
    """Pass Labels through, validate plain strings, reject anything else."""
    if isinstance(value, Label):
        return value
    if isinstance(value, str):
        return Label(value)
    raise InvalidLabel(f"Not a hostname label: {value!r}", value=value)


@dataclass(frozen=True)
class Host:
    """
    A host name like ``www.example.com``.

    Attributes:
        name: The leftmost label, like ``www``.
        domains: The remaining labels in written order, like
            ``(example, com)``. At least one is required.
    """

    name: Label
    domains: Tuple[Label, ...]

    def __post_init__(self) -> None:
        name = _as_label(self.name)
        domains = tuple(_as_label(domain) for domain in self.domains)
        if not domains:
            raise InvalidHost(
                f"Host needs at least two labels: {str(name)!r}",
                value=str(name),
            )
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "domains", domains)

    @classmethod
    def parse(cls, text: str) -> "Host":
        """
        Parse a dotted hostname.

        Raises:
            InvalidLabel: If any dot-separated segment is not a valid Label.
            InvalidHost: If there are fewer than two segments.
        """
        labels = [Label(part) for part in text.split(".")]
        if len(labels) < 2:
            raise InvalidHost(
                f"Host needs at least two labels: {text!r}", value=text
            )
        return cls(name=labels[0], domains=tuple(labels[1:]))

    @property
    def labels(self) -> Tuple[Label, ...]:
        """All labels, name first."""
        return (self.name,) + self.domains

    def __iter__(self) -> Iterator[Label]:
        return iter(self.labels)

    def __str__(self) -> str:
        return ".".join(str(label) for label in self.labels)
