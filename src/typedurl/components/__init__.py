"""Validated building blocks of a Url."""

from .host import Host
from .label import Label
from .path import Path
from .query import Query
from .scheme import Scheme

__all__ = ["Host", "Label", "Path", "Query", "Scheme"]
