"""Grouping, sorting and search filtering for list displays."""

from .config import ShaperConfig, load_config
from .constants import SCOPE_ALL, SortDirection
from .controller import ListShaper
from .errors import (
    ConfigError,
    ListShaperError,
    MissingKeyError,
    NotConfiguredError,
    RecordTypeError,
    StorageError,
)
from .models import FilterQuery, Group
from .records import Record, to_records
from .shaping import (
    default_predicate,
    filter_records,
    group_and_sort,
    make_scoped_predicate,
)

__all__ = [
    "SCOPE_ALL",
    "ConfigError",
    "FilterQuery",
    "Group",
    "ListShaper",
    "ListShaperError",
    "MissingKeyError",
    "NotConfiguredError",
    "Record",
    "RecordTypeError",
    "ShaperConfig",
    "SortDirection",
    "StorageError",
    "default_predicate",
    "filter_records",
    "group_and_sort",
    "load_config",
    "make_scoped_predicate",
    "to_records",
]
