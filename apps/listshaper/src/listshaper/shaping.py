"""Pure grouping, sorting and filtering over record collections."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any

from .constants import DEFAULT_NAME_FIELD, SortDirection
from .errors import MissingKeyError, NotConfiguredError
from .models import FilterQuery, Group
from .records import Record, to_records
from .sequences import categorize

Predicate = Callable[[Record, FilterQuery], bool]


def group_name_for(record: Record, group_by_key: str) -> str:
    """Return the upper-cased group name for one record."""
    return str(Record.from_mapping(record)[group_by_key]).upper()


def group_and_sort(
    records: Sequence[Mapping[str, Any]],
    group_by_key: str | None,
    direction: SortDirection = SortDirection.ASC,
) -> list[Group] | None:
    """Bucket records by the group-by field and sort the buckets by name.

    Returns None when no group-by key is set. Every group name is computed
    before any bucket is built, so a record missing the key raises
    MissingKeyError without producing a partial result.
    """
    if group_by_key is None:
        return None

    records = to_records(records)
    names: list[str] = []
    for index, record in enumerate(records):
        try:
            names.append(group_name_for(record, group_by_key))
        except MissingKeyError:
            raise MissingKeyError(group_by_key, index) from None

    buckets = categorize(range(len(records)), lambda i: names[i])
    groups = [
        Group(name=name, records=[records[i] for i in indices])
        for name, indices in buckets.items()
    ]
    groups.sort(key=lambda g: g.name, reverse=direction == SortDirection.DESC)
    return groups


def filter_records(
    records: Iterable[Mapping[str, Any]],
    query: FilterQuery,
    predicate: Predicate | None,
) -> list[Record]:
    """Return the records matching query, in source order."""
    if predicate is None:
        raise NotConfiguredError("Search predicate")
    return [record for record in to_records(records) if predicate(record, query)]


def default_predicate(record: Record, query: FilterQuery) -> bool:
    """Case-insensitive substring match of the query text against 'name'."""
    name = Record.from_mapping(record).get_str(DEFAULT_NAME_FIELD)
    return query.text.lower() in name.lower()


def make_scoped_predicate(fields: Sequence[str], scope_key: str | None = None) -> Predicate:
    """Build a predicate matching text against several fields within a scope.

    A record is in scope when the query is unscoped or its scope_key value
    equals the scope case-insensitively. In-scope records match an empty
    text, otherwise any listed field must contain the text.
    """
    if not fields:
        raise ValueError("At least one search field is required.")
    search_fields = list(fields)

    def _predicate(record: Record, query: FilterQuery) -> bool:
        record = Record.from_mapping(record)
        if query.scope is not None and not query.is_unscoped:
            if scope_key is None:
                raise NotConfiguredError("Scope key")
            if str(record[scope_key]).lower() != query.scope.lower():
                return False
        if query.text == "":
            return True
        needle = query.text.lower()
        return any(needle in record.get_str(f).lower() for f in search_fields)

    return _predicate


def display_label(record: Record) -> str:
    return Record.from_mapping(record).get_str(DEFAULT_NAME_FIELD)


def display_detail(record: Record) -> str:
    return Record.from_mapping(record).get_str(DEFAULT_NAME_FIELD)


def group_label(name: str, records: Sequence[Record]) -> str:
    return name
