"""Stateful list controller holding a record collection and its derived views."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from .config import ShaperConfig
from .constants import SCOPE_ALL, SortDirection
from .errors import ConfigError, NotConfiguredError
from .logging_utils import log_event
from .models import FilterQuery, Group
from .records import Record, to_records
from .shaping import filter_records, group_and_sort

Loader = Callable[[bool], Iterable[Mapping[str, Any]] | None]
SelectCallback = Callable[[Record | None], None]


class ListShaper:
    """Owns the full record collection plus the grouped and filtered views.

    Assigning ``records`` replaces the collection wholesale and regroups it
    synchronously. ``apply_query`` refilters from the full collection.
    Changing the group-by key or sort direction regroups the collection that
    is already held; callers never need to re-supply data.

    The section/row methods answer the questions a table-style widget asks.
    While a search text is active, or the config asks for a plain list, or
    no grouping is configured, the list is a single untitled section.
    """

    def __init__(
        self,
        config: ShaperConfig | None = None,
        *,
        loader: Loader | None = None,
        on_select: SelectCallback | None = None,
        ready_to_load: bool = True,
    ) -> None:
        self.config = config if config is not None else ShaperConfig()
        self.loader = loader
        self.on_select = on_select
        self.ready_to_load = ready_to_load
        self.selected: Record | None = None
        self._records: list[Record] | None = None
        self._grouped: list[Group] | None = None
        self._filtered: list[Record] | None = None
        self._query = FilterQuery()

    # Collection and derived views

    @property
    def records(self) -> list[Record] | None:
        return self._records

    @records.setter
    def records(self, items: Iterable[Mapping[str, Any]] | None) -> None:
        if items is None:
            self._records = None
            self._grouped = None
            self._filtered = None
            return

        records = to_records(items)
        # Derive both views before publishing so a failure leaves the previous state intact.
        grouped = group_and_sort(records, self.config.group_by_key, self.config.sort_direction)
        filtered = None
        if self._query.text:
            filtered = filter_records(records, self._query, self.config.search_predicate)
        self._records = records
        self._grouped = grouped
        self._filtered = filtered
        log_event(
            "records_replaced",
            record_count=len(records),
            group_by_key=self.config.group_by_key,
        )

    @property
    def grouped(self) -> list[Group] | None:
        return self._grouped

    @property
    def filtered(self) -> list[Record] | None:
        return self._filtered

    @property
    def query(self) -> FilterQuery:
        return self._query

    def apply_query(self, text: str, scope: str | None = None) -> list[Record]:
        """Filter the full collection by text and scope."""
        query = FilterQuery(text=text, scope=scope)
        matches = filter_records(self._records or [], query, self.config.search_predicate)
        self._query = query
        self._filtered = matches
        log_event(
            "query_applied",
            text=text,
            scope=scope,
            match_count=len(matches),
            total_count=len(self._records or []),
        )
        return matches

    def clear_query(self) -> None:
        self._query = FilterQuery()
        self._filtered = None

    def set_group_by_key(self, key: str | None) -> None:
        self._regroup(key, self.config.sort_direction)

    def set_sort_direction(self, direction: SortDirection | str) -> None:
        try:
            parsed = SortDirection(str(direction).upper())
        except ValueError as e:
            raise ConfigError(
                f"Invalid sort_direction: {direction}. Expected ASC or DESC"
            ) from e
        self._regroup(self.config.group_by_key, parsed)

    def _regroup(self, key: str | None, direction: SortDirection) -> None:
        grouped = None
        if self._records is not None:
            grouped = group_and_sort(self._records, key, direction)
        self.config.group_by_key = key
        self.config.sort_direction = direction
        self._grouped = grouped
        log_event(
            "view_grouped",
            group_by_key=self.config.group_by_key,
            sort_direction=self.config.sort_direction,
            group_count=None if self._grouped is None else len(self._grouped),
        )

    @property
    def scope_titles(self) -> list[str]:
        """Scope labels for a scope selector, with ALL first."""
        if not self.config.scopes:
            return []
        return [SCOPE_ALL, *(s for s in self.config.scopes if s.upper() != SCOPE_ALL)]

    # Section/row interface

    @property
    def is_searching(self) -> bool:
        return self.config.search_enabled and self._query.text != ""

    def _is_flat(self) -> bool:
        return self.is_searching or self.config.plain_style or self._grouped is None

    def _flat_rows(self) -> list[Record]:
        if self.is_searching:
            return self._filtered or []
        return self._records or []

    def section_count(self) -> int:
        if self._is_flat():
            return 1
        return len(self._grouped or [])

    def section_title(self, section: int) -> str | None:
        if self._is_flat():
            return None
        group = (self._grouped or [])[section]
        return self.config.group_label(group.name, group.records)

    def row_count(self, section: int) -> int:
        if self._is_flat():
            return len(self._flat_rows())
        return len((self._grouped or [])[section].records)

    def record_at(self, section: int, row: int) -> Record:
        if self._is_flat():
            return self._flat_rows()[row]
        return (self._grouped or [])[section].records[row]

    def display_label(self, record: Record) -> str:
        return self.config.display_label(record)

    def display_detail(self, record: Record) -> str:
        return self.config.display_detail(record)

    def select(self, section: int, row: int) -> Record:
        """Mark the record at section/row as selected and notify the callback."""
        record = self.record_at(section, row)
        self.selected = record
        log_event("record_selected", section=section, row=row)
        if self.on_select is not None:
            self.on_select(record)
        return record

    # Loading

    def load(self, ignore_cache: bool = False) -> None:
        """Fetch a fresh collection through the loader and replace the current one."""
        if not self.ready_to_load:
            return
        if self.loader is None:
            raise NotConfiguredError("Record loader")

        log_event("load_start", ignore_cache=ignore_cache)
        try:
            items = self.loader(ignore_cache)
        except Exception as exc:
            log_event(
                "load_error",
                level=logging.ERROR,
                ignore_cache=ignore_cache,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            raise
        self.records = items

    def refresh(self) -> None:
        """Reload, bypassing any loader-side cache."""
        self.load(ignore_cache=True)
