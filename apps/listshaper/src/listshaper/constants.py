"""Centralized constants for listshaper."""

from __future__ import annotations

from enum import StrEnum


class SortDirection(StrEnum):
    ASC = "ASC"
    DESC = "DESC"


# Scope label that disables scope restriction; always the first scope title.
SCOPE_ALL = "ALL"

# Field read by the default predicate and formatting hooks.
DEFAULT_NAME_FIELD = "name"

# CLI args and startup
ARG_HELP_LONG = "--help"
ARG_HELP_SHORT = "-h"
ARG_DATA = "--data"
ARG_CONFIG = "--config"
ARG_GROUP_BY = "--group-by"
ARG_DESC = "--desc"
ARG_SEARCH = "--search"
ARG_SCOPE = "--scope"
ARG_LOG = "--log"
CLI_USAGE = """\
Usage: listshaper --data <path> [options]

Options:
  --data <path>      JSON file with an array of records, or {"records": [...]}.
  --config <path>    Optional JSON config (group_by_key, sort_direction, scopes,
                     search_fields, scope_key, plain_style, context).
  --group-by <key>   Group records by this field (overrides the config).
  --desc             Sort groups in descending order.
  --search <text>    Show records matching the text instead of groups.
  --scope <label>    Restrict the search to one scope (default: ALL).
  --log <path>       Write structured logs to this file.
  --help, -h         Show this help message and exit.

Paths accept absolute forms, ~ (home), or @ (package root).
"""
CLI_HELP_HINT = "Run 'listshaper --help' for usage."

# Text output
EMPTY_LIST_TEXT = "No records."
EMPTY_SEARCH_TEXT = "No matching records."
