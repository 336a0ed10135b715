"""CLI argument parsing and one-shot list rendering."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn

from .config import ShaperConfig, load_config
from .constants import (
    ARG_CONFIG,
    ARG_DATA,
    ARG_DESC,
    ARG_GROUP_BY,
    ARG_HELP_LONG,
    ARG_HELP_SHORT,
    ARG_LOG,
    ARG_SCOPE,
    ARG_SEARCH,
    CLI_HELP_HINT,
    CLI_USAGE,
    SortDirection,
)
from .controller import ListShaper
from .errors import ConfigError, ListShaperError, StartupValidationError
from .formatter import format_flat, format_grouped, format_search_results
from .logging_utils import setup_logging
from .path_mapping import map_path
from .store import load_records

_VALUE_ARGS = {
    ARG_DATA: "data",
    ARG_CONFIG: "config",
    ARG_GROUP_BY: "group_by",
    ARG_SEARCH: "search",
    ARG_SCOPE: "scope",
    ARG_LOG: "log",
}


@dataclass
class AppArgs:
    data_path: Path
    config_path: Path | None = None
    group_by: str | None = None
    descending: bool = False
    search: str | None = None
    scope: str | None = None
    log_path: Path | None = None


def parse_args(argv: list[str] | None = None) -> AppArgs | None:
    """Parse CLI arguments. Returns None if --help was requested."""
    args = argv if argv is not None else sys.argv[1:]

    if ARG_HELP_LONG in args or ARG_HELP_SHORT in args:
        print(CLI_USAGE, end="")
        return None

    values: dict[str, str] = {}
    descending = False

    i = 0
    while i < len(args):
        arg = args[i]
        if arg == ARG_DESC:
            descending = True
            i += 1
        elif arg in _VALUE_ARGS:
            if i + 1 >= len(args):
                _die(f"{arg} requires a value.")
            values[_VALUE_ARGS[arg]] = args[i + 1]
            i += 2
        else:
            _die(f"Unknown argument: {arg}")

    if "data" not in values:
        _die(f"{ARG_DATA} is required.")
    if "scope" in values and "search" not in values:
        _die(f"{ARG_SCOPE} requires {ARG_SEARCH}.")

    return AppArgs(
        data_path=_resolve_path(values["data"], ARG_DATA),
        config_path=_resolve_path(values["config"], ARG_CONFIG) if "config" in values else None,
        group_by=values.get("group_by"),
        descending=descending,
        search=values.get("search"),
        scope=values.get("scope"),
        log_path=_resolve_path(values["log"], ARG_LOG) if "log" in values else None,
    )


def build_config(app_args: AppArgs) -> ShaperConfig:
    """Load the config file, if any, and apply command-line overrides."""
    config = load_config(app_args.config_path) if app_args.config_path else ShaperConfig()
    if app_args.group_by is not None:
        config.group_by_key = app_args.group_by
    if app_args.descending:
        config.sort_direction = SortDirection.DESC
    return config


def render(shaper: ListShaper, app_args: AppArgs) -> str:
    """Render the shaper's current view as text."""
    config = shaper.config
    if app_args.search is not None:
        if not config.search_enabled:
            raise ConfigError("Search is disabled by the config (search_enabled is false)")
        matches = shaper.apply_query(app_args.search, app_args.scope)
        return format_search_results(matches, config.display_label)
    if shaper.grouped is not None and not config.plain_style:
        return format_grouped(shaper.grouped, config.display_label, config.group_label)
    return format_flat(shaper.records or [], config.display_label)


def main(argv: list[str] | None = None) -> None:
    """Application entry point."""
    try:
        app_args = parse_args(argv)
    except StartupValidationError as exc:
        _die(str(exc))
    if app_args is None:
        sys.exit(0)

    setup_logging(str(app_args.log_path) if app_args.log_path else None)

    try:
        config = build_config(app_args)
        shaper = ListShaper(config, loader=lambda _ignore_cache: load_records(app_args.data_path))
        shaper.load()
        output = render(shaper, app_args)
    except FileNotFoundError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)
    except ListShaperError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)

    print(output)


def _resolve_path(raw: str, arg_name: str) -> Path:
    try:
        return map_path(raw, app_root_abs=Path(__file__).resolve().parent)
    except StartupValidationError as exc:
        raise StartupValidationError(f"{arg_name} path is invalid: {exc}") from exc


def _die(message: str) -> NoReturn:
    print(f"ERROR: {message}", file=sys.stderr)
    print(CLI_HELP_HINT, file=sys.stderr)
    sys.exit(1)
