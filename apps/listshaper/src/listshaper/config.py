"""Shaper configuration: in-memory model and JSON config file loading."""

from __future__ import annotations

import json
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .constants import SortDirection
from .errors import ConfigError, NotConfiguredError
from .logging_utils import log_event
from .models import FilterQuery
from .records import Record
from .shaping import (
    default_predicate,
    display_detail,
    display_label,
    group_label,
    make_scoped_predicate,
)

_KNOWN_FIELDS = {
    "group_by_key",
    "sort_direction",
    "scopes",
    "plain_style",
    "search_enabled",
    "search_fields",
    "scope_key",
    "context",
}


class ShaperConfig(BaseModel):
    """Options that drive grouping, filtering and display text.

    ``context`` carries caller-specific values (ids, filters for the loader,
    and so on) explicitly instead of through shared mutable state.
    """

    model_config = ConfigDict(validate_assignment=True)

    group_by_key: str | None = None
    sort_direction: SortDirection = SortDirection.ASC
    search_predicate: Callable[[Record, FilterQuery], bool] | None = default_predicate
    display_label: Callable[[Record], str] = display_label
    display_detail: Callable[[Record], str] = display_detail
    group_label: Callable[[str, Sequence[Record]], str] = group_label
    scopes: list[str] | None = None
    plain_style: bool = False
    search_enabled: bool = True
    context: dict[str, Any] = {}

    @field_validator("sort_direction", mode="before")
    @classmethod
    def _normalize_direction(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.upper()
        return value


def require_context(config: ShaperConfig, key: str) -> Any:
    """Return a context value the caller depends on, or raise NotConfiguredError."""
    if key not in config.context:
        raise NotConfiguredError(f"Context value '{key}'")
    return config.context[key]


def _require_optional_string(payload: dict[str, Any], field_name: str) -> None:
    value = payload.get(field_name)
    if value is not None and (not isinstance(value, str) or not value):
        raise ConfigError(f"{field_name} must be a non-empty string or null")


def _require_string_list(payload: dict[str, Any], field_name: str) -> None:
    if field_name not in payload or payload[field_name] is None:
        return
    value = payload[field_name]
    if not isinstance(value, list) or not all(isinstance(v, str) and v for v in value):
        raise ConfigError(f"{field_name} must be an array of non-empty strings")


def _validate_optional_bool_field(payload: dict[str, Any], field_name: str) -> None:
    if field_name in payload and not isinstance(payload[field_name], bool):
        raise ConfigError(f"{field_name} must be a boolean")


def validate_config_payload(payload: Any) -> None:
    """Validate the declarative config structure.

    Raises:
        ConfigError: If the payload is not a valid config object
    """
    if not isinstance(payload, dict):
        raise ConfigError("Config must be a JSON object")

    unknown = sorted(set(payload) - _KNOWN_FIELDS)
    if unknown:
        raise ConfigError(f"Config has unknown fields: {', '.join(unknown)}")

    _require_optional_string(payload, "group_by_key")
    _require_optional_string(payload, "scope_key")
    _require_string_list(payload, "scopes")
    _require_string_list(payload, "search_fields")
    _validate_optional_bool_field(payload, "plain_style")
    _validate_optional_bool_field(payload, "search_enabled")

    direction = payload.get("sort_direction")
    if direction is not None:
        if not isinstance(direction, str) or direction.upper() not in SortDirection.__members__:
            raise ConfigError(f"Invalid sort_direction: {direction}. Expected ASC or DESC")

    if "context" in payload and not isinstance(payload["context"], dict):
        raise ConfigError("context must be a JSON object")

    if payload.get("scopes") and not payload.get("scope_key"):
        raise ConfigError("scopes require scope_key")


def config_from_payload(payload: dict[str, Any]) -> ShaperConfig:
    """Build a ShaperConfig from an already validated payload."""
    options = {k: v for k, v in payload.items() if k not in ("search_fields", "scope_key")}
    search_fields = payload.get("search_fields")
    if search_fields:
        options["search_predicate"] = make_scoped_predicate(
            search_fields, payload.get("scope_key")
        )
    try:
        return ShaperConfig(**options)
    except ValidationError as e:
        raise ConfigError(f"Invalid config: {e}") from e


def load_config(path: Path) -> ShaperConfig:
    """Load and validate a shaper config from a JSON file.

    Raises:
        FileNotFoundError: If the config file doesn't exist
        ConfigError: If the file is not valid JSON or not a valid config
    """
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in config file: {e}") from e

    validate_config_payload(payload)
    config = config_from_payload(payload)
    log_event(
        "config_loaded",
        config_file=path,
        group_by_key=config.group_by_key,
        sort_direction=config.sort_direction,
        scopes=config.scopes,
    )
    return config
