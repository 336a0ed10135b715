"""Tests for shaper configuration and config file loading."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from listshaper.config import (
    ShaperConfig,
    load_config,
    require_context,
    validate_config_payload,
)
from listshaper.constants import SortDirection
from listshaper.errors import ConfigError, NotConfiguredError
from listshaper.models import FilterQuery
from listshaper.records import Record
from listshaper.shaping import default_predicate


def _write(tmp_path: Path, payload) -> Path:
    path = tmp_path / "config.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


class TestShaperConfig:
    def test_defaults(self):
        config = ShaperConfig()
        assert config.group_by_key is None
        assert config.sort_direction == SortDirection.ASC
        assert config.search_predicate is default_predicate
        assert config.scopes is None
        assert config.plain_style is False
        assert config.search_enabled is True
        assert config.context == {}

    def test_default_hooks_read_name(self):
        config = ShaperConfig()
        record = Record({"name": "Apple"})
        assert config.display_label(record) == "Apple"
        assert config.display_detail(record) == "Apple"
        assert config.group_label("FRUIT", [record]) == "FRUIT"

    def test_sort_direction_accepts_lowercase(self):
        assert ShaperConfig(sort_direction="desc").sort_direction == SortDirection.DESC

    def test_invalid_sort_direction_rejected_on_assignment(self):
        config = ShaperConfig()
        with pytest.raises(ValidationError):
            config.sort_direction = "sideways"

    def test_custom_hooks(self):
        config = ShaperConfig(
            display_detail=lambda r: r["code"],
            group_label=lambda name, records: f"{name} ({len(records)})",
        )
        record = Record({"name": "Milk", "code": "4750001"})
        assert config.display_detail(record) == "4750001"
        assert config.group_label("DAIRY", [record]) == "DAIRY (1)"

    def test_context_is_not_shared_between_instances(self):
        first = ShaperConfig()
        first.context["warehouse"] = 3
        assert ShaperConfig().context == {}


class TestRequireContext:
    def test_returns_present_value(self):
        config = ShaperConfig(context={"warehouse_id": 7})
        assert require_context(config, "warehouse_id") == 7

    def test_missing_value_raises(self):
        with pytest.raises(NotConfiguredError, match="Context value 'warehouse_id'"):
            require_context(ShaperConfig(), "warehouse_id")


class TestValidateConfigPayload:
    def test_accepts_full_payload(self):
        validate_config_payload(
            {
                "group_by_key": "group_name",
                "sort_direction": "DESC",
                "scopes": ["Dairy", "Bakery"],
                "scope_key": "group_name",
                "search_fields": ["title", "ean_code"],
                "plain_style": False,
                "search_enabled": True,
                "context": {"store": "riga"},
            }
        )

    @pytest.mark.parametrize(
        "payload, message",
        [
            ([], "Config must be a JSON object"),
            ({"colour": "red"}, "unknown fields: colour"),
            ({"group_by_key": ""}, "group_by_key must be a non-empty string"),
            ({"group_by_key": 3}, "group_by_key must be a non-empty string"),
            ({"sort_direction": "UP"}, "Invalid sort_direction: UP"),
            ({"scopes": "Dairy"}, "scopes must be an array"),
            ({"search_fields": ["title", ""]}, "search_fields must be an array"),
            ({"plain_style": "yes"}, "plain_style must be a boolean"),
            ({"context": []}, "context must be a JSON object"),
            ({"scopes": ["Dairy"]}, "scopes require scope_key"),
        ],
    )
    def test_rejects_invalid_payloads(self, payload, message):
        with pytest.raises(ConfigError, match=message):
            validate_config_payload(payload)


class TestLoadConfig:
    def test_loads_declarative_options(self, tmp_path):
        path = _write(
            tmp_path,
            {"group_by_key": "group", "sort_direction": "desc", "plain_style": True},
        )
        config = load_config(path)
        assert config.group_by_key == "group"
        assert config.sort_direction == SortDirection.DESC
        assert config.plain_style is True
        assert config.search_predicate is default_predicate

    def test_search_fields_build_scoped_predicate(self, tmp_path):
        path = _write(
            tmp_path,
            {"search_fields": ["title"], "scope_key": "group_name", "scopes": ["Dairy"]},
        )
        config = load_config(path)
        predicate = config.search_predicate
        record = Record({"title": "Kefir", "group_name": "dairy"})
        assert predicate(record, FilterQuery("kef", "Dairy"))
        assert not predicate(record, FilterQuery("kef", "Bakery"))
        assert config.scopes == ["Dairy"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Config not found"):
            load_config(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid JSON in config file"):
            load_config(path)

    def test_invalid_structure(self, tmp_path):
        path = _write(tmp_path, {"sort_direction": 1})
        with pytest.raises(ConfigError):
            load_config(path)
