"""Pytest configuration and fixtures for listshaper tests."""

import json
import logging
from pathlib import Path

import pytest

from listshaper.records import Record, to_records


@pytest.fixture(autouse=True)
def _reenable_logging():
    """Undo logging.disable() left behind by setup_logging(None)."""
    yield
    logging.disable(logging.NOTSET)


@pytest.fixture
def produce() -> list[Record]:
    """Small grocery list used across tests."""
    return to_records(
        [
            {"name": "Apple", "group": "fruit"},
            {"name": "Carrot", "group": "veg"},
            {"name": "Banana", "group": "fruit"},
        ]
    )


@pytest.fixture
def catalog() -> list[Record]:
    """Records with several searchable fields and a scope field."""
    return to_records(
        [
            {"title": "Milk 1L", "ean_code": "4750001", "group_name": "Dairy", "name": "Milk"},
            {"title": "Rye bread", "ean_code": "4750002", "group_name": "Bakery", "name": "Bread"},
            {"title": "Kefir", "ean_code": "4759999", "group_name": "dairy", "name": "Kefir"},
            {"title": "Bagel", "ean_code": "1230003", "group_name": "Bakery", "name": "Bagel"},
        ]
    )


@pytest.fixture
def records_file(tmp_path: Path) -> Path:
    path = tmp_path / "records.json"
    path.write_text(
        json.dumps(
            [
                {"name": "Apple", "group": "fruit"},
                {"name": "Carrot", "group": "veg"},
                {"name": "Banana", "group": "fruit"},
            ]
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def frozen_time():
    """Freeze time for consistent timestamped log payloads."""
    from freezegun import freeze_time

    with freeze_time("2026-02-09 10:00:00"):
        yield
