"""Schema-agnostic record container with typed accessors."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from .errors import MissingKeyError, RecordTypeError


class Record(Mapping[str, Any]):
    """Read-only, ordered key/value bag for one list entry.

    Plain ``record[key]`` access behaves like a dict but raises
    MissingKeyError for absent keys. The ``get_*`` accessors additionally
    check the value's type and raise RecordTypeError on a mismatch instead
    of coercing.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = dict(data or {})

    @classmethod
    def from_mapping(cls, value: Any, index: int | None = None) -> "Record":
        """Wrap a mapping, passing existing Records through."""
        if isinstance(value, Record):
            return value
        if not isinstance(value, Mapping):
            where = "Record" if index is None else f"Record {index}"
            raise RecordTypeError(
                f"{where} must be an object, got {type(value).__name__}."
            )
        return cls(value)

    def __getitem__(self, key: str) -> Any:
        try:
            return self._data[key]
        except KeyError:
            raise MissingKeyError(key) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Record({self._data!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Record):
            return self._data == other._data
        if isinstance(other, Mapping):
            return self._data == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def require(self, key: str) -> Any:
        return self[key]

    def get_str(self, key: str) -> str:
        return self._typed(key, str, "a string")

    def get_int(self, key: str) -> int:
        value = self[key]
        if isinstance(value, bool) or not isinstance(value, int):
            raise self._mismatch(key, value, "an integer")
        return value

    def get_float(self, key: str) -> float:
        value = self[key]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise self._mismatch(key, value, "a number")
        return float(value)

    def get_bool(self, key: str) -> bool:
        return self._typed(key, bool, "a boolean")

    def get_list(self, key: str) -> list[Any]:
        return self._typed(key, list, "an array")

    def get_mapping(self, key: str) -> Mapping[str, Any]:
        return self._typed(key, Mapping, "an object")

    def to_dict(self) -> dict[str, Any]:
        return dict(self._data)

    def _typed(self, key: str, expected: type, label: str) -> Any:
        value = self[key]
        if not isinstance(value, expected):
            raise self._mismatch(key, value, label)
        return value

    @staticmethod
    def _mismatch(key: str, value: Any, label: str) -> RecordTypeError:
        return RecordTypeError(
            f"Field '{key}' must be {label}, got {type(value).__name__}."
        )


def to_records(items: Iterable[Any]) -> list[Record]:
    """Convert an iterable of mappings into Records, failing on the first bad entry."""
    return [Record.from_mapping(item, index=i) for i, item in enumerate(items)]
