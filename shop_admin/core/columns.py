from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class ColumnSpec:
    """
    A displayed column of the data table.

    - key: field name read from each row (dict key or attribute name)
    - label: header text

    Order of a column sequence is the display order. Duplicate keys are
    allowed and simply render the same field twice.
    """
    key: str
    label: str

    def to_dict(self) -> Dict[str, str]:
        return {"key": self.key, "label": self.label}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ColumnSpec:
        key = str(data["key"])
        return cls(key=key, label=str(data.get("label", key)))


def field_value(row: Any, key: str) -> Any:
    """Read one field from a row, supporting both mapping rows and plain objects."""
    if isinstance(row, Mapping):
        return row.get(key)
    return getattr(row, key, None)
