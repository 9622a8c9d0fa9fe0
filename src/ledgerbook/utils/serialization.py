"""Conversion of report values to JSON-ready structures."""

import dataclasses
import json
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

# Unbounded period ends are rendered as empty strings
_BOUND_FIELDS = {"start_date", "end_date", "as_of"}


def report_to_dict(value: Any) -> Any:
    """Convert entities and reports to plain dicts, lists and strings.

    Decimals become strings to keep exact cents, dates become ISO strings
    and enums their values.
    """
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        result = {}
        for f in dataclasses.fields(value):
            item = getattr(value, f.name)
            if item is None and f.name in _BOUND_FIELDS:
                result[f.name] = ""
            else:
                result[f.name] = report_to_dict(item)
        return result
    if isinstance(value, (list, tuple)):
        return [report_to_dict(item) for item in value]
    if isinstance(value, dict):
        return {str(k): report_to_dict(v) for k, v in value.items()}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


def report_to_json(value: Any, indent: int = 2) -> str:
    """Serialize a report value to a JSON string."""
    return json.dumps(report_to_dict(value), indent=indent)
