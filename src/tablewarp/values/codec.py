"""Render values back to text"""
import math
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from typing import Any, Optional


@dataclass
class TaggedValue:
    """A value carrying an explicit type hint, e.g. a CRM entity reference."""
    type: str
    value: Any

    def to_dict(self) -> dict:
        return {'type': self.type, 'value': self.value}


def as_tagged(value: Any) -> Optional[TaggedValue]:
    """
    Return value as a TaggedValue if it carries a type tag, else None.

    Besides TaggedValue itself, any mapping with a non-null 'type' key counts,
    so tagged values reloaded from JSON as plain dicts keep their tag.
    """
    if isinstance(value, TaggedValue):
        return value
    if isinstance(value, Mapping) and value.get('type') is not None:
        return TaggedValue(type=str(value['type']), value=value.get('value'))
    return None


def render_timestamp(value: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a literal Z."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    # strftime('%Y') doesn't zero-pad years before 1000
    return (
        f'{value.year:04d}-{value.month:02d}-{value.day:02d}'
        f'T{value.hour:02d}:{value.minute:02d}:{value.second:02d}'
        f'.{value.microsecond // 1000:03d}Z'
    )


def render_number(value: float) -> str:
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def render_value(value: Any) -> Optional[str]:
    """
    Render a value to its textual form.

    Returns None when the value must be omitted entirely (None, or a tagged
    value whose inner value is None).
    """
    if value is None:
        return None

    tagged = as_tagged(value)
    if tagged is not None:
        return render_value(tagged.value)

    # bool before numbers: bool is an int subclass
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return render_number(value)
    if isinstance(value, datetime):
        return render_timestamp(value)
    if isinstance(value, date):
        return render_timestamp(datetime.combine(value, time(), tzinfo=timezone.utc))
    return str(value)


def json_default(value: Any) -> Any:
    """`default=` hook for json.dumps."""
    if isinstance(value, datetime):
        return render_timestamp(value)
    if isinstance(value, date):
        return render_value(value)
    if isinstance(value, TaggedValue):
        return value.to_dict()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
