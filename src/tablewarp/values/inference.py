"""Heuristic value inference - recover typed values from text"""
import logging
import re
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Optional, Tuple

logger = logging.getLogger(__name__)

BOOLEAN_PATTERN = re.compile(r'^(?:true|false)$', re.IGNORECASE)

# Plain decimal literal: no hex, no underscores, no inf/nan
NUMBER_PATTERN = re.compile(r'^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$', re.ASCII)

TIMESTAMP_PATTERN = re.compile(
    r'^(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})\.?(\d*)Z$',
    re.ASCII,
)


def parse_boolean(text: Any) -> Optional[bool]:
    """Return True/False for 'true'/'false' in any case, else None."""
    if not isinstance(text, str) or not BOOLEAN_PATTERN.match(text):
        return None
    return text.lower() == 'true'


def parse_number(text: Any) -> Optional[float]:
    """
    Return the float value of a strict numeric literal, else None.

    Surrounding whitespace is allowed, trailing garbage is not:
        parse_number(' 42 ') -> 42.0
        parse_number('42kg') -> None
        parse_number('')     -> None
    """
    if not isinstance(text, str):
        return None
    stripped = text.strip()
    if not NUMBER_PATTERN.fullmatch(stripped):
        return None
    return float(stripped)


def parse_timestamp(text: Any) -> Optional[datetime]:
    """
    Return a UTC datetime for 'YYYY-MM-DDTHH:MM:SS[.fraction]Z', else None.

    The fraction is read as a decimal fraction of a second and truncated to
    microseconds. A string that matches the pattern but names an impossible
    date (month 13, Feb 30) is not a timestamp.
    """
    if not isinstance(text, str):
        return None
    match = TIMESTAMP_PATTERN.fullmatch(text)
    if match is None:
        return None

    year, month, day, hour, minute, second, fraction = match.groups()
    try:
        result = datetime(
            int(year), int(month), int(day),
            int(hour), int(minute), int(second),
            tzinfo=timezone.utc,
        )
    except ValueError:
        logger.debug(f"Out of range timestamp fields in '{text}'")
        return None

    if fraction:
        micros = int(fraction[:6].ljust(6, '0'))
        result += timedelta(microseconds=micros)
    return result


# Applied in this order, first match wins
INFERENCE_RULES: Tuple[Tuple[str, Callable[[Any], Any]], ...] = (
    ('boolean', parse_boolean),
    ('number', parse_number),
    ('timestamp', parse_timestamp),
)


def infer_value(text: Any) -> Any:
    """
    Infer the typed value of a text token.

    Non-strings are returned as-is. Strings go through INFERENCE_RULES in
    order and the first rule that matches wins; if none match, the string
    is returned unchanged.
    """
    if not isinstance(text, str):
        return text
    for _, parser in INFERENCE_RULES:
        parsed = parser(text)
        if parsed is not None:
            return parsed
    return text


def revive_timestamps(node: Any) -> Any:
    """
    Walk a parsed JSON tree and turn timestamp-shaped strings into datetimes.

    Only the timestamp rule applies here, since JSON already carries
    booleans and numbers natively. Containers are rebuilt, not mutated.
    """
    if isinstance(node, str):
        parsed = parse_timestamp(node)
        return node if parsed is None else parsed
    if isinstance(node, dict):
        return {key: revive_timestamps(value) for key, value in node.items()}
    if isinstance(node, list):
        return [revive_timestamps(item) for item in node]
    return node
