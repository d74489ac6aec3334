import re
from typing import Optional

from ..exceptions import InvalidDateFormatError

DAY_LENGTH = 10

COMPACT_DATE_PATTERN = re.compile(r"[0-9]{8}")
DAY_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def truncate_to_day(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value[:DAY_LENGTH]


def is_valid_day(day: Optional[str]) -> bool:
    return day is not None and DAY_PATTERN.fullmatch(day) is not None


def compact_day(day: str) -> str:
    return day.replace("-", "")


def parse_compact_date(value: str) -> str:
    """Turn a yyyymmdd path value into a yyyy-mm-dd day, rejecting anything else."""
    if value is None or not COMPACT_DATE_PATTERN.fullmatch(value):
        raise InvalidDateFormatError(value)
    return f"{value[:4]}-{value[4:6]}-{value[6:]}"
