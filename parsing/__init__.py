"""수업시간 자유 텍스트 파서 ("화목7-9", "수10목2금7토3" → TimeSlot 목록)."""

from .time_expr import DEFAULT_DURATION, parse_time, to_hour24
from .schedule_parser import (
    DEFAULT_FALLBACK,
    ScheduleTextParser,
    TokenParts,
    classify_parts,
    is_cancelled,
    normalize,
    parse_schedule,
    resolve_token,
    split_parts,
)

__all__ = [
    "DEFAULT_DURATION",
    "DEFAULT_FALLBACK",
    "ScheduleTextParser",
    "TokenParts",
    "classify_parts",
    "is_cancelled",
    "normalize",
    "parse_schedule",
    "parse_time",
    "resolve_token",
    "split_parts",
    "to_hour24",
]
