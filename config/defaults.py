from config.schema import (
    CapacityConfig,
    HourWindow,
    ParserConfig,
    TimetableConfig,
)
from models.timeslot import OPERATING_DAYS


def default_hours() -> HourWindow:
    """기본 운영 시간: 10시 ~ 22시 (12시간).

    13시 점심, 18시 저녁 구간 포함. 수업 대부분은 오후/저녁.
    """
    return HourWindow(start_hour=10, end_hour=22)


def default_capacity() -> CapacityConfig:
    """기본 정원 12명.

    여유 1~4명 | 활발 5~8명 | 만석 9~12명 | 초과 13명+
    """
    return CapacityConfig(busy_threshold=5, full_threshold=9, capacity=12)


def default_parser() -> ParserConfig:
    """요일만 입력 → 19-22시, 단일 시각 → 2시간 수업."""
    return ParserConfig(fallback_start=19, fallback_end=22, default_duration=2)


def default_timetable_config() -> TimetableConfig:
    """화~토 운영 학원의 기본 설정."""
    return TimetableConfig(
        days=list(OPERATING_DAYS),
        hours=default_hours(),
        capacity=default_capacity(),
        parser=default_parser(),
        top_slots=15,
    )
