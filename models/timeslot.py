"""주간 반복 수업시간(슬롯) 데이터 모델."""

from dataclasses import dataclass

# 요일 도메인 (월~일)
WEEKDAYS: tuple[str, ...] = ("월", "화", "수", "목", "금", "토", "일")

# 학원 운영 요일 (화~토). 나머지 요일 슬롯은 데이터로만 보존된다.
OPERATING_DAYS: tuple[str, ...] = ("화", "수", "목", "금", "토")


@dataclass(frozen=True)
class TimeSlot:
    """매주 반복되는 하나의 수업 구간.

    요일 + 시작/종료 시각(24시간제 정수). start < end.
    Immutable (frozen=True) → Dict-Key / Set-Element로 사용 가능.
    """

    # 요일 글자 ("화", "목", ...)
    day: str
    # 시작 시각 (예: 19)
    start: int
    # 종료 시각, 구간에 포함되지 않음 (예: 22)
    end: int

    @property
    def duration(self) -> int:
        return self.end - self.start

    @property
    def day_index(self) -> int:
        """요일 순서 (0=월 .. 6=일). 알 수 없는 요일은 맨 뒤."""
        return WEEKDAYS.index(self.day) if self.day in WEEKDAYS else len(WEEKDAYS)

    def overlaps(self, other: "TimeSlot") -> bool:
        """같은 요일이고 [start, end) 구간이 겹치면 True."""
        return (
            self.day == other.day
            and self.start < other.end
            and other.start < self.end
        )

    def __repr__(self) -> str:
        return f"TimeSlot({self.day}, {self.start}-{self.end})"

    def __str__(self) -> str:
        return f"{self.day} {self.start}-{self.end}시"


def format_slots(slots: list[TimeSlot]) -> list[str]:
    """파싱 결과를 표시용 라벨 목록으로 변환 ("목 15-17시")."""
    return [str(s) for s in slots]
