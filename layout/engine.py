"""시간표 레이아웃 엔진.

학생들의 TimeSlot 을 요일별 블록으로 합치고, 겹침 그룹마다 컬럼을
할당한 뒤 요일 너비 가중치와 혼잡도를 계산한다. 결과(TimetableLayout)만
있으면 렌더러는 겹침 분석을 다시 할 필요가 없다.

모든 계산은 호출 단위로 새로 한다. 같은 입력이면 같은 결과.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Protocol, Sequence

from config.schema import CapacityConfig, TimetableConfig
from layout.capacity import CapacityTier, classify_tier
from layout.columns import assign_columns, find_overlap_groups
from models.timeslot import TimeSlot

logger = logging.getLogger(__name__)


class ScheduledSubject(Protocol):
    """엔진이 읽는 최소 계약: 고유 id + 슬롯 목록."""

    id: str
    parsed_schedule: Sequence[TimeSlot]


# ─── 결과 모델 ────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class SlotRef:
    """평탄화된 (요일, 시작, 종료, 학생) 한 건."""

    day: str
    start: int
    end: int
    student: ScheduledSubject

    @property
    def key(self) -> tuple[str, int, int]:
        return self.day, self.start, self.end


@dataclass(frozen=True)
class Block:
    """같은 (요일, 시작, 종료)를 공유하는 학생들의 표시 단위."""

    day: str
    start: int
    end: int
    members: tuple = ()
    column: int = 0
    group_column_count: int = 1
    tier: CapacityTier = CapacityTier.RELAXED

    @property
    def count(self) -> int:
        return len(self.members)

    @property
    def label(self) -> str:
        return f"{self.start}-{self.end}시"

    def overflow_members(self, capacity: int) -> tuple:
        """정원을 넘긴 학생들 (등록 순서 기준 capacity 번째 이후)."""
        return self.members[capacity:]


@dataclass(frozen=True)
class DayLayout:
    """하루치 블록 목록 + 너비 가중치."""

    day: str
    blocks: tuple[Block, ...] = ()
    width_weight: int = 1

    @property
    def total_enrollments(self) -> int:
        return sum(b.count for b in self.blocks)


@dataclass(frozen=True)
class TimetableLayout:
    """요일별 레이아웃 전체."""

    days: tuple[DayLayout, ...] = ()
    capacity: int = 12

    @property
    def day_names(self) -> list[str]:
        return [d.day for d in self.days]

    @property
    def total_weight(self) -> int:
        return sum(d.width_weight for d in self.days)

    @property
    def is_empty(self) -> bool:
        return all(not d.blocks for d in self.days)

    def day(self, name: str) -> Optional[DayLayout]:
        return next((d for d in self.days if d.day == name), None)

    def width_fraction(self, name: str) -> float:
        """요일 열의 너비 비율 (가중치 / 전체 가중치)."""
        d = self.day(name)
        total = self.total_weight
        if d is None or total == 0:
            return 0.0
        return d.width_weight / total

    def blocks(self) -> list[Block]:
        return [b for d in self.days for b in d.blocks]


# ─── 평탄화 ───────────────────────────────────────────────────────────────────

def flatten_slots(students: Optional[Iterable[ScheduledSubject]]) -> list[SlotRef]:
    """모든 학생의 모든 슬롯을 (요일, 시작, 종료, 학생) 목록으로.

    요일/시간 필터 없이 원본 그대로. 통계는 이 목록을 집계한다.
    """
    refs: list[SlotRef] = []
    for student in students or ():
        for slot in getattr(student, "parsed_schedule", None) or ():
            refs.append(SlotRef(slot.day, slot.start, slot.end, student))
    return refs


# ─── 엔진 ─────────────────────────────────────────────────────────────────────

@dataclass
class _Bucket:
    start: int
    end: int
    members: list = field(default_factory=list)


class TimetableLayoutEngine:
    """요일별 블록 배치 계산기."""

    def __init__(self, config: Optional[TimetableConfig] = None) -> None:
        self.config = config or TimetableConfig()

    def layout(
        self,
        students: Optional[Iterable[ScheduledSubject]],
        days: Optional[Sequence[str]] = None,
        capacity: Optional[int] = None,
    ) -> TimetableLayout:
        """학생 목록 → TimetableLayout.

        days / capacity 를 주면 설정값 대신 사용한다.
        """
        day_names = list(days) if days is not None else list(self.config.days)
        cap_cfg = self.config.capacity
        if capacity is not None:
            cap_cfg = cap_cfg.model_copy(update={"capacity": capacity})

        refs = flatten_slots(students)
        day_layouts = tuple(
            self.layout_day(day, [r for r in refs if r.day == day], cap_cfg)
            for day in day_names
        )
        return TimetableLayout(days=day_layouts, capacity=cap_cfg.capacity)

    def layout_day(
        self, day: str, refs: Sequence[SlotRef], cap_cfg: CapacityConfig
    ) -> DayLayout:
        """하루치 슬롯 → 블록 병합, 그룹핑, 컬럼 할당."""
        buckets = self._merge(day, refs)
        blocks: list[Block] = []
        max_cols = 0
        for group in find_overlap_groups(buckets):
            columns, col_count = assign_columns(group)
            max_cols = max(max_cols, col_count)
            for bucket, col in zip(group, columns):
                members = tuple(bucket.members)
                blocks.append(Block(
                    day=day,
                    start=bucket.start,
                    end=bucket.end,
                    members=members,
                    column=col,
                    group_column_count=col_count,
                    tier=classify_tier(len(members), cap_cfg),
                ))
        return DayLayout(day=day, blocks=tuple(blocks), width_weight=max(1, max_cols))

    def _merge(self, day: str, refs: Sequence[SlotRef]) -> list[_Bucket]:
        """운영 시간으로 자르고 같은 구간끼리 합친다 (첫 등장 순서 유지)."""
        hours = self.config.hours
        buckets: dict[tuple[int, int], _Bucket] = {}
        for ref in refs:
            start, end = hours.clamp(ref.start, ref.end)
            if start >= end:
                logger.debug(
                    f"운영 시간 밖 슬롯 제외: {day} {ref.start}-{ref.end} "
                    f"({getattr(ref.student, 'id', '?')})"
                )
                continue
            bucket = buckets.get((start, end))
            if bucket is None:
                bucket = buckets[(start, end)] = _Bucket(start, end)
            bucket.members.append(ref.student)
        return list(buckets.values())


def build_layout(
    students: Optional[Iterable[ScheduledSubject]],
    config: Optional[TimetableConfig] = None,
) -> TimetableLayout:
    """설정 기준으로 한 번에 레이아웃 계산."""
    return TimetableLayoutEngine(config).layout(students)
