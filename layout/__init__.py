"""시간표 레이아웃 모듈 (겹침 그룹, 컬럼 할당, 혼잡도)."""

from .capacity import CapacityTier, classify_tier, tier_ranges
from .columns import assign_columns, find_overlap_groups, max_concurrency, sort_intervals
from .engine import (
    Block,
    DayLayout,
    SlotRef,
    TimetableLayout,
    TimetableLayoutEngine,
    build_layout,
    flatten_slots,
)

__all__ = [
    "CapacityTier",
    "classify_tier",
    "tier_ranges",
    "assign_columns",
    "find_overlap_groups",
    "max_concurrency",
    "sort_intervals",
    "Block",
    "DayLayout",
    "SlotRef",
    "TimetableLayout",
    "TimetableLayoutEngine",
    "build_layout",
    "flatten_slots",
]
