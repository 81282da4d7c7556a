"""정원 대비 혼잡도 4단계 분류."""

from enum import Enum

from config.schema import CapacityConfig


class CapacityTier(str, Enum):
    RELAXED = "relaxed"
    ACTIVE = "active"
    FULL = "full"
    OVER = "over"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def color(self) -> str:
        """Rich 스타일 색상."""
        return _COLORS[self]


_LABELS = {
    CapacityTier.RELAXED: "여유",
    CapacityTier.ACTIVE: "활발",
    CapacityTier.FULL: "만석",
    CapacityTier.OVER: "초과",
}

_COLORS = {
    CapacityTier.RELAXED: "green",
    CapacityTier.ACTIVE: "cyan",
    CapacityTier.FULL: "yellow",
    CapacityTier.OVER: "red",
}


def classify_tier(count: int, config: CapacityConfig) -> CapacityTier:
    """인원 수 → 혼잡도 단계."""
    if count > config.capacity:
        return CapacityTier.OVER
    if count >= config.full_threshold:
        return CapacityTier.FULL
    if count >= config.busy_threshold:
        return CapacityTier.ACTIVE
    return CapacityTier.RELAXED


def tier_ranges(config: CapacityConfig) -> list[tuple[CapacityTier, str]]:
    """범례용 (단계, 인원 범위 문자열) 목록. 예: (여유, "1~4명")."""
    return [
        (CapacityTier.RELAXED, f"1~{config.busy_threshold - 1}명"),
        (CapacityTier.ACTIVE, f"{config.busy_threshold}~{config.full_threshold - 1}명"),
        (CapacityTier.FULL, f"{config.full_threshold}~{config.capacity}명"),
        (CapacityTier.OVER, f"{config.capacity + 1}명+"),
    ]
