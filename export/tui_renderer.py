"""터미널용 시간표 표 렌더링 (main.py show 에서 Rich Table 로 출력).

계산된 TimetableLayout 만 읽는다.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from config.schema import CapacityConfig
    from layout.engine import DayLayout, TimetableLayout


def _member_label(member) -> str:
    name = getattr(member, "display_name", None)
    return name if name else str(getattr(member, "id", "?"))


def render_day_rows(day_layout: "DayLayout", capacity: int) -> list[list[str]]:
    """하루치 블록 → 표 행.

    각 행: [시간, 컬럼, 인원, 상태, 학생 목록]
    정원 밖 학생은 '(대기)' 표시.
    """
    rows: list[list[str]] = []
    for block in day_layout.blocks:
        names = []
        for idx, member in enumerate(block.members):
            label = _member_label(member)
            if idx >= capacity:
                label += " (대기)"
            names.append(label)
        tier = block.tier
        rows.append([
            block.label,
            f"{block.column + 1}/{block.group_column_count}",
            f"{block.count}명",
            f"[{tier.color}]{tier.label}[/{tier.color}]",
            "\n".join(names),
        ])
    return rows


def render_summary_rows(layout: "TimetableLayout") -> list[list[str]]:
    """요일별 요약 행: [요일, 블록 수, 인원, 너비 비율]."""
    rows: list[list[str]] = []
    for d in layout.days:
        rows.append([
            d.day,
            str(len(d.blocks)),
            f"{d.total_enrollments}명" if d.total_enrollments else "—",
            f"{layout.width_fraction(d.day):.0%}",
        ])
    return rows


def render_legend(capacity: "CapacityConfig") -> str:
    """혼잡도 범례 한 줄."""
    from layout.capacity import tier_ranges
    parts = [
        f"[{tier.color}]●[/{tier.color}] {tier.label} ({rng})"
        for tier, rng in tier_ranges(capacity)
    ]
    return "  ".join(parts)
