"""시간표 통계: 인기 시간대, 정원 초과 시간대, 대기자 명단.

레이아웃 엔진과 같은 평탄화 슬롯 목록(flatten_slots)과 같은 혼잡도
분류(classify_tier)를 사용한다. 겹침/컬럼은 다시 계산하지 않는다.
"""

from typing import Optional

from pydantic import BaseModel

from config.schema import TimetableConfig
from layout.capacity import CapacityTier, classify_tier
from layout.engine import SlotRef, flatten_slots
from models.student import ClassType, Student


# ─── 결과 모델 ────────────────────────────────────────────────────────────────

class SlotPopularity(BaseModel):
    """한 시간대의 등록 현황."""

    day: str
    start: int
    end: int
    count: int
    tier: CapacityTier
    student_ids: list[str]

    @property
    def label(self) -> str:
        return f"{self.day} {self.start}-{self.end}시"


class OverCapacitySlot(BaseModel):
    """정원을 넘긴 시간대."""

    label: str
    count: int
    excess: int


class WaitlistEntry(BaseModel):
    """대기자 한 명 (정원 밖 등록)."""

    student_id: str
    name: str
    school: str
    contact: str
    class_type: ClassType
    slot: str


class TimetableStatistics(BaseModel):
    """전체 통계 보고서."""

    total_students: int
    students_by_class: dict[str, int]
    slot_count: int
    capacity: int
    top_slots: list[SlotPopularity]
    over_capacity: list[OverCapacitySlot]
    waitlist: list[WaitlistEntry]

    def print_rich(self) -> None:
        """통계를 Rich 로 출력."""
        from rich.console import Console
        from rich.panel import Panel
        from rich.table import Table
        from rich import box

        console = Console()
        console.print(Panel(
            f"전체 학생 [bold]{self.total_students}[/bold]명  |  "
            f"아기반 {self.students_by_class.get(ClassType.BABY.value, 0)}명  |  "
            f"청소년반 {self.students_by_class.get(ClassType.TEEN.value, 0)}명  |  "
            f"운영 시간대 {self.slot_count}개",
            title="현황",
            border_style="cyan",
        ))

        table = Table(title=f"인기 시간대 TOP {len(self.top_slots)}", box=box.ROUNDED)
        table.add_column("#", justify="right")
        table.add_column("시간대")
        table.add_column("인원", justify="right")
        table.add_column("상태")
        for rank, sp in enumerate(self.top_slots, start=1):
            table.add_row(
                str(rank), sp.label, f"{sp.count}명",
                f"[{sp.tier.color}]{sp.tier.label}[/{sp.tier.color}]",
            )
        if not self.top_slots:
            console.print("[dim]등록된 수업 데이터가 없습니다.[/dim]")
        else:
            console.print(table)

        if not self.over_capacity:
            console.print("[green]모든 시간대가 정원 이내입니다.[/green]")
        else:
            console.print("\n[red bold]정원 초과 시간대:[/red bold]")
            for oc in self.over_capacity:
                console.print(f"  [red]• {oc.label}: {oc.count}명 (+{oc.excess}명 초과)[/red]")

        if not self.waitlist:
            console.print("[green]대기자가 없습니다.[/green]")
            return
        wl = Table(title=f"대기자 명단 ({len(self.waitlist)}명)", box=box.SIMPLE)
        wl.add_column("이름")
        wl.add_column("학교/학년")
        wl.add_column("반")
        wl.add_column("시간대")
        for w in self.waitlist:
            wl.add_row(w.name or "-", w.school or "-", w.class_type.label, w.slot)
        console.print(wl)


# ─── Analyzer ─────────────────────────────────────────────────────────────────

class StatisticsAnalyzer:
    """평탄화된 슬롯 목록을 집계해 통계를 만든다."""

    def __init__(self, config: Optional[TimetableConfig] = None) -> None:
        self.config = config or TimetableConfig()

    def analyze(self, students: Optional[list[Student]]) -> TimetableStatistics:
        students = list(students or [])
        cap_cfg = self.config.capacity
        capacity = cap_cfg.capacity

        slots = self._count_slots(flatten_slots(students))
        # 인원 내림차순, 같으면 처음 등장한 순서
        ranked = sorted(slots.values(), key=lambda refs: -len(refs))

        popularity = [self._popularity(refs, cap_cfg) for refs in ranked]
        over = [sp for sp in popularity if sp.count > capacity]

        waitlist: list[WaitlistEntry] = []
        for sp, refs in zip(popularity, ranked):
            if sp.count <= capacity:
                continue
            for ref in refs[capacity:]:
                s = ref.student
                waitlist.append(WaitlistEntry(
                    student_id=s.id,
                    name=s.name,
                    school=s.school,
                    contact=s.contact,
                    class_type=s.class_type,
                    slot=sp.label,
                ))

        by_class = {
            ct.value: sum(1 for s in students if s.class_type == ct)
            for ct in ClassType
        }

        return TimetableStatistics(
            total_students=len(students),
            students_by_class=by_class,
            slot_count=len(slots),
            capacity=capacity,
            top_slots=popularity[: self.config.top_slots],
            over_capacity=[
                OverCapacitySlot(label=sp.label, count=sp.count, excess=sp.count - capacity)
                for sp in over
            ],
            waitlist=waitlist,
        )

    @staticmethod
    def _count_slots(refs: list[SlotRef]) -> dict[tuple[str, int, int], list[SlotRef]]:
        slots: dict[tuple[str, int, int], list[SlotRef]] = {}
        for ref in refs:
            slots.setdefault(ref.key, []).append(ref)
        return slots

    @staticmethod
    def _popularity(refs: list[SlotRef], cap_cfg) -> SlotPopularity:
        first = refs[0]
        return SlotPopularity(
            day=first.day,
            start=first.start,
            end=first.end,
            count=len(refs),
            tier=classify_tier(len(refs), cap_cfg),
            student_ids=[r.student.id for r in refs],
        )
