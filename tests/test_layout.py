"""시간표 레이아웃 엔진 테스트: 블록 병합, 겹침 그룹, 컬럼, 혼잡도."""

import random
from collections import namedtuple

import pytest

from config.schema import CapacityConfig, HourWindow, TimetableConfig
from layout.capacity import CapacityTier, classify_tier, tier_ranges
from layout.columns import (
    assign_columns,
    find_overlap_groups,
    max_concurrency,
    sort_intervals,
)
from layout.engine import TimetableLayoutEngine, build_layout, flatten_slots
from models.student import Student
from models.timeslot import TimeSlot

Iv = namedtuple("Iv", ["start", "end"])


def _student(sid: str, *slots: tuple[str, int, int]) -> Student:
    return Student(
        id=sid,
        name=sid,
        parsed_schedule=[TimeSlot(day=d, start=s, end=e) for d, s, e in slots],
    )


def _wide_config() -> TimetableConfig:
    return TimetableConfig(hours=HourWindow(start_hour=10, end_hour=24))


# ─── 구간 함수 ─────────────────────────────────────────────────────────────────

class TestColumns:
    def test_sort_by_start_then_end(self):
        ivs = [Iv(12, 14), Iv(10, 13), Iv(10, 11)]
        assert sort_intervals(ivs) == [Iv(10, 11), Iv(10, 13), Iv(12, 14)]

    def test_groups_empty(self):
        assert find_overlap_groups([]) == []

    def test_touching_intervals_separate(self):
        """[10,12) 와 [12,14) 는 겹치지 않음 → 다른 그룹."""
        groups = find_overlap_groups([Iv(12, 14), Iv(10, 12)])
        assert groups == [[Iv(10, 12)], [Iv(12, 14)]]

    def test_chain_is_one_group(self):
        """직접 겹치지 않아도 사슬로 이어지면 한 그룹."""
        groups = find_overlap_groups([Iv(10, 12), Iv(11, 14), Iv(13, 15)])
        assert len(groups) == 1
        columns, count = assign_columns(groups[0])
        assert columns == [0, 1, 0]
        assert count == 2

    def test_first_fit_reuses_freed_column(self):
        group = [Iv(10, 12), Iv(10, 14), Iv(12, 13), Iv(13, 16)]
        columns, count = assign_columns(group)
        assert columns == [0, 1, 0, 0]
        assert count == 2

    def test_assign_does_not_mutate(self):
        group = [Iv(10, 12), Iv(11, 13)]
        snapshot = list(group)
        assign_columns(group)
        assert group == snapshot

    def test_max_concurrency(self):
        assert max_concurrency([]) == 0
        assert max_concurrency([Iv(10, 12), Iv(12, 14)]) == 1
        assert max_concurrency([Iv(10, 15), Iv(11, 12), Iv(11, 13)]) == 3


# ─── 혼잡도 ───────────────────────────────────────────────────────────────────

class TestCapacityTier:
    @pytest.mark.parametrize("count,tier", [
        (1, CapacityTier.RELAXED),
        (4, CapacityTier.RELAXED),
        (5, CapacityTier.ACTIVE),
        (8, CapacityTier.ACTIVE),
        (9, CapacityTier.FULL),
        (12, CapacityTier.FULL),
        (13, CapacityTier.OVER),
    ])
    def test_reference_thresholds(self, count, tier):
        assert classify_tier(count, CapacityConfig()) == tier

    def test_custom_thresholds(self):
        cfg = CapacityConfig(busy_threshold=2, full_threshold=3, capacity=4)
        assert classify_tier(1, cfg) == CapacityTier.RELAXED
        assert classify_tier(2, cfg) == CapacityTier.ACTIVE
        assert classify_tier(4, cfg) == CapacityTier.FULL
        assert classify_tier(5, cfg) == CapacityTier.OVER

    def test_labels(self):
        assert CapacityTier.OVER.label == "초과"
        assert CapacityTier.RELAXED.label == "여유"

    def test_tier_ranges(self):
        ranges = dict(tier_ranges(CapacityConfig()))
        assert ranges[CapacityTier.RELAXED] == "1~4명"
        assert ranges[CapacityTier.ACTIVE] == "5~8명"
        assert ranges[CapacityTier.FULL] == "9~12명"
        assert ranges[CapacityTier.OVER] == "13명+"


# ─── 엔진 ─────────────────────────────────────────────────────────────────────

class TestLayoutEngine:
    def test_empty_input(self):
        """학생이 없으면 블록 없음, 모든 요일 가중치 1."""
        for students in ([], None):
            layout = build_layout(students)
            assert layout.day_names == ["화", "수", "목", "금", "토"]
            assert layout.is_empty
            assert all(d.width_weight == 1 for d in layout.days)
            assert layout.width_fraction("화") == pytest.approx(0.2)

    def test_students_without_slots(self):
        layout = build_layout([_student("a"), _student("b")])
        assert layout.is_empty

    def test_scenario_two_groups(self):
        """19-21, 20-22 → 2컬럼 그룹 / 22-24 → 단독 그룹."""
        students = [
            _student("a", ("화", 19, 21)),
            _student("b", ("화", 20, 22)),
            _student("c", ("화", 22, 24)),
        ]
        day = TimetableLayoutEngine(_wide_config()).layout(students).day("화")
        spans = [(b.start, b.end, b.column, b.group_column_count) for b in day.blocks]
        assert spans == [(19, 21, 0, 2), (20, 22, 1, 2), (22, 24, 0, 1)]
        assert day.width_weight == 2

    def test_clamped_to_window(self):
        """운영 시간 밖 부분은 잘리고, 완전히 밖이면 제외."""
        students = [
            _student("a", ("화", 9, 11)),
            _student("b", ("화", 22, 24)),
            _student("c", ("화", 21, 23)),
        ]
        day = build_layout(students).day("화")
        assert [(b.start, b.end) for b in day.blocks] == [(10, 11), (21, 22)]

    def test_non_operating_days_ignored(self):
        students = [_student("a", ("월", 19, 21), ("일", 10, 12), ("수", 19, 21))]
        layout = build_layout(students)
        assert layout.day("월") is None
        assert [b.day for b in layout.blocks()] == ["수"]

    def test_identical_slots_merged(self):
        """같은 구간은 하나의 블록, 등록 순서 유지."""
        students = [
            _student("a", ("목", 19, 21)),
            _student("b", ("목", 15, 17)),
            _student("c", ("목", 19, 21)),
        ]
        day = build_layout(students).day("목")
        assert len(day.blocks) == 2
        block = next(b for b in day.blocks if b.start == 19)
        assert [m.id for m in block.members] == ["a", "c"]
        assert block.count == 2
        assert block.group_column_count == 1

    def test_merge_after_clamping(self):
        """잘린 결과가 같으면 병합된다."""
        students = [_student("a", ("금", 8, 12)), _student("b", ("금", 9, 12))]
        day = build_layout(students).day("금")
        assert len(day.blocks) == 1
        assert (day.blocks[0].start, day.blocks[0].end, day.blocks[0].count) == (10, 12, 2)

    def test_blocks_sorted(self):
        students = [
            _student("a", ("토", 15, 18)),
            _student("b", ("토", 10, 12)),
            _student("c", ("토", 15, 17)),
        ]
        day = build_layout(students).day("토")
        assert [(b.start, b.end) for b in day.blocks] == [(10, 12), (15, 17), (15, 18)]

    def test_width_weights(self):
        students = [
            _student("a", ("화", 19, 21)),
            _student("b", ("화", 20, 22)),
            _student("c", ("수", 19, 21)),
        ]
        layout = build_layout(students)
        assert layout.day("화").width_weight == 2
        assert layout.total_weight == 6
        assert layout.width_fraction("화") == pytest.approx(2 / 6)
        assert layout.width_fraction("수") == pytest.approx(1 / 6)
        assert layout.width_fraction("월") == 0.0

    def test_tiers_and_overflow(self):
        students = [_student(f"s{i}", ("화", 19, 21)) for i in range(14)]
        layout = build_layout(students)
        block = layout.day("화").blocks[0]
        assert block.tier == CapacityTier.OVER
        assert [m.id for m in block.overflow_members(layout.capacity)] == ["s12", "s13"]
        assert layout.day("화").total_enrollments == 14

    def test_capacity_override(self):
        students = [_student(f"s{i}", ("화", 19, 21)) for i in range(4)]
        layout = build_layout(students)
        assert layout.blocks()[0].tier == CapacityTier.RELAXED

        layout = TimetableLayoutEngine().layout(students, capacity=3)
        assert layout.capacity == 3
        assert layout.blocks()[0].tier == CapacityTier.OVER

    def test_days_override(self):
        students = [_student("a", ("월", 19, 21))]
        layout = TimetableLayoutEngine().layout(students, days=["월"])
        assert layout.day_names == ["월"]
        assert len(layout.day("월").blocks) == 1

    def test_idempotent(self):
        students = [
            _student("a", ("화", 19, 21), ("목", 15, 17)),
            _student("b", ("화", 20, 22)),
        ]
        engine = TimetableLayoutEngine()
        assert engine.layout(students) == engine.layout(students)

    def test_flatten_slots(self):
        students = [_student("a", ("월", 19, 21), ("화", 9, 11))]
        refs = flatten_slots(students)
        assert [r.key for r in refs] == [("월", 19, 21), ("화", 9, 11)]
        assert all(r.student.id == "a" for r in refs)


# ─── 불변식 (무작위 입력) ─────────────────────────────────────────────────────

class TestLayoutInvariants:
    @staticmethod
    def _random_students(rng: random.Random, n: int) -> list[Student]:
        days = ["화", "수", "목", "금", "토"]
        students = []
        for i in range(n):
            slots = []
            for _ in range(rng.randint(0, 3)):
                start = rng.randint(10, 20)
                end = rng.randint(start + 1, min(start + 4, 22))
                slots.append((rng.choice(days), start, end))
            students.append(_student(f"s{i}", *slots))
        return students

    def test_same_column_never_overlaps(self):
        rng = random.Random(42)
        for _ in range(30):
            layout = build_layout(self._random_students(rng, 25))
            for day in layout.days:
                blocks = day.blocks
                for i, a in enumerate(blocks):
                    for b in blocks[i + 1:]:
                        if a.column == b.column:
                            assert a.end <= b.start or b.end <= a.start

    def test_column_count_is_minimal(self):
        """그룹 컬럼 수 == 스윕 라인으로 센 최대 동시 진행 수."""
        rng = random.Random(1234)
        for _ in range(30):
            layout = build_layout(self._random_students(rng, 25))
            for day in layout.days:
                for group in find_overlap_groups(day.blocks):
                    expected = max_concurrency(group)
                    assert {b.group_column_count for b in group} == {expected}
                    assert all(0 <= b.column < expected for b in group)
                if day.blocks:
                    assert day.width_weight == max(b.group_column_count for b in day.blocks)

    def test_no_duplicate_blocks(self):
        rng = random.Random(99)
        layout = build_layout(self._random_students(rng, 60))
        keys = [(b.day, b.start, b.end) for b in layout.blocks()]
        assert len(keys) == len(set(keys))
