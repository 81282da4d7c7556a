"""겹침 그룹 탐색과 그리디 컬럼 할당.

start / end 속성만 있으면 어떤 구간 객체에도 쓸 수 있다.
입력 객체는 변경하지 않는다.
"""

from typing import Protocol, Sequence, TypeVar


class Interval(Protocol):
    start: int
    end: int


T = TypeVar("T", bound=Interval)


def sort_intervals(intervals: Sequence[T]) -> list[T]:
    """start 오름차순, 같으면 end 오름차순 (안정 정렬)."""
    return sorted(intervals, key=lambda iv: (iv.start, iv.end))


def find_overlap_groups(intervals: Sequence[T]) -> list[list[T]]:
    """겹침으로 연결된 최대 구간 묶음 목록.

    정렬된 순서로 훑으면서 group_end 를 유지한다. start < group_end 이면
    같은 그룹. 서로 직접 겹치지 않아도 사슬로 이어지면 한 그룹이다.
    """
    ordered = sort_intervals(intervals)
    if not ordered:
        return []

    groups: list[list[T]] = []
    current = [ordered[0]]
    group_end = ordered[0].end
    for iv in ordered[1:]:
        if iv.start < group_end:
            current.append(iv)
            group_end = max(group_end, iv.end)
        else:
            groups.append(current)
            current = [iv]
            group_end = iv.end
    groups.append(current)
    return groups


def assign_columns(group: Sequence[T]) -> tuple[list[int], int]:
    """First-fit 컬럼 할당.

    group 은 정렬된 순서여야 한다. 각 컬럼의 마지막 end 가 start 이하인
    첫 컬럼에 넣고, 없으면 새 컬럼을 연다.
    반환: (group 과 같은 순서의 컬럼 번호, 컬럼 수)
    """
    frontiers: list[int] = []
    columns: list[int] = []
    for iv in group:
        for col, frontier in enumerate(frontiers):
            if frontier <= iv.start:
                frontiers[col] = iv.end
                columns.append(col)
                break
        else:
            columns.append(len(frontiers))
            frontiers.append(iv.end)
    return columns, len(frontiers)


def max_concurrency(intervals: Sequence[Interval]) -> int:
    """임의 시점에 동시에 진행 중인 구간 수의 최댓값 (스윕 라인)."""
    events: list[tuple[int, int]] = []
    for iv in intervals:
        events.append((iv.start, 1))
        events.append((iv.end, -1))
    # 같은 시각이면 종료(-1)를 먼저 처리: [start, end) 반개구간
    events.sort()
    active = peak = 0
    for _, delta in events:
        active += delta
        peak = max(peak, active)
    return peak
