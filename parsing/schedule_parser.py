"""수업시간 자유 텍스트 → 정규화된 TimeSlot 목록.

지원 형식 예시:
  목3, 화목 3, 화목 3-5, 화2, 수2 목3:30, 목 7
  수4 금3, 수금 3:30, 수10목2금7토3, 목4 토10
  목금3-5, 토3, 금3-5, 토4-6, 화목2-4
  수10토2, 화목4~6시, 수10, 목4, 수7-10, 토2-4

파서는 실패하지 않는다. 해석할 수 없는 조각은 버린다 (DEBUG 로그만 남김).
상태는 호출 단위로만 존재하며, 대기 요일(pending)은 토큰 처리 사이에
명시적인 값으로 전달된다.
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional

from models.timeslot import WEEKDAYS, TimeSlot
from parsing.time_expr import DEFAULT_DURATION, parse_time

logger = logging.getLogger(__name__)

# 시간이 어디에도 없는 요일에 적용하는 기본 구간 (19-22시)
DEFAULT_FALLBACK: tuple[int, int] = (19, 22)

_DAY_SET = frozenset(WEEKDAYS)
_CANCEL_RE = re.compile(r"휴원|휴|중단")
_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class TokenParts:
    """하나의 토큰을 분류한 결과.

    pairs: 요일마다 자기 숫자가 붙은 개별 페어 (수10목2금7토3)
    days:  다음 시간 표현을 공유하는 요일 그룹 (화목3-5 의 화, 목)
    times: 페어에 속하지 않은 숫자 파트
    """

    pairs: tuple[tuple[str, str], ...] = ()
    days: tuple[str, ...] = ()
    times: tuple[str, ...] = ()


# ─── 전처리 ───────────────────────────────────────────────────────────────────

def is_cancelled(text: str) -> bool:
    """휴원/중단 표시가 있으면 True (수업 없음)."""
    return bool(_CANCEL_RE.search(text))


def normalize(text: str) -> str:
    """"화요일" → "화", "시" 제거, "~" → "-"."""
    text = text.replace("요일", "")
    text = text.replace("시", "")
    return text.replace("~", "-")


def tokenize(text: str) -> list[str]:
    """공백 기준 분리, 토큰 내부 쉼표 제거. 빈 토큰은 버린다."""
    tokens = []
    for raw in _WHITESPACE_RE.split(text):
        token = raw.replace(",", "")
        if token:
            tokens.append(token)
    return tokens


def split_parts(token: str) -> tuple[str, ...]:
    """토큰을 요일 한 글자 / 비요일 문자열 파트로 분리.

    "수10목2금7토3" → (수, 10, 목, 2, 금, 7, 토, 3)
    "화목3-5"       → (화, 목, 3-5)
    """
    parts: list[str] = []
    buf = ""
    for ch in token:
        if ch in _DAY_SET:
            if buf:
                parts.append(buf)
                buf = ""
            parts.append(ch)
        else:
            buf += ch
    if buf:
        parts.append(buf)
    return tuple(parts)


def classify_parts(parts: tuple[str, ...]) -> TokenParts:
    """파트 목록을 페어 / 요일 그룹 / 숫자 파트로 분류.

    요일 바로 뒤에 숫자 파트가 있고, 정확히 두 칸 뒤에 다시 요일이 오면
    그 요일+숫자는 페어. 그 외의 요일은 그룹에 쌓인다.
    """
    pairs: list[tuple[str, str]] = []
    days: list[str] = []
    times: list[str] = []

    i = 0
    n = len(parts)
    while i < n:
        part = parts[i]
        if part not in _DAY_SET:
            times.append(part)
            i += 1
            continue
        has_number = i + 1 < n and parts[i + 1] not in _DAY_SET
        if has_number and i + 2 < n and parts[i + 2] in _DAY_SET:
            pairs.append((part, parts[i + 1]))
            i += 2
        else:
            days.append(part)
            i += 1

    return TokenParts(pairs=tuple(pairs), days=tuple(days), times=tuple(times))


# ─── 토큰 해석 ────────────────────────────────────────────────────────────────

def _slots_for(days, span: Optional[tuple[int, int]]) -> list[TimeSlot]:
    if span is None:
        return []
    start, end = span
    return [TimeSlot(day=d, start=start, end=end) for d in days]


def resolve_token(
    parts: TokenParts,
    pending: tuple[str, ...],
    fallback: tuple[int, int] = DEFAULT_FALLBACK,
    default_duration: int = DEFAULT_DURATION,
) -> tuple[list[TimeSlot], tuple[str, ...]]:
    """하나의 토큰을 해석하고 (생성된 슬롯, 다음 대기 요일)을 반환."""
    slots: list[TimeSlot] = []

    # 1) 페어 모드: 대기 요일은 먼저 기본 구간으로 확정
    if parts.pairs:
        slots.extend(_slots_for(pending, fallback))
        for day, expr in parts.pairs:
            span = parse_time(expr, default_duration)
            if span is None:
                logger.debug(f"시간 해석 실패, 무시: {day}{expr}")
            slots.extend(_slots_for((day,), span))
        if parts.days and not parts.times:
            return slots, parts.days
        if parts.days:
            span = parse_time(parts.times[0], default_duration)
            slots.extend(_slots_for(parts.days, span))
        return slots, ()

    # 2) 그룹 모드: 대기 요일 + 이 토큰의 요일이 하나의 시간을 공유
    if parts.days and parts.times:
        expr = "".join(parts.times)
        span = parse_time(expr, default_duration)
        if span is None:
            logger.debug(f"시간 해석 실패, 무시: {expr!r}")
        return _slots_for(pending + parts.days, span), ()

    # 3) 요일만 → 대기
    if parts.days:
        return slots, pending + parts.days

    # 4) 시간만 → 대기 요일에 적용
    if parts.times:
        expr = "".join(parts.times)
        if not pending:
            logger.debug(f"요일 없는 시간, 무시: {expr!r}")
            return slots, ()
        span = parse_time(expr, default_duration)
        if span is None:
            logger.debug(f"시간 해석 실패, 대기 요일 폐기: {expr!r}")
        return _slots_for(pending, span), ()

    return slots, pending


def parse_schedule(
    text: Optional[str],
    fallback: tuple[int, int] = DEFAULT_FALLBACK,
    default_duration: int = DEFAULT_DURATION,
) -> list[TimeSlot]:
    """자유 텍스트 → [TimeSlot, ...] (토큰 처리 순서 유지, 중복 제거 없음)."""
    if not text or not isinstance(text, str):
        return []
    text = text.strip()
    if not text or is_cancelled(text):
        return []

    results: list[TimeSlot] = []
    pending: tuple[str, ...] = ()
    for token in tokenize(normalize(text)):
        parts = classify_parts(split_parts(token))
        slots, pending = resolve_token(parts, pending, fallback, default_duration)
        results.extend(slots)

    # 시간이 끝까지 없던 요일도 버리지 않는다
    results.extend(_slots_for(pending, fallback))
    return results


class ScheduleTextParser:
    """설정(ParserConfig)에 묶인 파서. 상태를 갖지 않는다."""

    def __init__(self, config=None) -> None:
        if config is None:
            from config.schema import ParserConfig
            config = ParserConfig()
        self.config = config

    @property
    def fallback(self) -> tuple[int, int]:
        return self.config.fallback_start, self.config.fallback_end

    def parse(self, text: Optional[str]) -> list[TimeSlot]:
        return parse_schedule(
            text,
            fallback=self.fallback,
            default_duration=self.config.default_duration,
        )
