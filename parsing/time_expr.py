"""시간 표현식 문법.

    H[:MM]               단일 시각 → 기본 2시간 수업
    H[:MM][-~]H[:MM]     범위

분(MM)은 허용하지만 시 단위로 버린다.
"""

import re
from typing import Optional, Union

# 단일 시각만 적힌 경우의 기본 수업 길이 (시간)
DEFAULT_DURATION = 2

_RANGE_RE = re.compile(r"^(\d+)(?::(\d+))?[-~](\d+)(?::(\d+))?$")
_SINGLE_RE = re.compile(r"^(\d+)(?::(\d+))?$")
_NOISE_RE = re.compile(r"시|오전|오후")


def to_hour24(value: Union[int, str]) -> Optional[int]:
    """입력 시각을 24시간제로 변환.

    1~9 → 13~21 (오후로 간주), 10~12 및 그 외 값은 그대로.
    숫자가 아니면 None.
    """
    try:
        n = int(value)
    except (TypeError, ValueError):
        return None
    return n + 12 if 1 <= n <= 9 else n


def parse_time(
    expr: Optional[str], default_duration: int = DEFAULT_DURATION
) -> Optional[tuple[int, int]]:
    """"7-9", "3:30", "4~6시", "10" 같은 문자열 → (start, end).

    해석할 수 없거나 end <= start 로 남는 범위는 None.
    """
    if not expr:
        return None
    expr = _NOISE_RE.sub("", expr).strip()
    if not expr:
        return None

    m = _RANGE_RE.match(expr)
    if m:
        start = to_hour24(m.group(1))
        end = to_hour24(m.group(3))
        # 7-10 → 19-22: 끝 값 10~12는 오전으로 읽혔으므로 +12 보정
        if end <= start:
            raw_end = int(m.group(3))
            if 10 <= raw_end <= 12:
                end = raw_end + 12
        if end <= start:
            return None
        return start, end

    m = _SINGLE_RE.match(expr)
    if m:
        start = to_hour24(m.group(1))
        return start, start + default_duration

    return None
