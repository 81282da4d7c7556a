from pydantic import BaseModel, Field, model_validator

from models.timeslot import OPERATING_DAYS, WEEKDAYS


# ─── 운영 시간대 ───

class HourWindow(BaseModel):
    """시간표에 표시하는 시간 범위 [start_hour, end_hour)."""
    # 첫 표시 시각 (24시간제)
    start_hour: int = Field(10, ge=0, le=24,
        description="시간표 시작 시각")
    # 마지막 표시 시각 (이 시각에서 끝남)
    end_hour: int = Field(22, ge=0, le=24,
        description="시간표 종료 시각")

    @model_validator(mode='after')
    def validate_window(self):
        if self.start_hour >= self.end_hour:
            raise ValueError(
                f"start_hour ({self.start_hour}) >= end_hour ({self.end_hour})")
        return self

    @property
    def total_hours(self) -> int:
        return self.end_hour - self.start_hour

    def clamp(self, start: int, end: int) -> tuple[int, int]:
        """구간을 운영 시간 안으로 자른다. 결과가 비어 있을 수 있음."""
        return max(start, self.start_hour), min(end, self.end_hour)


# ─── 정원 / 혼잡도 구간 ───

class CapacityConfig(BaseModel):
    """혼잡도 4단계 기준.

    count < busy_threshold        → 여유
    count < full_threshold        → 활발
    count <= capacity             → 만석
    count > capacity              → 초과
    """
    # 이 인원부터 '활발'
    busy_threshold: int = Field(5, ge=1,
        description="활발 기준 인원")
    # 이 인원부터 '만석'
    full_threshold: int = Field(9, ge=1,
        description="만석 기준 인원")
    # 시간대별 정원. 초과 인원은 대기자
    capacity: int = Field(12, ge=1,
        description="시간대 정원")

    @model_validator(mode='after')
    def validate_order(self):
        if not (self.busy_threshold <= self.full_threshold <= self.capacity):
            raise ValueError(
                f"기준 순서 오류: busy ({self.busy_threshold}) <= "
                f"full ({self.full_threshold}) <= capacity ({self.capacity})"
            )
        return self


# ─── 파서 ───

class ParserConfig(BaseModel):
    """자유 텍스트 파서 기본값."""
    # 시간 없이 요일만 입력된 경우의 기본 구간
    fallback_start: int = Field(19, ge=0, le=24)
    fallback_end: int = Field(22, ge=0, le=24)
    # 단일 시각 입력 시 수업 길이 (시간)
    default_duration: int = Field(2, ge=1, le=6)

    @model_validator(mode='after')
    def validate_fallback(self):
        if self.fallback_start >= self.fallback_end:
            raise ValueError(
                f"fallback_start ({self.fallback_start}) >= "
                f"fallback_end ({self.fallback_end})")
        return self


# ─── 전체 설정 ───

class TimetableConfig(BaseModel):
    """학원 시간표 전체 설정."""
    # 학원 이름
    academy_name: str = Field("우리 미술학원",
        description="학원 이름")
    # 시간표에 배치하는 요일
    days: list[str] = Field(default_factory=lambda: list(OPERATING_DAYS),
        description="운영 요일")
    # 표시 시간 범위
    hours: HourWindow = Field(default_factory=HourWindow)
    # 정원 / 혼잡도 기준
    capacity: CapacityConfig = Field(default_factory=CapacityConfig)
    # 파서 기본값
    parser: ParserConfig = Field(default_factory=ParserConfig)
    # 통계: 인기 시간대 표시 개수
    top_slots: int = Field(15, ge=1, le=100,
        description="인기 시간대 표시 개수")

    @model_validator(mode='after')
    def validate_days(self):
        if not self.days:
            raise ValueError("운영 요일이 비어 있습니다.")
        if len(set(self.days)) != len(self.days):
            raise ValueError(f"운영 요일 중복: {self.days}")
        unknown = [d for d in self.days if d not in WEEKDAYS]
        if unknown:
            raise ValueError(f"알 수 없는 요일: {unknown}")
        return self
