"""학생 데이터 모델 (Pydantic v2)."""

import time
import uuid
from enum import Enum

from pydantic import BaseModel

from models.timeslot import TimeSlot


class ClassType(str, Enum):
    BABY = "baby"
    TEEN = "teen"

    @property
    def label(self) -> str:
        return "아기반" if self is ClassType.BABY else "청소년반"


def generate_student_id() -> str:
    """짧고 겹치지 않는 학생 ID (시간 기반 + 난수)."""
    return f"{int(time.time() * 1000):x}{uuid.uuid4().hex[:5]}"


class Student(BaseModel):
    """수업을 듣는 학생 한 명.

    시간표 엔진은 id 와 parsed_schedule 만 읽는다.
    """

    id: str
    name: str = ""
    school: str = ""                       # 학교/학년
    contact: str = ""
    class_type: ClassType = ClassType.TEEN
    schedule_text: str = ""                # 입력 원문 ("화목7-9")
    parsed_schedule: list[TimeSlot] = []   # schedule_text 파싱 결과

    @classmethod
    def from_text(cls, schedule_text: str, parser=None, **fields) -> "Student":
        """수업시간 원문을 파싱해 학생을 만든다. id 가 없으면 새로 발급."""
        fields.setdefault("id", generate_student_id())
        student = cls(schedule_text=schedule_text, **fields)
        return student.with_schedule(schedule_text, parser)

    def with_schedule(self, schedule_text: str, parser=None) -> "Student":
        """수업시간을 바꾼 사본. parsed_schedule 은 항상 다시 계산."""
        if parser is None:
            from parsing.schedule_parser import ScheduleTextParser
            parser = ScheduleTextParser()
        return self.model_copy(update={
            "schedule_text": schedule_text,
            "parsed_schedule": parser.parse(schedule_text),
        })

    @property
    def display_name(self) -> str:
        name = self.name or "?"
        return f"{name}({self.school})" if self.school else name
