"""Roster: 학생 명단 + JSON 저장/로드 (Pydantic v2)."""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from pydantic import BaseModel

from models.student import ClassType, Student

logger = logging.getLogger(__name__)


class Roster(BaseModel):
    """전체 학생 명단."""

    students: list[Student] = []
    modified_at: Optional[datetime] = None
    data_version: str = "1.0"

    def by_class(self, class_type: ClassType) -> list[Student]:
        """반별 학생 목록 (입력 순서 유지)."""
        return [s for s in self.students if s.class_type == class_type]

    def count_by_class(self) -> dict[str, int]:
        return {ct.value: len(self.by_class(ct)) for ct in ClassType}

    # ─── 저장 / 로드 ───

    def save_json(self, path: Path) -> None:
        """명단을 JSON으로 저장."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.modified_at = datetime.now(timezone.utc)
        path.write_text(self.model_dump_json(indent=2), encoding="utf-8")

    @classmethod
    def load_json(cls, path: Path, parser=None) -> "Roster":
        """JSON에서 명단을 읽는다.

        저장된 parsed_schedule 은 신뢰하지 않고 schedule_text 로부터
        매번 다시 파싱한다.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"명단 파일이 없습니다: {path}")
        roster = cls.model_validate_json(path.read_text(encoding="utf-8"))
        roster.students = [
            s.with_schedule(s.schedule_text, parser) for s in roster.students
        ]
        logger.info(f"명단 로드: {path} ({len(roster.students)}명)")
        return roster
