"""설정 관리자: YAML 로드, 저장, 검증.

ruamel.yaml로 주석이 달린 YAML을 읽고 쓴다.
"""

import json
from datetime import date
from pathlib import Path
from typing import Optional

from rich.console import Console
from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap

from config.defaults import default_timetable_config
from config.schema import TimetableConfig

console = Console()
yaml = YAML()
yaml.default_flow_style = False
yaml.width = 120
yaml.allow_unicode = True


# ─── YAML 주석 ───

_YAML_HEADER = f"""\
# ============================================
# 학원 시간표 — 설정 파일
# 생성일: {date.today().isoformat()}
# ============================================
"""

_SECTION_COMMENTS = {
    "days": (
        "운영 요일",
        "이 요일만 시간표에 배치됩니다. 다른 요일 수업은 데이터로만 보존됩니다.",
    ),
    "hours": (
        "운영 시간",
        "범위를 벗어나는 수업은 잘려서 표시됩니다.",
    ),
    "capacity": (
        "정원 / 혼잡도",
        "busy_threshold <= full_threshold <= capacity",
    ),
    "parser": (
        "수업시간 파서",
        None,
    ),
    "top_slots": (
        "통계",
        None,
    ),
}


class ConfigManager:
    CONFIG_DIR = Path("config")
    DEFAULT_CONFIG = CONFIG_DIR / "timetable_config.yaml"

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = path or self.DEFAULT_CONFIG

    def first_run_check(self) -> bool:
        """설정 파일이 아직 없으면 True."""
        return not self.path.exists()

    # ─── 로드 ───

    def load(self, path: Optional[Path] = None) -> TimetableConfig:
        """YAML에서 설정을 읽는다. Pydantic으로 자동 검증."""
        target = path or self.path
        if not target.exists():
            raise FileNotFoundError(
                f"설정 파일이 없습니다: {target}\n"
                f"'python main.py config init' 으로 기본 설정을 만드세요."
            )
        with open(target, "r", encoding="utf-8") as f:
            raw = yaml.load(f)
        try:
            return TimetableConfig.model_validate(dict(raw or {}))
        except Exception as e:
            raise ValueError(
                f"설정 파일이 올바르지 않습니다: {target}\n"
                f"Pydantic 오류: {e}"
            ) from e

    def load_or_default(self) -> TimetableConfig:
        """설정 파일이 없으면 기본 설정."""
        if self.first_run_check():
            return default_timetable_config()
        return self.load()

    # ─── 저장 ───

    def save(self, config: TimetableConfig, path: Optional[Path] = None) -> Path:
        """주석이 달린 YAML로 저장."""
        target = path or self.path
        target.parent.mkdir(parents=True, exist_ok=True)

        data = self._build_commented_yaml(config)

        with open(target, "w", encoding="utf-8") as f:
            f.write(_YAML_HEADER + "\n")
            yaml.dump(data, f)

        console.print(f"[green]✓[/green] 설정 저장: {target}")
        return target

    def _build_commented_yaml(self, config: TimetableConfig) -> CommentedMap:
        raw = json.loads(config.model_dump_json())
        cm = CommentedMap(raw)

        for field, (label, comment) in _SECTION_COMMENTS.items():
            if field not in cm:
                continue
            cm.yaml_set_comment_before_after_key(
                field,
                before=f"\n─── {label} ───" + (f"\n{comment}" if comment else ""),
            )

        capacity_map = CommentedMap(cm["capacity"])
        capacity_map.yaml_add_eol_comment("초과 인원은 대기자", "capacity")
        cm["capacity"] = capacity_map

        return cm
