"""출력 모듈: 터미널 시간표 렌더링 (Rich)."""

from export.tui_renderer import render_day_rows, render_legend, render_summary_rows

__all__ = ["render_day_rows", "render_legend", "render_summary_rows"]
