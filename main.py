"""학원 시간표 — 메인 CLI.

사용법:
  python main.py parse "화목7-9"              수업시간 파싱 결과 확인
  python main.py show                         요일별 시간표 배치
  python main.py show --class-type baby       아기반만
  python main.py stats                        인기 시간대 / 대기자 통계
  python main.py config init                  기본 설정 파일 생성
  python main.py config show                  설정 보기
"""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich import box

console = Console()

# 기본 명단 경로
DEFAULT_ROSTER_JSON = Path("output/roster.json")


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _load_config():
    """설정 파일을 읽는다. 없으면 기본 설정, 잘못되었으면 종료."""
    from config.manager import ConfigManager
    try:
        return ConfigManager().load_or_default()
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)


def _load_roster_or_abort(path: Path, config):
    from models.roster import Roster
    from parsing.schedule_parser import ScheduleTextParser
    try:
        return Roster.load_json(path, parser=ScheduleTextParser(config.parser))
    except FileNotFoundError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)


# ─── PARSE ────────────────────────────────────────────────────────────────────

@click.command("parse")
@click.argument("text")
def cmd_parse(text: str):
    """수업시간 텍스트를 파싱해 결과를 보여줍니다."""
    from parsing.schedule_parser import ScheduleTextParser

    config = _load_config()
    slots = ScheduleTextParser(config.parser).parse(text)
    if not slots:
        console.print("[yellow]수업 없음[/yellow] (휴원이거나 해석할 수 없는 입력)")
        return

    table = Table(title=f"파싱 결과: {text}", box=box.ROUNDED)
    table.add_column("요일")
    table.add_column("시작", justify="right")
    table.add_column("종료", justify="right")
    for s in slots:
        table.add_row(s.day, f"{s.start}시", f"{s.end}시")
    console.print(table)


# ─── SHOW ─────────────────────────────────────────────────────────────────────

@click.command("show")
@click.option("--roster", "roster_path", default=str(DEFAULT_ROSTER_JSON),
              type=click.Path(path_type=Path), help="학생 명단 JSON 경로.")
@click.option("--class-type", type=click.Choice(["baby", "teen"]), default=None,
              help="한 반만 표시.")
def cmd_show(roster_path: Path, class_type):
    """요일별 시간표 배치(블록, 컬럼, 혼잡도)를 보여줍니다."""
    from export.tui_renderer import render_day_rows, render_legend, render_summary_rows
    from layout.engine import TimetableLayoutEngine
    from models.student import ClassType

    config = _load_config()
    roster = _load_roster_or_abort(roster_path, config)
    students = roster.by_class(ClassType(class_type)) if class_type else roster.students

    if not students:
        console.print("[dim]등록된 학생이 없습니다.[/dim]")
        return

    layout = TimetableLayoutEngine(config).layout(students)
    if layout.is_empty:
        console.print(
            "[dim]수업시간이 입력된 학생이 없습니다. (예: 화목7-9)[/dim]"
        )
        return

    console.print(render_legend(config.capacity))

    summary = Table(title="요일별 요약", box=box.SIMPLE)
    for col in ("요일", "블록", "인원", "너비"):
        summary.add_column(col)
    for row in render_summary_rows(layout):
        summary.add_row(*row)
    console.print(summary)

    for day_layout in layout.days:
        if not day_layout.blocks:
            continue
        table = Table(title=f"{day_layout.day}요일", box=box.ROUNDED)
        table.add_column("시간")
        table.add_column("컬럼")
        table.add_column("인원", justify="right")
        table.add_column("상태")
        table.add_column("학생")
        for row in render_day_rows(day_layout, layout.capacity):
            table.add_row(*row)
        console.print(table)


# ─── STATS ────────────────────────────────────────────────────────────────────

@click.command("stats")
@click.option("--roster", "roster_path", default=str(DEFAULT_ROSTER_JSON),
              type=click.Path(path_type=Path), help="학생 명단 JSON 경로.")
def cmd_stats(roster_path: Path):
    """인기 시간대, 정원 초과, 대기자 명단을 보여줍니다."""
    from analysis.statistics import StatisticsAnalyzer

    config = _load_config()
    roster = _load_roster_or_abort(roster_path, config)
    report = StatisticsAnalyzer(config).analyze(roster.students)
    report.print_rich()


# ─── CONFIG ───────────────────────────────────────────────────────────────────

@click.group("config")
def cmd_config():
    """설정 보기 / 생성."""


@cmd_config.command("init")
@click.option("--force", is_flag=True, default=False, help="기존 설정 덮어쓰기.")
def config_init(force: bool):
    """기본 설정 파일을 생성합니다."""
    from config.defaults import default_timetable_config
    from config.manager import ConfigManager

    mgr = ConfigManager()
    if not mgr.first_run_check() and not force:
        console.print(
            "[yellow]설정 파일이 이미 있습니다.[/yellow] "
            "덮어쓰려면 [bold]--force[/bold]"
        )
        return
    mgr.save(default_timetable_config())


@cmd_config.command("show")
def config_show():
    """현재 설정을 보여줍니다."""
    config = _load_config()

    console.print(Panel(
        f"[bold]{config.academy_name}[/bold]  |  "
        f"운영 요일 {''.join(config.days)}  |  "
        f"{config.hours.start_hour}시 ~ {config.hours.end_hour}시",
        title="학원 설정",
        border_style="cyan",
    ))

    cap = config.capacity
    table = Table(title="정원 / 혼잡도", box=box.ROUNDED)
    table.add_column("항목")
    table.add_column("값", justify="right")
    table.add_row("활발 기준", f"{cap.busy_threshold}명")
    table.add_row("만석 기준", f"{cap.full_threshold}명")
    table.add_row("정원", f"{cap.capacity}명")
    console.print(table)

    p = config.parser
    console.print(
        f"[bold]파서:[/bold] 요일만 입력 → {p.fallback_start}-{p.fallback_end}시 | "
        f"단일 시각 → {p.default_duration}시간"
    )


# ─── 메인 CLI ─────────────────────────────────────────────────────────────────

@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="DEBUG 로그 출력.")
def cli(verbose: bool):
    """학원 시간표: 수업시간 파싱 + 요일별 배치 + 통계."""
    _setup_logging(verbose)


cli.add_command(cmd_parse)
cli.add_command(cmd_show)
cli.add_command(cmd_stats)
cli.add_command(cmd_config)


if __name__ == "__main__":
    cli()
