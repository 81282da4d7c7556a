"""main.py CLI 테스트 (click CliRunner)."""

from pathlib import Path

from click.testing import CliRunner

from main import cli
from models.roster import Roster
from models.student import ClassType, Student


def _write_roster(path: Path) -> None:
    Roster(students=[
        Student.from_text("화목7-9", id="a", name="김하늘", class_type=ClassType.BABY),
        Student.from_text("화8-10", id="b", name="박바다", class_type=ClassType.TEEN),
    ]).save_json(path)


class TestCli:
    def test_help(self):
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Usage" in result.output

    def test_parse(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["parse", "목3"])
        assert result.exit_code == 0
        assert "15시" in result.output
        assert "17시" in result.output

    def test_parse_cancelled(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["parse", "휴원"])
        assert result.exit_code == 0
        assert "수업 없음" in result.output

    def test_show(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            _write_roster(Path("output/roster.json"))
            result = runner.invoke(cli, ["show"])
        assert result.exit_code == 0, result.output
        assert "화요일" in result.output
        assert "목요일" in result.output

    def test_show_class_filter(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            _write_roster(Path("output/roster.json"))
            result = runner.invoke(cli, ["show", "--class-type", "teen"])
        assert result.exit_code == 0, result.output
        assert "화요일" in result.output
        assert "목요일" not in result.output

    def test_show_missing_roster(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["show"])
        assert result.exit_code == 1

    def test_stats(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            _write_roster(Path("roster.json"))
            result = runner.invoke(cli, ["stats", "--roster", "roster.json"])
        assert result.exit_code == 0, result.output
        assert "대기자가 없습니다" in result.output

    def test_config_init_and_show(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["config", "init"])
            assert result.exit_code == 0
            assert Path("config/timetable_config.yaml").exists()

            result = runner.invoke(cli, ["config", "init"])
            assert "이미" in result.output

            result = runner.invoke(cli, ["config", "show"])
        assert result.exit_code == 0
        assert "정원" in result.output
