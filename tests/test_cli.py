"""Tests for the command-line interface."""
import json

from click.testing import CliRunner

from calendar_server.server import get_calendar_events
from orchestrator.run import main


NOW = ["--now", "2026-02-17T09:00"]


def run_json(*args: str):
    """Invoke the CLI with --json and decode its output."""
    result = CliRunner().invoke(main, [*NOW, "--json", *args])
    return result, json.loads(result.stdout)


def test_json_output() -> None:
    """Test machine-readable output for a parsed sentence."""
    result, records = run_json("다음주 화요일 오후 3시 반에 강남에서 팀 미팅")

    assert result.exit_code == 0
    assert records == [{
        "sentence": "다음주 화요일 오후 3시 반에 강남에서 팀 미팅",
        "ok": True,
        "value": {
            "title": "팀 미팅",
            "start": "2026-02-24T15:30:00",
            "end": "2026-02-24T16:30:00",
            "all_day": False,
            "location": "강남",
            "source": "다음주 화요일 오후 3시 반에 강남에서 팀 미팅",
        },
    }]


def test_failure_sets_exit_code() -> None:
    """Test that an unparseable sentence makes the command fail."""
    result, records = run_json("내일 오후 3시에 회의", "회의 잡아줘")

    assert result.exit_code == 1
    assert [record["ok"] for record in records] == [True, False]
    assert records[1]["error"]


def test_create_into_preferred_calendar() -> None:
    """Test registering with --create and --calendar."""
    result, records = run_json("--create", "--calendar", "업무", "--duration", "30", "내일 오전 10시 회의")

    assert result.exit_code == 0
    assert records[0]["event"]["calendar_name"] == "업무"
    assert records[0]["event"]["end"] == "2026-02-18T10:30:00"
    assert len(get_calendar_events()) == 1


def test_sentences_from_file(tmp_path) -> None:
    """Test reading sentences from a file, skipping comments and blanks."""
    sentences = tmp_path / "sentences.txt"
    sentences.write_text("# 이번 주 일정\n\n오늘 휴가\n모레 오후 2시 치과\n", encoding="utf-8")

    result, records = run_json("--file", str(sentences))

    assert result.exit_code == 0
    assert [record["value"]["title"] for record in records] == ["휴가", "치과"]


def test_no_sentences() -> None:
    """Test that running without input is an error."""
    result = CliRunner().invoke(main, NOW)

    assert result.exit_code == 1


def test_rich_output() -> None:
    """Test the panel output."""
    result = CliRunner().invoke(main, [*NOW, "--create", "오늘 휴가"])

    assert result.exit_code == 0
    assert "휴가" in result.output
    assert "Statistics" in result.output
