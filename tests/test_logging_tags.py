"""Tests for color-coded logging in the Campus layer.

These tests assert that:
- Verbose campuses print tagged lines for successes, substitutions and failures
- Verbose campus loads end with a tagged summary line
- Quiet campuses print nothing
- CAMPUSIM_NO_COLOR strips ANSI codes
"""

from campusim.campus import Campus, load_campus
from campusim.logging_utils import (
    LOG_TAG_DETERMINISTIC,
    LOG_TAG_ERROR,
    LOG_TAG_INFO,
    LOG_TAG_SUCCESS,
    LOG_TAG_WARNING,
    Color,
    colored,
)
from campusim.schemas import Priority


def test_colored_respects_no_color(monkeypatch):
    monkeypatch.delenv("CAMPUSIM_NO_COLOR", raising=False)
    text = colored("hello", Color.GREEN, bold=True)
    assert text.startswith(Color.BOLD.value + Color.GREEN.value)
    assert text.endswith(Color.RESET.value)

    monkeypatch.setenv("CAMPUSIM_NO_COLOR", "1")
    assert colored("hello", Color.GREEN) == "hello"


def test_verbose_campus_logs_operations(monkeypatch, capsys):
    monkeypatch.setenv("CAMPUSIM_NO_COLOR", "1")
    campus = Campus(verbose=True)

    campus.add_event("E1", "Lecture", "Library", 9, 10, Priority.HIGH)
    campus.add_event("E2", "Lecture", "Library", 9, 10, Priority.HIGH)
    campus.remove_event("ghost")
    campus.route("Mainhall", "Hostel")

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == f"{LOG_TAG_SUCCESS} Scheduled: E1 in Library"
    assert lines[1] == f"{LOG_TAG_WARNING} Room Library unavailable. Using alternative: Mainhall"
    assert lines[2] == f"{LOG_TAG_SUCCESS} Scheduled: E2 in Mainhall"
    assert lines[3] == f"{LOG_TAG_ERROR} Event ghost not found"
    assert lines[4] == (
        f"{LOG_TAG_DETERMINISTIC} Shortest path: Mainhall -> Library -> Lab -> Hostel (Distance: 11)"
    )


def test_verbose_load_campus_logs_summary(monkeypatch, capsys):
    monkeypatch.setenv("CAMPUSIM_NO_COLOR", "1")
    load_campus(verbose=True)

    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == f"{LOG_TAG_INFO} Loaded campus default: 6 locations, 0 events"


def test_quiet_campus_prints_nothing(capsys):
    campus = Campus(verbose=False)
    campus.add_event("E1", "Lecture", "Library", 9, 10, Priority.HIGH)
    campus.route("Mainhall", "Nowhere")

    assert capsys.readouterr().out == ""
