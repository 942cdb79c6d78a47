# tests/test_render.py

from __future__ import annotations

import pytest

from pomoday.connectors.render import (
    format_counter,
    format_log_duration,
    render_board,
    render_screen,
    render_task,
    render_today,
)
from pomoday.core.models import BoardState, Task, TaskStatus, Worklog

NOW = 1_700_000_000_000


@pytest.mark.parametrize(
    "seconds,expected",
    [
        (0, "00:00"),
        (5.9, "00:05"),
        (307, "05:07"),
        (3723, "01:02:03"),
        (2 * 86400 + 10, "2 days 00:10"),
    ],
)
def test_format_counter(seconds: float, expected: str) -> None:
    assert format_counter(seconds) == expected


@pytest.mark.parametrize(
    "seconds,expected",
    [
        (0, "00 sec"),
        (65, "01 min 05 sec"),
        (7509, "02 hrs 05 min 09 sec"),
        (86400 + 3600, "1 days 01 hrs 00 sec"),
    ],
)
def test_format_log_duration(seconds: float, expected: str) -> None:
    assert format_log_duration(seconds) == expected


def test_render_task_glyphs_and_counters() -> None:
    wait = Task(id=3, tag="@t", title="idle", status=TaskStatus.WAIT)
    assert render_task(wait, NOW) == "   3. □ idle"

    flagged = Task(id=4, tag="@t", title="hot", status=TaskStatus.FLAG, logs=(Worklog(NOW - 65_000, NOW),))
    assert render_task(flagged, NOW) == "   4. ■ hot  01:05"

    done = Task(id=5, tag="@t", title="shipped", status=TaskStatus.DONE, logs=(Worklog(NOW, NOW),))
    assert render_task(done, NOW) == "   5. ✔ shipped  00:00"

    legacy = Task(id=6, tag="@t", title="imported", status=TaskStatus.NONE)
    assert render_task(legacy, NOW) == "   6. imported"


def test_render_board_groups_and_summary() -> None:
    state = BoardState(
        tasks=(
            Task(id=1, tag="@work", title="a", status=TaskStatus.DONE, logs=(Worklog(NOW, NOW),)),
            Task(id=2, tag="@home", title="b"),
            Task(id=3, tag="@work", title="c"),
        )
    )
    text = render_board(state, NOW)
    lines = text.splitlines()
    assert lines[0] == "@work"
    assert lines[1].endswith("a  00:00")
    assert lines[2] == "   3. □ c"
    assert lines[3] == ""
    assert lines[4] == "@home"
    assert lines[-2] == "33% of all tasks complete."
    assert lines[-1] == "1 done · 0 in-progress · 2 waiting"


def test_render_today_and_screen_panels() -> None:
    state = BoardState(
        tasks=(
            Task(
                id=1,
                tag="@w",
                title="Write spec",
                status=TaskStatus.DONE,
                logs=(Worklog(NOW - 65_000, NOW - 5_000),),
            ),
            Task(id=2, tag="@w", title="Review", status=TaskStatus.WIP, logs=(Worklog(NOW - 1_000),)),
        ),
        show_help=False,
        show_today=True,
    )
    today = render_today(state, NOW)
    assert "Today Activities" in today
    assert "01 min 00 sec - FINISHED" in today
    assert "ON GOING" in today
    assert today.splitlines()[-1] == "Total time spent: 01 min 01 sec"

    screen = render_screen(state, NOW)
    assert "Today Activities" in screen
    assert "close-help" not in screen

    help_screen = render_screen(BoardState(), NOW)
    assert "close-help" in help_screen
    assert "Today Activities" not in help_screen
