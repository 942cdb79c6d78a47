# tests/test_parser.py

from __future__ import annotations

import pytest

from pomoday.core.parser import (
    GRAMMARS,
    Command,
    CommandKind,
    match_check,
    match_edit,
    match_keyword,
    match_move,
    match_task,
    parse_command,
)


def test_task_with_tag_and_text() -> None:
    assert parse_command("t @work Write spec") == Command(
        kind=CommandKind.TASK, tag="@work", text="Write spec"
    )


def test_task_long_verb_without_tag() -> None:
    cmd = parse_command("task   Buy milk  ")
    assert cmd == Command(kind=CommandKind.TASK, tag=None, text="Buy milk")


@pytest.mark.parametrize(
    "line,tag",
    [
        ("t @longer-tag x", "@longer-tag"),
        ("t @it's x", "@it's"),
        ("t @a x", "@a"),
        ("t @v1.2 x", "@v1.2"),
    ],
)
def test_task_tag_forms(line: str, tag: str) -> None:
    cmd = match_task(line)
    assert cmd is not None
    assert cmd.tag == tag
    assert cmd.text == "x"


def test_task_empty_text_is_still_a_parse() -> None:
    assert parse_command("t @work") == Command(kind=CommandKind.TASK, tag="@work", text="")
    assert parse_command("t ") == Command(kind=CommandKind.TASK, tag=None, text="")


def test_verb_is_case_insensitive_but_text_is_not() -> None:
    cmd = parse_command("TASK @Work Call Bob")
    assert cmd == Command(kind=CommandKind.TASK, tag="@Work", text="Call Bob")
    assert parse_command("C 3") == Command(kind=CommandKind.CHECK, id=3)
    assert parse_command("Close-Help") == Command(kind=CommandKind.CLOSE_HELP)


def test_edit_and_move() -> None:
    assert match_edit("e 1 a new description") == Command(
        kind=CommandKind.EDIT, id=1, text="a new description"
    )
    assert parse_command("edit 12") == Command(kind=CommandKind.EDIT, id=12, text="")
    assert match_move("mv 2 @new-tag") == Command(kind=CommandKind.MOVE, id=2, tag="@new-tag")
    assert parse_command("move 2 @uncategorized") == Command(
        kind=CommandKind.MOVE, id=2, tag="@uncategorized"
    )


@pytest.mark.parametrize(
    "line,kind,task_id",
    [
        ("c 7", CommandKind.CHECK, 7),
        ("check 9", CommandKind.CHECK, 9),
        ("b 10", CommandKind.BEGIN, 10),
        ("begin 12", CommandKind.BEGIN, 12),
        ("d 3", CommandKind.DELETE, 3),
        ("delete 3", CommandKind.DELETE, 3),
        ("fl 2", CommandKind.FLAG, 2),
        ("flag 2", CommandKind.FLAG, 2),
        ("st 1", CommandKind.STOP, 1),
        ("stop 1", CommandKind.STOP, 1),
        ("c 0", CommandKind.CHECK, 0),
    ],
)
def test_id_commands(line: str, kind: CommandKind, task_id: int) -> None:
    assert parse_command(line) == Command(kind=kind, id=task_id)


def test_id_commands_ignore_trailing_text() -> None:
    assert match_check("c 3 right now") == Command(kind=CommandKind.CHECK, id=3)


@pytest.mark.parametrize(
    "line",
    ["c 1x", "c x", "b -1", "d", "mv 2", "mv x @tag", "e abc text", "stop"],
)
def test_malformed_ids_do_not_parse(line: str) -> None:
    assert parse_command(line) is None


def test_keywords_are_bare() -> None:
    assert match_keyword("help") == Command(kind=CommandKind.HELP)
    assert match_keyword("today ") == Command(kind=CommandKind.TODAY)
    assert match_keyword("today please") is None
    assert match_keyword("helpme") is None


@pytest.mark.parametrize(
    "line",
    [
        "cloſe-help",  # long s folds to "s" under Unicode case rules
        "ſt 1",
        "taſk x",
        "tasK x",  # Kelvin sign folds to "k"
        "HELPİ",
        "edİt 1 x",
        "Keep",
    ],
)
def test_unicode_case_folds_do_not_match_verbs(line: str) -> None:
    assert parse_command(line) is None


def test_ascii_verbs_still_fold_case() -> None:
    assert parse_command("CLOSE-Help") == Command(kind=CommandKind.CLOSE_HELP)
    assert parse_command("ST 4") == Command(kind=CommandKind.STOP, id=4)


def test_task_grammar_wins_over_keywords() -> None:
    # "today" must not be read as "t oday".
    assert parse_command("today") == Command(kind=CommandKind.TODAY)
    assert parse_command("t today") == Command(kind=CommandKind.TASK, tag=None, text="today")


@pytest.mark.parametrize(
    "line",
    ["", "   ", "hello world", "@work", "12", "tasks 1", "x 1", "\n", "🙂"],
)
def test_unrecognised_input_returns_none(line: str) -> None:
    assert parse_command(line) is None


def test_non_string_input_returns_none() -> None:
    assert parse_command(None) is None  # type: ignore[arg-type]
    assert parse_command(42) is None  # type: ignore[arg-type]


def test_parse_is_pure() -> None:
    for line in ["t @a b", "c 1", "garbage", "mv 3 @x", "today"]:
        assert parse_command(line) == parse_command(line)


def test_grammar_order() -> None:
    names = [g.__name__ for g in GRAMMARS]
    assert names == [
        "match_task",
        "match_edit",
        "match_move",
        "match_check",
        "match_begin",
        "match_delete",
        "match_flag",
        "match_stop",
        "match_keyword",
    ]
