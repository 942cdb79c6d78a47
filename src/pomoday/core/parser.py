# src/pomoday/core/parser.py

"""
Command line parser.

Every grammar is a small matcher: it either recognises the line and returns a
Command, or returns None. `parse_command` tries them in a fixed order and the
first hit wins, so "t ..." is always a task and never falls through to anything
else.

Only the verb is case-insensitive, and only for ASCII letters ("ſt 1" is not a
stop). Tags and free text keep their case.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum


class CommandKind(StrEnum):
    TASK = "task"
    EDIT = "edit"
    MOVE = "move"
    CHECK = "check"
    BEGIN = "begin"
    DELETE = "delete"
    FLAG = "flag"
    STOP = "stop"
    HELP = "help"
    CLOSE_HELP = "close-help"
    TODAY = "today"


@dataclass(frozen=True, slots=True)
class Command:
    kind: CommandKind
    id: int | None = None
    tag: str | None = None
    text: str | None = None


Matcher = Callable[[str], "Command | None"]

# "@" + non-space run ending in a word char, apostrophe or hyphen.
TAG = r"@\S*[0-9A-Za-z'-]"
# Digits not glued to anything else: "c 12x" is not a check.
ID = r"([0-9]+)(?!\S)"

_TASK_RE = re.compile(rf"^(?ai:t|task)\s+({TAG})?(.*)$", re.DOTALL)
_EDIT_RE = re.compile(rf"^(?ai:e|edit)\s+{ID}(.*)$", re.DOTALL)
_MOVE_RE = re.compile(rf"^(?ai:mv|move)\s+{ID}\s+({TAG})")
_KEYWORD_RE = re.compile(r"^(?ai:(close-help|help|today))\s*$")
_KEYWORDS = {k.value: k for k in (CommandKind.CLOSE_HELP, CommandKind.HELP, CommandKind.TODAY)}


def _id_only(*verbs: str) -> re.Pattern[str]:
    alts = "|".join(re.escape(v) for v in verbs)
    return re.compile(rf"^(?ai:{alts})\s+{ID}")


_CHECK_RE = _id_only("c", "check")
_BEGIN_RE = _id_only("b", "begin")
_DELETE_RE = _id_only("d", "delete")
_FLAG_RE = _id_only("fl", "flag")
_STOP_RE = _id_only("st", "stop")


def match_task(line: str) -> Command | None:
    m = _TASK_RE.match(line)
    if not m:
        return None
    return Command(kind=CommandKind.TASK, tag=m.group(1), text=m.group(2).strip())


def match_edit(line: str) -> Command | None:
    m = _EDIT_RE.match(line)
    if not m:
        return None
    return Command(kind=CommandKind.EDIT, id=int(m.group(1)), text=m.group(2).strip())


def match_move(line: str) -> Command | None:
    m = _MOVE_RE.match(line)
    if not m:
        return None
    return Command(kind=CommandKind.MOVE, id=int(m.group(1)), tag=m.group(2))


def _id_matcher(pattern: re.Pattern[str], kind: CommandKind) -> Matcher:
    def match(line: str) -> Command | None:
        m = pattern.match(line)
        if not m:
            return None
        return Command(kind=kind, id=int(m.group(1)))

    match.__name__ = f"match_{kind.name.lower()}"
    return match


match_check = _id_matcher(_CHECK_RE, CommandKind.CHECK)
match_begin = _id_matcher(_BEGIN_RE, CommandKind.BEGIN)
match_delete = _id_matcher(_DELETE_RE, CommandKind.DELETE)
match_flag = _id_matcher(_FLAG_RE, CommandKind.FLAG)
match_stop = _id_matcher(_STOP_RE, CommandKind.STOP)


def match_keyword(line: str) -> Command | None:
    m = _KEYWORD_RE.match(line)
    kind = _KEYWORDS.get(m.group(1).lower()) if m else None
    if kind is None:
        return None
    return Command(kind=kind)


# Priority order matters.
GRAMMARS: tuple[Matcher, ...] = (
    match_task,
    match_edit,
    match_move,
    match_check,
    match_begin,
    match_delete,
    match_flag,
    match_stop,
    match_keyword,
)


def parse_command(line: str) -> Command | None:
    """Return the Command for `line`, or None when no grammar recognises it."""
    if not isinstance(line, str):
        return None
    for matcher in GRAMMARS:
        cmd = matcher(line)
        if cmd is not None:
            return cmd
    return None
