"""Parsers for the text tmux prints for list-sessions and list-windows."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator

from tinfo.errors import ParseError

# Matches the format requested by tmux.list_sessions():
# "#{session_name} #{session_windows} #{session_attached}"
SESSION_PATTERN = r"^(\d+) (\d+) (\d+)"
# Default `tmux list-windows -a` line, e.g. "0:1: vim (2 panes) [80x24] ..."
WINDOW_PATTERN = r"^(\d+):(\d+): (.*) \((\d+) panes\) \[(\d+)x(\d+)\]"

SESSIONS_QUERY = "list-sessions"
WINDOWS_QUERY = "list-windows"


@dataclass(frozen=True)
class SessionRecord:
    id: int
    window_count: int
    attached: bool


@dataclass(frozen=True)
class WindowRecord:
    session_id: int
    index: int
    name: str
    pane_count: int
    width: int
    height: int


def parse_session_line(line: str) -> SessionRecord:
    match = re.match(SESSION_PATTERN, line)
    if match is None:
        raise ParseError(line, SESSIONS_QUERY)
    return SessionRecord(
        id=int(match.group(1)),
        window_count=int(match.group(2)),
        attached=int(match.group(3)) > 0,
    )


def parse_window_line(line: str) -> WindowRecord:
    match = re.match(WINDOW_PATTERN, line)
    if match is None:
        raise ParseError(line, WINDOWS_QUERY)
    pane_count = int(match.group(4))
    if pane_count == 0:
        raise ParseError(line, WINDOWS_QUERY)
    return WindowRecord(
        session_id=int(match.group(1)),
        index=int(match.group(2)),
        name=match.group(3),
        pane_count=pane_count,
        width=int(match.group(5)),
        height=int(match.group(6)),
    )


def output_lines(text: str) -> Iterator[str]:
    """Yield lines of query output up to the first empty line."""
    for line in text.split("\n"):
        if line == "":
            return
        yield line


def parse_sessions(text: str) -> Iterator[SessionRecord]:
    for line in output_lines(text):
        yield parse_session_line(line)
