"""The session directory: data model, builder and substring search.

A directory maps tmux session ids to sessions. It is built in two phases,
first the skeleton from ``list-sessions`` and then the windows from
``list-windows -a``, and is not mutated afterwards. Searching returns a
fresh directory.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from tinfo import tmux
from tinfo.errors import ConsistencyError
from tinfo.parse import output_lines, parse_sessions, parse_window_line

logger = logging.getLogger(__name__)


@dataclass
class Tab:
    name: str
    index: int
    pane_count: int


@dataclass
class Session:
    id: int
    attached: bool = False
    tabs: list[Tab] = field(default_factory=list)


Directory = dict[int, Session]


def sessions_from_output(text: str) -> Directory:
    """Build the session skeleton (no tabs yet) from list-sessions output."""
    directory: Directory = {}
    for record in parse_sessions(text):
        directory[record.id] = Session(id=record.id, attached=record.attached)
    return directory


def add_windows_from_output(directory: Directory, text: str) -> Directory:
    """Attach every window in list-windows output to its owning session."""
    for line in output_lines(text):
        record = parse_window_line(line)
        session = directory.get(record.session_id)
        if session is None:
            raise ConsistencyError(record.session_id, line)
        session.tabs.append(Tab(name=record.name, index=record.index, pane_count=record.pane_count))
    return directory


def directory_from_output(sessions_text: str, windows_text: str) -> Directory:
    return add_windows_from_output(sessions_from_output(sessions_text), windows_text)


def build_directory(tmux_command: str = "tmux") -> Directory:
    """Query tmux and build the full directory.

    The window query is only issued once the session skeleton exists.
    """
    directory = sessions_from_output(tmux.list_sessions(tmux_command))
    add_windows_from_output(directory, tmux.list_windows(tmux_command))
    logger.debug(
        "Found %d sessions with %d windows",
        len(directory),
        sum(len(s.tabs) for s in directory.values()),
    )
    return directory


def filter_directory(directory: Directory, term: str) -> Directory:
    """Keep only tabs whose name contains ``term``; drop emptied sessions."""
    result: Directory = {}
    for session_id, session in directory.items():
        tabs = [replace(tab) for tab in session.tabs if term in tab.name]
        if tabs:
            result[session_id] = Session(id=session.id, attached=session.attached, tabs=tabs)
    return result
