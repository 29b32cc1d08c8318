from __future__ import annotations

import json

from rich.markup import escape
from rich.tree import Tree

from tinfo import tmux
from tinfo.directory import Directory, Session
from tinfo.errors import CardinalityError


def _sorted_sessions(directory: Directory) -> list[Session]:
    return [directory[k] for k in sorted(directory)]


def _session_label(session: Session) -> str:
    label = f"Session: {session.id}"
    if session.attached:
        label += " (attached)"
    return label


def render_listing(directory: Directory) -> str:
    lines = []
    for session in _sorted_sessions(directory):
        lines.append(_session_label(session))
        for tab in session.tabs:
            lines.append(f"  {tab.index}: {tab.name}")
    return "\n".join(lines)


def render_json(directory: Directory) -> str:
    data = [
        {
            "id": s.id,
            "attached": s.attached,
            "tabs": [{"index": t.index, "name": t.name, "panes": t.pane_count} for t in s.tabs],
        }
        for s in _sorted_sessions(directory)
    ]
    return json.dumps(data, indent=2)


def render_tree(directory: Directory) -> Tree:
    rich_tree = Tree("Sessions")
    for session in _sorted_sessions(directory):
        label = f"[bold]{session.id}[/bold]"
        if session.attached:
            label += " [green](attached)[/green]"
        node = rich_tree.add(label)
        for tab in session.tabs:
            panes = "pane" if tab.pane_count == 1 else "panes"
            node.add(f"{tab.index}: {escape(tab.name)} [dim]({tab.pane_count} {panes})[/dim]")
    return rich_tree


def _single_session(directory: Directory, action: str) -> Session:
    if len(directory) != 1:
        raise CardinalityError(action, len(directory))
    return next(iter(directory.values()))


def relocate(directory: Directory, tmux_command: str = "tmux") -> tuple[int, int]:
    """Move the one matching window into the current session."""
    session = _single_session(directory, "get")
    if len(session.tabs) != 1:
        raise CardinalityError("get", 1, len(session.tabs))
    tab = session.tabs[0]
    tmux.move_window(session.id, tab.index, tmux_command)
    return session.id, tab.index


def attach(directory: Directory, tmux_command: str = "tmux") -> int:
    """Attach to the one matching session, whatever its window count."""
    session = _single_session(directory, "attach")
    tmux.attach_session(session.id, tmux_command)
    return session.id
