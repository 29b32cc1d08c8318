from __future__ import annotations

import logging
import subprocess

from tinfo.errors import DispatchError, QueryError

logger = logging.getLogger(__name__)

SESSION_FORMAT = "#{session_name} #{session_windows} #{session_attached}"


def _query(cmd: list[str]) -> str:
    logger.debug("Running %s", cmd)
    try:
        result = subprocess.run(cmd, capture_output=True, text=True)
    except OSError as e:
        raise QueryError(cmd, str(e)) from e
    if result.returncode != 0:
        reason = result.stderr.strip() or f"exit status {result.returncode}"
        raise QueryError(cmd, reason)
    return result.stdout


def _spawn(cmd: list[str]) -> None:
    # Not waited on: the request only has to be issued.
    logger.debug("Spawning %s", cmd)
    try:
        subprocess.Popen(cmd)
    except OSError as e:
        raise DispatchError(cmd, str(e)) from e


def list_sessions(tmux_command: str = "tmux") -> str:
    return _query([tmux_command, "list-sessions", "-F", SESSION_FORMAT])


def list_windows(tmux_command: str = "tmux") -> str:
    return _query([tmux_command, "list-windows", "-a"])


def move_window(session_id: int, tab_index: int, tmux_command: str = "tmux") -> None:
    """Move window ``session_id:tab_index`` into the caller's current session."""
    _spawn([tmux_command, "move-window", "-s", f"{session_id}:{tab_index}"])


def attach_session(session_id: int, tmux_command: str = "tmux") -> None:
    _spawn([tmux_command, "attach-session", "-t", str(session_id)])
