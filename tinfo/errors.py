from __future__ import annotations


class TinfoError(Exception):
    """Base class for every failure tinfo reports."""


class ParseError(TinfoError):
    def __init__(self, line: str, query: str) -> None:
        self.line = line
        self.query = query
        super().__init__(f"Couldn't parse {query} output line: {line!r}")


class QueryError(TinfoError):
    def __init__(self, command: list[str], reason: str) -> None:
        self.command = command
        self.reason = reason
        super().__init__(f"`{' '.join(command)}` failed: {reason}")


class ConsistencyError(TinfoError):
    def __init__(self, session_id: int, line: str) -> None:
        self.session_id = session_id
        self.line = line
        super().__init__(
            f"Window {line!r} belongs to session {session_id}, which list-sessions did not report"
        )


class CardinalityError(TinfoError):
    def __init__(self, action: str, sessions: int, tabs: int | None = None) -> None:
        self.action = action
        self.sessions = sessions
        self.tabs = tabs
        if sessions == 0 or tabs == 0:
            detail = "no window matched"
        elif sessions > 1:
            detail = f"ambiguous selection, {sessions} sessions matched"
        else:
            detail = f"ambiguous selection, {tabs} windows matched"
        super().__init__(f"Can only {action} with a single result: {detail}")


class DispatchError(TinfoError):
    def __init__(self, command: list[str], reason: str) -> None:
        self.command = command
        self.reason = reason
        super().__init__(f"Couldn't launch `{' '.join(command)}`: {reason}")
