from __future__ import annotations

import pytest

from tinfo.directory import directory_from_output

SESSIONS_OUTPUT = "0 2 1\n3 1 0\n7 3 0\n"
WINDOWS_OUTPUT = (
    "0:0: zsh (1 panes) [80x24] [layout b25d,80x24,0,0,0] @0\n"
    "0:1: vim (2 panes) [80x24] [layout 9a3e,80x24,0,0,1] @1 (active)\n"
    "3:0: logs (1 panes) [120x40] [layout aa01,120x40,0,0,2] @2 (active)\n"
    "7:0: editor (1 panes) [80x24] @3\n"
    "7:1: build (watch) (3 panes) [80x24] @4\n"
    "7:4: shell (1 panes) [80x24] @5 (active)\n"
)


@pytest.fixture
def sessions_output() -> str:
    return SESSIONS_OUTPUT


@pytest.fixture
def windows_output() -> str:
    return WINDOWS_OUTPUT


@pytest.fixture
def directory():
    return directory_from_output(SESSIONS_OUTPUT, WINDOWS_OUTPUT)
