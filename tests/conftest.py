# Copyright (c) 2024-2026 textdlg contributors
# SPDX-License-Identifier: ISC
#
# Shared fixtures and helpers for the textdlg pytest suite.

import io
import os
import re
import sys

import pytest

# Ensure textdlg and rawterm are importable from the project root
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import textdlg  # noqa: E402
from rawterm import Terminal  # noqa: E402

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep the environment from leaking rendering settings into tests."""
    monkeypatch.delenv("TEXTDLG_INTERVAL", raising=False)
    monkeypatch.delenv("TEXTDLG_PLAY_SOUND", raising=False)
    yield


@pytest.fixture
def make_term():
    """Returns a factory building a Terminal that reads 'keys' (bytes) from a
    pipe and writes to a StringIO. The write end is closed, so reading past
    'keys' hits end of input."""
    fds = []

    def factory(keys=b""):
        r, w = os.pipe()
        fds.append(r)
        os.write(w, keys)
        os.close(w)
        out = io.StringIO()
        return Terminal(r, out), out

    yield factory

    for fd in fds:
        os.close(fd)


@pytest.fixture
def make_dialog(make_term):
    """Like make_term, but returns (Dialog, output) with no delay between
    characters and warnings kept off stderr."""

    def factory(keys=b"", interval=0, play_sound=False):
        term, out = make_term(keys)
        dlg = textdlg.Dialog(term, textdlg.RenderConfig(interval, play_sound))
        dlg.warn_to_stderr = False
        return dlg, out

    return factory


@pytest.fixture
def pty_pair():
    """A (master, slave) pseudo-terminal pair. The slave is a real tty, so
    termios calls work on it."""
    termios = pytest.importorskip("termios")
    try:
        master, slave = os.openpty()
    except OSError as e:
        pytest.skip(f"no pseudo-terminals: {e}")

    yield master, slave, termios

    os.close(master)
    os.close(slave)


# ---------------------------------------------------------------------------
# Output parsing
# ---------------------------------------------------------------------------

_TOKEN_RE = re.compile(r"\x1b\[2J|\x1b\[(\d+);(\d+)H|\x07|.", re.DOTALL)


def parse_ops(output):
    """Splits terminal output into a list of operations:

      ("clear",)
      ("move", col, row)
      ("bell",)
      ("char", c)
    """
    ops = []
    for match in _TOKEN_RE.finditer(output):
        token = match.group(0)
        if token == "\x1b[2J":
            ops.append(("clear",))
        elif match.group(1) is not None:
            ops.append(("move", int(match.group(2)), int(match.group(1))))
        elif token == "\x07":
            ops.append(("bell",))
        else:
            ops.append(("char", token))
    return ops


def screen(output):
    """Replays terminal output and returns a {(col, row): char} dict of what
    ends up on the screen. Characters advance the cursor one column."""
    cells = {}
    col = row = 1
    for op in parse_ops(output):
        if op[0] == "clear":
            cells.clear()
        elif op[0] == "move":
            col, row = op[1], op[2]
        elif op[0] == "char":
            if op[1] == "\n":
                row += 1
                col = 1
                continue
            cells[(col, row)] = op[1]
            col += 1
    return cells
