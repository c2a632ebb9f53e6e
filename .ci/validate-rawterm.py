#!/usr/bin/env python3
"""Validate rawterm and textdlg without user interaction.

Exercises the rawterm escape sequences and sleep, the termios raw-mode guard
on a pseudo-terminal, and a headless run of each textdlg dialog type with
keys fed through a pipe.

Run from the project root: python .ci/validate-rawterm.py
"""

import io
import os
import sys
import time

# Ensure the project root (CWD) is on the import path, since Python
# adds the script's directory (.ci/) rather than CWD by default.
sys.path.insert(0, os.getcwd())


def check_rawterm_units():
    """rawterm sequences and msleep -- no terminal required."""
    from rawterm import BELL, CLEAR_SCREEN, move_seq, msleep

    assert CLEAR_SCREEN == "\x1b[2J", "clear sequence"
    assert BELL == "\x07", "bell character"
    assert move_seq(11, 10) == "\x1b[10;11H", "row comes first"
    assert move_seq(1, 1) == "\x1b[1;1H", "1-based"

    assert msleep(-1) is False, "negative sleep rejected"
    start = time.monotonic()
    assert msleep(20) is True, "sleep accepted"
    assert time.monotonic() - start >= 0.02, "slept long enough"

    print("rawterm unit checks passed")


def check_raw_mode():
    """RawMode on a pseudo-terminal: cbreak inside, original mode after."""
    try:
        import pty  # noqa: F401
        import termios
    except ImportError:
        print("raw mode checks skipped (no termios)")
        return

    from rawterm import RawMode

    master, slave = os.openpty()
    try:
        before = termios.tcgetattr(slave)

        with RawMode(slave):
            lflag = termios.tcgetattr(slave)[3]
            assert not lflag & termios.ICANON, "ICANON cleared"
            assert not lflag & termios.ECHO, "ECHO cleared"

        assert termios.tcgetattr(slave) == before, "mode restored"

        try:
            with RawMode(slave):
                raise KeyError("boom")
        except KeyError:
            pass
        assert termios.tcgetattr(slave) == before, "mode restored on error"
    finally:
        os.close(master)
        os.close(slave)

    print("raw mode checks passed")


def check_textdlg_headless():
    """One run of each dialog type, keys fed through a pipe."""
    import textdlg
    from rawterm import Terminal

    r, w = os.pipe()
    os.write(w, b"x" + b"092" + b"Alice\n")
    os.close(w)

    out = io.StringIO()
    dlg = textdlg.Dialog(Terminal(r, out), textdlg.RenderConfig(interval=0))

    dlg.show_border(10, 10, "Hi", "+", "|", "-")
    assert out.getvalue().startswith("\x1b[2J"), "screen cleared first"

    choices = []
    assert dlg.show_choice(10, 10, "Pick", ["a", "b"], choices.append) == 2
    assert choices == [2], "handler called once with 2"

    lines = []
    assert dlg.show_input(10, 10, "Name", 3, lines.append) == "Ali"
    assert lines == ["Ali"], "input truncated to max_chars"

    os.close(r)
    print("textdlg headless validation passed")


if __name__ == "__main__":
    check_rawterm_units()
    check_raw_mode()
    check_textdlg_headless()
    print("All checks passed")
