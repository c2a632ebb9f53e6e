#!/usr/bin/env python3

# Copyright (c) 2022 Moltony
# Copyright (c) 2024-2026 textdlg contributors
# SPDX-License-Identifier: ISC

"""
rawterm -- pure-Python terminal I/O for textdlg

The few primitives a dialog renderer needs on a VT100 terminal: a sleep that
never returns early, escape sequences for clearing the screen and positioning
the cursor, a guard that puts the input line discipline in cbreak mode for
single-keypress reads and always puts it back, and a Terminal object tying an
input file descriptor to an output stream.

Zero external dependencies. Uses only Python stdlib: termios, codecs, os,
sys, time.

Platform support: Unix (Linux, macOS). Windows consoles are not supported.
"""

import codecs
import os
import sys
import time

_IS_WINDOWS = os.name == "nt"

if not _IS_WINDOWS:
    import termios


# ---------------------------------------------------------------------------
# Escape sequences
# ---------------------------------------------------------------------------

CLEAR_SCREEN = "\x1b[2J"

BELL = "\a"


def move_seq(col, row):
    """Return the escape sequence moving the cursor to 1-based (col, row)."""
    return f"\x1b[{row};{col}H"


# ---------------------------------------------------------------------------
# Sleep
# ---------------------------------------------------------------------------


def msleep(msec):
    """Sleep for 'msec' milliseconds.

    Returns False without sleeping if 'msec' is negative, and True otherwise.
    An early wake-up (e.g. a signal handler running) just resumes sleeping
    for whatever remains, so the total time slept is never less than asked
    for.
    """
    if msec < 0:
        return False

    deadline = time.monotonic() + msec / 1000
    while True:
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            return True
        time.sleep(remaining)


# ---------------------------------------------------------------------------
# Raw mode
# ---------------------------------------------------------------------------


class RawMode:
    """Scoped cbreak mode for a terminal file descriptor.

    Entering captures the current termios attributes and installs a copy with
    line buffering (ICANON) and echo (ECHO) disabled. Leaving, by any path,
    reinstalls the captured attributes. Does nothing if the descriptor is not
    a tty, so piped input can still be read.
    """

    __slots__ = ("_fd", "_saved")

    def __init__(self, fd):
        self._fd = fd
        self._saved = None

    @property
    def active(self):
        """True while the captured mode is waiting to be restored."""
        return self._saved is not None

    def enter(self):
        if self._saved is not None:
            raise RuntimeError("raw mode already entered")

        if not os.isatty(self._fd):
            return self

        self._saved = termios.tcgetattr(self._fd)

        new = termios.tcgetattr(self._fd)
        # LFLAG: clear ICANON, ECHO; keep ISIG for Ctrl-C
        new[3] &= ~(termios.ICANON | termios.ECHO)
        new[6][termios.VMIN] = 1
        new[6][termios.VTIME] = 0
        termios.tcsetattr(self._fd, termios.TCSANOW, new)
        return self

    def restore(self):
        """Reinstall the captured mode. Safe to call more than once."""
        if self._saved is None:
            return
        saved = self._saved
        self._saved = None
        termios.tcsetattr(self._fd, termios.TCSANOW, saved)

    def __enter__(self):
        return self.enter()

    def __exit__(self, exc_type, exc_value, traceback):
        self.restore()


# ---------------------------------------------------------------------------
# Terminal
# ---------------------------------------------------------------------------


def _fileno(f):
    return f if isinstance(f, int) else f.fileno()


class Terminal:
    """An input file descriptor plus an output text stream.

    infile:
      File object or descriptor keys and lines are read from. Defaults to
      sys.stdin.

    outfile:
      Text stream escape sequences and characters are written to. If None,
      output goes to whatever sys.stdout is at the time of the write, so
      redirecting sys.stdout later is picked up.
    """

    def __init__(self, infile=None, outfile=None):
        if _IS_WINDOWS:
            raise RuntimeError("textdlg is not supported on Windows")

        self._in_fd = _fileno(sys.stdin if infile is None else infile)
        self._out = outfile

        # UTF-8 incremental decoder for input. Shared by getch() and
        # readline() so a multibyte character split across reads survives.
        self._decoder = codecs.getincrementaldecoder("utf-8")("replace")
        # Decoded characters not handed out yet. A malformed sequence can
        # decode to U+FFFD plus the character that ended it.
        self._pending = ""

    def fileno(self):
        return self._in_fd

    def isatty(self):
        return os.isatty(self._in_fd)

    # --- Output ---

    def write(self, s):
        """Append 's' to the output. Caller must call flush()."""
        self._stream().write(s)

    def flush(self):
        self._stream().flush()

    def _stream(self):
        return sys.stdout if self._out is None else self._out

    def clear(self):
        self.write(CLEAR_SCREEN)

    def move_to(self, col, row):
        self.write(move_seq(col, row))

    # --- Input ---

    def raw(self):
        """Return a RawMode guard for the input descriptor."""
        return RawMode(self._in_fd)

    def _read_char(self):
        # Returns the next decoded character, or None at EOF

        while not self._pending:
            data = os.read(self._in_fd, 1)
            if not data:
                # Emit anything stuck in the decoder as U+FFFD
                self._pending = self._decoder.decode(b"", final=True)
                self._decoder.reset()
                if not self._pending:
                    return None
                break

            self._pending = self._decoder.decode(data)

        ch = self._pending[0]
        self._pending = self._pending[1:]
        return ch

    def getch(self):
        """Block until one character is available and return it.

        Returns None at end of input. Call inside raw() to get keypresses
        without waiting for Enter.
        """
        return self._read_char()

    def readline(self, max_chars):
        """Read one line and return at most 'max_chars' characters of it.

        Reading stops at "\\n", which is not included, and a "\\r" right
        before it is dropped. Characters past 'max_chars' are read and thrown
        away so they can't show up in a later read. Returns None if input ends
        before anything was read.
        """
        if max_chars < 0:
            raise ValueError(f"max_chars must be non-negative, not {max_chars}")

        chars = []
        n_read = 0
        prev = None
        while True:
            ch = self._read_char()
            if ch is None:
                if not n_read:
                    return None
                break
            if ch == "\n":
                # A "\r" that was cut off by 'max_chars' is already gone
                if prev == "\r" and n_read <= max_chars:
                    chars.pop()
                break
            n_read += 1
            prev = ch
            if len(chars) < max_chars:
                chars.append(ch)

        return "".join(chars)

    def flush_input(self):
        """Discard input that has been typed but not read."""
        if os.isatty(self._in_fd):
            termios.tcflush(self._in_fd, termios.TCIFLUSH)
