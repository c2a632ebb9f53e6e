# Copyright (c) 2022 Moltony
# Copyright (c) 2024-2026 textdlg contributors
# SPDX-License-Identifier: ISC

"""
Overview
========

textdlg shows dialogs like the text boxes in RPGs in a terminal. Text is
revealed one character at a time at a given screen position, optionally inside
a border made of three characters, and dialogs can wait for a keypress, let
the user pick one of up to nine options with a single digit key, or read a
line of text.

Screen positions are 1-based (column, row) pairs, like the terminal's own
cursor addressing. Text may contain newlines; every line starts at the same
column.


Usage
=====

  import textdlg

  textdlg.show(10, 10, "Hello world")
  textdlg.show_border(20, 10, "look\\ni have a border", "+", "|", "-")

  def on_choice(choice):
      textdlg.show_nokey(10, 10, ("You picked apples", "You picked bananas")[choice - 1])

  textdlg.show_choice(15, 15, "Which do you like more?", ["Apples", "Bananas"], on_choice)

  textdlg.show_input(10, 10, "Enter your name", 30, print)

The module-level functions share textdlg.default_config and one Dialog on
stdin/stdout. Create Dialog instances to render with separate settings or on
other streams.


Dialog variants
===============

show*() dialogs clear the screen first unless the name has '_noclear', draw a
border if the name has '_border', and wait for a keypress afterwards unless
the name has '_nokey'. The key pressed is thrown away, together with anything
else typed ahead.

show_choice() and show_choice_border() list the choices as "1. Apples",
"2. Bananas", ... two rows below the prompt and wait until a digit key for one
of them is pressed. Other keys are ignored. The handler is then called once
with the number.

show_input() and show_input_border() show "> " two rows below the prompt and
read a line. Input past 'max_chars' characters is dropped. The handler is
then called once with the line.

Passing a handler that is None (or not callable), or a number of choices
outside 1-9, is a programming error: a message is printed and the process
exits with status 1, before anything is drawn.


Configuration
=============

RenderConfig holds the delay between characters ('interval', in milliseconds,
70 by default) and whether to ring the terminal bell for each character
('play_sound', off by default). Both are read for every character, and can be
changed between dialogs:

  textdlg.default_config.interval = 200
  textdlg.show(12, 12, "I appear slowly.............")
  textdlg.default_config.interval = textdlg.DEFAULT_INTERVAL

RenderConfig.from_env() builds a configuration from these environment
variables:

  TEXTDLG_INTERVAL      Delay between characters in milliseconds
  TEXTDLG_PLAY_SOUND    y/yes/1/true/on to ring the bell, n/no/0/false/off
                        to keep quiet

Invalid values produce a warning on stderr and leave the default in place.

A Dialog and its RenderConfig are not safe to use from several threads at
once.
"""

import os
import sys

import rawterm

# Default time between showing characters (in ms)
DEFAULT_INTERVAL = 70

# Choices are picked with a single digit key
MAX_CHOICES = 9

# Shown in front of the input field of input dialogs
_INPUT_PROMPT = "> "

_TRUE_STRS = frozenset(("y", "yes", "1", "true", "on"))
_FALSE_STRS = frozenset(("", "n", "no", "0", "false", "off"))


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class RenderConfig:
    """
    Rendering settings, read each time a character is shown.

    interval:
      Milliseconds to wait after each character. A negative value can't be
      slept; the dialog renders without delay and records a warning.

    play_sound:
      If True, the terminal bell is rung along with every character.
    """

    __slots__ = ("interval", "play_sound")

    def __init__(self, interval=DEFAULT_INTERVAL, play_sound=False):
        if not isinstance(interval, int) or isinstance(interval, bool):
            raise TypeError(f"interval must be an int, not {interval!r}")
        self.interval = interval
        self.play_sound = bool(play_sound)

    @classmethod
    def from_env(cls, environ=None):
        """
        Returns a RenderConfig with defaults overridden by TEXTDLG_INTERVAL
        and TEXTDLG_PLAY_SOUND.

        environ:
          Mapping to read the variables from. Defaults to os.environ.
        """
        if environ is None:
            environ = os.environ

        config = cls()

        if "TEXTDLG_INTERVAL" in environ:
            val = environ["TEXTDLG_INTERVAL"]
            try:
                interval = int(val)
            except ValueError:
                interval = -1

            if interval < 0:
                _env_warn(f"ignoring TEXTDLG_INTERVAL={val!r}: not a non-negative integer")
            else:
                config.interval = interval

        if "TEXTDLG_PLAY_SOUND" in environ:
            val = environ["TEXTDLG_PLAY_SOUND"]
            if val.strip().lower() in _TRUE_STRS:
                config.play_sound = True
            elif val.strip().lower() in _FALSE_STRS:
                config.play_sound = False
            else:
                _env_warn(f"ignoring TEXTDLG_PLAY_SOUND={val!r}: expected y or n")

        return config

    def __repr__(self):
        return f"RenderConfig(interval={self.interval}, play_sound={self.play_sound})"


def _env_warn(msg):
    print("textdlg warning: " + msg, file=sys.stderr)


# ---------------------------------------------------------------------------
# Borders
# ---------------------------------------------------------------------------


class Border:
    """Immutable set of glyphs for drawing a frame around a dialog.

    corner:
      Character for the four corners

    sides:
      Character for the left and right edges

    planes:
      Character for the top and bottom edges
    """

    __slots__ = ("corner", "sides", "planes")

    def __init__(self, corner, sides, planes):
        for name, glyph in (("corner", corner), ("sides", sides), ("planes", planes)):
            if not isinstance(glyph, str) or len(glyph) != 1:
                raise ValueError(f"{name} glyph must be a single character, not {glyph!r}")

        object.__setattr__(self, "corner", corner)
        object.__setattr__(self, "sides", sides)
        object.__setattr__(self, "planes", planes)

    def __setattr__(self, name, value):
        raise AttributeError("Border is immutable")

    def __eq__(self, other):
        if not isinstance(other, Border):
            return NotImplemented
        return (self.corner, self.sides, self.planes) == (
            other.corner,
            other.sides,
            other.planes,
        )

    def __hash__(self):
        return hash((self.corner, self.sides, self.planes))

    def __repr__(self):
        return f"Border({self.corner!r}, {self.sides!r}, {self.planes!r})"


def text_size(text):
    """Return (width, height) of 'text' as a block: the length of its longest
    line and its number of lines."""
    lines = text.split("\n")
    return max(len(line) for line in lines), len(lines)


def border_cells(x, y, w, h, border):
    """
    Returns the cells of a frame around a w x h block whose top-left cell is
    at (x, y), as a list of (col, row, glyph) tuples.

    The frame sits one cell outside the block on every side. Corners go at
    the four corner cells, border.planes along the top and bottom rows, and
    border.sides along the left and right columns. Every frame cell appears
    exactly once: top row first, then bottom row, then the two sides row by
    row.
    """
    left = x - 1
    right = x + w
    top = y - 1
    bottom = y + h

    cells = []
    for row in top, bottom:
        cells.append((left, row, border.corner))
        for col in range(x, right):
            cells.append((col, row, border.planes))
        cells.append((right, row, border.corner))

    for row in range(y, bottom):
        cells.append((left, row, border.sides))
        cells.append((right, row, border.sides))

    return cells


def choice_block_size(text, choices):
    # Size of the block a choice dialog occupies: the prompt, a blank row, and
    # one "N. label" row per choice

    w, h = text_size(text)
    items = _choice_items(choices)
    return max(w, *(len(item) for item in items)), h + 1 + len(items)


def input_block_size(text, max_chars):
    # Size of the block an input dialog occupies: the prompt, a blank row, and
    # the input row (prompt glyph plus up to 'max_chars' characters)

    w, h = text_size(text)
    return max(w, len(_INPUT_PROMPT) + max_chars), h + 2


def _choice_items(choices):
    return [f"{i}. {label}" for i, label in enumerate(choices, 1)]


# ---------------------------------------------------------------------------
# Dialog
# ---------------------------------------------------------------------------


class Dialog:
    """
    Renders dialogs on a terminal.

    The following attributes are available. They should be treated as
    read-only unless noted.

    term:
      The rawterm.Terminal dialogs are drawn on and read from.

    config:
      The RenderConfig in effect. Can be replaced or modified between
      dialogs.

    warn:
      Set this variable to False to disable all warnings. True by default.

    warn_to_stderr:
      Set this variable to False to only record warnings in 'warnings'
      instead of also printing them to stderr. True by default.

    warnings:
      A list of strings containing all warnings that have been generated,
      for cases where more flexibility is needed.
    """

    def __init__(self, term=None, config=None):
        self.term = term if term is not None else rawterm.Terminal()
        self.config = config if config is not None else RenderConfig()

        self.warn = True
        self.warn_to_stderr = True
        self.warnings = []

    #
    # Building blocks
    #

    def typewrite(self, x, y, text):
        """
        Reveals 'text' one character at a time, starting at (x, y).

        Each character is drawn at its own cursor position and flushed, after
        which the renderer waits config.interval milliseconds. A newline moves
        to column x of the next row without drawing or waiting.
        """
        col = x
        row = y
        warned = False

        for ch in text:
            if ch == "\n":
                row += 1
                col = x
                continue

            self.term.move_to(col, row)
            self.term.write(ch)
            if self.config.play_sound:
                self.term.write(rawterm.BELL)
            self.term.flush()

            interval = self.config.interval
            if not rawterm.msleep(interval) and not warned:
                self._warn(f"negative interval ({interval} ms), showing text without delay")
                warned = True

            col += 1

    def draw_border(self, x, y, w, h, border):
        """Draws 'border' around the w x h block at (x, y) and flushes."""
        for col, row, glyph in border_cells(x, y, w, h, border):
            self.term.move_to(col, row)
            self.term.write(glyph)
        self.term.flush()

    def wait_key(self):
        """Blocks until a key is pressed, then discards any typed-ahead input.

        End of input counts as a keypress.
        """
        with self.term.raw():
            self.term.getch()
        self.term.flush_input()

    def render(self, x, y, text, border=None, clear=True, wait=True):
        """
        Shows a dialog. All the show*() variants end up here.

        x, y:
          Position of the first character of 'text'

        text:
          Text to show

        border:
          Border to draw around the text, or None for no border

        clear:
          If True, the screen is cleared first

        wait:
          If True, blocks until a key is pressed afterwards
        """
        if clear:
            self.term.clear()
            self.term.flush()

        if border is not None:
            w, h = text_size(text)
            self.draw_border(x, y, w, h, border)

        self.typewrite(x, y, text)

        if wait:
            self.wait_key()

    #
    # Plain dialogs
    #

    def show(self, x, y, text):
        self.render(x, y, text)

    def show_nokey(self, x, y, text):
        self.render(x, y, text, wait=False)

    def show_noclear(self, x, y, text):
        self.render(x, y, text, clear=False)

    def show_nokey_noclear(self, x, y, text):
        self.render(x, y, text, clear=False, wait=False)

    def show_border(self, x, y, text, corner, sides, planes):
        self.render(x, y, text, Border(corner, sides, planes))

    def show_border_nokey(self, x, y, text, corner, sides, planes):
        self.render(x, y, text, Border(corner, sides, planes), wait=False)

    def show_border_noclear(self, x, y, text, corner, sides, planes):
        self.render(x, y, text, Border(corner, sides, planes), clear=False)

    def show_border_nokey_noclear(self, x, y, text, corner, sides, planes):
        self.render(
            x, y, text, Border(corner, sides, planes), clear=False, wait=False
        )

    #
    # Choice dialogs
    #

    def show_choice(self, x, y, text, choices, handler):
        """
        Shows a dialog where one of 'choices' is picked with a digit key.

        x, y:
          Position of the prompt

        text:
          Prompt text

        choices:
          Sequence of 1-9 choice labels

        handler:
          Called with the number (1-based) of the picked choice

        Returns the number of the picked choice. Raises EOFError, without
        calling 'handler', if input ends before a choice is made.
        """
        return self._choice("show_choice", x, y, text, choices, handler, None)

    def show_choice_border(self, x, y, text, corner, sides, planes, choices, handler):
        """
        Like show_choice(), with a border around the prompt and choices.
        """
        return self._choice(
            "show_choice_border",
            x,
            y,
            text,
            choices,
            handler,
            (corner, sides, planes),
        )

    def _choice(self, where, x, y, text, choices, handler, glyphs):
        # 'glyphs' is a (corner, sides, planes) tuple, or None for no border

        _check_handler(where, handler)

        if isinstance(choices, str):
            raise TypeError("choices must be a sequence of labels, not a string")
        choices = list(choices)
        if not 1 <= len(choices) <= MAX_CHOICES:
            _fatal(where, f"invalid num_choices ({len(choices)})")

        border = None if glyphs is None else Border(*glyphs)

        items = _choice_items(choices)
        h = text_size(text)[1]

        self.term.clear()
        self.term.flush()

        if border is not None:
            self.draw_border(x, y, *choice_block_size(text, choices), border)

        self.typewrite(x, y, text)

        # The choices appear all at once, starting two rows below the last
        # prompt line
        for i, item in enumerate(items, 1):
            self.term.move_to(x, y + h + i)
            self.term.write(item)
        self.term.flush()

        keys = "123456789"[: len(items)]
        with self.term.raw():
            while True:
                c = self.term.getch()
                if c is None:
                    raise EOFError("end of input while waiting for a choice")
                if c in keys:
                    break

        choice = int(c)
        handler(choice)
        self.term.flush_input()
        return choice

    #
    # Input dialogs
    #

    def show_input(self, x, y, text, max_chars, handler):
        """
        Shows a dialog asking for a line of text.

        x, y:
          Position of the prompt

        text:
          Prompt text

        max_chars:
          Maximum number of characters kept from the line

        handler:
          Called with the entered text

        Returns the entered text. Raises EOFError, without calling 'handler',
        if input ends before anything is entered.
        """
        return self._input("show_input", x, y, text, max_chars, handler, None)

    def show_input_border(self, x, y, text, max_chars, corner, sides, planes, handler):
        """
        Like show_input(), with a border around the prompt and input field.
        The border is as wide as the longest prompt line or the input row
        ("> " plus 'max_chars' characters), whichever is wider.
        """
        return self._input(
            "show_input_border",
            x,
            y,
            text,
            max_chars,
            handler,
            (corner, sides, planes),
        )

    def _input(self, where, x, y, text, max_chars, handler, glyphs):
        _check_handler(where, handler)

        if not isinstance(max_chars, int) or isinstance(max_chars, bool) or max_chars < 0:
            _fatal(where, f"invalid max_chars ({max_chars!r})")

        border = None if glyphs is None else Border(*glyphs)

        h = text_size(text)[1]

        self.term.clear()
        self.term.flush()

        if border is not None:
            self.draw_border(x, y, *input_block_size(text, max_chars), border)

        self.typewrite(x, y, text)

        self.term.move_to(x, y + h + 1)
        self.term.write(_INPUT_PROMPT)
        self.term.flush()

        s = self.term.readline(max_chars)
        if s is None:
            raise EOFError("end of input while waiting for a line")

        handler(s)
        return s

    #
    # Warnings
    #

    def _warn(self, msg):
        # For internal use. Records a warning and prints it to stderr,
        # depending on 'warn' and 'warn_to_stderr'.

        if not self.warn:
            return

        msg = "textdlg warning: " + msg
        self.warnings.append(msg)
        if self.warn_to_stderr:
            sys.stderr.write(msg + "\n")


def _check_handler(where, handler):
    if handler is None:
        _fatal(where, "handler is None")
    if not callable(handler):
        _fatal(where, f"handler is not callable ({handler!r})")


def _fatal(where, msg):
    # The interaction can't go on. Message on stdout, exit status 1.

    print(f"\nError in {where}: {msg}\n")
    sys.exit(1)


# ---------------------------------------------------------------------------
# Module-level API
# ---------------------------------------------------------------------------

# Settings used by the functions below. Not safe to change while another
# thread is showing a dialog.
default_config = RenderConfig()

_dialog = None


def _default_dialog():
    # Returns the Dialog on stdin/stdout used by the module-level functions,
    # creating it on first use. Picks up reassignments of default_config.
    # Output follows sys.stdout, including later redirections.

    global _dialog

    if _dialog is None:
        _dialog = Dialog(config=default_config)
    else:
        _dialog.config = default_config
    return _dialog


def show(x, y, text):
    """Clears the screen, shows 'text' at (x, y), and waits for a key."""
    _default_dialog().show(x, y, text)


def show_nokey(x, y, text):
    """Clears the screen and shows 'text' at (x, y)."""
    _default_dialog().show_nokey(x, y, text)


def show_noclear(x, y, text):
    """Shows 'text' at (x, y) and waits for a key."""
    _default_dialog().show_noclear(x, y, text)


def show_nokey_noclear(x, y, text):
    """Shows 'text' at (x, y)."""
    _default_dialog().show_nokey_noclear(x, y, text)


def show_border(x, y, text, corner, sides, planes):
    """Like show(), with a border drawn from the three glyphs."""
    _default_dialog().show_border(x, y, text, corner, sides, planes)


def show_border_nokey(x, y, text, corner, sides, planes):
    """Like show_nokey(), with a border drawn from the three glyphs."""
    _default_dialog().show_border_nokey(x, y, text, corner, sides, planes)


def show_border_noclear(x, y, text, corner, sides, planes):
    """Like show_noclear(), with a border drawn from the three glyphs."""
    _default_dialog().show_border_noclear(x, y, text, corner, sides, planes)


def show_border_nokey_noclear(x, y, text, corner, sides, planes):
    """Like show_nokey_noclear(), with a border drawn from the three glyphs."""
    _default_dialog().show_border_nokey_noclear(x, y, text, corner, sides, planes)


def show_choice(x, y, text, choices, handler):
    """See Dialog.show_choice()."""
    return _default_dialog().show_choice(x, y, text, choices, handler)


def show_choice_border(x, y, text, corner, sides, planes, choices, handler):
    """See Dialog.show_choice_border()."""
    return _default_dialog().show_choice_border(
        x, y, text, corner, sides, planes, choices, handler
    )


def show_input(x, y, text, max_chars, handler):
    """See Dialog.show_input()."""
    return _default_dialog().show_input(x, y, text, max_chars, handler)


def show_input_border(x, y, text, max_chars, corner, sides, planes, handler):
    """See Dialog.show_input_border()."""
    return _default_dialog().show_input_border(
        x, y, text, max_chars, corner, sides, planes, handler
    )
