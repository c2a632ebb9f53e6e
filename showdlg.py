#!/usr/bin/env python3

# Copyright (c) 2024-2026 textdlg contributors
# SPDX-License-Identifier: ISC

"""
Shows a textdlg dialog from the command line.

Sample usage:

  $ showdlg -x 10 -y 5 "Hello world"
  $ showdlg --border '+|-' "look\\ni have a border"
  $ showdlg --choice Apples --choice Bananas "Which do you like more?"
  $ showdlg --input 30 "Enter your name"

'\\n' in TEXT starts a new line. With --choice, the number of the picked
choice is printed after the dialog. With --input, the entered text is printed.

The delay between characters and the bell can also be set with the
TEXTDLG_INTERVAL and TEXTDLG_PLAY_SOUND environment variables. Command-line
options take precedence.

The exit status on errors is 1.
"""

import argparse
import sys

import textdlg
from rawterm import Terminal


def main():
    parser = argparse.ArgumentParser(
        formatter_class=argparse.RawDescriptionHelpFormatter, description=__doc__
    )

    parser.add_argument(
        "-x", type=int, default=10, help="Column of the first character (default: 10)"
    )

    parser.add_argument(
        "-y", type=int, default=10, help="Row of the first character (default: 10)"
    )

    parser.add_argument(
        "--border",
        metavar="CSP",
        help="Draw a border. CSP is three characters: corner, sides (left and "
        "right), and planes (top and bottom), e.g. '+|-'",
    )

    parser.add_argument(
        "--interval",
        metavar="MS",
        type=int,
        help=f"Milliseconds between characters (default: {textdlg.DEFAULT_INTERVAL})",
    )

    parser.add_argument(
        "--bell", action="store_true", help="Ring the terminal bell for each character"
    )

    parser.add_argument(
        "--no-clear",
        dest="clear",
        action="store_false",
        help="Don't clear the screen first",
    )

    parser.add_argument(
        "--no-key",
        dest="wait",
        action="store_false",
        help="Don't wait for a keypress afterwards",
    )

    mode = parser.add_mutually_exclusive_group()

    mode.add_argument(
        "--choice",
        metavar="LABEL",
        action="append",
        help="Add a choice (1-9 times). The picked number is printed.",
    )

    mode.add_argument(
        "--input",
        metavar="MAX_CHARS",
        type=int,
        help="Ask for a line of at most MAX_CHARS characters and print it",
    )

    parser.add_argument("text", metavar="TEXT", help="Text to show")

    args = parser.parse_args()

    text = args.text.replace("\\n", "\n")

    config = textdlg.RenderConfig.from_env()
    if args.interval is not None:
        if args.interval < 0:
            sys.exit(f"error: --interval must be non-negative, not {args.interval}")
        config.interval = args.interval
    if args.bell:
        config.play_sound = True

    border = None
    if args.border is not None:
        if len(args.border) != 3:
            sys.exit(
                f"error: --border takes exactly three characters, got '{args.border}'"
            )
        border = textdlg.Border(*args.border)

    # The border goes one cell left of and above the text
    min_pos = 2 if border else 1
    if args.x < min_pos:
        sys.exit(f"error: column {args.x} is off the screen")
    if args.y < min_pos:
        sys.exit(f"error: row {args.y} is off the screen")

    if (args.choice is not None or args.input is not None) and not (
        args.clear and args.wait
    ):
        sys.exit("error: --no-clear and --no-key only apply to plain dialogs")

    if args.choice is not None and len(args.choice) > textdlg.MAX_CHOICES:
        sys.exit(
            f"error: at most {textdlg.MAX_CHOICES} choices can be given, got "
            f"{len(args.choice)}"
        )

    if args.input is not None and args.input < 0:
        sys.exit(f"error: MAX_CHARS must be non-negative, not {args.input}")

    dlg = textdlg.Dialog(Terminal(), config)
    results = []

    try:
        if args.choice is not None:
            if border:
                dlg.show_choice_border(
                    args.x,
                    args.y,
                    text,
                    border.corner,
                    border.sides,
                    border.planes,
                    args.choice,
                    results.append,
                )
            else:
                dlg.show_choice(args.x, args.y, text, args.choice, results.append)
            _, h = textdlg.choice_block_size(text, args.choice)

        elif args.input is not None:
            if border:
                dlg.show_input_border(
                    args.x,
                    args.y,
                    text,
                    args.input,
                    border.corner,
                    border.sides,
                    border.planes,
                    results.append,
                )
            else:
                dlg.show_input(args.x, args.y, text, args.input, results.append)
            _, h = textdlg.input_block_size(text, args.input)

        else:
            dlg.render(args.x, args.y, text, border, args.clear, args.wait)
            _, h = textdlg.text_size(text)

    except EOFError:
        sys.exit("error: end of input before the dialog was answered")
    except KeyboardInterrupt:
        # Leave the prompt below the dialog instead of in the middle of it
        print()
        sys.exit(1)

    # Park the cursor below the dialog (and its border, if any) before
    # printing, so the shell prompt doesn't end up inside it
    dlg.term.move_to(1, args.y + h + (1 if border else 0))
    dlg.term.write("\n")
    dlg.term.flush()

    for result in results:
        print(result)


if __name__ == "__main__":
    main()
