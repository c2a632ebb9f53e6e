# Walks through the dialog types textdlg offers: plain dialogs, a bordered
# dialog, a slow dialog, a choice, a dialog with sound, and an input prompt.
#
# Run from the project root:
#
#   $ python3 examples/demo.py
#
# TEXTDLG_INTERVAL and TEXTDLG_PLAY_SOUND set the starting configuration.

import os
import sys
import time

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import textdlg  # noqa: E402


def fruit_handler(choice):
    # Choices are numbered 1-9

    if choice == 1:
        textdlg.show_nokey(10, 10, "You picked apples")
    elif choice == 2:
        textdlg.show_nokey(10, 10, "You picked bananas")

    time.sleep(1)
    textdlg.show_noclear(10, 12, "Good choice!")


def name_handler(name):
    textdlg.show_nokey(10, 10, f"Hello, {name}!")
    print("\n")


textdlg.default_config = textdlg.RenderConfig.from_env()
start_interval = textdlg.default_config.interval

# Basic dialogs
textdlg.show(10, 10, "Hello world")
textdlg.show(20, 20, "This is another dialog")

# Dialog with a border. '+' for the corners, '|' for the left and right sides,
# '-' for the top and bottom.
textdlg.show_border(20, 10, "look\ni have a border", "+", "|", "-")

# Raise the interval so that the text appears slower, then put it back
textdlg.default_config.interval = 200
textdlg.show(12, 12, "I appear slowly.............")
textdlg.default_config.interval = start_interval

textdlg.show_choice(
    15, 15, "Which do you like more?", ["Apples", "Bananas"], fruit_handler
)

# Dialog with sound
play_sound = textdlg.default_config.play_sound
textdlg.default_config.play_sound = True
textdlg.show(10, 10, "hello hello hello!!")
textdlg.default_config.play_sound = play_sound

textdlg.show_input_border(10, 10, "Enter your name", 30, "*", "*", "*", name_handler)
