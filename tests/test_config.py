# Copyright (c) 2024-2026 textdlg contributors
# SPDX-License-Identifier: ISC
#
# RenderConfig tests: defaults, validation, and environment overrides.

import pytest

from textdlg import DEFAULT_INTERVAL, RenderConfig


def test_defaults():
    config = RenderConfig()
    assert config.interval == DEFAULT_INTERVAL == 70
    assert config.play_sound is False


def test_interval_must_be_int():
    for bad in (1.5, "70", None, True):
        with pytest.raises(TypeError):
            RenderConfig(bad)


def test_mutable_between_dialogs():
    config = RenderConfig()
    config.interval = 200
    config.play_sound = True
    assert repr(config) == "RenderConfig(interval=200, play_sound=True)"


def test_from_env_without_variables():
    config = RenderConfig.from_env({})
    assert config.interval == DEFAULT_INTERVAL
    assert config.play_sound is False


def test_from_env_reads_os_environ(monkeypatch):
    monkeypatch.setenv("TEXTDLG_INTERVAL", "15")
    monkeypatch.setenv("TEXTDLG_PLAY_SOUND", "y")
    config = RenderConfig.from_env()
    assert config.interval == 15
    assert config.play_sound is True


@pytest.mark.parametrize("val", ["0", "200", " 5 "])
def test_from_env_interval(val):
    assert RenderConfig.from_env({"TEXTDLG_INTERVAL": val}).interval == int(val)


@pytest.mark.parametrize("val", ["-1", "fast", "", "1.5"])
def test_from_env_bad_interval_warns(capsys, val):
    config = RenderConfig.from_env({"TEXTDLG_INTERVAL": val})
    assert config.interval == DEFAULT_INTERVAL
    assert "textdlg warning: ignoring TEXTDLG_INTERVAL" in capsys.readouterr().err


@pytest.mark.parametrize(
    "val, expected",
    [
        ("y", True),
        ("YES", True),
        ("1", True),
        ("true", True),
        ("on", True),
        ("n", False),
        ("no", False),
        ("0", False),
        ("Off", False),
        ("", False),
    ],
)
def test_from_env_play_sound(val, expected):
    assert RenderConfig.from_env({"TEXTDLG_PLAY_SOUND": val}).play_sound is expected


def test_from_env_bad_play_sound_warns(capsys):
    config = RenderConfig.from_env({"TEXTDLG_PLAY_SOUND": "loud"})
    assert config.play_sound is False
    assert "textdlg warning: ignoring TEXTDLG_PLAY_SOUND" in capsys.readouterr().err


def test_separate_configs_do_not_interfere(make_term):
    from textdlg import Dialog

    quiet = Dialog(make_term()[0], RenderConfig(0))
    loud = Dialog(make_term()[0], RenderConfig(0, True))
    loud.config.interval = 5
    assert quiet.config.interval == 0
    assert quiet.config.play_sound is False
