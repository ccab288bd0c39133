import sys
import types

import pytest

from main import main


@pytest.fixture
def launched(monkeypatch):
    """Record which front end the launcher picks."""
    calls = []

    def fake_cli(argv=None):
        calls.append(("cli", argv))
        return 0

    def fake_gui():
        calls.append(("gui", None))
        return 0

    monkeypatch.setattr("cli.main", fake_cli)
    monkeypatch.setitem(sys.modules, "gui", types.SimpleNamespace(main=fake_gui))
    return calls


@pytest.mark.parametrize("flag", ["--gui", "-g"])
def test_leading_flag_opens_gui(flag, launched):
    assert main([flag]) == 0
    assert launched == [("gui", None)]


def test_later_gui_token_stays_with_cli(launched):
    argv = ["removeprefix", "-exts", "mp3", "-g"]
    assert main(argv) == 0
    assert launched == [("cli", argv)]


def test_default_is_cli(launched):
    assert main(["version"]) == 0
    assert launched == [("cli", ["version"])]
