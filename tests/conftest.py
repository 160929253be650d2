import json

import pytest

from tabpicker.session import Key, SelectionLoop, SessionState


class ScriptedKeys:
    """a key source that replays a fixed sequence of key presses"""

    def __init__(self, keys):
        self._keys = list(keys)

    def read_key(self):
        if not self._keys:
            raise EOFError("key script exhausted")
        return self._keys.pop(0)


@pytest.fixture(autouse=True)
def isolated_config_dir(monkeypatch, tmp_path):
    """keeps the tests away from the real user settings"""
    monkeypatch.setattr(
        "tabpicker.config.user_config_dir", lambda name: str(tmp_path / "config" / name)
    )


@pytest.fixture
def fruit_suggestions():
    return {
        "apple": "red fruit",
        "banana": "yellow fruit",
        "grape": "small fruit",
    }


@pytest.fixture
def exchange_file(tmp_path, fruit_suggestions):
    path = tmp_path / "exchange.json"
    path.write_text(
        json.dumps({"CurrentInput": "", "CustomSuggestions": fruit_suggestions}),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def scripted_session(monkeypatch):
    """replaces the curses session with the selection loop fed by scripted keys"""
    frames = []
    script = []

    def fake_session(state: SessionState, settings):
        loop = SelectionLoop(state, ScriptedKeys(script), frames.append)
        return loop.run()

    monkeypatch.setattr("tabpicker.app.termutils.run_curses_session", fake_session)

    def use(*keys: Key):
        script.extend(keys)
        return frames

    return use
