import json

import pytest

from tabpicker import exchange
from tabpicker.exchange import LoadError, SaveError


def write(path, text):
    path.write_text(text, encoding="utf-8")
    return path


def test_load_reads_input_and_suggestions(exchange_file, fruit_suggestions):
    current_input, raw = exchange.load(exchange_file)
    assert current_input == ""
    assert raw == fruit_suggestions


def test_load_defaults_missing_fields(tmp_path):
    current_input, raw = exchange.load(write(tmp_path / "x.json", "{}"))
    assert current_input == ""
    assert raw == {}


def test_load_treats_nulls_as_empty(tmp_path):
    path = write(
        tmp_path / "x.json",
        '{"CurrentInput": null, "CustomSuggestions": {"a": null, "b": "bee"}}',
    )
    current_input, raw = exchange.load(path)
    assert current_input == ""
    assert raw == {"a": "", "b": "bee"}


def test_load_null_suggestions(tmp_path):
    path = write(tmp_path / "x.json", '{"CurrentInput": "ap", "CustomSuggestions": null}')
    assert exchange.load(path) == ("ap", {})


def test_load_accepts_byte_order_mark(tmp_path):
    path = tmp_path / "bom.json"
    path.write_bytes(b"\xef\xbb\xbf" + b'{"CurrentInput": "g"}')
    assert exchange.load(path) == ("g", {})


def test_load_missing_file(tmp_path):
    with pytest.raises(LoadError, match="cannot read"):
        exchange.load(tmp_path / "missing.json")


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        "",
        "[1, 2, 3]",
        '"just a string"',
        '{"CustomSuggestions": {"a": 1}}',
        '{"CustomSuggestions": ["a", "b"]}',
        '{"CurrentInput": 5}',
    ],
)
def test_load_rejects_malformed_records(tmp_path, text):
    with pytest.raises(LoadError):
        exchange.load(write(tmp_path / "bad.json", text))


def test_load_error_chains_cause(tmp_path):
    with pytest.raises(LoadError) as info:
        exchange.load(write(tmp_path / "bad.json", "{"))
    assert isinstance(info.value.__cause__, json.JSONDecodeError)


def test_save_overwrites_with_selected_suggestion(exchange_file):
    exchange.save(exchange_file, "red fruit")
    assert json.loads(exchange_file.read_text(encoding="utf-8")) == {
        "SelectedSuggestion": "red fruit"
    }


def test_save_keeps_non_ascii_text(tmp_path):
    path = tmp_path / "out.json"
    exchange.save(path, "café ☕")
    assert json.loads(path.read_text(encoding="utf-8")) == {
        "SelectedSuggestion": "café ☕"
    }


def test_save_to_directory_fails(tmp_path):
    with pytest.raises(SaveError, match="cannot write"):
        exchange.save(tmp_path, "value")


def test_save_into_missing_directory_fails(tmp_path):
    with pytest.raises(SaveError):
        exchange.save(tmp_path / "nope" / "out.json", "value")
