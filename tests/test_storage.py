"""Tests for the JSON-or-string key/value storage helper."""

import json

import pytest

from dir2zip.storage import JsonFileStore, KeyValueStorage, RawValue, StructuredValue, decode_value


@pytest.fixture
def storage():
    return KeyValueStorage({})


def test_strings_are_stored_raw(storage):
    storage.set("greeting", "hello")

    assert storage.store["greeting"] == "hello"
    assert storage.get("greeting") == "hello"
    assert storage.lookup("greeting") == RawValue("hello")


def test_structured_values_round_trip_through_json(storage):
    storage.set("settings", {"fonts": ["Inter", "Roboto"], "preload": True})

    assert json.loads(storage.store["settings"]) == {"fonts": ["Inter", "Roboto"], "preload": True}
    assert storage.get("settings") == {"fonts": ["Inter", "Roboto"], "preload": True}
    assert isinstance(storage.lookup("settings"), StructuredValue)


def test_json_looking_strings_decode(storage):
    storage.set("count", "42")

    assert storage.get("count") == 42


def test_missing_key_returns_default(storage):
    assert storage.get("missing") is None
    assert storage.get("missing", "fallback") == "fallback"
    assert storage.lookup("missing") is None


def test_stored_null_is_not_the_default(storage):
    storage.set("nothing", None)

    assert storage.lookup("nothing") == StructuredValue(None)
    assert storage.get("nothing", "fallback") is None


def test_delete(storage):
    storage.set("key", [1, 2])
    storage.delete("key")
    storage.delete("never-set")

    assert storage.get("key") is None


@pytest.mark.parametrize(
    "text, expected",
    [
        ('{"a": 1}', StructuredValue({"a": 1})),
        ("[1, 2]", StructuredValue([1, 2])),
        ("true", StructuredValue(True)),
        ("not json", RawValue("not json")),
        ("{broken", RawValue("{broken")),
        ("", RawValue("")),
    ],
)
def test_decode_value(text, expected):
    assert decode_value(text) == expected


def test_json_file_store_persists(tmp_path):
    path = tmp_path / "storage.json"
    storage = KeyValueStorage(JsonFileStore(path))
    storage.set("fonts", ["Inter"])
    storage.set("note", "plain text")

    reopened = KeyValueStorage(JsonFileStore(path))

    assert reopened.get("fonts") == ["Inter"]
    assert reopened.get("note") == "plain text"
    assert json.loads(path.read_text()) == {"fonts": '["Inter"]', "note": "plain text"}


def test_json_file_store_delete_persists(tmp_path):
    path = tmp_path / "storage.json"
    store = JsonFileStore(path)
    store["a"] = "1"
    del store["a"]

    assert len(JsonFileStore(path)) == 0
    assert not (tmp_path / "storage.json.tmp").exists()


def test_json_file_store_missing_file_is_empty(tmp_path):
    store = JsonFileStore(tmp_path / "missing.json")

    assert list(store) == []
    assert not (tmp_path / "missing.json").exists()


def test_json_file_store_rejects_non_strings(tmp_path):
    store = JsonFileStore(tmp_path / "storage.json")

    with pytest.raises(TypeError, match="only holds strings"):
        store["a"] = 1


def test_json_file_store_rejects_non_object_file(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text("[1, 2, 3]")

    with pytest.raises(ValueError, match="does not contain a JSON object"):
        JsonFileStore(path)


@pytest.mark.parametrize("text", ["NaN", "Infinity", "-Infinity", '{"ratio": NaN}', "[1, Infinity]"])
def test_non_json_constants_stay_raw(storage, text):
    storage.set("k", text)

    assert storage.get("k") == text
    assert storage.lookup("k") == RawValue(text)


@pytest.mark.parametrize("value", [float("nan"), float("inf"), {"ratio": float("-inf")}])
def test_set_rejects_non_finite_floats(storage, value):
    with pytest.raises(ValueError):
        storage.set("k", value)

    assert storage.lookup("k") is None
