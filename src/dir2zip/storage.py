"""Persistent key/value storage with JSON-or-string values.

Values are kept in a string store. Strings are stored as they are; any other
value is serialized to JSON. On the way back, text that parses as JSON comes
back as the decoded value and anything else comes back as the raw string.
"""

import json
import os
from collections.abc import MutableMapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Union

from dir2zip.types import PathType


@dataclass(frozen=True)
class StructuredValue:
    """A stored value that decoded as JSON."""

    value: Any


@dataclass(frozen=True)
class RawValue:
    """A stored value that is not valid JSON and is returned as text."""

    text: str


StoredValue = Union[StructuredValue, RawValue]


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON, even though the json module reads them
    raise ValueError(f"Not a JSON value: {name}")


def decode_value(text: str) -> StoredValue:
    """Decode stored text into a structured or raw value.

    Example:
        >>> decode_value('{"a": 1}')
        StructuredValue(value={'a': 1})
        >>> decode_value("hello")
        RawValue(text='hello')
    """
    try:
        return StructuredValue(json.loads(text, parse_constant=_reject_constant))
    except ValueError:
        return RawValue(text)


class JsonFileStore(MutableMapping):  # type: ignore[type-arg]
    """String-to-string store persisted as a JSON object in a file.

    The file is read once on construction (a missing file is an empty store)
    and rewritten after every change. The parent directory must exist.
    """

    def __init__(self, path: PathType) -> None:
        self.path = Path(path)
        self._data: Dict[str, str] = {}
        if self.path.exists():
            with open(self.path, "r", encoding="utf-8") as f:
                content = json.load(f)
            if not isinstance(content, dict):
                raise ValueError(f"Storage file does not contain a JSON object: {self.path}")
            self._data = {str(k): str(v) for k, v in content.items()}

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __setitem__(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"JsonFileStore only holds strings, got {type(value).__name__}")
        self._data[key] = value
        self._save()

    def __delitem__(self, key: str) -> None:
        del self._data[key]
        self._save()

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def _save(self) -> None:
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(self._data, f, indent=2, sort_keys=True)
        os.replace(tmp_path, self.path)


class KeyValueStorage:
    """Set/get/delete helper over a string store.

    Attributes:
        store (MutableMapping): The underlying string store. A plain dict works
            for in-memory use; JsonFileStore persists across runs.

    Example:
        >>> storage = KeyValueStorage({})
        >>> storage.set("excludes", [".git", "node_modules"])
        >>> storage.get("excludes")
        ['.git', 'node_modules']
        >>> storage.set("note", "not json")
        >>> storage.lookup("note")
        RawValue(text='not json')
        >>> storage.get("missing", "fallback")
        'fallback'
    """

    def __init__(self, store: "MutableMapping[str, str]") -> None:
        self.store = store

    def set(self, key: str, value: Any) -> None:
        """Store a string as is, or any other value as JSON.

        Raises:
            TypeError: If the value is not JSON serializable.
            ValueError: If the value holds NaN or infinite floats.
        """
        self.store[key] = value if isinstance(value, str) else json.dumps(value, allow_nan=False)

    def lookup(self, key: str) -> Optional[StoredValue]:
        """Return the stored value for *key*, or None if there is none."""
        text = self.store.get(key)
        if text is None:
            return None
        return decode_value(text)

    def get(self, key: str, default: Any = None) -> Any:
        """Return the decoded value, the raw string, or *default* if *key* is missing."""
        stored = self.lookup(key)
        if stored is None:
            return default
        if isinstance(stored, StructuredValue):
            return stored.value
        return stored.text

    def delete(self, key: str) -> None:
        """Remove *key*; missing keys are ignored."""
        self.store.pop(key, None)
