"""Utility functions for the package."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterator, List, Sequence, Union

import orjson


def timestamp() -> str:
    """Return an ISO 8601 timestamp in UTC."""

    return datetime.now(timezone.utc).isoformat()


def append_jsonl(path: Path, record: Dict[str, Any]) -> None:
    """Append a dictionary as JSON to a JSONL file."""

    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("ab") as fh:
        fh.write(orjson.dumps(jsonable(record)))
        fh.write(b"\n")


def load_json(path: Path) -> Iterator[Dict[str, Any]]:
    """Yield JSON objects from a JSONL file."""

    if not path.exists():
        return
    with path.open("rb") as fh:
        for line in fh:
            if not line.strip():
                continue
            yield orjson.loads(line)


def coerce_item(token: str) -> Union[int, float, str]:
    """Interpret a command-line token as an int, a float, or leave it as text."""

    for kind in (int, float):
        try:
            return kind(token)
        except ValueError:
            continue
    return token


def coerce_items(tokens: Sequence[str]) -> List[Union[int, float, str]]:
    """Coerce every token to a number, or keep them all as text.

    Mixed numbers and words would not be mutually comparable, so a single
    non-numeric token leaves the whole list untouched.
    """

    coerced = [coerce_item(token) for token in tokens]
    if any(isinstance(item, str) for item in coerced):
        return list(tokens)
    return coerced


def jsonable(value: Any) -> Any:
    """Return *value* in a form orjson can serialize.

    Integers outside the 64-bit range are stored as their decimal string.
    """

    if isinstance(value, int) and not isinstance(value, bool):
        if not -(2**63) <= value < 2**64:
            return str(value)
        return value
    if isinstance(value, (list, tuple)):
        return [jsonable(item) for item in value]
    if isinstance(value, dict):
        return {key: jsonable(item) for key, item in value.items()}
    return value


__all__ = ["timestamp", "append_jsonl", "load_json", "coerce_item", "coerce_items", "jsonable"]
