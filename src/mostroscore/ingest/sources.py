"""Load raw events from relay dumps on disk."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

from mostroscore.domain.events import RawEvent
from mostroscore.errors import EventSourceError, MalformedEventError

SkipCallback = Callable[[str, str], None]


def load_event_records(path: str | Path, on_skip: SkipCallback | None = None) -> list[Any]:
    """Read event records from a JSONL file or a JSON array file.

    Lines that do not decode are reported through `on_skip` and dropped.
    """
    input_path = Path(path)
    try:
        text = input_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise EventSourceError(f"Cannot read events from {input_path}: {exc}") from exc

    stripped = text.lstrip()
    if stripped.startswith("["):
        try:
            document = json.loads(stripped)
        except ValueError:
            document = None
        if isinstance(document, list) and not _is_relay_message(document):
            return document

    records: list[Any] = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        content = line.strip()
        if not content:
            continue
        try:
            records.append(json.loads(content))
        except ValueError as exc:
            if on_skip is not None:
                reason = exc.msg if isinstance(exc, json.JSONDecodeError) else str(exc)
                on_skip(f"{input_path}:{line_number}", f"invalid JSON: {reason}")
    return records


def parse_events(
    records: Iterable[Any],
    source: str = "<memory>",
    on_skip: SkipCallback | None = None,
) -> list[RawEvent]:
    """Turn decoded records into events, dropping the malformed ones."""
    events: list[RawEvent] = []
    for index, record in enumerate(records):
        payload = _unwrap_relay_message(record)
        try:
            events.append(RawEvent.from_record(payload))
        except MalformedEventError as exc:
            if on_skip is not None:
                on_skip(f"{source}#{index}", str(exc))
    return events


def load_events(path: str | Path, on_skip: SkipCallback | None = None) -> list[RawEvent]:
    """Load and parse every event stored in `path`."""
    records = load_event_records(path, on_skip=on_skip)
    return parse_events(records, source=str(path), on_skip=on_skip)


def _is_relay_message(value: list[Any]) -> bool:
    return len(value) >= 3 and value[0] == "EVENT" and isinstance(value[2], dict)


def _unwrap_relay_message(record: Any) -> Any:
    # ["EVENT", <subscription id>, {...}]
    if isinstance(record, list) and _is_relay_message(record):
        return record[2]
    return record
