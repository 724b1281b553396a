"""Append-only buffer of a node's anchor and order events."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from dataclasses import dataclass

from mostroscore.domain.events import RawEvent
from mostroscore.ingest.filters import classify_event


@dataclass(frozen=True)
class EventSnapshot:
    """Read-only view handed to the metrics engine."""

    anchor_events: tuple[RawEvent, ...]
    order_events: tuple[RawEvent, ...]


class EventLog:
    """Caller-owned event collection for one node.

    Events are only ever appended. The metrics engine reads a snapshot, never
    the live lists, so appends between computations cannot tear a report.
    """

    def __init__(self, pubkey: str) -> None:
        self.pubkey = pubkey
        self._anchor_events: list[RawEvent] = []
        self._order_events: list[RawEvent] = []
        self._seen: set[Hashable] = set()

    def append(self, event: RawEvent) -> bool:
        """Store a matching event; return true when the log changed."""
        role = classify_event(event, self.pubkey)
        if role is None:
            return False
        key = _event_key(event)
        if key in self._seen:
            return False
        self._seen.add(key)
        if role == "anchor":
            self._anchor_events.append(event)
        else:
            self._order_events.append(event)
        return True

    def extend(self, events: Iterable[RawEvent]) -> int:
        """Append events and return how many were stored."""
        return sum(1 for event in events if self.append(event))

    def snapshot(self) -> EventSnapshot:
        return EventSnapshot(
            anchor_events=tuple(self._anchor_events),
            order_events=tuple(self._order_events),
        )

    def __len__(self) -> int:
        return len(self._anchor_events) + len(self._order_events)


def _event_key(event: RawEvent) -> Hashable:
    # Records without an id are identified by their full content.
    if event.id:
        return event.id
    return (event.kind, event.pubkey, event.created_at, event.tags)
