"""Raw event model for the public event log."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Self

from mostroscore.errors import MalformedEventError

ANCHOR_EVENT_KIND = 8383
ORDER_EVENT_KIND = 38383

Tag = tuple[str, ...]


@dataclass(frozen=True)
class RawEvent:
    """Single signed event as delivered by a relay.

    Signatures are verified upstream; only the fields the metrics use are kept.
    """

    id: str
    kind: int
    pubkey: str
    created_at: int
    tags: tuple[Tag, ...] = field(default_factory=tuple)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Self:
        """Build an event from a decoded JSON object.

        Individual malformed tags are dropped; a record without an integer kind
        or timestamp cannot be placed on the timeline and is rejected.
        """
        if not isinstance(record, Mapping):
            raise MalformedEventError(f"event must be an object, got {type(record).__name__}")
        kind = record.get("kind")
        created_at = record.get("created_at")
        if not _is_int(kind):
            raise MalformedEventError(f"event kind must be an integer, got {kind!r}")
        if not _is_int(created_at):
            raise MalformedEventError(f"event created_at must be an integer, got {created_at!r}")
        raw_tags = record.get("tags", [])
        if raw_tags is None:
            raw_tags = []
        if not isinstance(raw_tags, list):
            raise MalformedEventError("event tags must be a list")
        tags = tuple(
            tuple(raw_tag)
            for raw_tag in raw_tags
            if isinstance(raw_tag, list) and all(isinstance(item, str) for item in raw_tag)
        )
        return cls(
            id=str(record.get("id") or ""),
            kind=int(kind),
            pubkey=str(record.get("pubkey") or "").lower(),
            created_at=int(created_at),
            tags=tags,
        )

    def to_record(self) -> dict[str, Any]:
        """Convert event to serializable dict."""
        return {
            "id": self.id,
            "kind": self.kind,
            "pubkey": self.pubkey,
            "created_at": self.created_at,
            "tags": [list(tag) for tag in self.tags],
        }


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
