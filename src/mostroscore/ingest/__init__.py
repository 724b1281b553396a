"""Event ingestion helpers."""

from .event_log import EventLog, EventSnapshot
from .filters import (
    EventFilter,
    anchor_filter,
    classify_event,
    hex_to_npub,
    npub_to_hex,
    order_filter,
    parse_pubkey,
)
from .sources import load_event_records, load_events, parse_events

__all__ = [
    "EventFilter",
    "EventLog",
    "EventSnapshot",
    "anchor_filter",
    "classify_event",
    "hex_to_npub",
    "load_event_records",
    "load_events",
    "npub_to_hex",
    "order_filter",
    "parse_events",
    "parse_pubkey",
]
