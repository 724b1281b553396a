"""Subscription filters and pubkey parsing."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Literal

import bech32

from mostroscore.domain.events import ANCHOR_EVENT_KIND, ORDER_EVENT_KIND, RawEvent
from mostroscore.errors import ConfigError

EventRole = Literal["anchor", "order"]

NPUB_PREFIX = "npub"

_HEX_PUBKEY = re.compile(r"[0-9a-fA-F]{64}")


def parse_pubkey(value: str) -> str:
    """Normalize a user-supplied pubkey (npub or 64 character hex) to hex."""
    text = value.strip()
    if text.startswith("npub1"):
        return npub_to_hex(text)
    if _HEX_PUBKEY.fullmatch(text):
        return text.lower()
    raise ConfigError("Invalid pubkey format. Use npub1... or 64 character hex.")


def npub_to_hex(npub: str) -> str:
    hrp, data = bech32.bech32_decode(npub)
    if hrp != NPUB_PREFIX or data is None:
        raise ConfigError("Invalid npub format")
    decoded = bech32.convertbits(data, 5, 8, False)
    if decoded is None or len(decoded) != 32:
        raise ConfigError("Invalid npub format")
    return bytes(decoded).hex()


def hex_to_npub(pubkey: str) -> str:
    """Bech32 `npub` form of a hex pubkey, for display."""
    words = bech32.convertbits(bytes.fromhex(pubkey), 8, 5, True)
    return bech32.bech32_encode(NPUB_PREFIX, words)


@dataclass(frozen=True)
class EventFilter:
    """Relay-style filter on kind, author and tag values."""

    kinds: frozenset[int]
    authors: frozenset[str] = field(default_factory=frozenset)
    tags: tuple[tuple[str, str], ...] = ()

    def matches(self, event: RawEvent) -> bool:
        if event.kind not in self.kinds:
            return False
        if self.authors and event.pubkey not in self.authors:
            return False
        return all(_has_tag(event, name, value) for name, value in self.tags)


def _has_tag(event: RawEvent, name: str, value: str) -> bool:
    return any(len(tag) >= 2 and tag[0] == name and tag[1] == value for tag in event.tags)


def anchor_filter(pubkey: str) -> EventFilter:
    """Dev-fee payment events published by the node."""
    return EventFilter(
        kinds=frozenset({ANCHOR_EVENT_KIND}),
        authors=frozenset({pubkey}),
        tags=(("z", "dev-fee-payment"), ("y", "mostro")),
    )


def order_filter(pubkey: str) -> EventFilter:
    """Order events published by the node."""
    return EventFilter(
        kinds=frozenset({ORDER_EVENT_KIND}),
        authors=frozenset({pubkey}),
        tags=(("z", "order"),),
    )


def classify_event(event: RawEvent, pubkey: str) -> EventRole | None:
    if anchor_filter(pubkey).matches(event):
        return "anchor"
    if order_filter(pubkey).matches(event):
        return "order"
    return None
