"""Typed field extraction from raw event tags."""

from __future__ import annotations

import re
from dataclasses import dataclass

from mostroscore.domain.events import RawEvent

_AMOUNT_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class OrderFields:
    """Recognized order tags; None means absent or malformed."""

    order_id: str | None
    status: str | None
    amount_sats: int | None


def tag_value(event: RawEvent, name: str) -> str | None:
    """Return the value of the first tag named `name`, or None."""
    for tag in event.tags:
        if tag and tag[0] == name:
            # Only the first tag with a matching name is consulted.
            return tag[1] if len(tag) >= 2 else None
    return None


def parse_amount(value: str | None) -> int | None:
    """Parse a positive integer amount in sats."""
    if value is None:
        return None
    text = value.strip()
    if not _AMOUNT_PATTERN.fullmatch(text):
        return None
    try:
        amount = int(text)
    except ValueError:
        # Digit strings past the interpreter's conversion limit.
        return None
    if amount <= 0:
        return None
    return amount


def extract_order_fields(event: RawEvent) -> OrderFields:
    """Extract order id, status and amount from an order event."""
    return OrderFields(
        order_id=tag_value(event, "d") or None,
        status=tag_value(event, "s"),
        amount_sats=parse_amount(tag_value(event, "amt")),
    )
