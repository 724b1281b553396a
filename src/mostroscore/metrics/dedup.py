"""Collapse republished order events into one final state per order id."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from mostroscore.domain.events import RawEvent
from mostroscore.domain.models import CanonicalOrder
from mostroscore.metrics.normalizer import extract_order_fields


@dataclass(frozen=True)
class OrderDigest:
    """Deduplicated orders plus the raw order-event time range."""

    orders: dict[str, CanonicalOrder] = field(default_factory=dict)
    first_order_at: int | None = None
    last_order_at: int | None = None
    total_events: int = 0


def supersedes(incoming: RawEvent, stored: RawEvent) -> bool:
    """Return true when `incoming` should replace `stored` for the same order id.

    Later timestamps win. Equal timestamps fall back to the smallest event id,
    then the smallest tag tuple, so the winner never depends on arrival order.
    """
    if incoming.created_at != stored.created_at:
        return incoming.created_at > stored.created_at
    if incoming.id != stored.id:
        return incoming.id < stored.id
    return incoming.tags < stored.tags


def deduplicate_orders(order_events: Iterable[RawEvent]) -> OrderDigest:
    """Keep the latest event per `d` tag and track the raw time range."""
    winners: dict[str, RawEvent] = {}
    first_order_at: int | None = None
    last_order_at: int | None = None
    total_events = 0

    for event in order_events:
        total_events += 1
        if first_order_at is None or event.created_at < first_order_at:
            first_order_at = event.created_at
        if last_order_at is None or event.created_at > last_order_at:
            last_order_at = event.created_at

        order_id = extract_order_fields(event).order_id
        if order_id is None:
            continue
        stored = winners.get(order_id)
        if stored is None or supersedes(event, stored):
            winners[order_id] = event

    orders: dict[str, CanonicalOrder] = {}
    for order_id, event in winners.items():
        fields = extract_order_fields(event)
        orders[order_id] = CanonicalOrder(
            order_id=order_id,
            created_at=event.created_at,
            status=fields.status,
            amount_sats=fields.amount_sats,
            event_id=event.id,
        )
    return OrderDigest(
        orders=orders,
        first_order_at=first_order_at,
        last_order_at=last_order_at,
        total_events=total_events,
    )
