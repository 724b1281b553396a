from __future__ import annotations

import itertools

from mostroscore.domain.events import ORDER_EVENT_KIND, RawEvent
from mostroscore.metrics.dedup import deduplicate_orders, supersedes


def _order(
    event_id: str,
    created_at: int,
    order_id: str | None,
    status: str = "success",
    amount: str | None = None,
) -> RawEvent:
    tags: list[tuple[str, ...]] = [("z", "order")]
    if order_id is not None:
        tags.append(("d", order_id))
    tags.append(("s", status))
    if amount is not None:
        tags.append(("amt", amount))
    return RawEvent(
        id=event_id,
        kind=ORDER_EVENT_KIND,
        pubkey="aa",
        created_at=created_at,
        tags=tuple(tags),
    )


def test_latest_timestamp_wins_regardless_of_order() -> None:
    events = [
        _order("e2", 200, "o1", status="success", amount="500"),
        _order("e1", 100, "o1", status="pending"),
    ]

    digest = deduplicate_orders(events)

    assert list(digest.orders) == ["o1"]
    order = digest.orders["o1"]
    assert order.created_at == 200
    assert order.status == "success"
    assert order.amount_sats == 500
    assert order.event_id == "e2"


def test_events_without_order_id_only_feed_time_range() -> None:
    events = [
        _order("e1", 300, "o1"),
        _order("e2", 50, None),
        _order("e3", 900, None),
    ]

    digest = deduplicate_orders(events)

    assert list(digest.orders) == ["o1"]
    assert digest.first_order_at == 50
    assert digest.last_order_at == 900
    assert digest.total_events == 3


def test_empty_input_has_no_time_range() -> None:
    digest = deduplicate_orders([])

    assert digest.orders == {}
    assert digest.first_order_at is None
    assert digest.last_order_at is None
    assert digest.total_events == 0


def test_equal_timestamps_pick_the_same_winner_in_any_order() -> None:
    events = [
        _order("bbb", 100, "o1", status="pending"),
        _order("aaa", 100, "o1", status="success", amount="10"),
        _order("ccc", 100, "o1", status="canceled"),
    ]

    winners = {
        deduplicate_orders(permutation).orders["o1"].event_id
        for permutation in itertools.permutations(events)
    }

    assert winners == {"aaa"}


def test_supersedes_prefers_later_then_smaller_id() -> None:
    older = _order("a", 100, "o1")
    newer = _order("z", 101, "o1")

    assert supersedes(newer, older)
    assert not supersedes(older, newer)
    assert supersedes(_order("a", 100, "o1"), _order("b", 100, "o1"))
    assert not supersedes(_order("b", 100, "o1"), _order("a", 100, "o1"))


def test_deduplicating_canonical_orders_again_is_stable() -> None:
    events = [
        _order("e1", 100, "o1", status="pending"),
        _order("e2", 200, "o1", amount="1000"),
        _order("e3", 150, "o2", amount="abc"),
        _order("e4", 150, "o2", status="canceled", amount="5"),
        _order("e5", 400, "o3", amount="-3"),
    ]
    first = deduplicate_orders(events)

    replayed = deduplicate_orders(order.to_event("aa") for order in first.orders.values())

    assert replayed.orders == first.orders
