from __future__ import annotations

import pytest

from mostroscore.domain.events import ANCHOR_EVENT_KIND, ORDER_EVENT_KIND, RawEvent
from mostroscore.errors import ConfigError
from mostroscore.ingest.filters import (
    anchor_filter,
    classify_event,
    hex_to_npub,
    npub_to_hex,
    order_filter,
    parse_pubkey,
)

PUBKEY = "ab" * 32
OTHER = "cd" * 32
# Example pair from the npub encoding description (NIP-19).
NPUB = "npub180cvv07tjdrrgpa0j7j7tmnyl2yr6yr7l8j4s3evf6u64th6gkwsyjh6w6"
NPUB_HEX = "3bf0c63fcb93463407af97a5e5ee64fa883d107ef9e558472c4eb9aaaefa459d"


def _event(kind: int, pubkey: str, *tags: tuple[str, ...]) -> RawEvent:
    return RawEvent(id="e", kind=kind, pubkey=pubkey, created_at=1, tags=tags)


def test_parse_pubkey_normalizes_hex() -> None:
    assert parse_pubkey(f"  {'AB' * 32}\n") == PUBKEY


@pytest.mark.parametrize("value", ["", "xyz", "ab" * 31, "ab" * 33, "gg" * 32])
def test_parse_pubkey_rejects_invalid_values(value: str) -> None:
    with pytest.raises(ConfigError, match="Invalid pubkey"):
        parse_pubkey(value)


def test_parse_pubkey_decodes_npub() -> None:
    assert parse_pubkey(f" {NPUB} ") == NPUB_HEX


def test_hex_to_npub_encodes_known_pair() -> None:
    assert hex_to_npub(NPUB_HEX) == NPUB
    assert npub_to_hex(hex_to_npub(PUBKEY)) == PUBKEY


@pytest.mark.parametrize(
    "value",
    [
        NPUB[:-1] + ("q" if NPUB[-1] != "q" else "p"),
        "npub1qqqqqq",
        hex_to_npub(PUBKEY).replace("npub", "nsec", 1),
    ],
)
def test_npub_to_hex_rejects_corrupt_keys(value: str) -> None:
    with pytest.raises(ConfigError, match="Invalid"):
        npub_to_hex(value)


def test_anchor_filter_requires_kind_author_and_both_tags() -> None:
    matching = _event(ANCHOR_EVENT_KIND, PUBKEY, ("z", "dev-fee-payment"), ("y", "mostro"))

    assert anchor_filter(PUBKEY).matches(matching)
    assert not anchor_filter(PUBKEY).matches(
        _event(ANCHOR_EVENT_KIND, PUBKEY, ("z", "dev-fee-payment"))
    )
    assert not anchor_filter(PUBKEY).matches(
        _event(ANCHOR_EVENT_KIND, OTHER, ("z", "dev-fee-payment"), ("y", "mostro"))
    )
    assert not anchor_filter(PUBKEY).matches(
        _event(ORDER_EVENT_KIND, PUBKEY, ("z", "dev-fee-payment"), ("y", "mostro"))
    )


def test_tag_requirement_matches_any_tag_with_that_name() -> None:
    event = _event(ORDER_EVENT_KIND, PUBKEY, ("z", "info"), ("z", "order"))

    assert order_filter(PUBKEY).matches(event)


def test_classify_event() -> None:
    assert (
        classify_event(
            _event(ANCHOR_EVENT_KIND, PUBKEY, ("z", "dev-fee-payment"), ("y", "mostro")), PUBKEY
        )
        == "anchor"
    )
    assert classify_event(_event(ORDER_EVENT_KIND, PUBKEY, ("z", "order")), PUBKEY) == "order"
    assert classify_event(_event(ORDER_EVENT_KIND, PUBKEY, ("z", "rating")), PUBKEY) is None
    assert classify_event(_event(1, PUBKEY, ("z", "order")), PUBKEY) is None
