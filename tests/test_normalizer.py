from __future__ import annotations

from mostroscore.domain.events import ORDER_EVENT_KIND, RawEvent
from mostroscore.metrics.normalizer import extract_order_fields, parse_amount, tag_value


def _event(*tags: tuple[str, ...]) -> RawEvent:
    return RawEvent(id="e1", kind=ORDER_EVENT_KIND, pubkey="aa", created_at=100, tags=tags)


def test_tag_value_returns_first_matching_tag() -> None:
    event = _event(("z", "order"), ("d", "first"), ("d", "second"))

    assert tag_value(event, "d") == "first"
    assert tag_value(event, "z") == "order"


def test_tag_value_is_absent_for_missing_short_or_empty_tags() -> None:
    assert tag_value(_event(), "d") is None
    assert tag_value(_event(("s", "success")), "d") is None
    assert tag_value(_event(("d",)), "d") is None
    assert tag_value(_event((), ("d", "x")), "d") == "x"


def test_short_first_match_shadows_later_tags() -> None:
    assert tag_value(_event(("d",), ("d", "later")), "d") is None


def test_parse_amount_accepts_positive_decimal_integers() -> None:
    assert parse_amount("15000") == 15000
    assert parse_amount(" 42 ") == 42
    assert parse_amount("+7") == 7


def test_parse_amount_rejects_malformed_and_non_positive_values() -> None:
    for value in (None, "", "abc", "12.5", "1e3", "1_000", "0", "-5", "١٢"):
        assert parse_amount(value) is None


def test_parse_amount_rejects_digit_strings_too_long_to_convert() -> None:
    assert parse_amount("9" * 5000) is None
    assert parse_amount("9" * 19) == 9_999_999_999_999_999_999


def test_extract_order_fields_treats_empty_order_id_as_absent() -> None:
    fields = extract_order_fields(_event(("d", ""), ("s", "success"), ("amt", "oops")))

    assert fields.order_id is None
    assert fields.status == "success"
    assert fields.amount_sats is None


def test_extract_order_fields_reads_all_tags() -> None:
    fields = extract_order_fields(_event(("d", "o1"), ("s", "pending"), ("amt", "900")))

    assert fields.order_id == "o1"
    assert fields.status == "pending"
    assert fields.amount_sats == 900
