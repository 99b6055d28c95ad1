import logging

import pytest

from miniyaml.document import (
    BuilderState,
    DocumentBuilder,
    IntegerValue,
    ListValue,
    TextValue,
    ValueStore,
)
from miniyaml.parser import ParserOptions


def _builder(**options) -> tuple[DocumentBuilder, ValueStore]:
    store = ValueStore()
    options.setdefault("clock", lambda: 1_700_000_000.9)
    return DocumentBuilder(store, ParserOptions(**options)), store


def test_identifier_then_string_stores_text() -> None:
    builder, store = _builder()

    builder.on_identifier("foo")
    assert builder.state == BuilderState.AWAITING_VALUE

    builder.on_string("bar")
    assert builder.state == BuilderState.AWAITING_KEY
    assert store.get("foo") == TextValue("bar")


def test_rekeying_replaces_previous_value() -> None:
    builder, store = _builder()

    builder.on_identifier("foo")
    builder.on_string("bar")
    builder.on_identifier("foo")
    builder.on_number("7")

    assert store.get("foo") == IntegerValue(7)
    assert len(store) == 1


@pytest.mark.parametrize(
    ("literal", "expected"),
    [
        ("5", 5),
        ("+12", 12),
        ("-4", -4),
        ("3.9", 3),
        ("-3.9", -3),
        ("1e3", 1),
        (".5", 0),
        ("9223372036854775807", 9223372036854775807),
        ("-9223372036854775808", -9223372036854775808),
        ("9223372036854775808", 0),
    ],
)
def test_number_values_truncate_to_integer(literal: str, expected: int) -> None:
    builder, store = _builder()

    builder.on_identifier("n")
    builder.on_number(literal)

    assert store.get("n") == IntegerValue(expected)


def test_int_bits_option_narrows_range() -> None:
    builder, store = _builder(int_bits=8)

    builder.on_identifier("small")
    builder.on_number("127")
    builder.on_identifier("big")
    builder.on_number("200")

    assert store.get("small") == IntegerValue(127)
    assert store.get("big") == IntegerValue(0)


def test_value_without_key_is_dropped(caplog: pytest.LogCaptureFixture) -> None:
    builder, store = _builder()

    with caplog.at_level(logging.WARNING, logger="miniyaml.document.builder"):
        builder.on_string("orphan")
        builder.on_number("1")

    assert len(store) == 0
    assert builder.state == BuilderState.AWAITING_KEY
    assert "no key" in caplog.text


def test_list_item_creates_synthetic_list() -> None:
    builder, store = _builder()

    builder.on_list_item("first")
    builder.on_list_item("second")

    assert builder.state == BuilderState.IN_LIST
    assert builder.current_key == "list-1700000000"
    assert store.get("list-1700000000") == ListValue(["first", "second"])


def test_list_after_property_does_not_touch_property() -> None:
    builder, store = _builder()

    builder.on_identifier("name")
    builder.on_string("box")
    builder.on_list_item("a")

    assert store.get("name") == TextValue("box")
    assert store.get("list-1700000000") == ListValue(["a"])


def test_second_list_gets_distinct_key() -> None:
    builder, store = _builder()

    builder.on_list_item("a")
    builder.on_identifier("k")
    builder.on_string("v")
    assert builder.state == BuilderState.AWAITING_KEY
    builder.on_list_item("b")

    assert list(store) == ["list-1700000000", "k", "list-1700000000-1"]
    assert store.get("list-1700000000") == ListValue(["a"])
    assert store.get("list-1700000000-1") == ListValue(["b"])


def test_identifier_naming_existing_list_appends_to_it() -> None:
    builder, store = _builder()

    builder.on_list_item("a")
    builder.on_identifier("list-1700000000")
    builder.on_list_item("b")

    assert store.get("list-1700000000") == ListValue(["a", "b"])


def test_custom_list_key_prefix() -> None:
    builder, store = _builder(list_key_prefix="items_")

    builder.on_list_item("x")

    assert "items_1700000000" in store


def test_reset_clears_cursor() -> None:
    builder, _ = _builder()

    builder.on_identifier("foo")
    builder.reset()

    assert builder.current_key is None
    assert builder.state == BuilderState.AWAITING_KEY


@pytest.mark.parametrize(("kwargs", "message"), [({"list_key_prefix": ""}, "prefix"), ({"int_bits": 1}, "int_bits")])
def test_invalid_options_are_rejected(kwargs: dict, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        ParserOptions(**kwargs)
