"""Event sink that interns parser events into a value store."""

from __future__ import annotations

from enum import StrEnum
import itertools
import logging

from miniyaml.document.scalar import fits_signed, integer_portion
from miniyaml.document.store import ValueStore
from miniyaml.document.values import IntegerValue, ListValue, TextValue
from miniyaml.parser.options import ParserOptions

logger = logging.getLogger(__name__)


class BuilderState(StrEnum):
    AWAITING_KEY = "awaiting_key"
    AWAITING_VALUE = "awaiting_value"
    IN_LIST = "in_list"


class DocumentBuilder:
    """Translates identifier/value/list-item events into store mutations.

    Handlers never raise: any event order the grammar can produce is accepted,
    and a value without a preceding identifier is dropped.
    """

    def __init__(self, store: ValueStore, options: ParserOptions | None = None) -> None:
        self._store = store
        self._options = options or ParserOptions()
        self._current_key: str | None = None
        self._state = BuilderState.AWAITING_KEY
        self._list_counter = itertools.count(1)

    @property
    def current_key(self) -> str | None:
        return self._current_key

    @property
    def state(self) -> BuilderState:
        return self._state

    def reset(self) -> None:
        self._current_key = None
        self._state = BuilderState.AWAITING_KEY

    def on_identifier(self, text: str) -> None:
        logger.debug("identifier %r", text)
        self._current_key = text
        self._state = BuilderState.AWAITING_VALUE

    def on_string(self, text: str) -> None:
        if self._current_key is None:
            logger.warning("dropping string value %r: no key", text)
            return
        logger.debug("%s = %r", self._current_key, text)
        self._store.set(self._current_key, TextValue(text))
        self._state = BuilderState.AWAITING_KEY

    def on_number(self, text: str) -> None:
        if self._current_key is None:
            logger.warning("dropping number value %r: no key", text)
            return

        value = integer_portion(text)
        if value is None or not fits_signed(value, bits=self._options.int_bits):
            logger.debug("number %r is not a %d-bit integer, storing 0", text, self._options.int_bits)
            value = 0

        logger.debug("%s = %d", self._current_key, value)
        self._store.set(self._current_key, IntegerValue(value))
        self._state = BuilderState.AWAITING_KEY

    def on_list_item(self, text: str) -> None:
        items = self._get_or_create_list()
        items.append(text)
        self._state = BuilderState.IN_LIST

    def _get_or_create_list(self) -> ListValue:
        if self._current_key is not None:
            current = self._store.get(self._current_key)
            if isinstance(current, ListValue):
                return current

        key = self._synthetic_list_key()
        created = ListValue()
        self._store.set(key, created)
        self._current_key = key
        logger.debug("created list under %r", key)
        return created

    def _synthetic_list_key(self) -> str:
        key = f"{self._options.list_key_prefix}{int(self._options.clock())}"
        while key in self._store:
            key = f"{self._options.list_key_prefix}{int(self._options.clock())}-{next(self._list_counter)}"
        return key
