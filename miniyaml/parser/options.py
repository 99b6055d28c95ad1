"""Parser and document configuration."""

from collections.abc import Callable
from dataclasses import dataclass
import time


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Knobs for synthetic list keys and integer conversion."""

    list_key_prefix: str = "list-"
    clock: Callable[[], float] = time.time
    int_bits: int = 64

    def __post_init__(self) -> None:
        if not self.list_key_prefix:
            raise ValueError("list_key_prefix must not be empty")
        if self.int_bits < 2:
            raise ValueError("int_bits must be at least 2")
