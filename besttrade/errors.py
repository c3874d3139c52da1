from __future__ import annotations

from typing import Optional


class TradeInputError(ValueError):
    """Base class for inputs rejected before the trade search runs."""


class MissingInput(TradeInputError):
    def __init__(self, field: str):
        self.field = field
        super().__init__(f"{field} must not be None")


class InputSizeMismatch(TradeInputError):
    """
    The four parallel input lists do not have the same length.

    sizes: field name -> length, in argument order
    """

    def __init__(self, sizes: dict[str, int]):
        self.sizes = dict(sizes)
        desc = ", ".join(f"{k}={v}" for k, v in self.sizes.items())
        super().__init__(f"All input lists must have the same size ({desc})")


class InvalidTimeFormat(TradeInputError):
    """A time-of-day string is not a valid zero-padded 24h HH:mm value."""

    def __init__(self, value: object, field: str = "time", index: Optional[int] = None):
        self.value = value
        self.field = field
        self.index = index
        where = field if index is None else f"{field}[{index}]"
        super().__init__(f"{where} has invalid time value: {value!r} (expected HH:mm)")


class InvalidPrice(TradeInputError):
    def __init__(self, value: object, field: str, index: int):
        self.value = value
        self.field = field
        self.index = index
        super().__init__(f"{field}[{index}] has invalid price value: {value!r}")
