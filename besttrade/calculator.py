from __future__ import annotations

import logging
import math
from datetime import date
from typing import List, Optional, Sequence

from besttrade.dates.trading_dates import parse_time
from besttrade.errors import InputSizeMismatch, InvalidPrice, MissingInput
from besttrade.models.trade import TradeResult, TradingDay
from besttrade.search.engine import find_best_trade, resolve_days

log = logging.getLogger("calculator")


def _to_price(value: object, field: str, index: int) -> float:
    # bool is an int subclass; True/False are not prices.
    if value is None or isinstance(value, bool):
        raise InvalidPrice(value, field, index)
    try:
        price = float(value)
    except (TypeError, ValueError):
        raise InvalidPrice(value, field, index)
    if not math.isfinite(price):
        raise InvalidPrice(value, field, index)
    return price


def _build_days(
    low_prices: Sequence[object],
    low_times: Sequence[Optional[str]],
    high_prices: Sequence[object],
    high_times: Sequence[Optional[str]],
) -> List[TradingDay]:
    days: List[TradingDay] = []

    for i in range(len(low_prices)):
        day = TradingDay(
            low_price=_to_price(low_prices[i], "low_prices", i),
            low_time=parse_time(low_times[i], "low_times", i),
            high_price=_to_price(high_prices[i], "high_prices", i),
            high_time=parse_time(high_times[i], "high_times", i),
        )

        # Tolerated, but worth knowing about when the numbers look odd.
        if day.high_price < day.low_price:
            log.warning(
                "day=%d high_price=%s is below low_price=%s", i, day.high_price, day.low_price
            )
        if day.low_price < 0 or day.high_price < 0:
            log.warning(
                "day=%d has a negative price (low=%s, high=%s)", i, day.low_price, day.high_price
            )

        days.append(day)

    return days


def compute(
    low_prices: Optional[Sequence[object]],
    low_times: Optional[Sequence[Optional[str]]],
    high_prices: Optional[Sequence[object]],
    high_times: Optional[Sequence[Optional[str]]],
    calculation_date: Optional[date],
) -> TradeResult:
    """
    Best single buy/sell trade over the last N trading days before calculation_date.

    The four lists are parallel, one entry per trading day, oldest first; the
    last entry is the last Mon-Fri day strictly before calculation_date.
    Times are "HH:mm" (UTC).

    Raises a TradeInputError subclass for missing/mismatched/malformed input.
    "No profitable trade" is not an error: it returns TradeResult.no_trade(...).
    """
    args = {
        "low_prices": low_prices,
        "low_times": low_times,
        "high_prices": high_prices,
        "high_times": high_times,
        "calculation_date": calculation_date,
    }
    for name, value in args.items():
        if value is None:
            raise MissingInput(name)

    sizes = {
        "low_prices": len(low_prices),
        "low_times": len(low_times),
        "high_prices": len(high_prices),
        "high_times": len(high_times),
    }
    if len(set(sizes.values())) != 1:
        raise InputSizeMismatch(sizes)

    n = sizes["low_prices"]
    if n == 0:
        return TradeResult.no_trade(calculation_date)

    days = _build_days(low_prices, low_times, high_prices, high_times)
    resolved = resolve_days(days, calculation_date)
    result = find_best_trade(resolved, calculation_date)

    log.info(
        "compute n=%d calculation_date=%s max_profit=%d buy_day=%d sell_day=%d",
        n,
        calculation_date,
        result.max_profit,
        result.buy_day,
        result.sell_day,
    )
    return result
