from __future__ import annotations

import logging
import math
from datetime import date
from typing import List, Sequence

from besttrade.dates.trading_dates import (
    build_trading_dates,
    find_last_trading_date_before,
    to_instant,
)
from besttrade.models.trade import (
    BestTradeState,
    ResolvedTradingDay,
    TradeResult,
    TradingDay,
)

log = logging.getLogger("trade_search")


def round_half_up(value: float) -> int:
    """2.5 -> 3, -2.5 -> -2 (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def resolve_days(days: Sequence[TradingDay], calculation_date: date) -> List[ResolvedTradingDay]:
    """
    Bind each input day to its trading date and UTC instants.

    The last day maps to the last trading day strictly before calculation_date.
    """
    if not days:
        return []

    last_trading_date = find_last_trading_date_before(calculation_date)
    dates = build_trading_dates(last_trading_date, len(days))

    return [
        ResolvedTradingDay(
            index=i,
            date=d,
            low_price=day.low_price,
            low_time=day.low_time,
            high_price=day.high_price,
            high_time=day.high_time,
            low_ts=to_instant(d, day.low_time),
            high_ts=to_instant(d, day.high_time),
        )
        for i, (day, d) in enumerate(zip(days, dates))
    ]


def _scan_cross_day(resolved: Sequence[ResolvedTradingDay], best: BestTradeState) -> None:
    """Running-minimum pass: best buy on an earlier day vs. every later sell day."""
    min_day = resolved[0]

    for sell in resolved[1:]:
        best.consider(buy=min_day, sell=sell)

        # Only replace on strict improvement so the earliest minimum is kept.
        if sell.low_price < min_day.low_price:
            min_day = sell


def _scan_same_day(resolved: Sequence[ResolvedTradingDay], best: BestTradeState) -> None:
    """Intraday trades, only where the low happened before the high."""
    for day in resolved:
        if not day.same_day_tradable:
            continue
        best.consider(buy=day, sell=day)


def find_best_trade(resolved: Sequence[ResolvedTradingDay], calculation_date: date) -> TradeResult:
    """
    Best single buy/sell over the resolved series.

    Cross-day trades are scanned first, then same-day trades. Every comparison
    is strict, so on equal profit the first candidate found wins.
    Returns TradeResult.no_trade(...) when nothing makes a strictly positive profit.
    """
    best = BestTradeState()

    if resolved:
        _scan_cross_day(resolved, best)
        _scan_same_day(resolved, best)

    if not best.found:
        log.debug("No profitable trade over %d day(s) for %s", len(resolved), calculation_date)
        return TradeResult.no_trade(calculation_date)

    log.debug(
        "Best trade buy_day=%d sell_day=%d profit=%.4f",
        best.buy_day,
        best.sell_day,
        best.profit,
    )

    return TradeResult(
        max_profit=round_half_up(best.profit),
        buy_day=best.buy_day,
        sell_day=best.sell_day,
        buy_price=round_half_up(best.buy_price),
        buy_time=best.buy_ts,
        sell_price=round_half_up(best.sell_price),
        sell_time=best.sell_ts,
        calculation_date=calculation_date,
    )
