from __future__ import annotations

from besttrade.dates.trading_dates import format_day_label, format_instant
from besttrade.models.trade import TradeResult


def to_pretty_string(result: TradeResult) -> str:
    """
    Multi-line, human-readable summary of a TradeResult.

    Day labels assume day 0 is a Monday (0 -> "Monday", 9 -> "Friday next week").
    """
    calc_date = result.calculation_date.isoformat() if result.calculation_date else "n/a"

    if not result.is_trade:
        return "\n".join(
            [
                "No profitable trade was found.",
                "maxProfit = 0",
                "buyDay = -1, sellDay = -1",
                "buyPrice = 0, sellPrice = 0",
                f"calculationDate = {calc_date}",
            ]
        )

    return "\n".join(
        [
            f"Best buy is Day {result.buy_day} at {result.buy_price} "
            f"→ sell Day {result.sell_day} at {result.sell_price}",
            f"maxProfit = {result.max_profit}",
            f"buyDay = {result.buy_day} ({format_day_label(result.buy_day)}),  "
            f"buyPrice = {float(result.buy_price):.2f} at {format_instant(result.buy_time)}",
            f"sellDay = {result.sell_day} ({format_day_label(result.sell_day)}), "
            f"sellPrice = {float(result.sell_price):.2f} at {format_instant(result.sell_time)}",
            f"calculationDate = {calc_date}",
        ]
    )
