from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Dict, Optional


@dataclass(frozen=True)
class TradingDay:
    """
    TradingDay = one day of parsed input, not yet bound to a calendar date.

    low_price / low_time: intraday low and when it happened
    high_price / high_time: intraday high and when it happened
    """
    low_price: float
    low_time: time
    high_price: float
    high_time: time


@dataclass(frozen=True)
class ResolvedTradingDay:
    """
    A TradingDay bound to its concrete (Mon-Fri) date.

    index: position in the input series (0 = oldest)
    low_ts / high_ts: UTC instants of the low and the high
    """
    index: int
    date: date
    low_price: float
    low_time: time
    high_price: float
    high_time: time
    low_ts: datetime
    high_ts: datetime

    @property
    def same_day_tradable(self) -> bool:
        """Buying the low and selling the high on this day is only allowed if the low came first."""
        return self.low_time < self.high_time


@dataclass
class BestTradeState:
    """
    Running best trade during one search call.

    profit / buy_price / sell_price are kept unrounded until the search ends.
    """
    profit: float = 0.0
    buy_day: int = -1
    sell_day: int = -1
    buy_price: float = 0.0
    sell_price: float = 0.0
    buy_ts: Optional[datetime] = None
    sell_ts: Optional[datetime] = None

    @property
    def found(self) -> bool:
        return self.buy_day >= 0 and self.profit > 0.0

    def consider(self, buy: ResolvedTradingDay, sell: ResolvedTradingDay) -> bool:
        """
        Adopt (buy at buy.low, sell at sell.high) if it strictly beats the current best.
        Returns True when the candidate was adopted.
        """
        profit = sell.high_price - buy.low_price
        if not profit > self.profit:
            return False

        self.profit = profit
        self.buy_day = buy.index
        self.sell_day = sell.index
        self.buy_price = buy.low_price
        self.sell_price = sell.high_price
        self.buy_ts = buy.low_ts
        self.sell_ts = sell.high_ts
        return True


@dataclass(frozen=True)
class TradeResult:
    """
    Outcome of a best-trade calculation.

    Prices and profit are rounded to whole currency units.
    No trade: buy_day = sell_day = -1, zero prices, no times.
    calculation_date is always the date the caller asked about.
    """
    max_profit: int
    buy_day: int
    sell_day: int
    buy_price: int
    buy_time: Optional[datetime]
    sell_price: int
    sell_time: Optional[datetime]
    calculation_date: date

    @classmethod
    def no_trade(cls, calculation_date: date) -> "TradeResult":
        return cls(
            max_profit=0,
            buy_day=-1,
            sell_day=-1,
            buy_price=0,
            buy_time=None,
            sell_price=0,
            sell_time=None,
            calculation_date=calculation_date,
        )

    @property
    def is_trade(self) -> bool:
        return self.max_profit > 0 and self.buy_day >= 0 and self.sell_day >= 0

    def to_dict(self) -> Dict[str, object]:
        return {
            "max_profit": self.max_profit,
            "buy_day": self.buy_day,
            "sell_day": self.sell_day,
            "buy_price": self.buy_price,
            "buy_time": self.buy_time.isoformat() if self.buy_time else None,
            "sell_price": self.sell_price,
            "sell_time": self.sell_time.isoformat() if self.sell_time else None,
            "calculation_date": self.calculation_date.isoformat(),
        }
