import unittest
from datetime import date, datetime, timezone

from besttrade.formatting.pretty import to_pretty_string
from besttrade.models.trade import TradeResult


class TestPrettyString(unittest.TestCase):
    def test_no_trade(self):
        pretty = to_pretty_string(TradeResult.no_trade(date(2025, 11, 10)))

        expected = "\n".join(
            [
                "No profitable trade was found.",
                "maxProfit = 0",
                "buyDay = -1, sellDay = -1",
                "buyPrice = 0, sellPrice = 0",
                "calculationDate = 2025-11-10",
            ]
        )
        self.assertEqual(pretty, expected)

    def test_profitable_trade(self):
        result = TradeResult(
            max_profit=17,
            buy_day=0,
            sell_day=9,
            buy_price=10,
            buy_time=datetime(2025, 10, 27, 10, 0, tzinfo=timezone.utc),
            sell_price=27,
            sell_time=datetime(2025, 11, 7, 16, 5, tzinfo=timezone.utc),
            calculation_date=date(2025, 11, 10),
        )

        expected = "\n".join(
            [
                "Best buy is Day 0 at 10 → sell Day 9 at 27",
                "maxProfit = 17",
                "buyDay = 0 (Monday),  buyPrice = 10.00 at 2025-10-27T10:00",
                "sellDay = 9 (Friday next week), sellPrice = 27.00 at 2025-11-07T16:05",
                "calculationDate = 2025-11-10",
            ]
        )
        self.assertEqual(to_pretty_string(result), expected)

    def test_to_dict(self):
        result = TradeResult.no_trade(date(2025, 11, 10))
        self.assertEqual(
            result.to_dict(),
            {
                "max_profit": 0,
                "buy_day": -1,
                "sell_day": -1,
                "buy_price": 0,
                "buy_time": None,
                "sell_price": 0,
                "sell_time": None,
                "calculation_date": "2025-11-10",
            },
        )
