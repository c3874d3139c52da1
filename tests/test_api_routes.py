import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient

from besttrade.config import Settings
from besttrade.main import app

PAYLOAD = {
    "low_prices": [10.0, 12.0, 11.0, 13.0, 15.0, 16.0, 18.0, 19.0, 21.0, 22.0],
    "low_times": ["10:00", "09:45", "11:10", "09:50", "10:15", "09:55", "10:05", "09:40", "10:00", "09:35"],
    "high_prices": [14.0, 15.0, 16.0, 18.0, 20.0, 21.0, 23.0, 24.0, 26.0, 27.0],
    "high_times": ["15:00", "16:00", "14:30", "15:40", "16:10", "15:20", "16:00", "15:10", "15:25", "16:05"],
    "calculation_date": "2025-11-10",
}


class TestBestTradeRoute(unittest.TestCase):
    def setUp(self):
        self.client = TestClient(app)

    def test_health(self):
        resp = self.client.get("/health")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["status"], "ok")

    def test_profitable_trade(self):
        resp = self.client.post("/best-trade", json=PAYLOAD)
        self.assertEqual(resp.status_code, 200)

        body = resp.json()
        self.assertEqual(body["max_profit"], 17)
        self.assertEqual(body["buy_day"], 0)
        self.assertEqual(body["sell_day"], 9)
        self.assertEqual(body["buy_time"], "2025-10-27T10:00:00+00:00")
        self.assertEqual(body["sell_time"], "2025-11-07T16:05:00+00:00")
        self.assertEqual(body["calculation_date"], "2025-11-10")
        self.assertTrue(body["pretty"].startswith("Best buy is Day 0 at 10"))

    def test_no_trade_is_not_an_error(self):
        payload = {
            "low_prices": [],
            "low_times": [],
            "high_prices": [],
            "high_times": [],
            "calculation_date": "2025-11-10",
        }
        resp = self.client.post("/best-trade", json=payload)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["buy_day"], -1)
        self.assertIsNone(resp.json()["buy_time"])

    def test_bad_time_is_rejected(self):
        payload = dict(PAYLOAD, low_times=["9:30"] + PAYLOAD["low_times"][1:])
        resp = self.client.post("/best-trade", json=payload)

        self.assertEqual(resp.status_code, 422)
        self.assertIn("low_times[0]", resp.json()["detail"])

    def test_size_mismatch_is_rejected(self):
        payload = dict(PAYLOAD, high_times=PAYLOAD["high_times"][:-1])
        resp = self.client.post("/best-trade", json=payload)

        self.assertEqual(resp.status_code, 422)
        self.assertIn("same size", resp.json()["detail"])

    def test_too_many_days(self):
        small = Settings(app_env="test", log_level="INFO", max_days=5)
        with patch("besttrade.api.routes.get_settings", return_value=small):
            resp = self.client.post("/best-trade", json=PAYLOAD)

        self.assertEqual(resp.status_code, 422)
        self.assertIn("MAX_DAYS", resp.json()["detail"])
