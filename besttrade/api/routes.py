from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from besttrade.calculator import compute
from besttrade.config import get_settings
from besttrade.errors import TradeInputError
from besttrade.formatting.pretty import to_pretty_string

router = APIRouter()
log = logging.getLogger("api")


class BestTradeRequest(BaseModel):
    """
    One entry per trading day in each list, oldest first.

    low_times / high_times: "HH:mm" (UTC)
    calculation_date: the last entry is the last trading day strictly before this date
    """

    low_prices: List[float]
    low_times: List[Optional[str]]
    high_prices: List[float]
    high_times: List[Optional[str]]
    calculation_date: date


@router.post("/best-trade")
def best_trade(req: BestTradeRequest):
    """
    Best single buy/sell trade for the submitted series.
    A "no trade" outcome is a normal 200 response with buy_day = sell_day = -1.
    """
    settings = get_settings()

    n = len(req.low_prices)
    if n > settings.max_days:
        raise HTTPException(
            status_code=422,
            detail=f"Too many trading days: {n} > MAX_DAYS={settings.max_days}",
        )

    try:
        result = compute(
            req.low_prices,
            req.low_times,
            req.high_prices,
            req.high_times,
            req.calculation_date,
        )
    except TradeInputError as e:
        log.info("Rejected best-trade request: %s", e)
        raise HTTPException(status_code=422, detail=str(e))

    payload = result.to_dict()
    payload["pretty"] = to_pretty_string(result)
    return payload
