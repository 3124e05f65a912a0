"""
Quote model - real-time price snapshot returned by /quote.
"""
from typing import Optional

from pydantic import Field

from finnhub_client.models.base import FinnhubModel


class Quote(FinnhubModel):
    """Quote data model"""
    current_price: Optional[float] = Field(default=None, alias="c")
    change: Optional[float] = Field(default=None, alias="d")
    percent_change: Optional[float] = Field(default=None, alias="dp")
    high: Optional[float] = Field(default=None, alias="h")
    low: Optional[float] = Field(default=None, alias="l")
    open: Optional[float] = Field(default=None, alias="o")
    previous_close: Optional[float] = Field(default=None, alias="pc")
    timestamp: Optional[int] = Field(default=None, alias="t")  # Unix seconds
    volume: Optional[float] = Field(default=None, alias="v")
