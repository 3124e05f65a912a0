"""
Company profile model - static company metadata returned by /stock/profile2.
"""
from typing import Optional

from pydantic import Field

from finnhub_client.models.base import FinnhubModel


class CompanyProfile(FinnhubModel):
    """Company profile data model"""
    country: Optional[str] = None
    currency: Optional[str] = None
    exchange: Optional[str] = None
    ipo: Optional[str] = None  # 'YYYY-MM-DD'
    market_capitalization: Optional[float] = Field(default=None, alias="marketCapitalization")
    share_outstanding: Optional[float] = Field(default=None, alias="shareOutstanding")
    name: Optional[str] = None
    ticker: Optional[str] = None
    logo: Optional[str] = None
    weburl: Optional[str] = None
    finnhub_industry: Optional[str] = Field(default=None, alias="finnhubIndustry")
    phone: Optional[str] = None
