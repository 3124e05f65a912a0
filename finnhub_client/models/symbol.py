"""
Symbol models - instrument identifiers from /search and /stock/symbol.
"""
from typing import List, Optional

from pydantic import Field

from finnhub_client.models.base import FinnhubModel


class Symbol(FinnhubModel):
    """Fields shared by search results and exchange listings"""
    description: Optional[str] = None
    display_symbol: Optional[str] = Field(default=None, alias="displaySymbol")
    symbol: Optional[str] = None
    type: Optional[str] = None


class EnrichedSymbol(Symbol):
    """Exchange listing entry with venue and identifier details"""
    currency: Optional[str] = None
    figi: Optional[str] = None
    mic: Optional[str] = None
    isin: Optional[str] = None
    share_class_figi: Optional[str] = Field(default=None, alias="shareClassFIGI")
    symbol2: Optional[str] = None


class SymbolLookup(FinnhubModel):
    """Search envelope: match count plus the matches themselves"""
    count: Optional[int] = None
    result: Optional[List[Symbol]] = None
