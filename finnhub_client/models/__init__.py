from finnhub_client.models.candle import Candle
from finnhub_client.models.company_profile import CompanyProfile
from finnhub_client.models.quote import Quote
from finnhub_client.models.symbol import EnrichedSymbol, Symbol, SymbolLookup

__all__ = [
    "Candle",
    "CompanyProfile",
    "EnrichedSymbol",
    "Quote",
    "Symbol",
    "SymbolLookup",
]
