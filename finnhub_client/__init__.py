"""
Async client for the Finnhub stock-market REST API.
"""
from finnhub_client.client import FinnhubClient, build_url
from finnhub_client.endpoints import Endpoint, Exchange
from finnhub_client.errors import DecodeError, FinnhubError, InvalidArgumentError, TransportError
from finnhub_client.models import Candle, CompanyProfile, EnrichedSymbol, Quote, Symbol, SymbolLookup

__all__ = [
    "Candle",
    "CompanyProfile",
    "DecodeError",
    "Endpoint",
    "EnrichedSymbol",
    "Exchange",
    "FinnhubClient",
    "FinnhubError",
    "InvalidArgumentError",
    "Quote",
    "Symbol",
    "SymbolLookup",
    "TransportError",
    "build_url",
]
