"""
Finnhub REST client.
Builds token-authenticated GET requests, runs them off the event loop and
decodes the JSON bodies into pydantic models.
"""
from __future__ import annotations

import asyncio
from typing import Any, Dict, Iterable, List, Optional, Type, TypeVar, Union
from urllib.parse import quote, urlencode

import requests
from pydantic import BaseModel, TypeAdapter, ValidationError

from finnhub_client.config import Config, get_config
from finnhub_client.endpoints import Endpoint, Exchange
from finnhub_client.errors import DecodeError, InvalidArgumentError, TransportError
from finnhub_client.models import Candle, CompanyProfile, EnrichedSymbol, Quote, SymbolLookup
from finnhub_client.utils.logger import get_logger, setup_logger

DEFAULT_BASE_URL = "https://finnhub.io/api/v1"
DEFAULT_TIMEOUT = 5.0

ModelT = TypeVar("ModelT", bound=BaseModel)

_ENRICHED_SYMBOL_LIST = TypeAdapter(List[EnrichedSymbol])


def build_url(
    base_url: str,
    endpoint: Endpoint,
    token: str,
    params: Optional[Dict[str, Any]] = None
) -> str:
    """
    Build the full request URL for an endpoint.

    The token is always the first query parameter. Remaining parameters keep
    their order, None values are dropped and everything is percent-encoded.
    """
    query = [("token", token)]
    for key, value in (params or {}).items():
        if value is None:
            continue
        query.append((key, str(value)))
    return f"{endpoint.url(base_url)}?{urlencode(query, safe='', quote_via=quote)}"


def decode(text: str, model: Union[Type[ModelT], TypeAdapter], endpoint: Endpoint):
    """
    Parse a JSON body into a model class or a TypeAdapter target.

    Raises:
        DecodeError: body is not JSON or does not match the model
    """
    try:
        if isinstance(model, TypeAdapter):
            return model.validate_json(text)
        return model.model_validate_json(text)
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first.get("loc", ())) or "<root>"
        raise DecodeError(
            f"Invalid {endpoint.name} response at {location}: {first['msg']}",
            endpoint.name,
        ) from exc


class FinnhubClient:
    """
    Async client for the Finnhub stock API.

    Each public method is a coroutine that issues one GET request on a worker
    thread and resolves to a decoded model. The client holds no per-call
    state, so one instance can serve concurrent calls.
    """

    def __init__(
        self,
        token: str,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
        base_url: str = DEFAULT_BASE_URL
    ):
        """
        Initialize the client.

        Args:
            token: Finnhub API token
            session: Optional requests session; one is created and owned if omitted
            timeout: Socket timeout in seconds applied to every request
            base_url: API root, e.g. 'https://finnhub.io/api/v1'
        """
        if not token:
            raise InvalidArgumentError("Finnhub API token must not be empty")
        self._token = token
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()
        self.timeout = timeout
        self.base_url = base_url.rstrip("/")
        self.logger = get_logger(__name__)

    @classmethod
    def from_config(
        cls,
        config: Optional[Config] = None,
        session: Optional[requests.Session] = None
    ) -> "FinnhubClient":
        """
        Create a client from configuration, reading the token from the environment.

        Args:
            config: Configuration object; the global one is loaded if omitted
            session: Optional requests session to use
        """
        config = config or get_config()
        setup_logger("finnhub_client", level=config.logging.level, log_format=config.logging.format)
        return cls(
            config.finnhub_token,
            session=session,
            timeout=config.finnhub.timeout_seconds,
            base_url=config.finnhub.base_url,
        )

    def close(self) -> None:
        """Close the HTTP session if this client created it"""
        if self._owns_session:
            self._session.close()

    async def __aenter__(self) -> "FinnhubClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _redact(self, text: str) -> str:
        for secret in {self._token, quote(self._token, safe="")}:
            text = text.replace(secret, "***")
        return text

    def _get(self, endpoint: Endpoint, params: Dict[str, Any]) -> str:
        """Execute a blocking GET request and return the response body."""
        url = build_url(self.base_url, endpoint, self._token, params)
        self.logger.debug("Finnhub %s request: %s", endpoint.name, params)

        try:
            response = self._session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            # The original exception text embeds the URL, token included
            detail = self._redact(str(exc))
            self.logger.warning("Finnhub %s request failed: %s", endpoint.name, detail)
            raise TransportError(
                f"{endpoint.name} request failed: {type(exc).__name__}: {detail}",
                endpoint.name,
            ) from None

        if not 200 <= response.status_code < 300:
            body = self._redact(response.text[:200])
            self.logger.warning(
                "Finnhub %s non-2xx: status=%s body=%s",
                endpoint.name,
                response.status_code,
                body,
            )
            raise TransportError(
                f"{endpoint.name} returned HTTP {response.status_code}: {body}",
                endpoint.name,
                status_code=response.status_code,
            )

        return response.text

    def _get_and_decode(self, endpoint: Endpoint, params: Dict[str, Any], model):
        text = self._get(endpoint, params)
        try:
            return decode(text, model, endpoint)
        except DecodeError as exc:
            self.logger.warning("Finnhub %s decode failed: %s", endpoint.name, exc)
            raise

    async def _fetch(self, endpoint: Endpoint, params: Dict[str, Any], model):
        # GET and JSON parsing both run on the worker thread
        return await asyncio.to_thread(self._get_and_decode, endpoint, params, model)

    async def get_quote(self, symbol: str) -> Quote:
        """Fetch the real-time quote for a symbol."""
        return await self._fetch(Endpoint.QUOTE, {"symbol": symbol}, Quote)

    async def get_candle(
        self,
        symbol: str,
        resolution: str,
        start_epoch: int,
        end_epoch: int
    ) -> Candle:
        """
        Fetch OHLCV candles for a symbol.

        Args:
            symbol: Ticker symbol; sent upper-cased, as the candle endpoint requires
            resolution: Finnhub resolution code ('1', '5', '15', '30', '60', 'D', 'W', 'M')
            start_epoch: Inclusive start, Unix seconds
            end_epoch: Inclusive end, Unix seconds

        Returns:
            Candle with one entry per bar in each column
        """
        params = {
            "symbol": symbol.upper(),
            "resolution": resolution,
            "from": start_epoch,
            "to": end_epoch,
        }
        return await self._fetch(Endpoint.CANDLE, params, Candle)

    async def get_company_profile(self, symbol: str) -> CompanyProfile:
        """Fetch static company metadata for a symbol."""
        return await self._fetch(Endpoint.COMPANY_PROFILE, {"symbol": symbol}, CompanyProfile)

    async def get_symbols(
        self,
        exchange: Union[Exchange, str],
        mic: Optional[str] = None
    ) -> List[EnrichedSymbol]:
        """
        List every symbol traded on a known exchange.

        Args:
            exchange: Exchange member or its name, e.g. 'US' or 'LONDON'
            mic: Optional market identifier code to narrow the listing

        Raises:
            InvalidArgumentError: the exchange name is not recognized (no request is made)
        """
        code = Exchange.lookup(exchange).code
        return await self.list_symbols(code, mic=mic)

    async def list_symbols(self, exchange: str, mic: Optional[str] = None) -> List[EnrichedSymbol]:
        """List symbols for a raw Finnhub exchange code, without translation."""
        symbols = await self._fetch(
            Endpoint.SYMBOL,
            {"exchange": exchange, "mic": mic},
            _ENRICHED_SYMBOL_LIST,
        )
        self.logger.debug("Finnhub listed %s symbols for exchange %s", len(symbols), exchange)
        return symbols

    async def search_symbol(self, query: str) -> SymbolLookup:
        """Search symbols by name, ticker, ISIN or CUSIP."""
        return await self._fetch(Endpoint.SYMBOL_LOOKUP, {"q": query}, SymbolLookup)

    async def search_all_stock(self, exchange: str, symbol: str) -> List[EnrichedSymbol]:
        """
        Find one symbol in a full exchange listing.

        Returns:
            A single-element list with the first exact match, or an empty list
            when nothing matches or the match has a blank FIGI
        """
        stocks = await self.list_symbols(exchange)
        match = next((stock for stock in stocks if stock.symbol == symbol), None)

        if match is None or not (match.figi or "").strip():
            self.logger.debug("No usable listing for %s on %s", symbol, exchange)
            return []
        return [match]

    async def search_all_stock_by_mic(
        self,
        exchange: str,
        mics: Iterable[str],
        symbols: Iterable[str]
    ) -> List[EnrichedSymbol]:
        """
        Filter a full exchange listing by venue and symbol.

        An entry is kept when its MIC is in `mics` and its symbol is in
        `symbols`. The two collections are matched independently, not as
        (mic, symbol) pairs.

        Raises:
            InvalidArgumentError: `mics` or `symbols` is a single string (no request is made)
        """
        for name, values in (("mics", mics), ("symbols", symbols)):
            if isinstance(values, str):
                raise InvalidArgumentError(f"{name} must be a collection of strings, not a string: {values!r}")
        wanted_mics = frozenset(mics)
        wanted_symbols = frozenset(symbols)

        stocks = await self.list_symbols(exchange)
        matches = [stock for stock in stocks if stock.mic in wanted_mics and stock.symbol in wanted_symbols]
        self.logger.debug("Matched %s of %s listings on %s", len(matches), len(stocks), exchange)
        return matches
