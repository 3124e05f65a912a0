"""Tests for endpoint paths and exchange translation."""

import pytest
from hypothesis import given, strategies as st

from finnhub_client.endpoints import Endpoint, Exchange
from finnhub_client.errors import InvalidArgumentError


class TestEndpoint:
    """Endpoint URL resolution."""

    def test_paths_match_finnhub_routes(self):
        base = "https://finnhub.io/api/v1"
        assert Endpoint.QUOTE.url(base) == "https://finnhub.io/api/v1/quote"
        assert Endpoint.CANDLE.url(base) == "https://finnhub.io/api/v1/stock/candle"
        assert Endpoint.COMPANY_PROFILE.url(base) == "https://finnhub.io/api/v1/stock/profile2"
        assert Endpoint.SYMBOL.url(base) == "https://finnhub.io/api/v1/stock/symbol"
        assert Endpoint.SYMBOL_LOOKUP.url(base) == "https://finnhub.io/api/v1/search"

    def test_trailing_slash_on_base_is_ignored(self):
        assert Endpoint.QUOTE.url("https://example.test/api/") == "https://example.test/api/quote"


class TestExchangeLookup:
    """Exchange name → Finnhub code translation."""

    def test_known_names(self):
        assert Exchange.lookup("US").code == "US"
        assert Exchange.lookup("LONDON").code == "L"
        assert Exchange.lookup("TORONTO").code == "TO"

    def test_lookup_is_case_insensitive(self):
        assert Exchange.lookup("london") is Exchange.LONDON
        assert Exchange.lookup(" london ") is Exchange.LONDON
        assert Exchange.lookup(" Tokyo ") is Exchange.TOKYO

    def test_member_passes_through(self):
        assert Exchange.lookup(Exchange.HONG_KONG) is Exchange.HONG_KONG

    @given(st.sampled_from(list(Exchange)))
    def test_every_member_resolves_by_name(self, exchange):
        assert Exchange.lookup(exchange.name) is exchange

    @pytest.mark.parametrize("name", ["NASDAQ_GLOBAL", "", "L", None, 42])
    def test_unknown_exchange_raises(self, name):
        """Codes are not names: 'L' is the value of LONDON, not a key."""
        with pytest.raises(InvalidArgumentError, match="Unknown exchange"):
            Exchange.lookup(name)

    def test_invalid_argument_is_a_value_error(self):
        with pytest.raises(ValueError):
            Exchange.lookup("MARS")
