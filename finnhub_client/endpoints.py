"""
Fixed Finnhub endpoints and the exchange-code table.
"""
from enum import Enum
from typing import Union

from finnhub_client.errors import InvalidArgumentError


class Endpoint(Enum):
    """REST endpoints, relative to the API base URL"""
    QUOTE = "/quote"
    CANDLE = "/stock/candle"
    COMPANY_PROFILE = "/stock/profile2"
    SYMBOL = "/stock/symbol"
    SYMBOL_LOOKUP = "/search"

    def url(self, base_url: str) -> str:
        return base_url.rstrip("/") + self.value


class Exchange(Enum):
    """
    Exchanges accepted by /stock/symbol, keyed by a readable name.

    The value is the code Finnhub expects in the `exchange` query parameter.
    """
    US = "US"
    AMSTERDAM = "AS"
    ATHENS = "AT"
    AUSTRALIA = "AX"
    BUENOS_AIRES = "BA"
    BOGOTA = "BC"
    BUDAPEST = "BD"
    BERLIN = "BE"
    BANGKOK = "BK"
    BOMBAY = "BO"
    BRUSSELS = "BR"
    CANADIAN_SECURITIES = "CN"
    COPENHAGEN = "CO"
    CARACAS = "CR"
    DUBAI = "DB"
    XETRA = "DE"
    DUSSELDORF = "DU"
    FRANKFURT = "F"
    HELSINKI = "HE"
    HONG_KONG = "HK"
    HAMBURG = "HM"
    ICELAND = "IC"
    IRELAND = "IR"
    ISTANBUL = "IS"
    JAKARTA = "JK"
    JOHANNESBURG = "JO"
    KUALA_LUMPUR = "KL"
    KOSDAQ = "KQ"
    KOREA = "KS"
    LONDON = "L"
    LISBON = "LS"
    MADRID = "MC"
    MOSCOW = "ME"
    MILAN = "MI"
    MUNICH = "MU"
    MEXICO = "MX"
    NEO = "NE"
    NATIONAL_INDIA = "NS"
    NEW_ZEALAND = "NZ"
    OSLO = "OL"
    PARIS = "PA"
    PHILIPPINES = "PM"
    PRAGUE = "PR"
    QATAR = "QA"
    RIGA = "RG"
    SAO_PAULO = "SA"
    STUTTGART = "SG"
    SINGAPORE = "SI"
    SANTIAGO = "SN"
    SAUDI = "SR"
    SHANGHAI = "SS"
    STOCKHOLM = "ST"
    SWISS = "SW"
    SHENZHEN = "SZ"
    TOKYO = "T"
    TEL_AVIV = "TA"
    TALLINN = "TL"
    TORONTO = "TO"
    TAIWAN = "TW"
    TAIWAN_OTC = "TWO"
    TSX_VENTURE = "V"
    VIENNA = "VI"
    VIETNAM = "VN"
    VILNIUS = "VS"
    WARSAW = "WA"

    @property
    def code(self) -> str:
        return self.value

    @classmethod
    def lookup(cls, name: Union["Exchange", str]) -> "Exchange":
        """
        Resolve an exchange by member or member name.

        Names are matched case-insensitively after stripping surrounding
        whitespace, so "LONDON", "london" and " london " all resolve to
        Exchange.LONDON. Finnhub codes such as "L" are not names.

        Raises:
            InvalidArgumentError: if the name is not a known exchange
        """
        if isinstance(name, cls):
            return name
        if isinstance(name, str):
            member = cls.__members__.get(name.strip().upper())
            if member is not None:
                return member
        raise InvalidArgumentError(f"Unknown exchange: {name!r}")
