"""
Candle model - OHLCV series returned by /stock/candle.
"""
from typing import List, Optional

from pydantic import Field, model_validator

from finnhub_client.models.base import FinnhubModel

STATUS_OK = "ok"


class Candle(FinnhubModel):
    """
    Candle series for one symbol over [from, to] at a single resolution.

    Finnhub returns the bars column-wise: index i of every list belongs to
    the same bar. A "no_data" status comes back without any of the lists.
    """
    closes: Optional[List[float]] = Field(default=None, alias="c")
    highs: Optional[List[float]] = Field(default=None, alias="h")
    lows: Optional[List[float]] = Field(default=None, alias="l")
    opens: Optional[List[float]] = Field(default=None, alias="o")
    volumes: Optional[List[float]] = Field(default=None, alias="v")
    timestamps: Optional[List[int]] = Field(default=None, alias="t")
    status: Optional[str] = Field(default=None, alias="s")

    @model_validator(mode="after")
    def check_column_lengths(self) -> "Candle":
        lengths = {
            len(column)
            for column in (self.closes, self.highs, self.lows, self.opens, self.volumes, self.timestamps)
            if column is not None
        }
        if len(lengths) > 1:
            raise ValueError(f"candle columns have unequal lengths: {sorted(lengths)}")
        return self

    @property
    def has_data(self) -> bool:
        return self.status == STATUS_OK

    def __len__(self) -> int:
        return len(self.timestamps or [])
