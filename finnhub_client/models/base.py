"""
Shared base for Finnhub response models.
"""
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class FinnhubModel(BaseModel):
    """
    Immutable record decoded from a Finnhub JSON response.

    Attributes use snake_case names with aliases set to the upstream JSON keys.
    Unknown keys are ignored and missing keys stay None.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    def to_dict(self) -> Dict[str, Any]:
        """Dump with upstream key names, omitting absent fields."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)
