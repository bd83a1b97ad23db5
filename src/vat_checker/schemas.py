"""Pydantic schemas used by the API."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class VatCheckRequest(BaseModel):
    """Normalised lookup forwarded to VIES."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    country_code: str = Field(alias="countryCode", pattern=r"^[A-Z]{2}$")
    vat_number: str = Field(alias="vatNumber", pattern=r"^[A-Z0-9]{5,}$")

    def to_vies_payload(self) -> dict[str, str]:
        return self.model_dump(by_alias=True)


class ErrorResponse(BaseModel):
    error: str
    status: Optional[int] = None

    def to_body(self) -> dict[str, object]:
        return self.model_dump(exclude_none=True)
