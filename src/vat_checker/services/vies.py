"""VIES VAT number validation service."""
from __future__ import annotations

import logging
from typing import Any

import httpx

from ..config import get_settings
from ..schemas import VatCheckRequest

logger = logging.getLogger(__name__)


class ViesUnavailableError(Exception):
    """VIES answered with a non-success status."""

    def __init__(self, status_code: int, reason: str) -> None:
        super().__init__(f"VIES responded with {status_code} {reason}".strip())
        self.status_code = status_code
        self.reason = reason


async def check_vat_number(request: VatCheckRequest) -> Any:
    """Submit a lookup to VIES and return its decoded JSON body untouched."""
    settings = get_settings()
    headers = {"Content-Type": "application/json"}
    if settings.user_agent:
        headers["User-Agent"] = settings.user_agent

    async with httpx.AsyncClient(timeout=settings.vies_timeout, follow_redirects=True) as client:
        response = await client.post(
            settings.vies_endpoint,
            json=request.to_vies_payload(),
            headers=headers,
        )

    if not response.is_success:
        logger.error("VIES API error: %s %s", response.status_code, response.reason_phrase)
        raise ViesUnavailableError(response.status_code, response.reason_phrase)

    return response.json()
