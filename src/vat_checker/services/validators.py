"""Parsing and normalisation of VAT check submissions."""
from __future__ import annotations

import json
import math
import re
from dataclasses import dataclass
from typing import Any, Optional

from ..schemas import VatCheckRequest

INVALID_JSON = "Invalid JSON in request body"
MISSING_FIELDS = "Missing countryCode or vatNumber"
INVALID_COUNTRY_CODE = "Invalid country code format (must be 2 letters)"
INVALID_VAT_NUMBER = "Invalid VAT number format"

_COUNTRY_CODE_RE = re.compile(r"[A-Z]{2}")
_VAT_NUMBER_RE = re.compile(r"[A-Z0-9]{5,}")
_NON_ALNUM_RE = re.compile(r"[^A-Z0-9]")


class VatInputError(ValueError):
    """Client submitted a body that cannot be looked up."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class ParsedBody:
    payload: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_json_body(raw: bytes) -> ParsedBody:
    try:
        return ParsedBody(payload=json.loads(raw))
    except (UnicodeDecodeError, ValueError, RecursionError):
        return ParsedBody(error=INVALID_JSON)


def _is_present(value: Any) -> bool:
    # Containers count as present and fail the format checks instead.
    if isinstance(value, (list, dict)):
        return True
    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)


def _as_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, dict)):
        return ""
    return str(value)


def normalize_country_code(value: Any) -> str:
    return _as_text(value).upper().strip()


def normalize_vat_number(value: Any) -> str:
    return _NON_ALNUM_RE.sub("", _as_text(value).upper().strip())


def build_check_request(payload: Any) -> VatCheckRequest:
    """Validate a decoded body and return the normalised lookup.

    Steps run in order and the first failure raises :class:`VatInputError`.
    """
    fields = payload if isinstance(payload, dict) else {}
    country_code = fields.get("countryCode")
    vat_number = fields.get("vatNumber")
    if not _is_present(country_code) or not _is_present(vat_number):
        raise VatInputError(MISSING_FIELDS)

    country_code = normalize_country_code(country_code)
    vat_number = normalize_vat_number(vat_number)

    if not _COUNTRY_CODE_RE.fullmatch(country_code):
        raise VatInputError(INVALID_COUNTRY_CODE)
    if not _VAT_NUMBER_RE.fullmatch(vat_number):
        raise VatInputError(INVALID_VAT_NUMBER)

    return VatCheckRequest(country_code=country_code, vat_number=vat_number)
