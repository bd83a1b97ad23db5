"""VAT lookup endpoint relaying submissions to VIES."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse

from ..schemas import ErrorResponse
from ..services.validators import VatInputError, build_check_request, parse_json_body
from ..services.vies import ViesUnavailableError, check_vat_number

logger = logging.getLogger(__name__)

router = APIRouter(tags=["vat"])

ALLOW_ORIGIN = {"Access-Control-Allow-Origin": "*"}
PREFLIGHT_HEADERS = {
    **ALLOW_ORIGIN,
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

SERVICE_UNAVAILABLE = "VIES service temporarily unavailable. Please try again later."
INTERNAL_ERROR = "Internal server error. Please contact support."


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(
        ErrorResponse(error=message, status=status_code).to_body(),
        status_code=status_code,
        headers=ALLOW_ORIGIN,
    )


@router.api_route(
    "/check-vat",
    methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
)
async def check_vat(request: Request) -> Response:
    if request.method == "OPTIONS":
        return Response(status_code=204, headers=PREFLIGHT_HEADERS)
    if request.method != "POST":
        return JSONResponse(
            ErrorResponse(error="Method not allowed").to_body(),
            status_code=405,
            headers=ALLOW_ORIGIN,
        )

    try:
        parsed = parse_json_body(await request.body())
        if not parsed.ok:
            return _error(parsed.error, 400)

        try:
            lookup = build_check_request(parsed.payload)
        except VatInputError as exc:
            logger.info("Rejected VAT check: %s", exc.message)
            return _error(exc.message, 400)

        try:
            result = await check_vat_number(lookup)
        except ViesUnavailableError:
            return _error(SERVICE_UNAVAILABLE, 503)

        return JSONResponse(
            result,
            status_code=200,
            headers={**ALLOW_ORIGIN, "Cache-Control": "no-cache"},
        )
    except Exception:
        logger.exception("Unexpected error while checking VAT number")
        return _error(INTERNAL_ERROR, 500)
