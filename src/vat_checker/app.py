"""FastAPI application wiring for the VAT checker."""
from __future__ import annotations

import logging
import sys

from fastapi import FastAPI, Request, Response
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import get_version
from .config import get_settings
from .routers import vat
from .schemas import ErrorResponse

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    stream=sys.stdout,
)

fastapi_kwargs: dict[str, str | None] = {}
if not settings.expose_docs:
    fastapi_kwargs.update({"docs_url": None, "redoc_url": None, "openapi_url": None})

app = FastAPI(
    title="VAT Checker",
    description="Validates EU VAT numbers against the VIES service.",
    version=get_version(),
    **fastapi_kwargs,
)

app.add_middleware(TrustedHostMiddleware, allowed_hosts=settings.allowed_hosts)


@app.exception_handler(StarletteHTTPException)
async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Answer verbs the router never sees with the same 405 body as the VAT route."""

    if exc.status_code != 405:
        return await http_exception_handler(request, exc)
    return JSONResponse(
        ErrorResponse(error="Method not allowed").to_body(),
        status_code=405,
        headers={**(exc.headers or {}), **vat.ALLOW_ORIGIN},
    )


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


app.include_router(vat.router)
