"""Application configuration."""
from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

VIES_REST_ENDPOINT = "https://ec.europa.eu/taxation_customs/vies/rest-api/check-vat-number"


class Settings(BaseSettings):
    """Central application configuration with sane defaults."""

    model_config = SettingsConfigDict(env_prefix="VAT_CHECKER_", case_sensitive=False)

    vies_endpoint: str = Field(
        VIES_REST_ENDPOINT,
        description="VIES REST endpoint receiving check-vat-number requests.",
    )
    vies_timeout: float = Field(
        30.0,
        gt=0,
        description="Timeout in seconds for a single VIES call.",
    )
    user_agent: str = Field(
        "VAT-Checker/1.0",
        description="User-Agent sent to VIES. An empty value omits the header.",
    )
    allowed_hosts: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["*"],
        description="Whitelisted host headers accepted by the API.",
    )
    expose_docs: bool = Field(
        False,
        description="Expose interactive API documentation endpoints.",
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level.",
    )

    @field_validator("allowed_hosts", mode="before")
    @classmethod
    def _split_comma_separated(cls, value: Any):
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.strip().upper()


@lru_cache
def get_settings() -> Settings:
    """Return memoized settings instance."""

    return Settings()
