from __future__ import annotations

import os

from pydantic import BaseModel, field_validator

from .crypto.seal import get_usable_key
from .domain.constants import DEFAULT_VERSION
from .domain.errors import InvalidEptCode, InvalidKey
from .domain.validators import validate_ept_code


class Settings(BaseModel):
    """Typed application settings built from environment variables."""

    # Merchant credentials
    ept_code: str
    security_key: str
    company_code: str
    version: str = DEFAULT_VERSION
    test_mode: bool = False

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False
    api_cors_origins: list[str] = ["*"]

    # Application settings
    app_name: str = "Monetico"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    @field_validator("ept_code")
    @classmethod
    def check_ept_code(cls, v: str) -> str:
        try:
            return validate_ept_code(v)
        except InvalidEptCode as e:
            raise ValueError(str(e)) from e

    @field_validator("security_key")
    @classmethod
    def check_security_key(cls, v: str) -> str:
        if not v:
            raise ValueError("Security key cannot be empty")
        try:
            get_usable_key(v)
        except InvalidKey as e:
            raise ValueError(str(e)) from e
        return v


def get_settings() -> Settings:
    """Return typed settings instance sourced from env vars."""
    return Settings(
        ept_code=os.environ.get("MONETICO_EPT_CODE", ""),
        security_key=os.environ.get("MONETICO_SECURITY_KEY", ""),
        company_code=os.environ.get("MONETICO_COMPANY_CODE", ""),
        version=os.environ.get("MONETICO_VERSION", DEFAULT_VERSION),
        test_mode=os.environ.get("MONETICO_TEST_MODE", "false").lower() == "true",
        api_host=os.environ.get("API_HOST", "0.0.0.0"),
        api_port=int(os.environ.get("API_PORT", "8000")),
        api_debug=os.environ.get("API_DEBUG", "false").lower() == "true",
        api_cors_origins=os.environ.get("API_CORS_ORIGINS", "*").split(","),
        app_name=os.environ.get("APP_NAME", "Monetico"),
        app_version=os.environ.get("APP_VERSION", "1.0.0"),
        log_level=os.environ.get("LOG_LEVEL", "INFO"),
    )
