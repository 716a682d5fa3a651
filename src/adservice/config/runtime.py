"""Pydantic-based runtime settings for the ad service.

Loads from environment variables (with optional .env file).
Invalid values fail fast at startup.
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from ..domain.catalog import MAX_ADS_TO_SERVE


class Transport(str, Enum):
    grpc = "grpc"
    mcp = "mcp"


class RuntimeSettings(BaseSettings):
    """All configuration for the ad service runtime, validated at startup."""

    model_config = {"env_prefix": "", "env_file": ".env", "env_file_encoding": "utf-8"}

    # --- Transport ---
    transport: Transport = Field(
        default=Transport.grpc,
        description="Which server to start: 'grpc' (GetAds RPCs) or 'mcp' (stdio tools)",
    )

    # --- gRPC ---
    port: int = Field(default=9555, description="gRPC listen port (0 picks a free port)")
    max_workers: int = Field(default=10, ge=1, le=1000, description="gRPC handler thread pool size")

    # --- Matching ---
    max_ads_to_serve: int = Field(
        default=MAX_ADS_TO_SERVE,
        ge=0,
        le=MAX_ADS_TO_SERVE,
        description="Maximum number of ads returned on the random fallback path",
    )
    random_seed: int | None = Field(default=None, description="Seed for the fallback sampler")

    # --- Logging ---
    log_level: str = Field(default="INFO", description="Root log level for the adservice loggers")

    @field_validator("port")
    @classmethod
    def _port_range(cls, v: int) -> int:
        if not (0 <= v <= 65535):
            raise ValueError(f"port must be 0-65535, got {v}")
        return v

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log_level {v!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> RuntimeSettings:
    """Return the singleton RuntimeSettings (cached after first call)."""
    return RuntimeSettings()
