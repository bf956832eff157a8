"""Application configuration using pydantic-settings.

Holds the API endpoint and the default transaction building policy.
"""

import json
import logging
from functools import lru_cache
from typing import Any, Optional

from pydantic import Field, TypeAdapter
from pydantic_settings import BaseSettings, SettingsConfigDict

from jupiter_swap.contracts import (
    ComputeUnitPriceMicroLamports,
    PrioritizationFeeLamports,
    TransactionConfig,
)

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_compute_unit_price_adapter = TypeAdapter(ComputeUnitPriceMicroLamports)
_prioritization_fee_adapter = TypeAdapter(PrioritizationFeeLamports)


class Settings(BaseSettings):
    """Settings loaded from ``JUPITER_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="JUPITER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # API
    # ======================
    api_url: str = Field(default="https://quote-api.jup.ag/v6", description="Swap API base URL")
    api_key: Optional[str] = Field(default=None, description="API key for higher rate limits")

    # ======================
    # Environment
    # ======================
    environment: str = Field(default="development", description="Runtime environment")
    debug: bool = Field(default=False, description="Enable debug logging")

    # ======================
    # Quote defaults
    # ======================
    default_slippage_bps: int = Field(
        default=50, ge=0, le=10_000, description="Default slippage in basis points"
    )

    # ======================
    # Transaction defaults
    # ======================
    wrap_and_unwrap_sol: bool = Field(default=True, description="Wrap and unwrap SOL")
    dynamic_compute_unit_limit: bool = Field(
        default=False, description="Simulate swaps to size the compute unit limit"
    )
    prioritization_fee_lamports: Optional[str] = Field(
        default=None,
        description='Priority fee: "auto", "disabled", lamports, or a JSON object',
    )
    compute_unit_price_micro_lamports: Optional[str] = Field(
        default=None, description='Compute unit price: "auto" or micro-lamports'
    )

    @property
    def quote_url(self) -> str:
        return f"{self.api_url.rstrip('/')}/quote"

    @property
    def swap_url(self) -> str:
        return f"{self.api_url.rstrip('/')}/swap"

    @property
    def swap_instructions_url(self) -> str:
        return f"{self.api_url.rstrip('/')}/swap-instructions"

    def transaction_config(self) -> TransactionConfig:
        """Build the default transaction config.

        Raises:
            pydantic.ValidationError: if a fee setting is not a valid representation
        """
        compute_unit_price = None
        if self.compute_unit_price_micro_lamports is not None:
            compute_unit_price = _compute_unit_price_adapter.validate_python(
                _decode_setting(self.compute_unit_price_micro_lamports)
            )

        prioritization_fee = None
        if self.prioritization_fee_lamports is not None:
            prioritization_fee = _prioritization_fee_adapter.validate_python(
                _decode_setting(self.prioritization_fee_lamports)
            )

        return TransactionConfig(
            wrap_and_unwrap_sol=self.wrap_and_unwrap_sol,
            dynamic_compute_unit_limit=self.dynamic_compute_unit_limit,
            compute_unit_price_micro_lamports=compute_unit_price,
            prioritization_fee_lamports=prioritization_fee,
        )

    def get_safe_dict(self) -> dict:
        """Return settings dict with secrets redacted."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "api_url": self.api_url,
            "api_key": "***" if self.api_key else "(not set)",
            "quote": {"default_slippage_bps": self.default_slippage_bps},
            "transaction": {
                "wrap_and_unwrap_sol": self.wrap_and_unwrap_sol,
                "dynamic_compute_unit_limit": self.dynamic_compute_unit_limit,
                "prioritization_fee_lamports": self.prioritization_fee_lamports or "(not set)",
                "compute_unit_price_micro_lamports": (
                    self.compute_unit_price_micro_lamports or "(not set)"
                ),
            },
        }


def _decode_setting(raw: str) -> Any:
    """Decode a fee setting: numbers and JSON objects are parsed, words kept as-is."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw.strip()


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure root logging from settings."""
    settings = settings or get_settings()
    log_level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(level=log_level, format=LOG_FORMAT)
    logger.debug(f"Logging configured for {settings.environment}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
