"""
config.py — tax estimator settings.

Usage:
    from tax_estimator.config import settings
    print(settings.payroll_withholding_rate)

Every field can be overridden with a TAX_ESTIMATOR_* environment variable or a
.env file. Brackets are given as JSON, e.g.

    TAX_ESTIMATOR_BRACKETS='[{"up_to": 20000, "rate": 0}, {"up_to": null, "rate": 0.2}]'

The bracket table is validated when settings are loaded, so a bad table fails
at startup instead of under-taxing at request time.
"""
import logging
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .tax_config import (
    DEFAULT_BRACKETS,
    DEFAULT_PAYROLL_WITHHOLDING_RATE,
    DEFAULT_PER_DEPENDENT_MONTHLY_DEDUCTION,
    TaxBracket,
    TaxTable,
    build_tax_table,
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TAX_ESTIMATOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Deductions ---
    per_dependent_monthly_deduction: float = DEFAULT_PER_DEPENDENT_MONTHLY_DEDUCTION
    payroll_withholding_rate: float = DEFAULT_PAYROLL_WITHHOLDING_RATE

    # --- Brackets ---
    brackets: List[TaxBracket] = Field(default_factory=lambda: list(DEFAULT_BRACKETS))

    # --- CORS ---
    # Comma-separated list of allowed frontend origins
    cors_origins: str = "http://localhost:5173,http://127.0.0.1:5173"

    # --- Application ---
    log_level: str = "INFO"

    @property
    def cors_origins_list(self) -> List[str]:
        """Split comma-separated CORS origins into a list."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def tax_table(self) -> TaxTable:
        return build_tax_table(self.brackets)


def load_settings(**overrides) -> Settings:
    """
    Read settings from the environment and validate the bracket table.
    Raises InvalidBracketTable if the configured brackets are unusable.
    """
    loaded = Settings(**overrides)
    build_tax_table(loaded.brackets)
    return loaded


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Module-level singleton — import this throughout the codebase
settings = load_settings()
