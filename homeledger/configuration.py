"""Mini README: Centralised configuration for Home Ledger.

Structure:
    * LedgerSettings - Pydantic settings model read from ``HOMELEDGER_*``
      environment variables or a ``.env`` file.
    * get_settings - cached accessor so validation runs once per process.

Usage:
    Storage location, the storage key, display conventions (currency symbol,
    separators, date pattern) and the web interface binding are all read from
    here. Tests build ``LedgerSettings`` directly instead of using the cache.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, validator
from pydantic_settings import BaseSettings

DEFAULT_STORAGE_KEY = "controle-financeiro-transactions"


class LedgerSettings(BaseSettings):
    """Runtime configuration for the ledger and its web interface."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    data_directory: Path = Field(
        Path("data"),
        description="Directory holding the key-value storage file.",
    )
    storage_key: str = Field(
        DEFAULT_STORAGE_KEY,
        description="Key under which the serialized transaction list is stored.",
        min_length=1,
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the web interface to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the web interface exposes.",
        ge=1,
        le=65535,
    )
    currency_symbol: str = Field("R$", description="Symbol prefixed to monetary values.")
    decimal_separator: str = Field(",", description="Separator between units and cents.")
    thousands_separator: str = Field(".", description="Separator between digit groups.")
    date_format: str = Field(
        "%d/%m/%Y",
        description="strftime pattern used when displaying transaction dates.",
    )
    seed_demo_data: bool = Field(
        True,
        description="Record example transactions when the stored ledger is empty.",
    )

    class Config:
        env_prefix = "HOMELEDGER_"
        env_file = ".env"
        case_sensitive = False

    @validator("data_directory", pre=True)
    def _expand_path(cls, value: str | Path) -> Path:
        """Ensure the data directory expands user paths and exists."""

        path = Path(value).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def storage_file(self) -> Path:
        """Location of the JSON file backing the key-value storage."""

        return self.data_directory / "storage.json"


@lru_cache()
def get_settings() -> LedgerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return LedgerSettings()
