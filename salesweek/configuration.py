"""Mini README: Centralised configuration for the weekly sales ledger.

Structure:
    * SalesweekSettings - Pydantic settings model read from the environment.
    * get_settings - cached accessor so validation runs once per process.

Usage:
    ``get_settings().storage_path`` names the durable slot that holds the
    whole transaction collection. Every field can be overridden with a
    ``SALESWEEK_`` prefixed environment variable or a local ``.env`` file.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class SalesweekSettings(BaseSettings):
    """Runtime configuration for the sales ledger and its interfaces."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    data_directory: Path = Field(
        Path("data"),
        description="Directory holding the durable transaction slot.",
    )
    storage_slot: str = Field(
        "dailySalesTransactions",
        description="Name of the slot (file stem) storing the serialised ledger.",
        min_length=1,
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the JSON API to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the JSON API exposes.",
        ge=1,
        le=65535,
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level applied by the entry points.",
    )

    class Config:
        env_prefix = "SALESWEEK_"
        env_file = ".env"
        case_sensitive = False

    @validator("data_directory", pre=True)
    def _expand_path(cls, value: Optional[str | Path]) -> Path:
        """Ensure configured paths expand user directories and exist."""

        path = Path(value).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def storage_path(self) -> Path:
        """Location of the JSON file backing the storage slot."""

        return self.data_directory / f"{self.storage_slot}.json"


@lru_cache()
def get_settings() -> SalesweekSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return SalesweekSettings()
