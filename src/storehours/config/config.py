from __future__ import annotations

from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # TOML or JSON store file; the built-in store is used when unset.
    store_config: Path | None = Field(
        default=None,
        validation_alias=AliasChoices("STOREHOURS_CONFIG"),
    )
    closing_soon_minutes: int = Field(
        default=45,
        ge=0,
        validation_alias=AliasChoices("STOREHOURS_CLOSING_SOON_MINUTES"),
    )
    window_days: int = Field(
        default=7,
        ge=1,
        le=14,
        validation_alias=AliasChoices("STOREHOURS_WINDOW_DAYS"),
    )
    search_horizon_days: int = Field(
        default=14,
        ge=1,
        le=14,
        validation_alias=AliasChoices("STOREHOURS_SEARCH_HORIZON_DAYS"),
    )

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
