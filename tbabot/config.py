import logging
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TBA_BASE_URL = "https://www.thebluealliance.com/api/v3"


class Settings(BaseSettings):
    """Bot settings (read from the environment or .env)"""

    discord_bot_token: str = Field(..., description="Discord bot token, without the 'Bot ' prefix.")
    tba_auth_key: str = Field(..., description="Read API key for The Blue Alliance.")

    # Deregister the commands this process registered when it shuts down
    remove_commands: bool = Field(False)

    tba_base_url: str = Field(DEFAULT_TBA_BASE_URL)
    # None keeps the httpx default
    tba_timeout: Optional[float] = Field(None, gt=0)

    log_level: str = Field("INFO")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v):
        level = str(v).upper()
        if level not in logging._nameToLevel:
            raise ValueError(f"invalid log level: {v}")
        return level

    @field_validator("tba_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")
