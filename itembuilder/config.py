"""Application configuration loaded from environment variables and .env file."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    Values are loaded from environment variables first,
    then from a .env file in the project root as fallback.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    LOG_LEVEL: str = "INFO"

    # ItemBuilder settings
    ITEM_BUILDER_ALT_COLOR_CHAR: str = Field(default="&", min_length=1, max_length=1)
    # False: 스냅샷에 메타가 있으면 복사를 건너뛴다 (기존 동작 그대로)
    ITEM_BUILDER_COPY_EXISTING_META: bool = False


settings = Settings()
