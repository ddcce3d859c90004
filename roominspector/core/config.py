from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ROOM_INSPECTOR_",
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    PROJECT_NAME: str = "Room Inspector"
    API_PREFIX: str = "/inspector"
    ENVIRONMENT: Literal["local", "staging", "production"] = "local"
    LOG_LEVEL: str = "INFO"

    # Double embedded single quotes in value literals. False keeps values verbatim.
    ESCAPE_LITERALS: bool = True
    ALLOW_RAW_QUERIES: bool = True

    ROWS_PAGE_SIZE: int = Field(default=100, ge=1)
    MAX_ROWS_PAGE_SIZE: int = Field(default=1000, ge=1)

    # Busy timeout (seconds) for engines built from a SQLite path
    SQLITE_TIMEOUT: float = 5.0


settings = Settings()  # type: ignore
