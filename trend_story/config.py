from functools import lru_cache
from typing import Annotated

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode

class Settings(BaseSettings):

    api_host: str = Field(default="127.0.0.1", description="API host")
    api_port: int = Field(default=3003, description="API port")
    debug: bool = Field(default=False, description="Debug mode")

    # Public base URL used for image and date links
    domain: str = Field(
        default="https://trend-story-api.oopus.info",
        description="Public base URL of the API",
    )

    # Dataset repository
    repository_url: str = Field(
        default="https://github.com/sudoghut/trends-story",
        description="Git repository holding the trend dataset",
    )
    repository_path: str = Field(default="./trends-story", description="Local checkout of the dataset repository")
    database_path: str = Field(default="trends-story/trends_data.db", description="SQLite database file")
    images_dir: str = Field(default="trends-story/images", description="Directory served under /images")

    # Periodic sync
    sync_enabled: bool = Field(default=True, description="Clone or pull the dataset repository periodically")
    sync_interval_minutes: int = Field(default=20, description="Minutes between repository syncs")
    git_executable: str = Field(default="git", description="git binary used for syncing")

    tags_enabled: bool = Field(default=True, description="Expand serpapi categories into tags")

    allowed_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["*"],
        description="Allowed CORS origins",
        validation_alias=AliasChoices("CORS_ALLOWED_ORIGINS", "ALLOWED_ORIGINS"),
    )
    allowed_methods: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["GET", "POST", "DELETE"],
        description="Allowed CORS methods",
    )
    allowed_headers: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["content-type"],
        description="Allowed CORS headers",
    )

    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Log format (json or text)")

    @field_validator("allowed_origins", "allowed_methods", "allowed_headers", mode="before")
    @classmethod
    def parse_comma_separated(cls, value):
        if value is None:
            return value
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value

    class Config:
        env_file = [".env", ".env.local"]  # .env.local takes precedence over .env
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
