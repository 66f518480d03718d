"""Application configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseModel):
    """Key-value storage configuration."""

    # "memory" keeps everything in process (tests, demos)
    # "file" writes one JSON file per key under `path`
    backend: Literal["memory", "file"] = "memory"
    path: Path = Path(".forum-data")


class DeletionSettings(BaseModel):
    """Soft-delete configuration."""

    # Window during which a deleted thread/comment/reply can be restored
    grace_period_seconds: float = Field(default=5.0, gt=0)


class SeedSettings(BaseModel):
    """Demo content configuration."""

    # Merge the built-in demo threads into the loaded thread list
    enabled: bool = True


class ThreadRules(BaseModel):
    """Validation limits applied when authoring a thread."""

    title_min_length: int = 10
    title_max_length: int = 200
    content_min_length: int = 20
    max_tags: int = 5
    tag_max_length: int = 20


class PointsSettings(BaseModel):
    """Reputation points reported back to authors."""

    thread_created: int = 10
    comment_added: int = 3
    upvote_received: int = 5


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, using ``__`` for nested values:

        ENVIRONMENT=production
        STORAGE__BACKEND=file
        STORAGE__PATH=/var/lib/forum
        DELETION__GRACE_PERIOD_SECONDS=5
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows STORAGE__PATH syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Nested settings
    storage: StorageSettings = StorageSettings()
    deletion: DeletionSettings = DeletionSettings()
    seed: SeedSettings = SeedSettings()
    threads: ThreadRules = ThreadRules()
    points: PointsSettings = PointsSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
