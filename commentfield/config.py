"""Application configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CommentFieldSettings(BaseModel):
    """Configuration of a comments field.

    The field is identified by its name: two settings objects with the same
    name describe the same field.
    """

    name: str = Field(default="comments", min_length=1)

    # Maximum reply depth (0 = threading disabled, replies not allowed)
    depth: int = Field(default=0, ge=0)

    # 0 = no moderation, 1 = moderate all, 2 = moderate only new authors
    moderate: int = Field(default=1, ge=0, le=2)

    # 0 = votes disabled, 1 = upvotes only, 2 = upvotes and downvotes
    use_votes: int = Field(default=0, ge=0, le=2)

    use_stars: bool = False
    sort_newest: bool = False

    # Spam older than this many days is eligible for removal by the store
    delete_spam_days: int = Field(default=3, ge=0)


class APISettings(BaseModel):
    """API configuration."""

    host: str
    port: int
    protocol: Literal["http", "https"]

    @property
    def base_url(self) -> str:
        """Base URL for this API server."""
        if self.host == "localhost":
            return f"{self.protocol}://{self.host}:{self.port}"
        return f"{self.protocol}://{self.host}"


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # If None, sends when a token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, using ``__`` for nested values:

        ENVIRONMENT=production
        HOST=comments.example.org
        COMMENTS__NAME=comments
        COMMENTS__DEPTH=3
        COMMENTS__USE_VOTES=2
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Git commit SHA (loaded from version.txt file or defaults to "unknown")
    git_sha: str = "unknown"

    host: str = "localhost"
    port: int = 8000

    comments: CommentFieldSettings = CommentFieldSettings()
    api: APISettings = APISettings(host="localhost", port=8000, protocol="http")
    observability: ObservabilitySettings = ObservabilitySettings()

    @model_validator(mode="after")
    def initialize_api_settings(self) -> "Settings":
        """Initialize API settings from host and environment."""
        protocol: Literal["http", "https"] = (
            "http" if self.environment in ("test", "development") else "https"
        )
        self.api = APISettings(host=self.host, port=self.port, protocol=protocol)
        self.git_sha = self._load_git_sha()
        return self

    @staticmethod
    def _load_git_sha() -> str:
        """Load git SHA from version file, or "unknown" when absent."""
        version_file = Path("/app/version.txt")
        if version_file.exists():
            try:
                return version_file.read_text().strip()
            except OSError:
                return "unknown"
        return "unknown"
