"""Application configuration."""

from pathlib import Path
from typing import Literal
from pydantic import BaseModel, computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from chatly.util.retry import RetryPolicy

PLACEHOLDER = "CHANGE_ME_IN_PRODUCTION"


class NotionSettings(BaseModel):
    """Notion integration configuration.

    The integration key must stay server-side; it is never sent to clients.
    """

    api_key: str = PLACEHOLDER
    posts_db_id: str = PLACEHOLDER
    comments_db_id: str = PLACEHOLDER
    upvotes_db_id: str = PLACEHOLDER

    base_url: str = "https://api.notion.com/v1"
    version: str = "2022-06-28"
    timeout_seconds: float = 30.0

    @property
    def is_configured(self) -> bool:
        """Whether every credential and database id has been set."""
        return PLACEHOLDER not in (
            self.api_key,
            self.posts_db_id,
            self.comments_db_id,
            self.upvotes_db_id,
        )


class FirebaseSettings(BaseModel):
    """Firebase Admin configuration."""

    # Base64-encoded service account JSON.
    # When unset, application default credentials are used
    # (GOOGLE_APPLICATION_CREDENTIALS).
    service_account_json: str | None = None

    project_id: str | None = None


class VoteSettings(BaseModel):
    """Upvote counter configuration."""

    # read_modify_write: read the post counter, apply the delta, write it back
    # recount: set the counter to the number of active vote records
    counter_mode: Literal["read_modify_write", "recount"] = "read_modify_write"


class APISettings(BaseModel):
    """API configuration."""

    host: str
    port: int
    protocol: Literal["http", "https"]
    frontend_host: str

    @computed_field
    @property
    def frontend_url(self) -> str:
        """Frontend origin allowed by CORS.

        In development: http://localhost:3000
        """
        if self.frontend_host == "localhost":
            return "http://localhost:3000"
        else:
            return f"{self.protocol}://{self.frontend_host}"


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

        NOTION__API_KEY=secret_xxx
        NOTION__POSTS_DB_ID=...
        NOTION__COMMENTS_DB_ID=...
        NOTION__UPVOTES_DB_ID=...
        FIREBASE__SERVICE_ACCOUNT_JSON=<base64 json>
        RETRY__MAX_RETRIES=4
        VOTES__COUNTER_MODE=recount
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
    frontend_host: str = "localhost"

    # Nested settings
    notion: NotionSettings = NotionSettings()
    firebase: FirebaseSettings = FirebaseSettings()
    retry: RetryPolicy = RetryPolicy()
    votes: VoteSettings = VoteSettings()
    api: APISettings = APISettings(
        host="localhost", port=8000, protocol="http", frontend_host="localhost"
    )  # Overwritten in validator
    observability: ObservabilitySettings = ObservabilitySettings()

    @model_validator(mode="after")
    def initialize_api_settings(self) -> "Settings":
        """Initialize API settings from host and environment."""
        protocol: Literal["http", "https"] = (
            "http" if self.environment in ("test", "development") else "https"
        )

        self.api = APISettings(
            host=self.host,
            port=self.port,
            protocol=protocol,
            frontend_host=self.frontend_host,
        )

        self.git_sha = self._load_git_sha()

        return self

    @staticmethod
    def _load_git_sha() -> str:
        """Load git SHA from version file.

        Returns:
            Git SHA if version file exists, otherwise "unknown"
        """
        version_file = Path("/app/version.txt")
        if version_file.exists():
            try:
                return version_file.read_text().strip()
            except OSError:
                return "unknown"
        return "unknown"
