"""Application configuration."""

from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CognitoSettings(BaseModel):
    """Cognito user pool configuration.

    Credentials are not configured here; the AWS default credential chain
    (environment, shared profile, instance role) is used as-is.
    """

    region: str = "us-east-1"
    user_pool_id: str = ""

    # Custom endpoint for local emulators (e.g. moto server)
    endpoint_url: str | None = None

    # Applied when callers pass a non-positive list limit
    default_list_limit: int = Field(default=20, ge=1, le=60)

    # botocore timeouts (seconds) and standard-mode attempts, initial call included
    connect_timeout: float = 5.0
    read_timeout: float = 10.0
    max_attempts: int = Field(default=3, ge=1)


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
        COGNITO__REGION=us-east-2
        COGNITO__USER_POOL_ID=us-east-2_AbCdEf123
        OBSERVABILITY__LOGFIRE_TOKEN=...
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    cognito: CognitoSettings = CognitoSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
