"""Application settings powered by Pydantic BaseSettings."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from client_errors.constants import PROBLEM_JSON_MEDIA_TYPE


class ClientErrorSettings(BaseSettings):
    """Centralized environment configuration.

    List values are read from the environment as JSON arrays, e.g.
    ``CLIENT_ERRORS_ALLOWED_QUERY_PARAMS='["page", "limit"]'``.
    """

    model_config = SettingsConfigDict(
        env_prefix="CLIENT_ERRORS_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    redaction_mode: Literal["default", "unredacted"] = Field(
        default="default",
        description="Use 'unredacted' only for local debugging",
    )
    allowed_request_headers: list[str] = Field(default_factory=list)
    allowed_response_headers: list[str] = Field(default_factory=list)
    allowed_query_params: list[str] = Field(default_factory=list)
    problem_media_type: str = Field(default=PROBLEM_JSON_MEDIA_TYPE, min_length=1)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_json: bool = True


def get_settings() -> ClientErrorSettings:
    """Get a settings instance."""
    return ClientErrorSettings()
