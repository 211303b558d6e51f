"""
Process configuration.

Credentials are read once from the environment (or a local ``.env``) when the
application is created. Missing values are kept as empty strings so that the
request handler can report them as a server misconfiguration instead of the
process refusing to start.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from .types import DEFAULT_GENERATION_CONFIG, GenerationConfig


class Settings(BaseSettings):
    # Credential callers must present.
    api_key: str = ""
    # Credential for the Gemini API.
    gemini_api_key: str = ""
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    @property
    def generation(self) -> GenerationConfig:
        return DEFAULT_GENERATION_CONFIG
