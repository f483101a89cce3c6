"""Application and provider configuration."""

import json
import os
from pathlib import Path
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, field_validator


class AppConfig(BaseModel):
    """Runtime settings for the suggestion pipeline.

    These settings come from environment variables or defaults. Request
    timeout and TLS verification can additionally be changed per call
    through the ``ai_api_request_timeout`` and ``ai_api_sslverify`` filters.
    """

    model_config = ConfigDict(frozen=True)

    # Transport
    request_timeout: float = 30.0
    sslverify: bool = True

    # Prompting
    site_language: str = "en-US"
    max_tokens: int = 200

    # Models
    openai_model: str = "gpt-3.5-turbo"
    google_model: str = "gemini-1.5-flash"
    huggingface_model: str = "gpt2"

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    api_token: str | None = None

    # Logging
    log_level: str = "INFO"

    @property
    def ui_language(self) -> str:
        """Primary subtag of the site language, used for message catalogues."""
        return self.site_language.replace("_", "-").split("-")[0].lower() or "en"

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create configuration from environment variables.

        Returns:
            AppConfig instance.

        Raises:
            ValueError: If environment variable values are invalid.
        """

        def get_int_env(name: str, default: int, min_val: int, max_val: int) -> int:
            """Parse and validate integer environment variable."""
            value_str = os.getenv(name, str(default))
            try:
                value = int(value_str)
            except ValueError:
                raise ValueError(f"{name} must be an integer, got: {value_str}")
            if value < min_val or value > max_val:
                raise ValueError(f"{name} must be between {min_val} and {max_val}, got: {value}")
            return value

        return cls(
            request_timeout=get_int_env("SEOKAR_REQUEST_TIMEOUT", 30, 1, 600),
            sslverify=os.getenv("SEOKAR_SSLVERIFY", "true").lower() != "false",
            site_language=os.getenv("SEOKAR_SITE_LANGUAGE", "en-US"),
            max_tokens=get_int_env("SEOKAR_MAX_TOKENS", 200, 1, 8192),
            openai_model=os.getenv("SEOKAR_OPENAI_MODEL", "gpt-3.5-turbo"),
            google_model=os.getenv("SEOKAR_GOOGLE_MODEL", "gemini-1.5-flash"),
            huggingface_model=os.getenv("SEOKAR_HUGGINGFACE_MODEL", "gpt2"),
            host=os.getenv("SEOKAR_HOST", "127.0.0.1"),
            port=get_int_env("SEOKAR_PORT", 8000, 1, 65535),
            api_token=os.getenv("SEOKAR_API_TOKEN") or None,
            log_level=os.getenv("SEOKAR_LOG_LEVEL", "INFO"),
        )


class ProviderConfig(BaseModel):
    """Provider credentials, read once and never modified.

    A provider whose key is missing or blank is never selected.
    """

    model_config = ConfigDict(frozen=True)

    openai_api_key: str | None = None
    google_api_key: str | None = None
    huggingface_api_key: str | None = None

    @field_validator("openai_api_key", "google_api_key", "huggingface_api_key")
    @classmethod
    def _blank_is_missing(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = str(value).strip()
        return value or None

    def credential_for(self, key_name: str) -> str | None:
        """Get a credential by its option key name."""
        return getattr(self, key_name, None)

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None) -> "ProviderConfig":
        """Create configuration from the persisted settings record.

        Unknown keys are ignored.
        """
        options = options or {}
        return cls(
            openai_api_key=options.get("openai_api_key"),
            google_api_key=options.get("google_api_key"),
            huggingface_api_key=options.get("huggingface_api_key"),
        )

    @classmethod
    def from_env(cls) -> "ProviderConfig":
        """Create configuration from environment variables."""
        return cls(
            openai_api_key=os.getenv("SEOKAR_OPENAI_API_KEY"),
            google_api_key=os.getenv("SEOKAR_GOOGLE_API_KEY"),
            huggingface_api_key=os.getenv("SEOKAR_HUGGINGFACE_API_KEY"),
        )

    @classmethod
    def from_file(cls, path: Path) -> "ProviderConfig":
        """Load the settings record from a JSON file.

        Raises:
            ValueError: If the file is not a JSON object.
        """
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Options file must contain a JSON object: {path}")
        return cls.from_options(data)
