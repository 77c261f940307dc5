"""
Server configuration loaded from environment variables or an env file.
"""

from __future__ import annotations

from typing import Optional

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

THUMBOR_ENV_FILENAME = "thumbor.env"


class ServerConfig(BaseSettings):
    """
    Settings model for the image server via environment variables
    or other settings sources supported by `pydantic-settings`.
    """

    THUMBOR_SERVER_ORIGIN: Optional[str] = None
    THUMBOR_SECURITY_KEY: Optional[SecretStr] = None

    model_config = SettingsConfigDict(
        env_file=THUMBOR_ENV_FILENAME,
        extra="ignore",
    )

    def validate_config(self) -> None:
        """Validate that the server origin is present."""
        if not self.THUMBOR_SERVER_ORIGIN:
            raise ValueError("THUMBOR_SERVER_ORIGIN is missing.")

    def get_security_key(self) -> Optional[str]:
        if self.THUMBOR_SECURITY_KEY is None:
            return None
        return self.THUMBOR_SECURITY_KEY.get_secret_value()
