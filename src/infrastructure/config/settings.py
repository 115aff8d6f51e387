"""
Process-wide settings read once from the environment at startup.

The composition root calls load_dotenv() (and optionally pulls secrets from AWS
Secrets Manager) before Settings() is built; the resulting object is handed to
the adapters instead of being read ambiently per request.
"""

from typing import Literal, Optional

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.domain.entities.identity import DEFAULT_UID

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class Settings(BaseSettings):
    """Service configuration. Missing keys are allowed; requests needing them fail individually."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    jwk_private_key: Optional[SecretStr] = None
    jwk_public_key: Optional[SecretStr] = None
    token_uid: str = DEFAULT_UID
    jwk_secret_arn: Optional[str] = None
    log_level: LogLevel = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


def reveal(secret: Optional[SecretStr]) -> Optional[str]:
    return secret.get_secret_value() if secret is not None else None
