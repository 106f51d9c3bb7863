from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Literal, Optional

from scanner.errors import ConfigError


class Settings(BaseSettings):
    APP_NAME: str = "has-my-alias-been-pwned"
    VERSION: str = "1.0.0"

    ANONADDY_TOKEN: str
    ANONADDY_HOST: str = "https://app.anonaddy.com"

    HIBP_TOKEN: str
    HIBP_HOST: str = "https://haveibeenpwned.com"

    USER_AGENT: str = "has-my-alias-been-pwned"
    HTTP_TIMEOUT_SECONDS: float = 15.0
    RATE_LIMIT_DEFAULT_WAIT_SECONDS: float = 2.0  # used when retry-after is missing
    RATE_LIMIT_MAX_WAIT_SECONDS: float = 300.0

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def upper_log_level(cls, v):
        return v.upper().strip() if isinstance(v, str) else v


def load_settings(env_file: Optional[str] = ".env") -> Settings:
    """Load settings from the environment and an optional .env file."""
    try:
        return Settings(_env_file=env_file)
    except ValidationError as e:
        missing = [
            str(err["loc"][0]) for err in e.errors() if err["type"] == "missing"
        ]
        if missing:
            raise ConfigError(f"Please provide {', '.join(missing)}") from e
        raise ConfigError(f"Invalid configuration: {e}") from e
