"""
Configuration loaded from environment variables
Values come from DICEWARE_* variables or a .env file
"""

from pydantic import ValidationError
from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional
from pathlib import Path

from diceware.errors import ConfigurationError
from diceware.limits import (
    DEFAULT_WORD_COUNT,
    LOG_LEVELS,
    MAX_WORD_COUNT,
    MIN_WORD_COUNT,
)
from diceware.wordlist import DEFAULT_LANGUAGE, available_languages


# Find .env file - could be in current dir, project root, or absent
def _find_env_file() -> str:
    """Find .env file in current or project root directory"""
    if Path(".env").exists():
        return ".env"
    root_env = Path(__file__).parent.parent / ".env"
    if root_env.exists():
        return str(root_env)
    return ".env"


class Settings(BaseSettings):
    """Passphrase defaults from environment"""

    # Passphrase shape
    WORD_COUNT: int = DEFAULT_WORD_COUNT
    SEPARATOR: str = " "
    ALLOW_DUPLICATES: bool = True

    # Vocabulary
    LANGUAGE: str = DEFAULT_LANGUAGE

    # Randomness - unset means SystemRandom
    SEED: Optional[int] = None

    # Logging
    LOG_LEVEL: str = "WARNING"

    class Config:
        env_prefix = "DICEWARE_"
        env_file = _find_env_file()
        case_sensitive = True


def validate_settings(active_settings: Settings) -> None:
    """Validate settings before any words are drawn."""
    errors = []

    if not MIN_WORD_COUNT <= active_settings.WORD_COUNT <= MAX_WORD_COUNT:
        errors.append(
            f"WORD_COUNT must be between {MIN_WORD_COUNT} and {MAX_WORD_COUNT}"
        )

    languages = available_languages()
    if active_settings.LANGUAGE not in languages:
        errors.append(f"LANGUAGE must be one of: {', '.join(languages)}")

    if active_settings.LOG_LEVEL.upper() not in LOG_LEVELS:
        errors.append(f"LOG_LEVEL must be one of: {', '.join(LOG_LEVELS)}")

    if errors:
        raise ConfigurationError("Invalid configuration:\n- " + "\n- ".join(errors))


@lru_cache()
def get_settings() -> Settings:
    """
    Cached settings instance

    Raises:
      ConfigurationError if an environment value cannot be parsed.
    """
    try:
        return Settings()
    except ValidationError as e:
        problems = [
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        ]
        raise ConfigurationError(
            "Invalid configuration:\n- " + "\n- ".join(problems)
        ) from e
