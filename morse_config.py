"""Configuration management for the Morse translator."""

from dataclasses import dataclass
import os
from pathlib import Path

from dotenv import load_dotenv

from morse_exceptions import ConfigurationError


# Load .env file from project root without overriding the real environment
env_path = Path(__file__).parent / '.env'
load_dotenv(dotenv_path=env_path, override=False)

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class TranslatorConfig:
    """Configuration for the command line translator."""

    log_level: str = "WARNING"
    prompt: str = "> "

    def validate(self) -> None:
        """Validate translator configuration parameters."""
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(
                f"MORSE_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, "
                f"got: {self.log_level}"
            )
        if not self.prompt:
            raise ConfigurationError("MORSE_PROMPT must not be empty")


def load_config() -> TranslatorConfig:
    """
    Load translator configuration from environment variables.

    Environment variables:
        MORSE_LOG_LEVEL: Logging level (default: WARNING)
        MORSE_PROMPT: Prompt shown before reading input (default: "> ")

    Returns:
        Validated TranslatorConfig instance

    Raises:
        ConfigurationError: If configuration is invalid
    """
    config = TranslatorConfig(
        log_level=os.getenv('MORSE_LOG_LEVEL', 'WARNING'),
        prompt=os.getenv('MORSE_PROMPT', '> '),
    )
    config.validate()
    return config
