"""Custom exception classes for the Morse translator."""


class MorseError(Exception):
    """Base exception class for all translator errors."""
    pass


class UsageError(MorseError):
    """Exception raised when the command line arguments are wrong."""

    exit_code = 1


class ConfigurationError(MorseError):
    """Exception raised when configuration is invalid or missing."""
    pass
