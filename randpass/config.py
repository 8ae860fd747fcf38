"""
Configuration for the RandPass password generator.
"""

from dataclasses import dataclass

# Base alphabet is always part of the pool.
LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
DIGITS = "0123456789"
# All 32 printable ASCII punctuation characters.
SYMBOLS = "!@#$%^&*()_+=-`~[]{}|;:'\"<>,./?\\"

MIN_LENGTH = 6
MAX_LENGTH = 100
DEFAULT_LENGTH = 12

# Transient copy status values and how long they stay visible.
COPY_STATUS_IDLE = ""
COPY_STATUS_COPIED = "copied"
COPY_STATUS_FAILED = "failed"
COPY_STATUS_RESET_MS = 2000


@dataclass(frozen=True)
class GeneratorConfig:
    # Desired password length in characters.
    # The generator trusts this value; use clamp_length() before building one
    # from user input.
    length: int = DEFAULT_LENGTH

    # Append DIGITS to the pool.
    include_digits: bool = False

    # Append SYMBOLS to the pool.
    include_symbols: bool = False


def clamp_length(length: int) -> int:
    """
    Force a requested length into [MIN_LENGTH, MAX_LENGTH].
    """
    if isinstance(length, bool) or not isinstance(length, int):
        raise TypeError(f"Password length must be an int, got {type(length).__name__}")
    return max(MIN_LENGTH, min(MAX_LENGTH, length))


# Default configuration instance you can import elsewhere
DEFAULT_CONFIG = GeneratorConfig()
