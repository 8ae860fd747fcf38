"""
Character pool assembly: turn a GeneratorConfig into the candidate alphabet.
"""

from __future__ import annotations

from .config import DEFAULT_CONFIG, DIGITS, LETTERS, SYMBOLS, GeneratorConfig


def build_pool(config: GeneratorConfig | None = None) -> str:
    """
    Return the ordered pool of candidate characters.

    The letters always come first, followed by the digits and then the
    symbols when the config enables them. The pool is never empty.
    """
    cfg = config or DEFAULT_CONFIG

    pool = LETTERS
    if cfg.include_digits:
        pool += DIGITS
    if cfg.include_symbols:
        pool += SYMBOLS
    return pool
