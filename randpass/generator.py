"""
High-level password generation functions.
"""
from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass

from .config import DEFAULT_CONFIG, GeneratorConfig
from .pool import build_pool

logger = logging.getLogger(__name__)


@dataclass
class GenerationMeta:
    """
    Full result of one password generation.
    """
    # Final password
    password: str

    # Number of candidate characters each position was drawn from
    pool_size: int

    # Theoretical entropy of the password (length * log2(pool_size))
    entropy_bits: float
    config: GeneratorConfig


def generate(
    config: GeneratorConfig | None = None,
    rng: random.Random | None = None,
) -> str:
    """
    Draw config.length characters from the pool, independently and with
    replacement.

    `rng` only needs a `randrange` method; the module-level `random`
    functions are used when it is omitted. No validation is done on the
    length: clamp user input with `clamp_length` first.
    """
    cfg = config or DEFAULT_CONFIG
    source = rng or random
    pool = build_pool(cfg)

    logger.debug(
        "Generating password (length=%d, digits=%s, symbols=%s, pool=%d)",
        cfg.length, cfg.include_digits, cfg.include_symbols, len(pool),
    )

    chars: list[str] = []
    for _ in range(cfg.length):
        chars.append(pool[source.randrange(len(pool))])
    return "".join(chars)


def generate_with_meta(
    config: GeneratorConfig | None = None,
    rng: random.Random | None = None,
) -> GenerationMeta:
    cfg = config or DEFAULT_CONFIG
    pool_size = len(build_pool(cfg))
    password = generate(cfg, rng)

    return GenerationMeta(
        password=password,
        pool_size=pool_size,
        entropy_bits=config_entropy_bits(cfg),
        config=cfg,
    )


# ---------- strength helpers ----------

def config_entropy_bits(config: GeneratorConfig | None = None) -> float:
    """
    Entropy in bits of a password drawn with `config`: every position is an
    independent pick from the whole pool, so this is length * log2(pool size).
    """
    cfg = config or DEFAULT_CONFIG
    if cfg.length <= 0:
        return 0.0
    return cfg.length * math.log2(len(build_pool(cfg)))


# Lower bound in bits for each rating, strongest first.
STRENGTH_THRESHOLDS = (
    (110, "Very strong"),
    (80, "Strong"),
    (50, "Moderate"),
)


def strength_label(bits: float) -> str:
    if bits <= 0:
        return "Very weak"
    for minimum, label in STRENGTH_THRESHOLDS:
        if bits >= minimum:
            return label
    return "Weak"


def describe_strength(config: GeneratorConfig | None = None) -> str:
    """e.g. "Moderate (~68.4 bits)"."""
    bits = config_entropy_bits(config)
    return f"{strength_label(bits)} (~{bits:.1f} bits)"
