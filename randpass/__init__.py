"""
RandPass: random password generator with a Qt front end.
"""

from .config import GeneratorConfig, DEFAULT_CONFIG, clamp_length
from .pool import build_pool
from .generator import generate, generate_with_meta, GenerationMeta

__all__ = [
    "GeneratorConfig",
    "DEFAULT_CONFIG",
    "clamp_length",
    "build_pool",
    "generate",
    "generate_with_meta",
    "GenerationMeta",
]
