"""
Command-line interface.
"""
from __future__ import annotations

import argparse
import logging
from typing import Sequence

from .config import DEFAULT_LENGTH, GeneratorConfig, clamp_length
from .generator import describe_strength, generate_with_meta
from .logger import setup_logger

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="randpass",
        description="Random password generator",
    )
    parser.add_argument('-l', '--length', type=int, default=DEFAULT_LENGTH,
                        help=f'Password length, clamped to 6..100 (default: {DEFAULT_LENGTH})')
    parser.add_argument('-d', '--digits', action='store_true', help='Include digits')
    parser.add_argument('-s', '--symbols', action='store_true', help='Include punctuation symbols')
    parser.add_argument('-n', '--count', type=int, default=1, help='How many passwords to print (default: 1)')
    parser.add_argument('--quantum', action='store_true',
                        help='Draw randomness from simulated qubit measurements')
    parser.add_argument('--show-strength', action='store_true',
                        help='Print the estimated entropy after each password')
    parser.add_argument('--gui', action='store_true', help='Open the generator window instead')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log debug output')
    parser.add_argument('--log-file', help='Also write log output to this file')
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """
    Entry point for `randpass`, `python -m randpass` or `run_randpass.py`.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.count < 1:
        parser.error("--count must be at least 1")

    setup_logger(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)

    length = clamp_length(args.length)
    if length != args.length:
        logger.warning("Length %d out of range, clamped to %d", args.length, length)

    config = GeneratorConfig(
        length=length,
        include_digits=args.digits,
        include_symbols=args.symbols,
    )

    rng = None
    if args.quantum:
        from .quantum_engine import QuantumRandom
        rng = QuantumRandom()

    if args.gui:
        from .gui_qt import main as gui_main  # local import keeps Qt optional here
        gui_main(config, rng)
        return 0

    for _ in range(args.count):
        meta = generate_with_meta(config, rng)
        if args.show_strength:
            print(f"{meta.password}\t{describe_strength(meta.config)}")
        else:
            print(meta.password)

    return 0
