"""
Tests for pool assembly and password generation.
"""

import random
import string

import pytest

from randpass import GeneratorConfig, build_pool, generate, generate_with_meta
from randpass.config import DIGITS, LETTERS, SYMBOLS
from randpass.generator import config_entropy_bits, describe_strength, strength_label

ALL_FLAGS = [(False, False), (True, False), (False, True), (True, True)]


class TestPool:

    def test_base_pool_is_52_letters(self):
        pool = build_pool(GeneratorConfig())
        assert pool == LETTERS
        assert len(pool) == 52

    def test_digits_extend_pool_by_ten(self):
        base = build_pool(GeneratorConfig())
        pool = build_pool(GeneratorConfig(include_digits=True))
        assert len(pool) == len(base) + 10
        assert pool == base + DIGITS

    def test_symbols_extend_pool_by_32(self):
        base = build_pool(GeneratorConfig())
        pool = build_pool(GeneratorConfig(include_symbols=True))
        assert len(pool) == len(base) + 32
        assert pool == base + SYMBOLS

    def test_full_pool_is_94_distinct_characters(self):
        pool = build_pool(GeneratorConfig(include_digits=True, include_symbols=True))
        assert len(pool) == 94
        assert len(set(pool)) == 94
        assert set(pool) == set(string.ascii_letters + string.digits + string.punctuation)

    def test_default_config_when_none(self):
        assert build_pool() == LETTERS


class TestGenerate:

    @pytest.mark.parametrize("digits, symbols", ALL_FLAGS)
    @pytest.mark.parametrize("length", [6, 12, 57, 100])
    def test_length_and_membership(self, rng, length, digits, symbols):
        config = GeneratorConfig(length=length, include_digits=digits, include_symbols=symbols)
        pool = set(build_pool(config))
        password = generate(config, rng)
        assert len(password) == length
        assert set(password) <= pool

    def test_letters_only(self):
        for _ in range(50):
            password = generate(GeneratorConfig(length=12))
            assert len(password) == 12
            assert all(c in string.ascii_letters for c in password)

    def test_lengths_outside_ui_range_still_work(self, rng):
        assert generate(GeneratorConfig(length=0), rng) == ""
        assert len(generate(GeneratorConfig(length=1), rng)) == 1
        assert len(generate(GeneratorConfig(length=500), rng)) == 500

    def test_same_seed_same_password(self):
        config = GeneratorConfig(length=30, include_digits=True, include_symbols=True)
        assert generate(config, random.Random(7)) == generate(config, random.Random(7))

    def test_consecutive_calls_vary(self):
        config = GeneratorConfig(length=20, include_digits=True)
        passwords = {generate(config) for _ in range(10)}
        assert len(passwords) > 1

    def test_repeats_are_allowed(self):
        # A 100 character draw from 52 letters must repeat something.
        password = generate(GeneratorConfig(length=100), random.Random(3))
        assert len(set(password)) < len(password)

    def test_every_pool_character_reachable(self):
        config = GeneratorConfig(length=100, include_digits=True, include_symbols=True)
        source = random.Random(99)
        seen = set()
        for _ in range(100):
            seen.update(generate(config, source))
        assert seen == set(build_pool(config))

    def test_uses_rng_randrange(self):
        class FirstIndex:
            def randrange(self, n):
                return 0

        class LastIndex:
            def randrange(self, n):
                return n - 1

        config = GeneratorConfig(length=8, include_digits=True, include_symbols=True)
        assert generate(config, FirstIndex()) == "A" * 8
        assert generate(config, LastIndex()) == "\\" * 8
        assert generate(GeneratorConfig(length=8), LastIndex()) == "z" * 8


class TestMeta:

    def test_meta_fields(self, rng):
        config = GeneratorConfig(length=16, include_digits=True)
        meta = generate_with_meta(config, rng)
        assert len(meta.password) == 16
        assert meta.pool_size == 62
        assert meta.config is config
        assert meta.entropy_bits == pytest.approx(16 * 5.954196310386876)

    def test_meta_zero_length(self, rng):
        meta = generate_with_meta(GeneratorConfig(length=0), rng)
        assert meta.password == ""
        assert meta.entropy_bits == 0.0


class TestStrength:

    def test_zero_length(self):
        assert config_entropy_bits(GeneratorConfig(length=0)) == 0.0
        assert strength_label(0.0) == "Very weak"

    def test_bits_come_from_pool_size(self):
        assert config_entropy_bits(GeneratorConfig(length=4)) == pytest.approx(4 * 5.700439718141092)
        full = GeneratorConfig(length=4, include_digits=True, include_symbols=True)
        assert config_entropy_bits(full) == pytest.approx(4 * 6.554588851677638)

    def test_same_figure_whatever_was_drawn(self):
        class FirstIndex:
            def randrange(self, n):
                return 0

        # "AAAAAAAA" rates the same as any other draw with these settings.
        config = GeneratorConfig(length=8, include_digits=True, include_symbols=True)
        meta = generate_with_meta(config, FirstIndex())
        assert meta.password == "A" * 8
        assert meta.entropy_bits == config_entropy_bits(config)
        assert describe_strength(config) == f"{strength_label(meta.entropy_bits)} (~52.4 bits)"

    @pytest.mark.parametrize("bits, label", [
        (10, "Weak"),
        (49.9, "Weak"),
        (50, "Moderate"),
        (80, "Strong"),
        (109.9, "Strong"),
        (110, "Very strong"),
    ])
    def test_labels(self, bits, label):
        assert strength_label(bits) == label
