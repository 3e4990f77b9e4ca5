"""Tests for short code generation."""

import random

import pytest
from shortener.shortcode import ShortCodeGenerator


class TestShortCodeGenerator:
    """Test short code generation."""

    def test_generate_default_length(self):
        """Codes are six base62 characters."""
        generator = ShortCodeGenerator(default_length=6)

        for _ in range(200):
            code = generator.generate()
            assert len(code) == 6
            assert code.isascii() and code.isalnum()
            assert set(code) <= set(ShortCodeGenerator.BASE62_CHARS)

    def test_generate_custom_length(self):
        """Test random code with custom length."""
        generator = ShortCodeGenerator(default_length=6)

        code = generator.generate(length=8)
        assert len(code) == 8
        assert set(code) <= set(ShortCodeGenerator.BASE62_CHARS)

    def test_seeded_source_is_reproducible(self):
        """Same seed, same codes."""
        first = ShortCodeGenerator(rng=random.Random(42))
        second = ShortCodeGenerator(rng=random.Random(42))

        assert [first.generate() for _ in range(5)] == [second.generate() for _ in range(5)]

    def test_draws_cover_whole_alphabet(self):
        """Lower case, upper case and digits all show up."""
        generator = ShortCodeGenerator(rng=random.Random(7))

        seen = set("".join(generator.generate() for _ in range(2000)))

        assert seen == set(ShortCodeGenerator.BASE62_CHARS)

    def test_alphabet(self):
        """Alphabet is the 62 alphanumeric symbols."""
        assert len(ShortCodeGenerator.BASE62_CHARS) == 62
        assert len(set(ShortCodeGenerator.BASE62_CHARS)) == 62

    def test_rejects_non_positive_length(self):
        with pytest.raises(ValueError):
            ShortCodeGenerator(default_length=0)
