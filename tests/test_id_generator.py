"""Tests for short id generation."""

import pytest

from shorturl.services.id_generator import DEFAULT_ALPHABET, IdGenerator


class TestIdGenerator:
    """Test IdGenerator."""

    def test_default_format(self):
        """Default ids are 10 symbols from the 16-symbol hex alphabet."""
        generator = IdGenerator()
        for _ in range(100):
            short_id = generator.generate()
            assert len(short_id) == 10
            assert set(short_id) <= set(DEFAULT_ALPHABET)

    def test_custom_alphabet_and_length(self):
        generator = IdGenerator(alphabet="xy", length=4)
        for _ in range(50):
            short_id = generator.generate()
            assert len(short_id) == 4
            assert set(short_id) <= {"x", "y"}

    def test_single_symbol_alphabet(self):
        assert IdGenerator(alphabet="z", length=3).generate() == "zzz"

    def test_ids_are_fresh(self):
        """Consecutive ids differ (16^10 possibilities)."""
        generator = IdGenerator()
        ids = {generator.generate() for _ in range(1000)}
        assert len(ids) == 1000

    def test_all_symbols_reachable(self):
        generator = IdGenerator()
        seen = set()
        for _ in range(200):
            seen.update(generator.generate())
        assert seen == set(DEFAULT_ALPHABET)

    @pytest.mark.parametrize(
        "alphabet, length",
        [
            ("", 10),
            ("aab", 10),
            ("abc", 0),
            ("abc", -1),
        ],
    )
    def test_rejects_bad_configuration(self, alphabet, length):
        with pytest.raises(ValueError):
            IdGenerator(alphabet=alphabet, length=length)
