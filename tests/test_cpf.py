"""
Tests para el validador de CPF.

Valores conocidos:
- 111.444.777-35 y 123.456.789-09: CPFs válidos de ejemplo
- 123.456.789-01: formato correcto, verificadores incorrectos
"""

import pytest

from brforms.documents import cpf
from brforms.exceptions import GeneratorError


class TestCleanCPF:
    """Tests para cpf.clean."""

    def test_removes_mask(self):
        assert cpf.clean("123.456.789-01") == "12345678901"

    def test_removes_spaces_and_dashes(self):
        assert cpf.clean("123 456 789 01") == "12345678901"
        assert cpf.clean("123-456-789-01") == "12345678901"

    def test_empty_and_none(self):
        assert cpf.clean("") == ""
        assert cpf.clean(None) == ""

    @pytest.mark.parametrize("raw", ["123.456.789-01", "abc", "1a2b3c", "  9 ", "٣٤٥"])
    def test_idempotent(self, raw):
        assert cpf.clean(cpf.clean(raw)) == cpf.clean(raw)

    def test_ignores_non_ascii_digits(self):
        """Dígitos de otros alfabetos no cuentan como dígitos del documento."""
        assert cpf.clean("٣٤٥") == ""


class TestFormatCPF:
    """Tests para cpf.format."""

    def test_full_number(self):
        assert cpf.format("12345678901") == "123.456.789-01"
        assert cpf.format("11144477735") == "111.444.777-35"

    def test_already_formatted(self):
        assert cpf.format("123.456.789-01") == "123.456.789-01"

    def test_empty(self):
        assert cpf.format("") == ""

    def test_partial_input(self):
        assert cpf.format("123") == "123"
        assert cpf.format("1234") == "123.4"
        assert cpf.format("1234567") == "123.456.7"
        assert cpf.format("1234567890") == "123.456.789-0"

    def test_truncates_extra_digits(self):
        assert cpf.format("123456789012345") == "123.456.789-01"

    def test_no_digits_returns_input(self):
        assert cpf.format("abc") == "abc"

    @pytest.mark.parametrize("raw", ["1", "1234", "123456789", "12345678901", "111.444.777-35"])
    def test_idempotent(self, raw):
        once = cpf.format(raw)
        assert cpf.format(once) == once

    def test_stable_under_clean(self):
        value = "111.444.777-35"
        assert cpf.format(cpf.clean(value)) == cpf.format(value)


class TestValidateCPF:
    """Tests para cpf.validate."""

    def test_valid(self):
        assert cpf.validate("11144477735") is True
        assert cpf.validate("111.444.777-35") is True
        assert cpf.validate("12345678909") is True

    def test_wrong_check_digits(self):
        assert cpf.validate("12345678900") is False
        assert cpf.validate("12345678901") is False
        assert cpf.validate("11144477736") is False

    @pytest.mark.parametrize("digit", "0123456789")
    def test_repeated_digits(self, digit):
        assert cpf.validate(digit * 11) is False

    def test_wrong_length(self):
        assert cpf.validate("123456789") is False
        assert cpf.validate("123456789012") is False
        assert cpf.validate("123") is False

    def test_garbage(self):
        assert cpf.validate("") is False
        assert cpf.validate("abc") is False
        assert cpf.validate(None) is False
        assert cpf.validate(12345678909) is False

    def test_check_digit(self):
        assert cpf.check_digit([1, 1, 1, 4, 4, 4, 7, 7, 7]) == 3
        assert cpf.check_digit([1, 1, 1, 4, 4, 4, 7, 7, 7, 3]) == 5
        # resto 10 -> 0
        assert cpf.check_digit([1, 2, 3, 4, 5, 6, 7, 8, 9]) == 0


class TestGenerateCPF:
    """Tests para cpf.generate."""

    def test_generated_is_valid(self):
        for _ in range(200):
            assert cpf.validate(cpf.generate())

    def test_generated_is_formatted(self, rng):
        value = cpf.generate(rng)
        assert len(value) == 14
        assert value == cpf.format(value)
        assert len(cpf.clean(value)) == 11

    def test_seeded_is_reproducible(self):
        import random
        assert cpf.generate(random.Random(7)) == cpf.generate(random.Random(7))

    def test_from_base(self):
        assert cpf.from_base([1, 1, 1, 4, 4, 4, 7, 7, 7]) == "111.444.777-35"

    def test_from_base_malformed(self):
        with pytest.raises(GeneratorError):
            cpf.from_base([1, 2, 3])
        with pytest.raises(GeneratorError):
            cpf.from_base([1, 2, 3, 4, 5, 6, 7, 8, 10])
