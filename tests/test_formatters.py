"""
Tests para form/formatters.py - Formateadores de entrada.
"""

import pytest

from brforms.documents import format_cpf
from brforms.form import (
    FormatResult,
    compose_formatters,
    conditional_formatter,
    format_sentence_case,
    format_title_case,
    format_uppercase,
    validate_and_format,
    validate_and_format_cpf,
    validate_and_format_phone,
)
from brforms.validation.sanitize import normalize_text


class TestValidateAndFormatCPF:
    """Tests para validate_and_format_cpf."""

    def test_valid(self):
        assert validate_and_format_cpf("11144477735") == FormatResult(True, "111.444.777-35")

    def test_empty(self):
        result = validate_and_format_cpf("")
        assert result == FormatResult(False, "", "CPF é obrigatório")
        assert validate_and_format_cpf("abc").error == "CPF é obrigatório"

    def test_wrong_length_keeps_mask(self):
        result = validate_and_format_cpf("1234")
        assert result.is_valid is False
        assert result.formatted == "123.4"
        assert result.error == "CPF deve ter 11 dígitos"

    def test_wrong_check_digits(self):
        result = validate_and_format_cpf("123.456.789-00")
        assert result.formatted == "123.456.789-00"
        assert result.error == "CPF inválido"


class TestValidateAndFormatPhone:
    """Tests para validate_and_format_phone."""

    def test_valid_mobile_and_landline(self):
        assert validate_and_format_phone("11987654321").formatted == "(11) 98765-4321"
        assert validate_and_format_phone("1134567890").is_valid is True

    def test_wrong_length(self):
        result = validate_and_format_phone("119")
        assert result.formatted == "(11) 9"
        assert result.error == "Telefone deve ter 10 ou 11 dígitos"

    def test_invalid(self):
        assert validate_and_format_phone("(11) 88765-4321").error == "Telefone inválido"


class TestValidateAndFormat:
    """Tests para validate_and_format con otros documentos."""

    def test_by_name(self):
        assert validate_and_format("cnpj", "11222333000181").formatted == "11.222.333/0001-81"
        assert validate_and_format("rg", "123").error == "RG deve ter 8 ou 9 dígitos"
        assert validate_and_format("cep", "00000000").error == "CEP inválido"

    def test_unknown_type(self):
        with pytest.raises(ValueError):
            validate_and_format("passport", "123")


class TestFormatterComposition:
    """Tests para compose_formatters y conditional_formatter."""

    def test_compose_in_order(self):
        formatter = compose_formatters(normalize_text, format_title_case)
        assert formatter("  ana   maria ") == "Ana Maria"

    def test_compose_empty(self):
        assert compose_formatters()("x") == "x"

    def test_conditional(self):
        formatter = conditional_formatter(str.isdigit, format_cpf)
        assert formatter("11144477735") == "111.444.777-35"
        assert formatter("abc") == "abc"


class TestCaseFormatters:
    """Tests para formateadores de mayúsculas."""

    def test_uppercase(self):
        assert format_uppercase("ação") == "AÇÃO"

    def test_title_case(self):
        assert format_title_case("JOÃO da SILVA") == "João Da Silva"

    def test_sentence_case(self):
        assert format_sentence_case("hELLO World") == "Hello world"
        assert format_sentence_case("") == ""
