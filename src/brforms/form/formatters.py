"""
Formateadores de entrada para campos de formulario.

Un formateador es una función str -> str que se aplica al valor antes de
guardarlo con set_field_value. validate_and_format combina máscara y
validación de un documento para mostrar el error en línea.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Union

from brforms.config import DocumentType
from brforms.documents import get_document

Formatter = Callable[[str], str]


@dataclass(frozen=True)
class FormatResult:
    """Resultado de validar y aplicar máscara a un documento."""
    is_valid: bool
    formatted: str
    error: Optional[str] = None


def validate_and_format(doc_type: Union[DocumentType, str], value: str) -> FormatResult:
    """
    Valida un documento y devuelve su forma con máscara.

    El mensaje distingue campo vacío, largo incorrecto y verificador
    inválido; `formatted` tiene la máscara aunque el documento sea inválido.

    Raises:
        ValueError: Si el tipo de documento no existe.
    """
    handler = get_document(doc_type)
    digits = handler.clean(value)
    if not digits:
        return FormatResult(False, "", f"{handler.label} é obrigatório")

    formatted = handler.format(digits)
    if len(digits) not in handler.lengths:
        lengths = " ou ".join(str(n) for n in handler.lengths)
        return FormatResult(False, formatted, f"{handler.label} deve ter {lengths} dígitos")
    if not handler.validate(digits):
        return FormatResult(False, formatted, f"{handler.label} inválido")
    return FormatResult(True, formatted)


def validate_and_format_cpf(value: str) -> FormatResult:
    return validate_and_format(DocumentType.CPF, value)


def validate_and_format_phone(value: str) -> FormatResult:
    return validate_and_format(DocumentType.PHONE, value)


def compose_formatters(*formatters: Formatter) -> Formatter:
    """Aplica los formateadores en orden, cada uno sobre el resultado del anterior."""
    def formatter(value: str) -> str:
        for f in formatters:
            value = f(value)
        return value
    return formatter


def conditional_formatter(condition: Callable[[str], bool], formatter: Formatter) -> Formatter:
    """Aplica `formatter` sólo cuando `condition(valor)` es verdadero."""
    def wrapped(value: str) -> str:
        return formatter(value) if condition(value) else value
    return wrapped


def format_uppercase(value: str) -> str:
    return (value or "").upper()


def format_title_case(value: str) -> str:
    """Primera letra de cada palabra en mayúscula, el resto en minúscula."""
    words = (value or "").lower().split(" ")
    return " ".join(word[:1].upper() + word[1:] for word in words)


def format_sentence_case(value: str) -> str:
    value = value or ""
    return value[:1].upper() + value[1:].lower()
