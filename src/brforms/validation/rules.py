"""
Reglas de validación componibles.

Cada fábrica devuelve una regla `(valor, valores=None) -> mensaje | None`.
Salvo `required`, todas las reglas aceptan el valor vacío: un campo
opcional sólo se valida si tiene contenido.

Ejemplo:
    validation = {
        "email": compose(required("Email é obrigatório"), email()),
        "cpf": compose(required(), document(DocumentType.CPF)),
    }
"""

import math
import re
from typing import Any, Callable, Mapping, Optional, Union

from brforms.config import DocumentType, FieldValidator
from brforms.documents import get_document, validate_phone
from brforms.validation.generic import (
    has_max_length,
    has_min_length,
    is_required,
    is_valid_email,
    is_valid_url,
)

Rule = Callable[..., Optional[str]]

_DECIMAL_RX = re.compile(r"[+-]?(?:[0-9]+(?:[.,][0-9]*)?|[.,][0-9]+)(?:[eE][+-]?[0-9]+)?")


def _is_empty(value: Any) -> bool:
    return not is_required(value)


def _to_number(value: Any) -> Optional[float]:
    """Número finito; acepta coma decimal. None si no es un número."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    else:
        text = str(value).strip()
        if not _DECIMAL_RX.fullmatch(text):
            return None
        number = float(text.replace(",", "."))
    return number if math.isfinite(number) else None


def required(message: str = "Campo obrigatório") -> Rule:
    def rule(value: Any, values: Optional[Mapping] = None) -> Optional[str]:
        return message if _is_empty(value) else None
    return rule


def min_length(minimum: int, message: Optional[str] = None) -> Rule:
    def rule(value: Any, values: Optional[Mapping] = None) -> Optional[str]:
        if _is_empty(value) or has_min_length(value, minimum):
            return None
        return message or f"Deve ter pelo menos {minimum} caracteres"
    return rule


def max_length(maximum: int, message: Optional[str] = None) -> Rule:
    def rule(value: Any, values: Optional[Mapping] = None) -> Optional[str]:
        if _is_empty(value) or has_max_length(value, maximum):
            return None
        return message or f"Deve ter no máximo {maximum} caracteres"
    return rule


def email(message: str = "Email inválido") -> Rule:
    def rule(value: Any, values: Optional[Mapping] = None) -> Optional[str]:
        if _is_empty(value) or is_valid_email(value):
            return None
        return message
    return rule


def phone(message: str = "Telefone inválido") -> Rule:
    """Teléfono brasileño (fijo o celular)."""
    def rule(value: Any, values: Optional[Mapping] = None) -> Optional[str]:
        if _is_empty(value) or validate_phone(value):
            return None
        return message
    return rule


def url(message: str = "URL inválida") -> Rule:
    def rule(value: Any, values: Optional[Mapping] = None) -> Optional[str]:
        if _is_empty(value) or is_valid_url(value):
            return None
        return message
    return rule


def numeric(message: str = "Deve ser um número") -> Rule:
    def rule(value: Any, values: Optional[Mapping] = None) -> Optional[str]:
        if _is_empty(value) or _to_number(value) is not None:
            return None
        return message
    return rule


def min_value(minimum: float, message: Optional[str] = None) -> Rule:
    def rule(value: Any, values: Optional[Mapping] = None) -> Optional[str]:
        if _is_empty(value):
            return None
        number = _to_number(value)
        if number is None:
            return "Deve ser um número"
        if number < minimum:
            return message or f"Deve ser no mínimo {minimum}"
        return None
    return rule


def max_value(maximum: float, message: Optional[str] = None) -> Rule:
    def rule(value: Any, values: Optional[Mapping] = None) -> Optional[str]:
        if _is_empty(value):
            return None
        number = _to_number(value)
        if number is None:
            return "Deve ser um número"
        if number > maximum:
            return message or f"Deve ser no máximo {maximum}"
        return None
    return rule


def matches(other_field: str, message: str = "Valores não coincidem") -> Rule:
    """Igual al valor de otro campo del formulario (ej. confirmación de senha)."""
    def rule(value: Any, values: Optional[Mapping] = None) -> Optional[str]:
        if _is_empty(value):
            return None
        other = (values or {}).get(other_field)
        return None if value == other else message
    return rule


def document(doc_type: Union[DocumentType, str], message: Optional[str] = None) -> Rule:
    """Documento brasileño válido (CPF, CNPJ, PIS, CEP, RG o teléfono)."""
    handler = get_document(doc_type)

    def rule(value: Any, values: Optional[Mapping] = None) -> Optional[str]:
        if _is_empty(value) or handler.validate(value):
            return None
        return message or f"{handler.label} inválido"
    return rule


def compose(*rules: Rule) -> FieldValidator:
    """
    Combina reglas en un validador de FormEngine.

    Devuelve el mensaje de la primera regla que falla.
    """
    def validator(value: Any, values: Optional[Mapping] = None) -> Optional[str]:
        for rule in rules:
            error = rule(value, values)
            if error:
                return error
        return None
    return validator


def validate_data(
    data: Mapping[str, Any],
    rules: Mapping[str, Rule],
) -> tuple[bool, dict[str, str]]:
    """
    Valida un diccionario plano contra un mapa de reglas.

    Returns:
        (es_valido, errores) con errores sólo para los campos que fallan
    """
    errors = {}
    for key, rule in rules.items():
        error = rule(data.get(key), data)
        if error:
            errors[key] = error
    return not errors, errors
