"""
Validadores genéricos, composición de reglas y limpieza de texto.

Se combinan con los validadores de documentos para armar el mapa de
validación de cada formulario.
"""

from . import rules as validation_rules
from . import sanitize
from .generic import (
    is_empty,
    is_required,
    is_valid_email,
    is_numeric,
    is_alpha,
    is_alphanumeric,
    is_valid_url,
    is_valid_credit_card,
    has_min_length,
    has_max_length,
    check_password,
    is_strong_password,
)
from .rules import compose, validate_data
from .sanitize import escape_html, normalize_text, sanitize_input, strip_html

__all__ = [
    "validation_rules",
    "sanitize",
    "is_empty",
    "is_required",
    "is_valid_email",
    "is_numeric",
    "is_alpha",
    "is_alphanumeric",
    "is_valid_url",
    "is_valid_credit_card",
    "has_min_length",
    "has_max_length",
    "check_password",
    "is_strong_password",
    "compose",
    "validate_data",
    "escape_html",
    "normalize_text",
    "sanitize_input",
    "strip_html",
]
