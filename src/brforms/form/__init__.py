"""
Motor de estado y validación de formularios.
"""

from .models import FormField, FormData, FormState
from .helpers import (
    VALIDATION_ERROR,
    build_form_data,
    get_form_values,
    validate_field,
    validate_all,
    is_form_valid,
    is_form_dirty,
    is_form_touched,
)
from .engine import FormEngine
from .formatters import (
    FormatResult,
    validate_and_format,
    validate_and_format_cpf,
    validate_and_format_phone,
    compose_formatters,
    conditional_formatter,
    format_uppercase,
    format_title_case,
    format_sentence_case,
)

__all__ = [
    "FormField",
    "FormData",
    "FormState",
    "FormEngine",
    "VALIDATION_ERROR",
    "build_form_data",
    "get_form_values",
    "validate_field",
    "validate_all",
    "is_form_valid",
    "is_form_dirty",
    "is_form_touched",
    "FormatResult",
    "validate_and_format",
    "validate_and_format_cpf",
    "validate_and_format_phone",
    "compose_formatters",
    "conditional_formatter",
    "format_uppercase",
    "format_title_case",
    "format_sentence_case",
]
