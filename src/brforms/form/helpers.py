"""
Funciones puras sobre FormData y mapas de validación.
"""

import copy
import logging
from typing import Any, Mapping, Optional

from brforms.config import FieldValidator
from brforms.form.models import FormData, FormField

logger = logging.getLogger(__name__)

# Mensaje cuando un validador lanza una excepción
VALIDATION_ERROR = "Validation error"


def build_form_data(values: Mapping[str, Any]) -> FormData:
    """Crea un campo limpio (sin error, sin tocar) por cada valor."""
    return {key: FormField(value=copy.deepcopy(value)) for key, value in values.items()}


def get_form_values(data: FormData) -> dict[str, Any]:
    """Valores planos del formulario."""
    return {key: f.value for key, f in data.items()}


def validate_field(
    field: str,
    value: Any,
    values: Mapping[str, Any],
    validation: Mapping[str, FieldValidator],
    log: Optional[logging.Logger] = None,
) -> Optional[str]:
    """
    Ejecuta el validador de un campo.

    Un validador que lanza una excepción no debe tumbar la interfaz: el
    error se registra con el nombre del campo y se devuelve VALIDATION_ERROR.

    Returns:
        Mensaje de error o None si el campo es válido (o no tiene validador)
    """
    validator = validation.get(field)
    if validator is None:
        return None

    try:
        error = validator(value, values)
    except Exception:
        (log or logger).warning(
            "El validador del campo %r lanzó una excepción", field, exc_info=True
        )
        return VALIDATION_ERROR

    return error or None


def validate_all(
    data: FormData,
    validation: Mapping[str, FieldValidator],
    log: Optional[logging.Logger] = None,
) -> dict[str, Optional[str]]:
    """Errores de todos los campos, sin modificar el estado."""
    values = get_form_values(data)
    return {
        key: validate_field(key, f.value, values, validation, log)
        for key, f in data.items()
    }


def is_form_valid(errors: Mapping[str, Optional[str]]) -> bool:
    """True si ningún campo tiene error."""
    return all(error is None for error in errors.values())


def is_form_dirty(data: FormData) -> bool:
    return any(f.dirty for f in data.values())


def is_form_touched(data: FormData) -> bool:
    return any(f.touched for f in data.values())
