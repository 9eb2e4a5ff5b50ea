"""
Motor de estado de formularios.

Mantiene {value, error, touched, dirty} por campo, aplica el mapa de
validación según los disparadores configurados y expone operaciones de
mutación, consulta y envío. Todo es síncrono: cada operación se ejecuta
completa dentro del manejador de evento que la invoca.
"""

import copy
import logging
from typing import Any, Callable, Mapping, Optional

from brforms.config import FieldValidator, FormOptions
from brforms.exceptions import UnknownFieldError
from brforms.form.helpers import (
    build_form_data,
    get_form_values,
    is_form_dirty,
    is_form_touched,
    is_form_valid,
    validate_all,
    validate_field,
)
from brforms.form.models import FormData, FormField, FormState

_FIELD_ATTRS = ("value", "error", "touched", "dirty")


class FormEngine:
    """
    Contenedor explícito del estado de un formulario.

    Cada instancia es dueña de su propio mapa de campos; las claves quedan
    fijas al construirla.

    Ejemplo:
        form = FormEngine(
            {"email": "", "cpf": ""},
            {"email": compose(required(), email())},
        )
        form.set_field_value("email", "bad")
        form.state.errors["email"]   # "Email inválido"
    """

    def __init__(
        self,
        initial_values: Mapping[str, Any],
        validation: Optional[Mapping[str, FieldValidator]] = None,
        *,
        validate_on_change: bool = True,
        validate_on_blur: bool = True,
        validate_on_submit: bool = True,
        logger: Optional[logging.Logger] = None,
    ):
        self._initial = copy.deepcopy(dict(initial_values))
        # Referencia para dirty; cambia con reset_form(new_values)
        self._baseline = copy.deepcopy(self._initial)
        self._validation = dict(validation or {})
        self.validate_on_change = validate_on_change
        self.validate_on_blur = validate_on_blur
        self.validate_on_submit = validate_on_submit
        self.logger = logger or logging.getLogger(__name__)

        for key in self._validation:
            if key not in self._initial:
                raise UnknownFieldError(key, list(self._initial))

        self._data: FormData = build_form_data(self._initial)

    @classmethod
    def from_options(
        cls, options: FormOptions, logger: Optional[logging.Logger] = None
    ) -> "FormEngine":
        """Construye el motor a partir de FormOptions."""
        return cls(
            options.initial_values,
            options.validation,
            validate_on_change=options.validate_on_change,
            validate_on_blur=options.validate_on_blur,
            validate_on_submit=options.validate_on_submit,
            logger=logger,
        )

    # ------------------------------------------------------------------
    # Consultas
    # ------------------------------------------------------------------

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(self._data)

    @property
    def initial_values(self) -> dict[str, Any]:
        """Valores de construcción; reset_form no los modifica."""
        return copy.deepcopy(self._initial)

    @property
    def values(self) -> dict[str, Any]:
        """Valores planos actuales."""
        return get_form_values(self._data)

    @property
    def state(self) -> FormState:
        """Instantánea derivada del estado actual (copia independiente)."""
        data = copy.deepcopy(self._data)
        errors = {key: f.error for key, f in data.items()}
        return FormState(
            data=data,
            is_valid=is_form_valid(errors),
            is_dirty=is_form_dirty(data),
            is_touched=is_form_touched(data),
            errors=errors,
        )

    def __contains__(self, field: str) -> bool:
        return field in self._data

    def get_field(self, field: str) -> FormField:
        """Copia del estado de un campo."""
        return copy.deepcopy(self._get(field))

    def get_field_value(self, field: str) -> Any:
        return self._get(field).value

    def get_field_error(self, field: str) -> Optional[str]:
        return self._get(field).error

    def is_field_touched(self, field: str) -> bool:
        return self._get(field).touched

    def is_field_dirty(self, field: str) -> bool:
        return self._get(field).dirty

    # ------------------------------------------------------------------
    # Mutaciones
    # ------------------------------------------------------------------

    def set_field_value(self, field: str, value: Any) -> None:
        """Escribe el valor, recalcula dirty y valida si validate_on_change."""
        f = self._get(field)
        f.value = value
        f.dirty = value != self._baseline[field]
        if self.validate_on_change:
            f.error = self._run_validator(field)

    def set_field_touched(self, field: str) -> None:
        """Marca el campo como tocado (blur) y valida si validate_on_blur."""
        f = self._get(field)
        f.touched = True
        if self.validate_on_blur:
            f.error = self._run_validator(field)

    def set_field_error(self, field: str, error: Optional[str]) -> None:
        """Fija el error sin pasar por el validador (ej. error del servidor)."""
        self._get(field).error = error or None

    def set_field_dirty(self, field: str, dirty: bool) -> None:
        self._get(field).dirty = bool(dirty)

    def set_field(self, field: str, **updates: Any) -> None:
        """
        Actualización parcial de value/error/touched/dirty, sin validar.

        touched nunca vuelve a False por esta vía; sólo los reset lo limpian.
        """
        f = self._get(field)
        for attr, value in updates.items():
            if attr not in _FIELD_ATTRS:
                raise TypeError(f"Atributo de campo desconocido: {attr!r}")
            if attr == "touched":
                f.touched = f.touched or bool(value)
            elif attr == "error":
                f.error = value or None
            elif attr == "dirty":
                f.dirty = bool(value)
            else:
                f.value = value

    def set_fields(self, updates: Mapping[str, Mapping[str, Any]]) -> None:
        """set_field para varios campos: {"campo": {"value": ..., ...}}."""
        self._check_keys(updates)
        for field, field_updates in updates.items():
            self.set_field(field, **field_updates)

    def set_values(self, values: Mapping[str, Any]) -> None:
        """set_field_value para varios campos."""
        self._check_keys(values)
        for field, value in values.items():
            self.set_field_value(field, value)

    def set_errors(self, errors: Mapping[str, Optional[str]]) -> None:
        self._check_keys(errors)
        for field, error in errors.items():
            self.set_field_error(field, error)

    def clear_errors(self) -> None:
        for f in self._data.values():
            f.error = None

    def reset_field(self, field: str) -> None:
        """Restaura el campo al valor de construcción, sin error ni marcas."""
        self._get(field)
        self._baseline[field] = copy.deepcopy(self._initial[field])
        self._data[field] = FormField(value=copy.deepcopy(self._initial[field]))

    def reset_form(self, new_values: Optional[Mapping[str, Any]] = None) -> None:
        """
        Reconstruye todos los campos.

        `new_values` se combina siempre sobre los valores de construcción,
        que no cambian; el resultado pasa a ser la referencia para dirty
        (flujo "recargar"). Sin argumentos vuelve a los valores de construcción.
        """
        new_values = dict(new_values or {})
        self._check_keys(new_values)
        self._baseline = {**copy.deepcopy(self._initial), **copy.deepcopy(new_values)}
        self._data = build_form_data(self._baseline)

    # ------------------------------------------------------------------
    # Validación y envío
    # ------------------------------------------------------------------

    def validate_field(self, field: str) -> Optional[str]:
        """Error actual del campo según su validador, sin modificar estado."""
        self._get(field)
        return self._run_validator(field)

    def validate_form(self) -> bool:
        """Valida todos los campos, escribe los errores y devuelve si es válido."""
        errors = validate_all(self._data, self._validation, self.logger)
        for field, error in errors.items():
            self._data[field].error = error
        return is_form_valid(errors)

    def handle_submit(
        self, on_submit: Callable[[dict[str, Any]], Any]
    ) -> Callable[..., Any]:
        """
        Crea el manejador de envío.

        El manejador suprime el comportamiento por defecto del evento (si se
        pasa uno), valida si validate_on_submit y sólo llama a `on_submit`
        con los valores planos cuando el formulario es válido. El resultado
        de `on_submit` se devuelve sin esperarlo.
        """
        def handler(event: Any = None) -> Any:
            if event is not None:
                _suppress_event(event)

            if self.validate_on_submit and not self.validate_form():
                invalid = [key for key, f in self._data.items() if f.error is not None]
                self.logger.debug("Envío bloqueado, campos inválidos: %s", invalid)
                return None

            values = copy.deepcopy(self.values)
            self.logger.debug("Enviando formulario con campos: %s", list(values))
            return on_submit(values)

        return handler

    # ------------------------------------------------------------------
    # Internos
    # ------------------------------------------------------------------

    def _get(self, field: str) -> FormField:
        try:
            return self._data[field]
        except KeyError:
            raise UnknownFieldError(field, list(self._data)) from None

    def _check_keys(self, mapping: Mapping[str, Any]) -> None:
        for key in mapping:
            if key not in self._data:
                raise UnknownFieldError(key, list(self._data))

    def _run_validator(self, field: str) -> Optional[str]:
        return validate_field(
            field,
            self._data[field].value,
            self.values,
            self._validation,
            self.logger,
        )


def _suppress_event(event: Any) -> None:
    """Llama a preventDefault/stopPropagation (o sus variantes snake_case)."""
    for names in (("preventDefault", "prevent_default"), ("stopPropagation", "stop_propagation")):
        for name in names:
            method = getattr(event, name, None)
            if callable(method):
                method()
                break
