"""
Modelos de datos del motor de formularios.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Optional


@dataclass
class FormField:
    """
    Estado de un campo.

    dirty: el valor difiere del valor inicial
    touched: el campo recibió y perdió el foco al menos una vez
    error: None si el campo pasa su validador (o no tiene)
    """
    value: Any = None
    error: Optional[str] = None
    touched: bool = False
    dirty: bool = False


# Campo -> estado; las claves se fijan al construir el formulario
FormData = dict[str, FormField]


@dataclass
class FormState:
    """Instantánea del formulario, derivada de FormData en cada lectura."""
    data: FormData = field(default_factory=dict)
    is_valid: bool = True
    is_dirty: bool = False
    is_touched: bool = False
    errors: dict[str, Optional[str]] = field(default_factory=dict)

    @property
    def values(self) -> dict[str, Any]:
        """Valores planos por campo."""
        return {key: f.value for key, f in self.data.items()}

    def to_dict(self) -> dict:
        """Representación serializable."""
        return {
            "data": {key: asdict(f) for key, f in self.data.items()},
            "is_valid": self.is_valid,
            "is_dirty": self.is_dirty,
            "is_touched": self.is_touched,
            "errors": dict(self.errors),
        }
