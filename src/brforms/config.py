"""Modelos Pydantic para configuración de formularios y tipos de documento."""

from enum import Enum
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class DocumentType(str, Enum):
    """Tipos de documento brasileño soportados."""
    CPF = "cpf"
    CNPJ = "cnpj"
    PIS = "pis"
    CEP = "cep"
    RG = "rg"
    PHONE = "phone"


# Validador de campo: (valor, valores_del_formulario) -> mensaje | None
FieldValidator = Callable[[Any, dict], Optional[str]]


class FormOptions(BaseModel):
    """Opciones de construcción de un FormEngine."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    initial_values: dict[str, Any] = Field(..., description="Valores iniciales por campo")
    validation: dict[str, FieldValidator] = Field(
        default_factory=dict, description="Validador por campo"
    )
    validate_on_change: bool = Field(default=True, description="Validar al cambiar el valor")
    validate_on_blur: bool = Field(default=True, description="Validar al perder el foco")
    validate_on_submit: bool = Field(default=True, description="Validar antes de enviar")

    @model_validator(mode="after")
    def check_validation_keys(self) -> "FormOptions":
        unknown = sorted(set(self.validation) - set(self.initial_values))
        if unknown:
            raise ValueError(
                f"Validadores para campos inexistentes: {', '.join(unknown)}"
            )
        return self
