"""
Mapas de validación de las pantallas de login, registro y perfil.

Los mensajes son los que se muestran al usuario final (pt-BR).
"""

from typing import Any, Mapping, Optional

from brforms.config import DocumentType, FieldValidator
from brforms.documents import validate_cpf, validate_phone
from brforms.validation.generic import is_valid_email
from brforms.validation.rules import compose, matches, min_length, required


def validate_name(value: str, values: Optional[Mapping[str, Any]] = None) -> Optional[str]:
    if not value:
        return "Nome é obrigatório"
    if len(value.strip()) < 2:
        return "Nome deve ter pelo menos 2 caracteres"
    return None


def validate_email(value: str, values: Optional[Mapping[str, Any]] = None) -> Optional[str]:
    if not value:
        return "Email é obrigatório"
    if not is_valid_email(value):
        return "Email inválido"
    return None


def validate_cpf_field(value: str, values: Optional[Mapping[str, Any]] = None) -> Optional[str]:
    if not value:
        return "CPF é obrigatório"
    if not validate_cpf(value):
        return "CPF inválido"
    return None


def validate_phone_field(value: str, values: Optional[Mapping[str, Any]] = None) -> Optional[str]:
    if not value:
        return "Telefone é obrigatório"
    if not validate_phone(value):
        return "Telefone inválido"
    return None


LOGIN_VALIDATION: dict[str, FieldValidator] = {
    "email": validate_email,
    "password": compose(required("Senha é obrigatória")),
}

REGISTER_VALIDATION: dict[str, FieldValidator] = {
    "name": validate_name,
    "email": validate_email,
    "password": compose(
        required("Senha é obrigatória"),
        min_length(6, "Senha deve ter pelo menos 6 caracteres"),
    ),
    "confirm_password": compose(
        required("Confirmação de senha é obrigatória"),
        matches("password", "Senhas não coincidem"),
    ),
    "cpf": validate_cpf_field,
    "phone": validate_phone_field,
}

PROFILE_VALIDATION: dict[str, FieldValidator] = {
    "name": validate_name,
    "email": validate_email,
    "cpf": validate_cpf_field,
    "phone": validate_phone_field,
}

# Campos que se guardan con máscara de documento
DOCUMENT_FIELDS: dict[str, DocumentType] = {
    "cpf": DocumentType.CPF,
    "cnpj": DocumentType.CNPJ,
    "pis": DocumentType.PIS,
    "cep": DocumentType.CEP,
    "rg": DocumentType.RG,
    "phone": DocumentType.PHONE,
}

FORMS: dict[str, dict[str, FieldValidator]] = {
    "login": LOGIN_VALIDATION,
    "register": REGISTER_VALIDATION,
    "profile": PROFILE_VALIDATION,
}


def initial_values_for(form_name: str) -> dict[str, str]:
    """Valores iniciales vacíos para un formulario registrado."""
    try:
        validation = FORMS[form_name]
    except KeyError:
        raise ValueError(
            f"Formulario desconocido: {form_name} (válidos: {', '.join(FORMS)})"
        ) from None
    return {key: "" for key in validation}
