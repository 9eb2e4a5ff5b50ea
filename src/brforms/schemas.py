"""
Modelos Pydantic de los formularios de autenticación y perfil.

Alternativa declarativa al FormEngine para validar un envío completo.
Los documentos se normalizan a su forma con máscara.
"""

import re
from enum import Enum

from pydantic import BaseModel, Field, field_validator, model_validator

from brforms.documents import format_cpf, format_phone, validate_cpf, validate_phone
from brforms.validation.generic import is_valid_email

_NAME_RX = re.compile(r"[a-zA-ZÀ-ÿ\s]+")
_PASSWORD_RX = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)")


class UserRole(str, Enum):
    """Roles de usuario."""
    USER = "user"
    ADMIN = "admin"
    MODERATOR = "moderator"


def _check_email(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("Email é obrigatório")
    if not is_valid_email(v):
        raise ValueError("Email inválido")
    return v


def _check_name(v: str) -> str:
    v = v.strip()
    if not _NAME_RX.fullmatch(v):
        raise ValueError("Nome deve conter apenas letras e espaços")
    return v


def _check_cpf(v: str) -> str:
    if not v:
        raise ValueError("CPF é obrigatório")
    if not validate_cpf(v):
        raise ValueError("CPF inválido")
    return format_cpf(v)


def _check_phone(v: str) -> str:
    if not v:
        raise ValueError("Telefone é obrigatório")
    if not validate_phone(v):
        raise ValueError("Telefone inválido")
    return format_phone(v)


class LoginForm(BaseModel):
    """Formulario de login."""
    email: str = Field(..., max_length=255, description="Email")
    password: str = Field(..., min_length=1, description="Senha")

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return _check_email(v)


class ProfileUpdateForm(BaseModel):
    """Actualización de perfil."""
    name: str = Field(..., min_length=2, max_length=100, description="Nome")
    email: str = Field(..., max_length=255, description="Email")
    cpf: str = Field(..., description="CPF (con o sin máscara)")
    phone: str = Field(..., description="Telefone (con o sin máscara)")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _check_name(v)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return _check_email(v)

    @field_validator("cpf")
    @classmethod
    def validate_cpf(cls, v: str) -> str:
        return _check_cpf(v)

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v: str) -> str:
        return _check_phone(v)


class ProfileCreateForm(ProfileUpdateForm):
    """Alta de perfil (uso administrativo)."""
    role: UserRole = Field(default=UserRole.USER, description="Rol")
    is_active: bool = Field(default=True, description="Activo")


class RegisterForm(ProfileUpdateForm):
    """Formulario de registro."""
    password: str = Field(..., min_length=8, max_length=128, description="Senha")
    confirm_password: str = Field(..., description="Confirmação de senha")

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        if not _PASSWORD_RX.match(v):
            raise ValueError(
                "Senha deve conter pelo menos: 1 letra minúscula, 1 maiúscula e 1 número"
            )
        return v

    @model_validator(mode="after")
    def check_passwords_match(self) -> "RegisterForm":
        if self.password != self.confirm_password:
            raise ValueError("Senhas não coincidem")
        return self
