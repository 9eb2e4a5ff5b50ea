"""
Predicados de validación genéricos.

Todos devuelven bool y rechazan la entrada vacía, salvo que se indique.
"""

import re
from collections.abc import Sized
from typing import Any
from urllib.parse import urlparse

_EMAIL_RX = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_NUMERIC_RX = re.compile(r"[0-9]+")
_ALPHA_RX = re.compile(r"[a-zA-Z]+")
_ALPHANUMERIC_RX = re.compile(r"[a-zA-Z0-9]+")
_SPECIAL_RX = re.compile(r"[!@#$%^&*(),.?\":{}|<>]")

PASSWORD_MIN_LENGTH = 8


def is_empty(value: Any) -> bool:
    """
    True para None, strings en blanco y colecciones o mapeos vacíos.

    Números y booleanos nunca están vacíos (0 y False son valores).
    """
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def is_required(value: Any) -> bool:
    """True si hay un valor (lo contrario de is_empty)."""
    return not is_empty(value)


def is_valid_email(email: str) -> bool:
    if not email or not isinstance(email, str):
        return False
    return bool(_EMAIL_RX.fullmatch(email))


def is_numeric(value: str) -> bool:
    """Sólo dígitos."""
    if not value or not isinstance(value, str):
        return False
    return bool(_NUMERIC_RX.fullmatch(value))


def is_alpha(value: str) -> bool:
    if not value or not isinstance(value, str):
        return False
    return bool(_ALPHA_RX.fullmatch(value))


def is_alphanumeric(value: str) -> bool:
    if not value or not isinstance(value, str):
        return False
    return bool(_ALPHANUMERIC_RX.fullmatch(value))


def is_valid_url(url: str) -> bool:
    """URL absoluta con esquema y host."""
    if not url or not isinstance(url, str):
        return False
    try:
        parsed = urlparse(url.strip())
    except ValueError:
        return False
    return bool(parsed.scheme) and bool(parsed.netloc)


def is_valid_credit_card(card_number: str) -> bool:
    """
    Número de tarjeta de 13 a 19 dígitos que cumple el algoritmo de Luhn.

    Se ignoran espacios y guiones.
    """
    if not card_number or not isinstance(card_number, str):
        return False
    digits = re.sub(r"[^0-9]", "", card_number)
    if not 13 <= len(digits) <= 19:
        return False

    total = 0
    for i, c in enumerate(reversed(digits)):
        d = int(c)
        if i % 2 == 1:
            d *= 2
            if d > 9:
                d -= 9
        total += d
    return total % 10 == 0


def has_min_length(value: Any, minimum: int) -> bool:
    if value is None:
        return False
    return len(value) >= minimum


def has_max_length(value: Any, maximum: int) -> bool:
    if value is None:
        return True
    return len(value) <= maximum


def check_password(password: str) -> list[str]:
    """
    Requisitos de contraseña que no se cumplen.

    Returns:
        Lista de mensajes; vacía si la contraseña es fuerte.
    """
    password = password or ""
    problems = []
    if len(password) < PASSWORD_MIN_LENGTH:
        problems.append(f"Senha deve ter pelo menos {PASSWORD_MIN_LENGTH} caracteres")
    if not re.search(r"[A-Z]", password):
        problems.append("Senha deve conter pelo menos uma letra maiúscula")
    if not re.search(r"[a-z]", password):
        problems.append("Senha deve conter pelo menos uma letra minúscula")
    if not re.search(r"[0-9]", password):
        problems.append("Senha deve conter pelo menos um número")
    if not _SPECIAL_RX.search(password):
        problems.append("Senha deve conter pelo menos um caractere especial")
    return problems


def is_strong_password(password: str) -> bool:
    return not check_password(password)
