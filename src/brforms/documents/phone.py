"""
Teléfonos brasileños (fijos y celulares).

Fijo: 10 dígitos, (00) 0000-0000
Celular: 11 dígitos con 9 como tercer dígito, (00) 00000-0000
"""

import random
from typing import Optional

from .base import check_generated, is_repeated, join_digits, only_digits, random_digits

LANDLINE_LENGTH = 10
MOBILE_LENGTH = 11
MIN_AREA_CODE = 11
MAX_AREA_CODE = 99
MOBILE_MARKER = "9"


def clean(phone: str) -> str:
    """Elimina todo carácter no numérico."""
    return only_digits(phone)


def format(phone: str) -> str:
    """
    Aplica la máscara de teléfono según la cantidad de dígitos.

    Parcial: "(1", "(11) 9876", "(11) 9876-5432"; con 11 dígitos la parte
    local pasa a 5+4. Los dígitos después del 11º se descartan.
    """
    if not phone or not isinstance(phone, str):
        return ""

    d = clean(phone)[:MOBILE_LENGTH]
    if not d:
        return phone
    if len(d) <= 2:
        return f"({d}"
    if len(d) <= 6:
        return f"({d[:2]}) {d[2:]}"
    if len(d) <= LANDLINE_LENGTH:
        return f"({d[:2]}) {d[2:6]}-{d[6:]}"
    return f"({d[:2]}) {d[2:7]}-{d[7:]}"


def validate(phone: str) -> bool:
    """Valida largo (10/11), código de área 11-99 y marca de celular."""
    digits = clean(phone)
    if len(digits) not in (LANDLINE_LENGTH, MOBILE_LENGTH) or is_repeated(digits):
        return False

    area_code = int(digits[:2])
    if not MIN_AREA_CODE <= area_code <= MAX_AREA_CODE:
        return False

    if len(digits) == MOBILE_LENGTH and digits[2] != MOBILE_MARKER:
        return False
    return True


def is_mobile(phone: str) -> bool:
    """True si es un celular (11 dígitos, tercer dígito 9)."""
    digits = clean(phone)
    return len(digits) == MOBILE_LENGTH and digits[2] == MOBILE_MARKER


def is_landline(phone: str) -> bool:
    """True si tiene largo de teléfono fijo."""
    return len(clean(phone)) == LANDLINE_LENGTH


def generate(rng: Optional[random.Random] = None) -> str:
    """Genera un celular válido aleatorio (para pruebas), con máscara."""
    rng = rng or random
    digits = _random_mobile(rng)
    while is_repeated(join_digits(digits)):
        digits = _random_mobile(rng)
    check_generated(digits, MOBILE_LENGTH)
    return format(join_digits(digits))


def _random_mobile(rng) -> list[int]:
    area_code = rng.randint(MIN_AREA_CODE, MAX_AREA_CODE)
    return [area_code // 10, area_code % 10, int(MOBILE_MARKER)] + random_digits(8, rng)
