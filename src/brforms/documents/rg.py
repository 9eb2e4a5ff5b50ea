"""
RG (Registro Geral).

Documento de identidad emitido por cada estado; el formato varía y no hay
un verificador común, por lo que sólo se controla largo y patrón.
Máscara: 00.000.000-0
"""

import random
from typing import Optional

from .base import apply_mask, check_generated, is_repeated, join_digits, only_digits, random_digits

MIN_LENGTH = 8
MAX_LENGTH = 9
MASK = ((2, ""), (3, "."), (3, "."), (1, "-"))


def clean(rg: str) -> str:
    """Elimina todo carácter no numérico."""
    return only_digits(rg)


def format(rg: str) -> str:
    """Aplica la máscara 00.000.000-0 (parcial si faltan dígitos)."""
    return apply_mask(rg, MASK)


def validate(rg: str) -> bool:
    """8 o 9 dígitos que no sean un único dígito repetido."""
    digits = clean(rg)
    if not MIN_LENGTH <= len(digits) <= MAX_LENGTH:
        return False
    return not is_repeated(digits)


def generate(rng: Optional[random.Random] = None) -> str:
    """Genera un RG de 8 dígitos (para pruebas), con máscara."""
    digits = random_digits(MIN_LENGTH, rng)
    while is_repeated(join_digits(digits)):
        digits = random_digits(MIN_LENGTH, rng)
    check_generated(digits, MIN_LENGTH)
    return format(join_digits(digits))
