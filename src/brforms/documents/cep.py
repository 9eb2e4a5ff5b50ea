"""
CEP (Código de Endereçamento Postal).

8 dígitos sin verificador. Máscara: 00000-000
"""

import random
from typing import Optional

from .base import apply_mask, check_generated, is_repeated, join_digits, only_digits, random_digits

LENGTH = 8
MASK = ((5, ""), (3, "-"))


def clean(cep: str) -> str:
    """Elimina todo carácter no numérico."""
    return only_digits(cep)


def format(cep: str) -> str:
    """Aplica la máscara 00000-000."""
    return apply_mask(cep, MASK)


def validate(cep: str) -> bool:
    """8 dígitos que no sean un único dígito repetido (incluye 00000-000)."""
    digits = clean(cep)
    return len(digits) == LENGTH and not is_repeated(digits)


def generate(rng: Optional[random.Random] = None) -> str:
    """Genera un CEP aleatorio con formato válido (para pruebas)."""
    digits = random_digits(LENGTH, rng)
    while is_repeated(join_digits(digits)):
        digits = random_digits(LENGTH, rng)
    check_generated(digits, LENGTH)
    return format(join_digits(digits))
