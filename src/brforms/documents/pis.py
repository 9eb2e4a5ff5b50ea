"""
PIS/PASEP (Programa de Integração Social).

11 dígitos con un único verificador. Máscara: 000.00000.00-0
"""

import random
from typing import Optional, Sequence

from .base import (
    apply_mask,
    check_generated,
    is_repeated,
    join_digits,
    mod11_digit,
    only_digits,
    random_digits,
    to_ints,
)

LENGTH = 11
MASK = ((3, ""), (5, "."), (2, "."), (1, "-"))
WEIGHTS = (3, 2, 9, 8, 7, 6, 5, 4, 3, 2)


def clean(pis: str) -> str:
    """Elimina todo carácter no numérico."""
    return only_digits(pis)


def format(pis: str) -> str:
    """Aplica la máscara 000.00000.00-0 (parcial si faltan dígitos)."""
    return apply_mask(pis, MASK)


def validate(pis: str) -> bool:
    """Valida largo, secuencia repetida y dígito verificador."""
    digits = clean(pis)
    if len(digits) != LENGTH or is_repeated(digits):
        return False

    nums = to_ints(digits)
    return nums[10] == mod11_digit(nums[:10], WEIGHTS)


def from_base(base: Sequence[int]) -> str:
    """
    Completa 10 dígitos base con su verificador.

    Raises:
        GeneratorError: Si `base` no son exactamente 10 dígitos.
    """
    check_generated(base, LENGTH - 1)
    return format(join_digits(list(base) + [mod11_digit(base, WEIGHTS)]))


def generate(rng: Optional[random.Random] = None) -> str:
    """Genera un PIS válido aleatorio (para pruebas), con máscara."""
    base = random_digits(LENGTH - 1, rng)
    while is_repeated(join_digits(base)):
        base = random_digits(LENGTH - 1, rng)
    return from_base(base)
