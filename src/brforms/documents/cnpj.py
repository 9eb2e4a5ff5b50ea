"""
CNPJ (Cadastro Nacional da Pessoa Jurídica).

Registro de empresas: 14 dígitos, los dos últimos son verificadores.
Máscara: 00.000.000/0000-00
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

LENGTH = 14
MASK = ((2, ""), (3, "."), (3, "."), (4, "/"), (2, "-"))

# Pesos para los dígitos verificadores
WEIGHTS_FIRST = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
WEIGHTS_SECOND = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)


def clean(cnpj: str) -> str:
    """Elimina todo carácter no numérico."""
    return only_digits(cnpj)


def format(cnpj: str) -> str:
    """Aplica la máscara 00.000.000/0000-00 (parcial si faltan dígitos)."""
    return apply_mask(cnpj, MASK)


def validate(cnpj: str) -> bool:
    """Valida largo, secuencia repetida y ambos dígitos verificadores."""
    digits = clean(cnpj)
    if len(digits) != LENGTH or is_repeated(digits):
        return False

    nums = to_ints(digits)
    first = mod11_digit(nums[:12], WEIGHTS_FIRST)
    second = mod11_digit(nums[:13], WEIGHTS_SECOND)
    return nums[12] == first and nums[13] == second


def from_base(base: Sequence[int]) -> str:
    """
    Completa 12 dígitos base (raíz + filial) con sus verificadores.

    Raises:
        GeneratorError: Si `base` no son exactamente 12 dígitos.
    """
    check_generated(base, LENGTH - 2)
    first = mod11_digit(base, WEIGHTS_FIRST)
    second = mod11_digit(list(base) + [first], WEIGHTS_SECOND)
    return format(join_digits(list(base) + [first, second]))


def generate(rng: Optional[random.Random] = None) -> str:
    """Genera un CNPJ válido aleatorio (para pruebas), con máscara."""
    base = random_digits(LENGTH - 2, rng)
    while is_repeated(join_digits(base)):
        base = random_digits(LENGTH - 2, rng)
    return from_base(base)
