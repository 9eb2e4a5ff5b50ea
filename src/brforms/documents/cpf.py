"""
CPF (Cadastro de Pessoas Físicas).

Registro de contribuyente individual: 11 dígitos, los dos últimos son
verificadores. Máscara: 000.000.000-00
"""

import random
from typing import Optional, Sequence

from .base import (
    apply_mask,
    check_generated,
    is_repeated,
    join_digits,
    only_digits,
    random_digits,
    to_ints,
)

LENGTH = 11
MASK = ((3, ""), (3, "."), (3, "."), (2, "-"))


def clean(cpf: str) -> str:
    """Elimina todo carácter no numérico."""
    return only_digits(cpf)


def format(cpf: str) -> str:
    """Aplica la máscara 000.000.000-00 (parcial si faltan dígitos)."""
    return apply_mask(cpf, MASK)


def check_digit(digits: Sequence[int]) -> int:
    """
    Calcula un dígito verificador de CPF.

    Los pesos van de len(digits)+1 hasta 2:
        resto = (Σ d×peso × 10) mod 11; dígito = 0 si resto ∈ {10, 11}

    Args:
        digits: 9 dígitos para el primer verificador, 10 para el segundo

    Returns:
        Dígito verificador (0-9)
    """
    n = len(digits)
    total = sum(d * (n + 1 - i) for i, d in enumerate(digits))
    remainder = (total * 10) % 11
    return 0 if remainder in (10, 11) else remainder


def validate(cpf: str) -> bool:
    """Valida largo, secuencia repetida y ambos dígitos verificadores."""
    digits = clean(cpf)
    if len(digits) != LENGTH or is_repeated(digits):
        return False

    nums = to_ints(digits)
    return nums[9] == check_digit(nums[:9]) and nums[10] == check_digit(nums[:10])


def from_base(base: Sequence[int]) -> str:
    """
    Completa 9 dígitos base con sus verificadores.

    Raises:
        GeneratorError: Si `base` no son exactamente 9 dígitos.
    """
    check_generated(base, LENGTH - 2)
    first = check_digit(base)
    second = check_digit(list(base) + [first])
    return format(join_digits(list(base) + [first, second]))


def generate(rng: Optional[random.Random] = None) -> str:
    """Genera un CPF válido aleatorio (para pruebas), con máscara."""
    base = random_digits(LENGTH - 2, rng)
    while is_repeated(join_digits(base)):
        base = random_digits(LENGTH - 2, rng)
    return from_base(base)
