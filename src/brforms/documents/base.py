"""
Funciones compartidas por los validadores de documentos.

Limpieza, aplicación de máscaras, detección de secuencias repetidas y
cálculo de dígitos verificadores módulo 11.
"""

import random
import re
from typing import Optional, Sequence

from brforms.exceptions import GeneratorError

_NON_DIGITS = re.compile(r"[^0-9]")

# Segmento de máscara: (cantidad de dígitos, separador previo)
MaskSegment = tuple[int, str]


def only_digits(value: str) -> str:
    """Elimina todo carácter que no sea dígito ASCII."""
    if not value or not isinstance(value, str):
        return ""
    return _NON_DIGITS.sub("", value)


def is_repeated(digits: str) -> bool:
    """True si la cadena es un único dígito repetido."""
    return len(digits) > 0 and len(set(digits)) == 1


def apply_mask(raw: str, segments: Sequence[MaskSegment]) -> str:
    """
    Aplica una máscara de segmentos fijos a los dígitos de `raw`.

    Los separadores sólo se emiten hasta donde alcanzan los dígitos y los
    dígitos sobrantes se descartan. Sin dígitos, `raw` se devuelve tal cual.

    Args:
        raw: Texto ingresado (puede contener máscara parcial)
        segments: Lista de (tamaño, separador previo)

    Returns:
        Texto con máscara
    """
    if not raw or not isinstance(raw, str):
        return ""

    digits = only_digits(raw)
    if not digits:
        return raw

    out = ""
    pos = 0
    for size, separator in segments:
        chunk = digits[pos:pos + size]
        if not chunk:
            break
        out += (separator if pos else "") + chunk
        pos += size
    return out


def mask_length(segments: Sequence[MaskSegment]) -> int:
    """Cantidad total de dígitos cubiertos por una máscara."""
    return sum(size for size, _ in segments)


def mod11_digit(digits: Sequence[int], weights: Sequence[int]) -> int:
    """
    Dígito verificador módulo 11 (regla CNPJ/PIS).

    resto = Σ d×w mod 11; dígito = 0 si resto < 2, si no 11 - resto.
    """
    total = sum(d * w for d, w in zip(digits, weights))
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def to_ints(digits: str) -> list[int]:
    """Convierte una cadena de dígitos en lista de enteros."""
    return [int(c) for c in digits]


def random_digits(count: int, rng: Optional[random.Random] = None) -> list[int]:
    """Genera `count` dígitos aleatorios."""
    rng = rng or random
    return [rng.randint(0, 9) for _ in range(count)]


def check_generated(digits: Sequence[int], expected: int) -> None:
    """
    Verifica la lista de dígitos de un generador.

    Raises:
        GeneratorError: Si la lista no tiene el largo esperado o contiene
            valores que no son dígitos.
    """
    if len(digits) != expected:
        raise GeneratorError(
            f"Lista de dígitos inválida: se esperaban {expected}, hay {len(digits)}"
        )
    for d in digits:
        if not isinstance(d, int) or isinstance(d, bool) or not 0 <= d <= 9:
            raise GeneratorError(f"Dígito inválido en lista generada: {d!r}")


def join_digits(digits: Sequence[int]) -> str:
    """Une una lista de enteros en una cadena de dígitos."""
    return "".join(str(d) for d in digits)
