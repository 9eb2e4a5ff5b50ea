"""
Limpieza de texto ingresado por el usuario.

Funciones puras sobre strings; None se trata como "".
"""

import re

_HTML_TAG_RX = re.compile(r"<[^>]*>")
_WHITESPACE_RX = re.compile(r"\s+")
_SPECIAL_CHARS_RX = re.compile(r"[^\w\s]")
_NON_ALPHANUMERIC_RX = re.compile(r"[^a-zA-Z0-9\s]")

_HTML_ESCAPES = str.maketrans({
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
})


def strip_html(text: str) -> str:
    """Elimina las etiquetas HTML, conservando su contenido."""
    return _HTML_TAG_RX.sub("", text or "")


def escape_html(text: str) -> str:
    """Escapa & < > " ' como entidades HTML."""
    return (text or "").translate(_HTML_ESCAPES)


def normalize_text(text: str) -> str:
    """Recorta los extremos y colapsa cada secuencia de espacios en uno."""
    return _WHITESPACE_RX.sub(" ", (text or "").strip())


# Alias con el nombre usado en los formularios
clean = normalize_text


def alphanumeric(text: str) -> str:
    """Conserva sólo letras ASCII, dígitos y espacios."""
    return _NON_ALPHANUMERIC_RX.sub("", text or "")


def sanitize_input(
    value: str,
    *,
    trim: bool = True,
    normalize_whitespace: bool = True,
    remove_special_chars: bool = False,
) -> str:
    """
    Limpia un valor de entrada antes de guardarlo en el formulario.

    Args:
        value: Texto ingresado
        trim: Recortar espacios en los extremos
        normalize_whitespace: Colapsar secuencias de espacios
        remove_special_chars: Eliminar todo lo que no sea letra, dígito,
            guion bajo o espacio (las letras acentuadas se conservan)

    Returns:
        Texto limpio
    """
    sanitized = value or ""
    if trim:
        sanitized = sanitized.strip()
    if normalize_whitespace:
        sanitized = _WHITESPACE_RX.sub(" ", sanitized)
    if remove_special_chars:
        sanitized = _SPECIAL_CHARS_RX.sub("", sanitized)
    return sanitized
