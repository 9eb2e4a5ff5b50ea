"""
Excepciones de brforms.

Los errores de validación de campos nunca se lanzan: viven como strings en
el estado del formulario. Estas excepciones cubren errores de programación.
"""


class BrFormsError(Exception):
    """Clase base para excepciones de brforms."""


class UnknownFieldError(BrFormsError, KeyError):
    """Campo que no existe en el formulario."""

    def __init__(self, field: str, known: list[str] | None = None):
        self.field = field
        self.known = list(known or [])
        super().__init__(field)

    def __str__(self) -> str:
        if self.known:
            return f"Campo desconocido: {self.field!r} (campos: {', '.join(self.known)})"
        return f"Campo desconocido: {self.field!r}"


class GeneratorError(BrFormsError):
    """Lista de dígitos aleatorios mal formada en un generador de documentos."""
