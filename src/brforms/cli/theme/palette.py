"""
Paletas de colores de la CLI y consola Rich compartida.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from rich.console import Console
from rich.theme import Theme


class ThemeName(Enum):
    """Temas disponibles."""
    DEFAULT = "default"
    BRASIL = "brasil"
    MONO = "mono"


@dataclass(frozen=True)
class ColorPalette:
    """Colores de un tema."""
    title: str        # Encabezados y títulos de tabla
    subtitle: str     # Cabeceras de columna
    valid: str        # Documento o campo válido
    invalid: str      # Documento o campo inválido
    warning: str
    info: str
    muted: str        # Texto atenuado, marcadores vacíos
    value: str        # Valores de campos y documentos
    label: str
    border: str


THEME_DEFAULT = ColorPalette(
    title="#5f87d7",
    subtitle="#87afd7",
    valid="#5faf5f",
    invalid="#d75f5f",
    warning="#d7af00",
    info="#5f87d7",
    muted="#8a8a8a",
    value="#d7d7af",
    label="#b2b2b2",
    border="#585858",
)

# Verde, amarillo y azul de la bandera
THEME_BRASIL = ColorPalette(
    title="#00af5f",
    subtitle="#ffd700",
    valid="#00af5f",
    invalid="#ff5f5f",
    warning="#ffd700",
    info="#005fd7",
    muted="#6c6c6c",
    value="#ffffff",
    label="#ffd700",
    border="#005f00",
)

# Sin color: sólo negrita y atenuado
THEME_MONO = ColorPalette(
    title="bold",
    subtitle="bold",
    valid="bold",
    invalid="bold reverse",
    warning="bold",
    info="default",
    muted="dim",
    value="bold",
    label="default",
    border="default",
)

THEMES = {
    ThemeName.DEFAULT: THEME_DEFAULT,
    ThemeName.BRASIL: THEME_BRASIL,
    ThemeName.MONO: THEME_MONO,
}


class CLITheme:
    """Tema activo y consola asociada."""

    _palette: ColorPalette = THEME_DEFAULT
    _console: Optional[Console] = None

    @classmethod
    def set_theme(cls, theme: ThemeName) -> None:
        cls._palette = THEMES.get(theme, THEME_DEFAULT)
        cls._console = None

    @classmethod
    def get_palette(cls) -> ColorPalette:
        return cls._palette

    @classmethod
    def get_console(cls) -> Console:
        """Consola Rich con los estilos del tema (se crea al primer uso)."""
        if cls._console is None:
            p = cls._palette
            cls._console = Console(
                theme=Theme({
                    "title": p.title,
                    "valid": p.valid,
                    "invalid": p.invalid,
                    "warning": p.warning,
                    "info": p.info,
                    "muted": p.muted,
                }),
                highlight=False,
            )
        return cls._console


def get_console() -> Console:
    return CLITheme.get_console()


def get_palette() -> ColorPalette:
    return CLITheme.get_palette()
