"""
Temas de la CLI de brforms.

- palette: paletas y consola (CLITheme, ColorPalette)
- styled: objetos Text/Panel estilizados
- printing: mensajes y cuadros impresos en consola
- tables: tablas de documentos y de estado de formularios
"""

from brforms.cli.theme.palette import (
    ThemeName,
    ColorPalette,
    THEMES,
    CLITheme,
    get_console,
    get_palette,
)
from brforms.cli.theme.styled import (
    styled_header,
    styled_pair,
    styled_message,
    styled_validity,
)
from brforms.cli.theme.printing import (
    print_header,
    print_success,
    print_warning,
    print_error,
    print_info,
    print_summary_box,
)
from brforms.cli.theme.tables import (
    SECRET_MASK,
    create_table,
    print_documents_table,
    print_form_state_table,
)

__all__ = [
    "ThemeName",
    "ColorPalette",
    "THEMES",
    "CLITheme",
    "get_console",
    "get_palette",
    "styled_header",
    "styled_pair",
    "styled_message",
    "styled_validity",
    "print_header",
    "print_success",
    "print_warning",
    "print_error",
    "print_info",
    "print_summary_box",
    "SECRET_MASK",
    "create_table",
    "print_documents_table",
    "print_form_state_table",
]
