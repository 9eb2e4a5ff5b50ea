"""
Objetos Rich estilizados según la paleta activa (no imprimen).
"""

from typing import Any, Optional

from rich import box
from rich.panel import Panel
from rich.text import Text

from brforms.cli.theme.palette import get_palette

# Prefijo de cada tipo de mensaje
MARKERS = {
    "success": "[+]",
    "warning": "[!]",
    "error": "[x]",
    "info": "[i]",
}


def styled_header(text: str, subtitle: Optional[str] = None) -> Panel:
    p = get_palette()
    content = Text(text, style=f"bold {p.title}")
    if subtitle:
        content.append(f"\n{subtitle}", style=p.muted)
    return Panel(content, border_style=p.border, box=box.ROUNDED, padding=(0, 2))


def styled_pair(label: str, value: Any) -> Text:
    """'label: valor' con el valor resaltado."""
    p = get_palette()
    return Text.assemble((f"{label}: ", p.label), (str(value), f"bold {p.value}"))


def styled_message(kind: str, text: str) -> Text:
    """Mensaje con prefijo según su tipo (success, warning, error, info)."""
    p = get_palette()
    style = {
        "success": p.valid,
        "warning": p.warning,
        "error": p.invalid,
        "info": p.info,
    }[kind]
    return Text(f"{MARKERS[kind]} {text}", style=style)


def styled_validity(valid: bool) -> Text:
    """Marca de válido/inválido para tablas."""
    p = get_palette()
    if valid:
        return Text("válido", style=f"bold {p.valid}")
    return Text("inválido", style=f"bold {p.invalid}")
