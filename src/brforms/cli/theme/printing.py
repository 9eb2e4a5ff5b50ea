"""
Salida directa a la consola.
"""

from typing import Any, Iterable, Optional

from rich import box
from rich.panel import Panel
from rich.text import Text

from brforms.cli.theme.palette import get_console, get_palette
from brforms.cli.theme.styled import styled_header, styled_message, styled_pair


def print_header(text: str, subtitle: Optional[str] = None) -> None:
    get_console().print(styled_header(text, subtitle))


def print_success(text: str) -> None:
    get_console().print(styled_message("success", text))


def print_warning(text: str) -> None:
    get_console().print(styled_message("warning", text))


def print_error(text: str) -> None:
    get_console().print(styled_message("error", text))


def print_info(text: str) -> None:
    get_console().print(styled_message("info", text))


def print_summary_box(title: str, items: Iterable[tuple[str, Any]]) -> None:
    """
    Imprime un cuadro con pares label/valor.

    Args:
        title: Título del cuadro
        items: Tuplas (label, valor)
    """
    p = get_palette()
    body = Text("\n").join(styled_pair(label, value) for label, value in items)
    get_console().print(Panel(
        body,
        title=title,
        title_align="left",
        border_style=p.border,
        box=box.ROUNDED,
        padding=(0, 1),
    ))
