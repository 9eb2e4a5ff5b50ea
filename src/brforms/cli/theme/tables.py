"""
Tablas Rich de documentos y estado de formularios.
"""

from typing import TYPE_CHECKING, Collection, Optional, Sequence

from rich import box
from rich.table import Table
from rich.text import Text

from brforms.cli.theme.palette import get_console, get_palette
from brforms.cli.theme.styled import styled_validity

if TYPE_CHECKING:
    from brforms.form.models import FormState


def create_table(title: Optional[str], columns: Sequence[tuple[str, str]]) -> Table:
    """Tabla con el estilo del tema; columns es [(nombre, justify), ...]."""
    p = get_palette()
    table = Table(
        title=title,
        title_style=f"bold {p.title}",
        header_style=f"bold {p.subtitle}",
        border_style=p.border,
        box=box.ROUNDED,
    )
    for name, justify in columns:
        table.add_column(name, justify=justify)
    return table


def print_documents_table(rows: list[dict], title: str = "DOCUMENTOS") -> None:
    """
    Imprime el resultado de identificar valores como documentos.

    Args:
        rows: Dicts con 'value', 'label', 'formatted' y 'valid'
        title: Título de la tabla
    """
    table = create_table(
        title,
        [("Valor", "left"), ("Tipo", "left"), ("Formato", "left"), ("Estado", "center")],
    )
    for row in rows:
        table.add_row(row["value"], row["label"], row["formatted"], styled_validity(row["valid"]))
    get_console().print(table)


def _flag(value: bool) -> str:
    return "si" if value else "no"


SECRET_MASK = "******"


def print_form_state_table(
    state: "FormState",
    title: str = "FORMULARIO",
    secret_fields: Collection[str] = (),
) -> None:
    """
    Imprime value/touched/dirty/error de cada campo.

    Los valores de `secret_fields` (contraseñas) se muestran enmascarados.
    """
    p = get_palette()
    table = create_table(
        title,
        [("Campo", "left"), ("Valor", "left"), ("Tocado", "center"),
         ("Modificado", "center"), ("Error", "left")],
    )
    for key, f in state.data.items():
        error = Text(f.error, style=p.invalid) if f.error else Text("-", style=p.muted)
        value = SECRET_MASK if key in secret_fields and f.value else str(f.value)
        table.add_row(key, value, _flag(f.touched), _flag(f.dirty), error)
    get_console().print(table)
