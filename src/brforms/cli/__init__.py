"""
CLI de brforms - Documentos brasileños y formularios.

Sub-aplicaciones:
- doc: limpieza, formato, validación y generación de documentos
- form: formularios interactivos (login, register, profile)
"""

import logging
from typing import Annotated, Optional

import typer

from brforms import __version__
from brforms.cli.theme import CLITheme, ThemeName

# Crear aplicación principal
app = typer.Typer(
    name="brforms",
    help="Validación de documentos brasileños y formularios.",
    no_args_is_help=True,
)


def _register_subapps():
    """Registra las sub-aplicaciones."""
    from brforms.cli.documents import doc_app
    from brforms.cli.form import form_app

    app.add_typer(doc_app, name="doc")
    app.add_typer(form_app, name="form")


_register_subapps()


def version_callback(value: bool):
    if value:
        typer.echo(f"brforms v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, is_eager=True, help="Mostrar versión"),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Mostrar logs de depuración")] = False,
    theme: Annotated[ThemeName, typer.Option("--theme", help="Tema de colores")] = ThemeName.DEFAULT,
):
    """
    brforms - CPF, CNPJ, PIS, CEP, RG, teléfono y formularios.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    CLITheme.set_theme(theme)
