"""
Comandos CLI para documentos brasileños.
"""

import random
from typing import Annotated, Optional

import typer

from brforms.documents import DOCUMENTS, DocumentHandler, get_document
from brforms.cli.theme import print_documents_table, print_error, print_info, print_success

# Crear sub-aplicación
doc_app = typer.Typer(help="Limpieza, formato, validación y generación de documentos")

_DOC_HELP = "Tipo de documento: cpf, cnpj, pis, cep, rg, phone"


def _handler_or_exit(doc_type: str) -> DocumentHandler:
    try:
        return get_document(doc_type)
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(1)


@doc_app.command("clean")
def doc_clean(
    doc_type: Annotated[str, typer.Argument(help=_DOC_HELP)],
    value: Annotated[str, typer.Argument(help="Valor con o sin máscara")],
):
    """
    Muestra sólo los dígitos del documento.

    Ejemplo:
        brforms doc clean cpf 111.444.777-35
    """
    handler = _handler_or_exit(doc_type)
    typer.echo(handler.clean(value))


@doc_app.command("format")
def doc_format(
    doc_type: Annotated[str, typer.Argument(help=_DOC_HELP)],
    value: Annotated[str, typer.Argument(help="Valor con o sin máscara")],
):
    """
    Aplica la máscara del documento.

    Ejemplo:
        brforms doc format cnpj 11222333000181
    """
    handler = _handler_or_exit(doc_type)
    typer.echo(handler.format(value))


@doc_app.command("validate")
def doc_validate(
    doc_type: Annotated[str, typer.Argument(help=_DOC_HELP)],
    value: Annotated[str, typer.Argument(help="Valor con o sin máscara")],
):
    """
    Valida un documento. Termina con código 1 si es inválido.

    Ejemplo:
        brforms doc validate cpf 11144477735
        brforms doc validate phone "(11) 98765-4321"
    """
    handler = _handler_or_exit(doc_type)
    formatted = handler.format(value)
    if handler.validate(value):
        print_success(f"{handler.label} válido: {formatted}")
        return
    print_error(f"{handler.label} inválido: {formatted or value}")
    raise typer.Exit(1)


@doc_app.command("generate")
def doc_generate(
    doc_type: Annotated[str, typer.Argument(help=_DOC_HELP)],
    count: Annotated[int, typer.Option("--count", "-n", min=1, help="Cantidad a generar")] = 1,
    seed: Annotated[Optional[int], typer.Option("--seed", help="Semilla para resultados reproducibles")] = None,
):
    """
    Genera documentos válidos aleatorios (sólo para pruebas).

    Ejemplo:
        brforms doc generate cpf -n 5
        brforms doc generate cnpj --seed 42
    """
    handler = _handler_or_exit(doc_type)
    rng = random.Random(seed) if seed is not None else None
    for _ in range(count):
        typer.echo(handler.generate(rng))


@doc_app.command("check")
def doc_check(
    values: Annotated[list[str], typer.Argument(help="Valores a identificar")],
):
    """
    Indica para qué tipos de documento es válido cada valor.

    Ejemplo:
        brforms doc check 11144477735 01310-100
    """
    rows = []
    ambiguous = []
    for value in values:
        matches = [handler for handler in DOCUMENTS.values() if handler.validate(value)]
        for handler in matches:
            rows.append({
                "value": value,
                "label": handler.label,
                "formatted": handler.format(value),
                "valid": True,
            })
        if not matches:
            rows.append({"value": value, "label": "-", "formatted": "-", "valid": False})
        elif len(matches) > 1:
            ambiguous.append(f"{value}: {', '.join(h.label for h in matches)}")

    print_documents_table(rows)
    for line in ambiguous:
        print_info(f"Válido para varios tipos {line}")
    if not any(row["valid"] for row in rows):
        raise typer.Exit(1)
