"""
Formularios interactivos en terminal.

Cada respuesta pasa por el FormEngine igual que lo haría un input de la
interfaz: los documentos se guardan con máscara, el campo se marca como
tocado (blur) y se vuelve a preguntar mientras tenga error.
"""

import logging
from typing import Optional

import questionary
import typer

from brforms.cli.theme import (
    SECRET_MASK,
    print_error,
    print_form_state_table,
    print_header,
    print_success,
    print_summary_box,
    print_warning,
)
from brforms.form import FormEngine, validate_and_format
from brforms.form.registries import DOCUMENT_FIELDS, FORMS, initial_values_for
from brforms.validation import sanitize_input

logger = logging.getLogger(__name__)

form_app = typer.Typer(help="Completar formularios de forma interactiva")

FIELD_LABELS = {
    "name": "Nome",
    "email": "Email",
    "password": "Senha",
    "confirm_password": "Confirmação de senha",
    "cpf": "CPF",
    "phone": "Telefone",
}

SECRET_FIELDS = {"password", "confirm_password"}


def _ask(field: str, default: str = "") -> Optional[str]:
    """Pregunta un campo; None si el usuario cancela."""
    label = FIELD_LABELS.get(field, field)
    if field in SECRET_FIELDS:
        return questionary.password(f"{label}:").ask()
    return questionary.text(f"{label}:", default=default or "").ask()


def fill_form(form_name: str) -> FormEngine:
    """
    Completa un formulario registrado pregunta por pregunta.

    Raises:
        typer.Exit: Si el usuario cancela una pregunta.
    """
    engine = FormEngine(
        initial_values_for(form_name),
        FORMS[form_name],
        validate_on_change=False,
    )

    for field in engine.fields:
        label = FIELD_LABELS.get(field, field)
        while True:
            answer = _ask(field, engine.get_field_value(field))
            if answer is None:
                print_warning("Formulario cancelado")
                raise typer.Exit(1)

            doc_type = DOCUMENT_FIELDS.get(field)
            result = validate_and_format(doc_type, answer) if doc_type else None
            if result is not None:
                value = result.formatted
            elif field in SECRET_FIELDS:
                value = answer
            else:
                value = sanitize_input(answer)
            engine.set_field_value(field, value)
            engine.set_field_touched(field)

            error = engine.get_field_error(field)
            if error is not None and result is not None and result.error:
                # Mensaje más preciso del documento (largo vs. verificador)
                engine.set_field_error(field, result.error)
                error = result.error
            if error is None:
                break
            print_error(f"{label}: {error}")

    return engine


def run_form(form_name: str) -> dict:
    """Completa y envía un formulario; devuelve los valores enviados."""
    print_header(f"FORMULARIO: {form_name.upper()}", "Ctrl+C para cancelar")
    engine = fill_form(form_name)

    submitted: dict = {}
    engine.handle_submit(submitted.update)()
    if not submitted:
        print_form_state_table(engine.state, secret_fields=SECRET_FIELDS)
        print_error("El formulario tiene errores")
        raise typer.Exit(1)

    logger.info("Formulario %s enviado", form_name)
    items = [
        (FIELD_LABELS.get(key, key), SECRET_MASK if key in SECRET_FIELDS else value)
        for key, value in submitted.items()
    ]
    print_summary_box(form_name.upper(), items)
    print_success("Formulario enviado")
    return submitted


@form_app.command("login")
def form_login():
    """Formulario de login (email y senha)."""
    run_form("login")


@form_app.command("register")
def form_register():
    """Formulario de registro (nome, email, senha, CPF, telefone)."""
    run_form("register")


@form_app.command("profile")
def form_profile():
    """Formulario de perfil (nome, email, CPF, telefone)."""
    run_form("profile")
