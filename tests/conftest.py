"""Configuración de pytest para tests de brforms."""

import logging
import random

import pytest

from brforms.form import FormEngine
from brforms.validation.rules import compose, email, required


@pytest.fixture
def rng():
    """Generador aleatorio con semilla fija."""
    return random.Random(20240518)


@pytest.fixture
def valid_documents():
    """Un valor válido por tipo de documento."""
    return {
        "cpf": "111.444.777-35",
        "cnpj": "11.222.333/0001-81",
        "pis": "120.56734.06-2",
        "cep": "01310-100",
        "rg": "12.345.678-9",
        "phone": "(11) 98765-4321",
    }


@pytest.fixture
def email_form():
    """Formulario con email y nombre, validación al cambiar."""
    return FormEngine(
        {"email": "", "name": "Ana"},
        {
            "email": compose(required("Email é obrigatório"), email()),
            "name": compose(required("Nome é obrigatório")),
        },
        validate_on_change=True,
    )


class RecordingHandler(logging.Handler):
    """Handler que guarda los registros emitidos."""

    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture
def recording_logger():
    """Logger aislado que registra todo lo emitido."""
    logger = logging.getLogger("brforms.tests.recording")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    handler = RecordingHandler()
    logger.addHandler(handler)
    yield logger, handler
    logger.removeHandler(handler)
