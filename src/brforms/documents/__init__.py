"""
Validadores de documentos brasileños.

Cada módulo expone la misma interfaz:
- clean: sólo dígitos (vista canónica para validar)
- format: máscara aplicada (vista canónica para guardar y mostrar)
- validate: largo, secuencia repetida y dígitos verificadores
- generate: documento válido aleatorio, para pruebas

Documentos: CPF, CNPJ, PIS, CEP, RG y teléfono.
"""

from dataclasses import dataclass
from typing import Callable, Union

from brforms.config import DocumentType

from . import cep, cnpj, cpf, phone, pis, rg

# Alias planos
from .cpf import (
    clean as clean_cpf,
    format as format_cpf,
    validate as validate_cpf,
    generate as generate_cpf,
)
from .cnpj import (
    clean as clean_cnpj,
    format as format_cnpj,
    validate as validate_cnpj,
    generate as generate_cnpj,
)
from .pis import (
    clean as clean_pis,
    format as format_pis,
    validate as validate_pis,
    generate as generate_pis,
)
from .cep import (
    clean as clean_cep,
    format as format_cep,
    validate as validate_cep,
    generate as generate_cep,
)
from .rg import (
    clean as clean_rg,
    format as format_rg,
    validate as validate_rg,
    generate as generate_rg,
)
from .phone import (
    clean as clean_phone,
    format as format_phone,
    validate as validate_phone,
    generate as generate_phone,
    is_mobile as is_mobile_phone,
    is_landline as is_landline_phone,
)


@dataclass(frozen=True)
class DocumentHandler:
    """Funciones de un tipo de documento."""
    doc_type: DocumentType
    label: str
    lengths: tuple[int, ...]
    clean: Callable[[str], str]
    format: Callable[[str], str]
    validate: Callable[[str], bool]
    generate: Callable[..., str]


def _handler(doc_type: DocumentType, label: str, module, lengths: tuple[int, ...]) -> DocumentHandler:
    return DocumentHandler(
        doc_type=doc_type,
        label=label,
        lengths=lengths,
        clean=module.clean,
        format=module.format,
        validate=module.validate,
        generate=module.generate,
    )


DOCUMENTS: dict[DocumentType, DocumentHandler] = {
    DocumentType.CPF: _handler(DocumentType.CPF, "CPF", cpf, (cpf.LENGTH,)),
    DocumentType.CNPJ: _handler(DocumentType.CNPJ, "CNPJ", cnpj, (cnpj.LENGTH,)),
    DocumentType.PIS: _handler(DocumentType.PIS, "PIS/PASEP", pis, (pis.LENGTH,)),
    DocumentType.CEP: _handler(DocumentType.CEP, "CEP", cep, (cep.LENGTH,)),
    DocumentType.RG: _handler(DocumentType.RG, "RG", rg, (rg.MIN_LENGTH, rg.MAX_LENGTH)),
    DocumentType.PHONE: _handler(
        DocumentType.PHONE, "Telefone", phone, (phone.LANDLINE_LENGTH, phone.MOBILE_LENGTH)
    ),
}


def get_document(doc_type: Union[DocumentType, str]) -> DocumentHandler:
    """
    Obtiene las funciones de un tipo de documento.

    Args:
        doc_type: DocumentType o su nombre ("cpf", "CNPJ", ...)

    Raises:
        ValueError: Si el tipo no existe.
    """
    if not isinstance(doc_type, DocumentType):
        try:
            doc_type = DocumentType(str(doc_type).strip().lower())
        except ValueError:
            valid = ", ".join(t.value for t in DocumentType)
            raise ValueError(f"Tipo de documento desconocido: {doc_type} (válidos: {valid})") from None
    return DOCUMENTS[doc_type]


def detect_documents(raw: str) -> list[DocumentType]:
    """Tipos de documento para los que `raw` es válido."""
    return [doc_type for doc_type, handler in DOCUMENTS.items() if handler.validate(raw)]


__all__ = [
    "cpf", "cnpj", "pis", "cep", "rg", "phone",
    "clean_cpf", "format_cpf", "validate_cpf", "generate_cpf",
    "clean_cnpj", "format_cnpj", "validate_cnpj", "generate_cnpj",
    "clean_pis", "format_pis", "validate_pis", "generate_pis",
    "clean_cep", "format_cep", "validate_cep", "generate_cep",
    "clean_rg", "format_rg", "validate_rg", "generate_rg",
    "clean_phone", "format_phone", "validate_phone", "generate_phone",
    "is_mobile_phone", "is_landline_phone",
    "DocumentHandler", "DOCUMENTS", "get_document", "detect_documents",
]
