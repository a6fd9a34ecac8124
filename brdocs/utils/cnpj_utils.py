"""
Configuração do CNPJ (pessoa jurídica, 14 dígitos).
"""
from typing import Optional

from brdocs.utils.document_utils import DocumentChecker, DocumentSpec, only_digits, validate

DEFAULT_MESSAGE = "O '{value}' é um CNPJ inválido"

CNPJ_SPEC = DocumentSpec(
    label="CNPJ",
    mask_pattern=r"\d{2}\.\d{3}\.\d{3}/\d{4}-\d{2}",
    expected_length=14,
    first_weights=(5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2),
    second_weights=(6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2),
)


def cnpj_checker(message: Optional[str] = None) -> DocumentChecker:
    return DocumentChecker(CNPJ_SPEC, DEFAULT_MESSAGE, message)


def normalize_cnpj(cnpj: Optional[str]) -> str:
    return only_digits(cnpj)


def is_valid_cnpj(cnpj: Optional[str]) -> bool:
    return validate(CNPJ_SPEC, cnpj)
