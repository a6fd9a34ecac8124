"""
Configuração do CPF (pessoa física, 11 dígitos).
"""
from typing import Optional

from brdocs.utils.document_utils import DocumentChecker, DocumentSpec, only_digits, validate

DEFAULT_MESSAGE = "O '{value}' é um CPF inválido"

CPF_SPEC = DocumentSpec(
    label="CPF",
    mask_pattern=r"\d{3}\.\d{3}\.\d{3}-\d{2}",
    expected_length=11,
    first_weights=(10, 9, 8, 7, 6, 5, 4, 3, 2),
    second_weights=(11, 10, 9, 8, 7, 6, 5, 4, 3, 2),
)


def cpf_checker(message: Optional[str] = None) -> DocumentChecker:
    return DocumentChecker(CPF_SPEC, DEFAULT_MESSAGE, message)


def normalize_cpf(cpf: Optional[str]) -> str:
    return only_digits(cpf)


def is_valid_cpf(cpf: Optional[str]) -> bool:
    return validate(CPF_SPEC, cpf)
