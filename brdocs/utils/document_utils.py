"""
Módulo utilitário para validação de documentos brasileiros (CPF / CNPJ).
Um único verificador genérico, parametrizado pela máscara, tamanho e pesos
de cada tipo de documento.
"""
import re
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

_DIGITS_ONLY = re.compile(r"[0-9]*", re.ASCII)
_NON_DIGITS = re.compile(r"[^0-9]", re.ASCII)


@dataclass(frozen=True)
class DocumentSpec:
    """
    Configuração imutável de um tipo de documento.
    Parâmetros:
        label (str): nome do documento usado nas mensagens (ex: 'CPF')
        mask_pattern (str): regex do formato com pontuação
        expected_length (int): quantidade de dígitos sem pontuação
        first_weights (Sequence[int]): pesos do primeiro dígito verificador
        second_weights (Sequence[int]): pesos do segundo dígito verificador
    """
    label: str
    mask_pattern: str
    expected_length: int
    first_weights: Tuple[int, ...]
    second_weights: Tuple[int, ...]
    mask: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.expected_length < 3:
            raise ValueError(f"expected_length inválido para {self.label}: {self.expected_length}")
        first = tuple(self.first_weights)
        second = tuple(self.second_weights)
        if len(first) != self.expected_length - 2:
            raise ValueError(
                f"{self.label}: first_weights deve ter {self.expected_length - 2} pesos, recebeu {len(first)}"
            )
        if len(second) != self.expected_length - 1:
            raise ValueError(
                f"{self.label}: second_weights deve ter {self.expected_length - 1} pesos, recebeu {len(second)}"
            )
        try:
            mask = re.compile(self.mask_pattern, re.ASCII)
        except re.error as exc:
            raise ValueError(f"{self.label}: mask_pattern inválido: {exc}") from exc
        object.__setattr__(self, "first_weights", first)
        object.__setattr__(self, "second_weights", second)
        object.__setattr__(self, "mask", mask)


@dataclass(frozen=True)
class ValidationOutcome:
    valid: bool
    message: Optional[str] = None


def mod11(total: int) -> int:
    """Dígito verificador: 0 se o resto for 0 ou 1, senão 11 - resto."""
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def only_digits(value: Optional[str]) -> str:
    """
    Remove caracteres não numéricos.
    Exemplo: '123.456.789-09' -> '12345678909'
    """
    return _NON_DIGITS.sub("", value or "")


def check_digits(spec: DocumentSpec, digits: Sequence[int]) -> Tuple[int, int]:
    """
    Calcula os dois dígitos verificadores a partir do corpo do documento.
    Parâmetros:
        spec (DocumentSpec): configuração do documento
        digits (Sequence[int]): ao menos os expected_length - 2 primeiros dígitos
    Retorno:
        Tuple[int, int]: primeiro e segundo dígitos verificadores
    """
    if len(digits) < spec.expected_length - 2:
        raise ValueError(
            f"{spec.label}: são necessários {spec.expected_length - 2} dígitos, recebeu {len(digits)}"
        )
    body = list(digits[:spec.expected_length - 2])
    first = mod11(sum(w * d for w, d in zip(spec.first_weights, body)))
    # o segundo dígito incorpora o primeiro como parte do documento
    second = mod11(sum(w * d for w, d in zip(spec.second_weights, body + [first])))
    return first, second


def is_valid_format(spec: DocumentSpec, value: str) -> bool:
    return _DIGITS_ONLY.fullmatch(value) is not None or spec.mask.fullmatch(value) is not None


def validate(spec: DocumentSpec, candidate: Optional[str]) -> bool:
    """
    Valida um documento: formato, tamanho, dígitos repetidos e dígitos verificadores.
    Parâmetros:
        spec (DocumentSpec): configuração do documento
        candidate (str | None): documento com ou sem máscara
    Retorno:
        bool: True se válido, False caso contrário
    """
    if candidate is None:
        candidate = ""
    if not isinstance(candidate, str) or not is_valid_format(spec, candidate):
        return False
    document: List[int] = [int(c) for c in only_digits(candidate)]
    if len(document) != spec.expected_length:
        return False
    if all(d == document[0] for d in document):
        return False
    return tuple(document[-2:]) == check_digits(spec, document)


def format_message(template: str, value: Optional[str], field_name: str) -> str:
    """
    Substitui os marcadores {value} e {field} da mensagem de erro.
    Outras chaves são mantidas como estão.
    """
    return template.replace("{value}", "" if value is None else str(value)).replace("{field}", field_name)


class DocumentChecker:
    """
    Verificador de um tipo de documento. Sem estado mutável: uma instância
    pode ser compartilhada entre threads e tarefas.
    """

    def __init__(self, spec: DocumentSpec, default_message: str, message: Optional[str] = None):
        """
        Parâmetros:
            spec (DocumentSpec): configuração do documento
            default_message (str): mensagem padrão do tipo de documento
            message (str, opcional): mensagem customizada de falha
        """
        self.spec = spec
        self.message = message if message is not None else default_message

    @property
    def label(self) -> str:
        return self.spec.label

    def normalize(self, candidate: Optional[str]) -> str:
        return only_digits(candidate)

    def validate(self, candidate: Optional[str]) -> bool:
        return validate(self.spec, candidate)

    async def validate_async(self, candidate: Optional[str]) -> bool:
        return self.validate(candidate)

    def check(self, candidate: Optional[str], field_name: Optional[str] = None) -> ValidationOutcome:
        """
        Valida e, em caso de falha, monta a mensagem de erro.
        Parâmetros:
            candidate (str | None): documento
            field_name (str, opcional): nome do campo; padrão é o label do documento
        Retorno:
            ValidationOutcome: resultado com mensagem quando inválido
        """
        if self.validate(candidate):
            return ValidationOutcome(valid=True)
        return ValidationOutcome(valid=False, message=format_message(self.message, candidate, field_name or self.label))

    def __repr__(self) -> str:
        return f"DocumentChecker({self.label!r})"
