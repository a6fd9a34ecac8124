"""
Modelos da API e regras de validação de documentos para o pydantic.
"""
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, ValidationInfo

from brdocs.utils.cnpj_utils import cnpj_checker
from brdocs.utils.cpf_utils import cpf_checker
from brdocs.utils.document_utils import DocumentChecker


def document_rule(checker: DocumentChecker) -> AfterValidator:
    """
    Cria a regra pydantic que aplica o verificador ao campo.
    Parâmetros:
        checker (DocumentChecker): verificador do documento (com mensagem opcional)
    Retorno:
        AfterValidator: falha com ValueError contendo a mensagem formatada
    """
    def _validate(value: Optional[str], info: ValidationInfo) -> Optional[str]:
        outcome = checker.check(value, info.field_name)
        if not outcome.valid:
            raise ValueError(outcome.message)
        return value

    return AfterValidator(_validate)


CPFField = Annotated[Optional[str], document_rule(cpf_checker())]
CNPJField = Annotated[Optional[str], document_rule(cnpj_checker())]


class Person(BaseModel):
    name: Optional[str] = None
    cpf: CPFField
    cnpj: CNPJField


class PersonRequest(BaseModel):
    name: Optional[str] = None
    cpf: Optional[str] = None
    cnpj: Optional[str] = None


class DocumentRequest(BaseModel):
    value: Optional[str] = None


class ValidationResponse(BaseModel):
    kind: str
    value: Optional[str]
    valid: bool
    digits: Optional[str] = None
    message: Optional[str] = None
