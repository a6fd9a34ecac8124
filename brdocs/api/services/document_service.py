"""
Serviço de validação de documentos: encapsula os verificadores de CPF e CNPJ,
as mensagens de erro e os logs.
"""
import logging
from typing import Any, Dict, List, Optional

from fastapi import HTTPException

from brdocs.utils.cnpj_utils import cnpj_checker
from brdocs.utils.cpf_utils import cpf_checker
from brdocs.utils.document_utils import DocumentChecker, ValidationOutcome


class DocumentService:
    def __init__(self, cpf_message: Optional[str] = None, cnpj_message: Optional[str] = None, logger=None):
        """
        Inicializa o serviço de documentos.
        Parâmetros:
            cpf_message (str, opcional): mensagem customizada para CPF inválido
            cnpj_message (str, opcional): mensagem customizada para CNPJ inválido
            logger (logging.Logger, opcional): Logger para logs
        """
        self.checkers: Dict[str, DocumentChecker] = {
            "cpf": cpf_checker(cpf_message),
            "cnpj": cnpj_checker(cnpj_message),
        }
        if logger is None:
            logger = logging.getLogger("document_service")
            logger.setLevel(logging.INFO)
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
            if not logger.hasHandlers():
                logger.addHandler(handler)
        self.logger = logger

    def kinds(self) -> List[Dict[str, Any]]:
        return [
            {"kind": kind, "label": checker.label, "length": checker.spec.expected_length}
            for kind, checker in self.checkers.items()
        ]

    def get_checker(self, kind: str) -> DocumentChecker:
        """
        Retorna o verificador do tipo de documento.
        Parâmetros:
            kind (str): 'cpf' ou 'cnpj'
        Retorno:
            DocumentChecker: verificador
        """
        checker = self.checkers.get(kind.lower())
        if checker is None:
            self.logger.warning(f"Tipo de documento não suportado: kind={kind}")
            raise HTTPException(status_code=404, detail="Tipo de documento não suportado")
        return checker

    def check(self, kind: str, value: Optional[str], field_name: Optional[str] = None) -> ValidationOutcome:
        checker = self.get_checker(kind)
        outcome = checker.check(value, field_name)
        if outcome.valid:
            self.logger.info(f"{checker.label} válido: value={value}")
        else:
            self.logger.warning(f"{checker.label} inválido detectado: value={value}")
        return outcome

    async def validate_document(self, kind: str, value: Optional[str]) -> Dict[str, Any]:
        """
        Valida um documento avulso.
        Parâmetros:
            kind (str): tipo do documento
            value (str | None): documento com ou sem máscara
        Retorno:
            dict: resultado da validação
        """
        checker = self.get_checker(kind)
        outcome = self.check(kind, value)
        return {
            "kind": kind.lower(),
            "value": value,
            "valid": outcome.valid,
            "digits": checker.normalize(value) if outcome.valid else None,
            "message": outcome.message,
        }

    async def register_person(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Valida CPF e CNPJ de uma pessoa. Ambos os campos são verificados antes
        de rejeitar, para que todos os erros sejam retornados juntos.
        Parâmetros:
            payload (dict): dados com name, cpf e cnpj
        Retorno:
            dict: dados com documentos normalizados
        """
        self.logger.info(f"Recebendo payload de pessoa: {payload}")
        errors = []
        for field_name in ("cpf", "cnpj"):
            outcome = self.check(field_name, payload.get(field_name), field_name)
            if not outcome.valid:
                errors.append({"field": field_name, "message": outcome.message})
        if errors:
            self.logger.warning(f"Pessoa rejeitada: errors={errors}")
            raise HTTPException(status_code=422, detail=errors)

        result = {
            "name": payload.get("name"),
            "cpf": self.checkers["cpf"].normalize(payload["cpf"]),
            "cnpj": self.checkers["cnpj"].normalize(payload["cnpj"]),
        }
        self.logger.info(f"Pessoa validada: {result}")
        return result
