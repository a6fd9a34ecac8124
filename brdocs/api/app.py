from typing import Any, Dict, List
from fastapi import FastAPI, status, Path
import logging
import uvicorn
import os

from brdocs.api.schemas import DocumentRequest, Person, PersonRequest, ValidationResponse
from brdocs.api.services.document_service import DocumentService

API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CPF_ERROR_MESSAGE = os.getenv("CPF_ERROR_MESSAGE")
CNPJ_ERROR_MESSAGE = os.getenv("CNPJ_ERROR_MESSAGE")


def resolve_log_level(name: str) -> int:
    """Converte o nome do nível de log; nomes desconhecidos viram INFO."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


logger = logging.getLogger("brdocs.api")
logger.setLevel(resolve_log_level(LOG_LEVEL))
if not logger.hasHandlers():
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)

app = FastAPI(title="Brazilian Documents API", version="1.0.0")

document_service = DocumentService(CPF_ERROR_MESSAGE, CNPJ_ERROR_MESSAGE, logger=logger)


@app.get("/")
async def root() -> dict:
    """
    Endpoint de status da API.
    Retorno:
        dict: status da API
    """
    logger.info("Endpoint / chamado, status=ok")
    return {"status": "ok"}


#########
@app.get("/api/v1/documents")
async def list_document_kinds() -> List[dict]:
    """
    Lista os tipos de documento suportados.
    Retorno:
        List[dict]: tipo, label e quantidade de dígitos
    """
    items = document_service.kinds()
    logger.info(f"Listando tipos de documento: total={len(items)}")
    return items


#########
@app.post("/api/v1/documents/{kind}/validate", response_model=ValidationResponse)
async def validate_document(payload: DocumentRequest, kind: str = Path(..., description="cpf ou cnpj")) -> Dict[str, Any]:
    """
    Valida um CPF ou CNPJ, com ou sem máscara.
    Parâmetros:
        payload (DocumentRequest): documento a validar
        kind (str): tipo do documento
    Retorno:
        dict: resultado da validação
    """
    logger.debug(f"Validação solicitada: kind={kind}, payload={payload}")
    return await document_service.validate_document(kind, payload.value)


#########
@app.post("/api/v1/people", status_code=status.HTTP_201_CREATED)
async def register_person(payload: PersonRequest) -> Dict[str, Any]:
    """
    Valida os documentos de uma pessoa pelo serviço.
    Parâmetros:
        payload (PersonRequest): name, cpf e cnpj
    Retorno:
        dict: dados com documentos normalizados
    """
    result = await document_service.register_person(payload.model_dump())
    logger.info(f"Pessoa processada: retorno={result}")
    return result


#########
# Mesma validação aplicada pelas regras do modelo pydantic (422 do FastAPI)
@app.post("/api/v1/people/model", status_code=status.HTTP_201_CREATED)
async def register_person_model(person: Person) -> Dict[str, Any]:
    result = {
        "name": person.name,
        "cpf": document_service.checkers["cpf"].normalize(person.cpf),
        "cnpj": document_service.checkers["cnpj"].normalize(person.cnpj),
    }
    logger.info(f"Pessoa validada pelo modelo: {result}")
    return result


if __name__ == "__main__":
    """
    Inicializa o servidor Uvicorn para rodar a API.
    """
    logger.info(f"Starting Uvicorn server on {API_HOST}:{API_PORT}")
    uvicorn.run(app, host=API_HOST, port=API_PORT)
