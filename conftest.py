import random
from typing import List

import pytest

from brdocs.utils.cnpj_utils import CNPJ_SPEC
from brdocs.utils.cpf_utils import CPF_SPEC
from brdocs.utils.document_utils import DocumentSpec, check_digits


def build_documents(spec: DocumentSpec, size: int, seed: int = 42) -> List[str]:
    """Monta documentos válidos a partir de corpos aleatórios."""
    rnd = random.Random(seed)
    documents = []
    while len(documents) < size:
        body = [rnd.randint(0, 9) for _ in range(spec.expected_length - 2)]
        if len(set(body)) == 1:
            continue
        documents.append("".join(str(d) for d in body + list(check_digits(spec, body))))
    return documents


def mask_cpf(cpf: str) -> str:
    return f"{cpf[0:3]}.{cpf[3:6]}.{cpf[6:9]}-{cpf[9:11]}"


def mask_cnpj(cnpj: str) -> str:
    return f"{cnpj[0:2]}.{cnpj[2:5]}.{cnpj[5:8]}/{cnpj[8:12]}-{cnpj[12:14]}"


@pytest.fixture
def valid_cpfs() -> List[str]:
    return build_documents(CPF_SPEC, 10)


@pytest.fixture
def valid_cnpjs() -> List[str]:
    return build_documents(CNPJ_SPEC, 10)


@pytest.fixture
def masked_cpfs(valid_cpfs) -> List[str]:
    return [mask_cpf(cpf) for cpf in valid_cpfs]


@pytest.fixture
def masked_cnpjs(valid_cnpjs) -> List[str]:
    return [mask_cnpj(cnpj) for cnpj in valid_cnpjs]
