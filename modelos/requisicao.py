from typing import Literal

from pydantic import BaseModel, field_validator


class RequisicaoCNPJ(BaseModel):
    """
    Dados enviados pelo formulário: a ação escolhida e o CNPJ digitado
    (vazio quando a ação é gerarCNPJ).
    """

    acao: Literal["gerarCNPJ", "validar", "gerarDV"]
    cnpj: str = ""

    @field_validator("cnpj", mode="before")
    def normalizar_cnpj(cls, v):
        if v is None:
            return ""
        return str(v)


class RespostaErro(BaseModel):
    status: Literal["error"] = "error"
    message: str
