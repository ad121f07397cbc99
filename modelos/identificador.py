import logging
import re

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from utils.digito_verificador import calcular, verificar_base
from utils.erros import FormatoInvalido
from utils.mascara import mascarar, remover_mascara

logger = logging.getLogger(__name__)

_DV = re.compile(r"[0-9]{2}")


class Identificador(BaseModel):
    """
    CNPJ alfanumérico já separado em base (12 caracteres) e dígitos
    verificadores (2 dígitos). Imutável: cada operação gera um novo valor.

    Não confere se os dígitos batem com a base; para isso use `confere()`.
    """

    model_config = ConfigDict(frozen=True)

    base: str
    digitos: str

    @field_validator("base", mode="before")
    def validar_base(cls, v):
        """
        Garante 12 caracteres alfanuméricos, em maiúsculas e sem letras proibidas.
        """
        if not isinstance(v, str):
            raise FormatoInvalido("Base do CNPJ deve ser texto.")
        return verificar_base(v)

    @field_validator("digitos")
    def validar_digitos(cls, v):
        if not _DV.fullmatch(v):
            raise FormatoInvalido("Dígitos verificadores devem ser 2 dígitos numéricos.")
        return v

    @property
    def completo(self) -> str:
        return self.base + self.digitos

    @property
    def mascarado(self) -> str:
        return mascarar(self.completo)

    def confere(self) -> bool:
        """True se os dígitos informados forem os calculados para a base."""
        esperado = calcular(self.base)
        logger.debug(f"dv_esperado={esperado}, dv_informado={self.digitos}")
        return esperado == self.digitos

    @classmethod
    def de_base(cls, base: str) -> "Identificador":
        """Monta o identificador calculando os dígitos verificadores da base."""
        return cls._construir(base=base, digitos=calcular(base))

    @classmethod
    def de_texto(cls, texto: str) -> "Identificador":
        """
        Monta o identificador a partir de um CNPJ com ou sem máscara
        (14 caracteres após a limpeza).
        """
        limpo = remover_mascara(texto)
        if len(limpo) != 14:
            raise FormatoInvalido(
                f"CNPJ deve conter 14 caracteres sem a máscara (recebido {len(limpo)})."
            )
        return cls._construir(base=limpo[:12], digitos=limpo[12:])

    @classmethod
    def _construir(cls, **campos) -> "Identificador":
        # pydantic embrulha o FormatoInvalido dos validadores em ValidationError
        try:
            return cls(**campos)
        except ValidationError as e:
            mensagens = [err["msg"].removeprefix("Value error, ") for err in e.errors()]
            logger.debug(f"Identificador rejeitado: {mensagens}")
            raise FormatoInvalido(" ".join(mensagens)) from e
