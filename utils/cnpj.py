import logging
import re
import secrets

from modelos.identificador import Identificador
from utils.digito_verificador import LETRAS_PROIBIDAS, TAMANHO_BASE, calcular
from utils.erros import FormatoInvalido
from utils.mascara import mascarar, remover_mascara

"""
Operações sobre o CNPJ alfanumérico:
 - gerar: CNPJ aleatório válido, já mascarado
 - validar / validar_formato
 - gerar_dv: dígitos verificadores de um CNPJ parcial
 - mascarar / remover_mascara (reexportadas de utils.mascara)
"""

logger = logging.getLogger(__name__)

# 0-9 e A-Z sem I, O, U, Q, F (31 símbolos)
CARACTERES_PERMITIDOS = "".join(
    c for c in "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ" if c not in LETRAS_PROIBIDAS
)

_FORMATO_MASCARADO = re.compile(r"[A-Z0-9]{2}\.[A-Z0-9]{3}\.[A-Z0-9]{3}/[A-Z0-9]{4}-\d{2}")
_FORMATO_SEM_MASCARA = re.compile(r"[A-Z0-9]{12}\d{2}")

__all__ = [
    "CARACTERES_PERMITIDOS",
    "FormatoInvalido",
    "LETRAS_PROIBIDAS",
    "gerar",
    "gerar_dv",
    "mascarar",
    "remover_mascara",
    "validar",
    "validar_formato",
]


def gerar() -> str:
    """
    Gera um CNPJ alfanumérico válido aleatório no formato XX.XXX.XXX/XXXX-DD.
    Os 12 caracteres da base vêm de `secrets`, não de um gerador previsível.
    """
    base = "".join(secrets.choice(CARACTERES_PERMITIDOS) for _ in range(TAMANHO_BASE))
    cnpj = Identificador.de_base(base).mascarado
    logger.debug(f"CNPJ gerado: {cnpj}")
    return cnpj


def validar_formato(cnpj: str, aceitar_sem_mascara: bool = True) -> bool:
    """
    Confere a estrutura do CNPJ, sem calcular os dígitos verificadores:
      - máscara XX.XXX.XXX/XXXX-DD (ou 14 caracteres sem máscara, se permitido)
      - 14 caracteres após remover a máscara
      - últimos 2 caracteres numéricos
      - nenhuma letra proibida nos 12 primeiros
    """
    cnpj = cnpj.upper()
    mascarado = bool(_FORMATO_MASCARADO.fullmatch(cnpj))
    sem_mascara = aceitar_sem_mascara and bool(_FORMATO_SEM_MASCARA.fullmatch(cnpj))
    if not (mascarado or sem_mascara):
        return False

    limpo = remover_mascara(cnpj)
    if len(limpo) != 14 or not limpo[-2:].isdigit():
        return False

    return not any(letra in limpo[:12] for letra in LETRAS_PROIBIDAS)


def validar(cnpj: str, aceitar_sem_mascara: bool = True) -> bool:
    """
    Valida formato e dígitos verificadores. Nunca levanta FormatoInvalido:
    CNPJ malformado é simplesmente inválido.
    """
    if not validar_formato(cnpj, aceitar_sem_mascara=aceitar_sem_mascara):
        logger.debug(f"CNPJ com formato inválido: {cnpj!r}")
        return False

    try:
        return Identificador.de_texto(cnpj).confere()
    except FormatoInvalido as e:
        logger.debug(f"CNPJ {cnpj!r} rejeitado no cálculo: {e}")
        return False


def gerar_dv(cnpj_parcial: str) -> str:
    """
    Retorna os 2 dígitos verificadores de um CNPJ parcial.

    Aceita a base de 12 caracteres (aa.aaa.aaa/aaaa) ou o CNPJ completo de
    14 caracteres (aa.aaa.aaa/aaaa-dd), caso em que os 2 últimos são ignorados.
    """
    limpo = remover_mascara(cnpj_parcial)
    if len(limpo) == 14 and limpo[-2:].isdigit():
        limpo = limpo[:12]
    elif len(limpo) != TAMANHO_BASE:
        raise FormatoInvalido(
            f"CNPJ parcial deve conter 12 caracteres, ou 14 terminando em 2 dígitos "
            f"(recebido {len(limpo)})."
        )
    return calcular(limpo)
