import logging
import re

from utils.erros import FormatoInvalido

"""
Cálculo dos dígitos verificadores do CNPJ alfanumérico (ENCAT):
 - valor_caractere: código ASCII - 48 ('0'..'9' -> 0..9, 'A'..'Z' -> 17..42)
 - sequencia_pesos: pesos 2..9 alinhados da direita para a esquerda
 - calcular_digito: soma ponderada módulo 11
 - calcular: os dois DVs de uma base de 12 caracteres
"""

logger = logging.getLogger(__name__)

TAMANHO_BASE = 12
LETRAS_PROIBIDAS = ("I", "O", "U", "Q", "F")
PESOS = list(range(2, 10))

# Exceção fixa da especificação ENCAT, não segue o módulo 11.
BASE_ESPECIAL = "000000000001"
DV_BASE_ESPECIAL = "01"

_ALFANUMERICO = re.compile(r"[0-9A-Z]+")


def valor_caractere(caractere: str) -> int:
    """Converte um caractere do CNPJ no valor usado na multiplicação pelos pesos."""
    return ord(caractere) - 48


def sequencia_pesos(tamanho: int) -> list[int]:
    """
    Repete 2..9 até cobrir `tamanho` posições e inverte, de modo que o
    último caractere recebe peso 2, o penúltimo 3, e assim por diante.
    """
    repeticoes = -(-tamanho // len(PESOS))
    pesos = (PESOS * repeticoes)[:tamanho]
    return pesos[::-1]


def calcular_digito(texto: str) -> int:
    """Retorna um dígito verificador (0-9) para `texto`."""
    pesos = sequencia_pesos(len(texto))
    soma = sum(valor_caractere(c) * p for c, p in zip(texto, pesos))
    resto = soma % 11
    logger.debug(f"soma={soma}, resto={resto} para {texto}")
    return 0 if resto < 2 else 11 - resto


def verificar_base(base: str) -> str:
    """
    Normaliza a base para maiúsculas e garante 12 caracteres alfanuméricos
    sem letras proibidas. Levanta FormatoInvalido caso contrário.
    """
    base = base.upper()
    if len(base) != TAMANHO_BASE:
        raise FormatoInvalido(
            f"Base do CNPJ deve conter {TAMANHO_BASE} caracteres (recebido {len(base)})."
        )
    if not _ALFANUMERICO.fullmatch(base):
        raise FormatoInvalido("Base do CNPJ deve conter apenas caracteres alfanuméricos.")

    proibidas = sorted({letra for letra in base if letra in LETRAS_PROIBIDAS})
    if proibidas:
        raise FormatoInvalido(
            f"Base do CNPJ contém letras proibidas: {', '.join(proibidas)}."
        )
    return base


def calcular(base: str) -> str:
    """Retorna os 2 dígitos verificadores de uma base de 12 caracteres."""
    base = verificar_base(base)
    if base == BASE_ESPECIAL:
        logger.debug(f"Base especial {BASE_ESPECIAL}, DV fixo {DV_BASE_ESPECIAL}")
        return DV_BASE_ESPECIAL

    dv1 = str(calcular_digito(base))
    dv2 = str(calcular_digito(base + dv1))
    logger.debug(f"dv1={dv1}, dv2={dv2} (base {base})")
    return dv1 + dv2
