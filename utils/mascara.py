import re

"""
Aplicação e remoção da máscara XX.XXX.XXX/XXXX-DD.
"""

_NAO_ALFANUMERICO = re.compile(r"[^A-Z0-9]")
_PARTES_CNPJ = re.compile(r"([A-Z0-9]{2})([A-Z0-9]{3})([A-Z0-9]{3})([A-Z0-9]{4})(\d{2})")


def remover_mascara(cnpj: str) -> str:
    """
    Converte para maiúsculas e remove tudo que não for 0-9 ou A-Z.
    Nunca falha; pode retornar string vazia.
    """
    return _NAO_ALFANUMERICO.sub("", cnpj.upper())


def mascarar(cnpj: str) -> str:
    """
    Aplica a máscara XX.XXX.XXX/XXXX-DD. Se o CNPJ limpo não tiver
    14 caracteres terminados em 2 dígitos, devolve o CNPJ limpo.
    """
    limpo = remover_mascara(cnpj)
    partes = _PARTES_CNPJ.fullmatch(limpo)
    if not partes:
        return limpo
    return "{}.{}.{}/{}-{}".format(*partes.groups())
