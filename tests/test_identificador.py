import pytest
from pydantic import ValidationError

from modelos.identificador import Identificador
from utils.erros import FormatoInvalido


def test_de_base_calcula_digitos():
    ident = Identificador.de_base("12abc34501de")
    assert ident.base == "12ABC34501DE"
    assert ident.digitos == "35"
    assert ident.completo == "12ABC34501DE35"
    assert ident.mascarado == "12.ABC.345/01DE-35"
    assert ident.confere()


def test_de_texto_com_e_sem_mascara():
    assert Identificador.de_texto("12.ABC.345/01DE-35") == Identificador.de_texto("12ABC34501DE35")


def test_de_texto_digitos_errados_nao_conferem():
    ident = Identificador.de_texto("12.ABC.345/01DE-34")
    assert not ident.confere()


@pytest.mark.parametrize("texto", [
    "12.ABC.345/01DE",
    "12.ABC.345/01DE-XX",
    "12.ABC.345/01IF-35",
])
def test_de_texto_formato_invalido(texto):
    with pytest.raises(FormatoInvalido):
        Identificador.de_texto(texto)


def test_construcao_direta_valida_campos():
    with pytest.raises(ValidationError):
        Identificador(base="12ABC34501DQ", digitos="35")
    with pytest.raises(ValidationError):
        Identificador(base="12ABC34501DE", digitos="3")
    with pytest.raises(ValidationError):
        Identificador(base="12ABC34501DE", digitos="35\n")
    with pytest.raises(ValidationError):
        Identificador(base="12ABC34501D\n", digitos="35")


def test_identificador_imutavel():
    ident = Identificador.de_base("12ABC34501DE")
    with pytest.raises(ValidationError):
        ident.digitos = "00"


def test_de_base_rejeita_quebra_de_linha():
    with pytest.raises(FormatoInvalido):
        Identificador.de_base("12ABC34501D\n")
