import re

import pytest

from utils.digito_verificador import (
    calcular,
    calcular_digito,
    sequencia_pesos,
    valor_caractere,
)
from utils.erros import FormatoInvalido


def test_valor_caractere_digitos_e_letras():
    assert valor_caractere("0") == 0
    assert valor_caractere("9") == 9
    assert valor_caractere("A") == 17
    assert valor_caractere("Z") == 42


def test_sequencia_pesos_alinhada_pela_direita():
    assert sequencia_pesos(12) == [5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
    assert sequencia_pesos(13) == [6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
    assert sequencia_pesos(3) == [4, 3, 2]


def test_calcular_digito_resto_menor_que_dois_vira_zero():
    assert calcular_digito("000000000000") == 0
    # soma 459, resto 8
    assert calcular_digito("12ABC34501DE") == 3


def test_calcular_exemplo_alfanumerico():
    assert calcular("12ABC34501DE") == "35"


def test_calcular_aceita_minusculas():
    assert calcular("12abc34501de") == "35"


@pytest.mark.parametrize("base, esperado", [
    ("510906260001", "77"),
    ("054751030001", "21"),
    ("000000000000", "00"),
])
def test_calcular_cnpj_numerico(base, esperado):
    assert calcular(base) == esperado


def test_calcular_base_especial():
    # pelo módulo 11 o primeiro dígito seria 9
    assert calcular_digito("000000000001") == 9
    assert calcular("000000000001") == "01"


@pytest.mark.parametrize("base", ["12GHJ34501KL", "12MPR34501ST", "12VWX34501YZ", "123456789012"])
def test_calcular_retorna_dois_digitos(base):
    assert re.fullmatch(r"\d{2}", calcular(base))


@pytest.mark.parametrize("base", ["12345678", "1234567890123", ""])
def test_calcular_tamanho_invalido(base):
    with pytest.raises(FormatoInvalido):
        calcular(base)


@pytest.mark.parametrize("base", ["12345678901!", "12ABC34501D\n", "12ABC34501DÉ"])
def test_calcular_caractere_invalido(base):
    with pytest.raises(FormatoInvalido):
        calcular(base)


@pytest.mark.parametrize("letra", ["I", "O", "U", "Q", "F"])
def test_calcular_letra_proibida(letra):
    with pytest.raises(FormatoInvalido, match=letra):
        calcular("12345678901" + letra)


def test_formato_invalido_e_value_error():
    with pytest.raises(ValueError):
        calcular("curto")
