import pytest

from cadastro_br.utils.cnpj_utils import CNPJUtils
from cadastro_br.utils.cpf_utils import CPFUtils
from cadastro_br.utils.digito_verificador import (
    PESOS_CNPJ,
    PESOS_CPF,
    calcula_digito,
    calcula_digitos,
    confere_digitos,
)


def test_calcula_digito_resto_menor_que_dois_vira_zero():
    # 1*10 + 1*9 = 19, 19 % 11 = 8 -> 3
    assert calcula_digito("11", (10, 9)) == 3
    # soma 11 -> resto 0 -> 0
    assert calcula_digito("11", (10, 1)) == 0
    # soma 12 -> resto 1 -> 0
    assert calcula_digito("12", (10, 1)) == 0


def test_calcula_digitos_cpf_e_cnpj():
    assert calcula_digitos("111444777", PESOS_CPF) == "35"
    assert calcula_digitos("112223330001", PESOS_CNPJ) == "81"


def test_confere_digitos_tamanho_errado():
    assert confere_digitos("1114447773", PESOS_CPF) is False
    assert confere_digitos("111444777355", PESOS_CPF) is False


def test_normalize_cpf():
    assert CPFUtils.normalize_cpf(" 111.444.777-35 ") == "11144477735"


@pytest.mark.parametrize("cpf", [
    "111.444.777-35",
    "11144477735",
    "  111.444.777-35\t",
    "529.982.247-25",
    "09702414458",
])
def test_cpf_valido(cpf):
    assert CPFUtils.is_valid_cpf(cpf) is True


@pytest.mark.parametrize("cpf", [
    "11144477736",
    "12345678900",
    "111.444.777-53",
    "",
    "1114447773",
    "111444777350",
    "111/444/777-35",
    "1114447773a",
    "111.444.777-3 ",
    "１１１４４４７７７３５",
])
def test_cpf_invalido(cpf):
    assert CPFUtils.is_valid_cpf(cpf) is False


@pytest.mark.parametrize("digito", "0123456789")
def test_cpf_digitos_repetidos(digito):
    assert CPFUtils.is_valid_cpf(digito * 11) is False


def test_cpf_ausente_e_valido():
    assert CPFUtils.is_valid_cpf(None) is True


def test_cpf_tipo_errado_nao_lanca():
    assert CPFUtils.is_valid_cpf(11144477735) is False


def test_normalize_cnpj():
    assert CNPJUtils.normalize_cnpj("11.222.333/0001-81") == "11222333000181"


@pytest.mark.parametrize("cnpj", [
    "11.222.333/0001-81",
    "11222333000181",
    " 11.444.777/0001-61 ",
])
def test_cnpj_valido(cnpj):
    assert CNPJUtils.is_valid_cnpj(cnpj) is True


@pytest.mark.parametrize("cnpj", [
    "11.222.333/0001-82",
    "11222333000118",
    "",
    "1122233300018",
    "112223330001811",
    "11.222.333/0001-8x",
    "11,222,333/0001-81",
])
def test_cnpj_invalido(cnpj):
    assert CNPJUtils.is_valid_cnpj(cnpj) is False


def test_cnpj_ausente_e_valido():
    assert CNPJUtils.is_valid_cnpj(None) is True


def test_cnpj_zerado_passa_no_calculo():
    # Diferente do CPF, sequências repetidas não são rejeitadas
    assert CNPJUtils.is_valid_cnpj("00000000000000") is True


def test_cnpj_tipo_errado_nao_lanca():
    assert CNPJUtils.is_valid_cnpj(11222333000181) is False
