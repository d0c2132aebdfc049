import pytest

from cadastro_br.utils.validacao_cadastro import (
    VALIDADORES,
    valida_cadastro,
    valida_cep,
    valida_cnpj,
    valida_cpf,
    valida_ddd,
    valida_email,
    valida_telefone,
    valida_uf,
)


def test_validadores_registrados():
    assert set(VALIDADORES) == {"cpf", "cnpj", "ddd", "telefone", "email", "cep", "uf"}


def test_exemplos_de_referencia():
    assert valida_cpf("111.444.777-35") is True
    assert valida_cpf("11144477735") is True
    assert valida_cpf("11144477736") is False
    assert valida_cnpj("11.222.333/0001-81") is True
    assert valida_ddd(11) is True
    assert valida_ddd(20) is False
    assert valida_cep("01310-100") is True
    assert valida_cep("00000000") is False
    assert valida_uf("sp") is True
    assert valida_uf("XX") is False
    assert valida_email("a@b.com") is True
    assert valida_email("not-an-email") is False
    assert valida_telefone(987654321) is True


def test_entrada_ausente():
    # Somente CPF e CNPJ tratam ausência como válida
    assert valida_cpf(None) is True
    assert valida_cnpj(None) is True
    for tipo in ("ddd", "telefone", "email", "cep", "uf"):
        assert VALIDADORES[tipo](None) is False


@pytest.mark.parametrize("tipo,valor", [
    ("cpf", "111.444.777-35"),
    ("cpf", "11144477736"),
    ("cnpj", "11.222.333/0001-81"),
    ("ddd", 20),
    ("telefone", 12345678),
    ("email", "a@b.com"),
    ("cep", "01310-100"),
    ("uf", "sp"),
])
def test_idempotencia(tipo, valor):
    validador = VALIDADORES[tipo]
    assert validador(valor) == validador(valor)


@pytest.mark.parametrize("valor", [object(), [], {}, 3.5, b"11144477735"])
def test_validadores_nao_lancam(valor):
    for validador in VALIDADORES.values():
        assert validador(valor) is False


def test_valida_cadastro():
    dados = {
        "cpf": "111.444.777-35",
        "cnpj": "11.222.333/0001-82",
        "ddd": 11,
        "telefone": 987654321,
        "email": "a@b.com",
        "cep": "01310-100",
        "uf": "sp",
    }
    assert valida_cadastro(dados) == {
        "cpf": True,
        "cnpj": False,
        "ddd": True,
        "telefone": True,
        "email": True,
        "cep": True,
        "uf": True,
    }


def test_valida_cadastro_tipo_desconhecido():
    with pytest.raises(KeyError):
        valida_cadastro({"rg": "123"})
