"""
Conjunto de validadores de cadastro base (CPF, CNPJ, DDD, telefone, e-mail, CEP e UF).
Ponto único de acesso às funções de validação; cada uma é pura e independente.
"""
from typing import Any, Callable, Dict, Mapping

from cadastro_br.utils.cnpj_utils import CNPJUtils
from cadastro_br.utils.contato_utils import ContatoUtils
from cadastro_br.utils.cpf_utils import CPFUtils
from cadastro_br.utils.endereco_utils import EnderecoUtils

valida_cpf = CPFUtils.is_valid_cpf
valida_cnpj = CNPJUtils.is_valid_cnpj
valida_ddd = ContatoUtils.is_valid_ddd
valida_telefone = ContatoUtils.is_valid_telefone
valida_email = ContatoUtils.is_valid_email
valida_cep = EnderecoUtils.is_valid_cep
valida_uf = EnderecoUtils.is_valid_uf

VALIDADORES: Dict[str, Callable[[Any], bool]] = {
    "cpf": valida_cpf,
    "cnpj": valida_cnpj,
    "ddd": valida_ddd,
    "telefone": valida_telefone,
    "email": valida_email,
    "cep": valida_cep,
    "uf": valida_uf,
}

# Tipos cujo valor de entrada é numérico
TIPOS_INTEIROS = frozenset({"ddd", "telefone"})


def valida_cadastro(dados: Mapping[str, Any]) -> Dict[str, bool]:
    """
    Valida vários campos de um cadastro de uma vez.
    Parâmetros:
        dados (Mapping[str, Any]): tipo do validador -> valor
    Retorno:
        Dict[str, bool]: tipo do validador -> resultado
    Exemplo: {'cpf': '111.444.777-35', 'uf': 'sp'} -> {'cpf': True, 'uf': True}
    Lança KeyError se algum tipo não tiver validador.
    """
    return {tipo: VALIDADORES[tipo](valor) for tipo, valor in dados.items()}
