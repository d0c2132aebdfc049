"""
Módulo utilitário para validação e normalização de CNPJ.
"""
from typing import Optional

from cadastro_br.utils.digito_verificador import PESOS_CNPJ, confere_digitos

TAMANHO_CNPJ = 14


class CNPJUtils:
    @staticmethod
    def normalize_cnpj(cnpj: str) -> str:
        """
        Remove espaços nas bordas e os separadores '.', '-' e '/' do CNPJ.
        Exemplo: '11.222.333/0001-81' -> '11222333000181'
        """
        return cnpj.strip().replace(".", "").replace("-", "").replace("/", "")

    @staticmethod
    def is_valid_cnpj(cnpj: Optional[str]) -> bool:
        """
        Valida CNPJ pelo algoritmo dos dígitos verificadores.
        Parâmetros:
            cnpj (str | None): CNPJ com ou sem máscara
        Retorno:
            bool: True se válido, False caso contrário.
            CNPJ ausente (None) é considerado válido.
        """
        if cnpj is None:
            return True
        if not isinstance(cnpj, str):
            return False
        cnpj = CNPJUtils.normalize_cnpj(cnpj)
        if len(cnpj) != TAMANHO_CNPJ:
            return False
        if not (cnpj.isascii() and cnpj.isdigit()):
            return False
        return confere_digitos(cnpj, PESOS_CNPJ)
