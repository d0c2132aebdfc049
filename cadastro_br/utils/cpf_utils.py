"""
Módulo utilitário para validação e normalização de CPF.
Funções puras e reutilizáveis: nenhuma delas lança exceção para entrada malformada.
"""
from typing import Optional

from cadastro_br.utils.digito_verificador import PESOS_CPF, confere_digitos

TAMANHO_CPF = 11


class CPFUtils:
    @staticmethod
    def normalize_cpf(cpf: str) -> str:
        """
        Remove espaços nas bordas e os separadores '.' e '-' do CPF.
        Parâmetros:
            cpf (str): CPF em qualquer formato
        Retorno:
            str: CPF sem separadores
        Exemplo: ' 111.444.777-35 ' -> '11144477735'
        """
        return cpf.strip().replace(".", "").replace("-", "")

    @staticmethod
    def is_valid_cpf(cpf: Optional[str]) -> bool:
        """
        Valida CPF pelo algoritmo dos dígitos verificadores.
        Parâmetros:
            cpf (str | None): CPF com ou sem máscara
        Retorno:
            bool: True se válido, False caso contrário.
            CPF ausente (None) é considerado válido.
        """
        if cpf is None:
            return True
        if not isinstance(cpf, str):
            return False
        cpf = CPFUtils.normalize_cpf(cpf)
        if len(cpf) != TAMANHO_CPF:
            return False
        # Somente dígitos ASCII; '²' e afins passam em str.isdigit()
        if not (cpf.isascii() and cpf.isdigit()):
            return False
        # Sequências repetidas passam no cálculo mas não são emitidas
        if cpf == cpf[0] * TAMANHO_CPF:
            return False
        return confere_digitos(cpf, PESOS_CPF)
