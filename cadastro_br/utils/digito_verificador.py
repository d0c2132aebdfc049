"""
Cálculo de dígitos verificadores módulo 11, compartilhado por CPF e CNPJ.
Cada documento informa apenas suas sequências de pesos.
"""
from typing import Sequence, Tuple

PesosDV = Tuple[Tuple[int, ...], Tuple[int, ...]]

# (pesos do 1º DV, pesos do 2º DV)
PESOS_CPF: PesosDV = (
    (10, 9, 8, 7, 6, 5, 4, 3, 2),
    (11, 10, 9, 8, 7, 6, 5, 4, 3, 2),
)
PESOS_CNPJ: PesosDV = (
    (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2),
    (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2),
)


def calcula_digito(base: str, pesos: Sequence[int]) -> int:
    """
    Calcula um dígito verificador sobre a base informada.
    Parâmetros:
        base (str): dígitos já normalizados, com o mesmo tamanho de pesos
        pesos (Sequence[int]): pesos aplicados posição a posição
    Retorno:
        int: 0 se o resto da divisão por 11 for menor que 2, senão 11 - resto
    """
    soma = sum(int(d) * p for d, p in zip(base, pesos))
    resto = soma % 11
    return 0 if resto < 2 else 11 - resto


def calcula_digitos(base: str, pesos: PesosDV) -> str:
    """
    Calcula os dois dígitos verificadores. O segundo é calculado sobre a base
    acrescida do primeiro.
    Exemplo: calcula_digitos('111444777', PESOS_CPF) -> '35'
    """
    pesos_primeiro, pesos_segundo = pesos
    primeiro = calcula_digito(base, pesos_primeiro)
    segundo = calcula_digito(base + str(primeiro), pesos_segundo)
    return f"{primeiro}{segundo}"


def confere_digitos(numero: str, pesos: PesosDV) -> bool:
    """
    Confere se os dois últimos dígitos de numero são os verificadores da base.
    numero deve conter apenas dígitos e ter len(pesos[1]) + 1 posições.
    """
    tamanho_base = len(pesos[0])
    if len(numero) != tamanho_base + 2:
        return False
    return numero[tamanho_base:] == calcula_digitos(numero[:tamanho_base], pesos)
