"""
Validação de dados de endereço: CEP e unidade federativa (UF).
"""
import re
from typing import Optional

UFS = frozenset({
    "AC", "AL", "AP", "AM", "BA", "CE", "DF", "GO", "ES",
    "MA", "MT", "MS", "MG", "PA", "PB", "PR", "PE", "PI",
    "RJ", "RN", "RS", "RO", "RR", "SP", "SC", "SE", "TO",
})

TAMANHO_CEP = 8
CEP_RE = re.compile(r"[0-9]{5}[0-9]{3}")


class EnderecoUtils:
    @staticmethod
    def normalize_cep(cep: str) -> str:
        """
        Remove o hífen do CEP, se houver.
        Exemplo: '01310-100' -> '01310100'
        """
        return cep.replace("-", "", 1)

    @staticmethod
    def is_valid_cep(cep: Optional[str]) -> bool:
        """
        Valida CEP com 8 dígitos, com ou sem hífen.
        Parâmetros:
            cep (str | None): CEP
        Retorno:
            bool: True se válido. CEP ausente ou vazio é inválido.
        """
        if not cep or not isinstance(cep, str):
            return False
        cep = EnderecoUtils.normalize_cep(cep)
        if len(cep) != TAMANHO_CEP:
            return False
        # Não permite alfanuméricos nem caracteres repetidos, ex.: "00000000"
        if cep == cep[0] * TAMANHO_CEP:
            return False
        return CEP_RE.fullmatch(cep) is not None

    @staticmethod
    def is_valid_uf(uf: Optional[str]) -> bool:
        """
        Valida a sigla da unidade federativa, sem diferenciar maiúsculas.
        Exemplo: 'sp' -> True, 'XX' -> False
        """
        if not isinstance(uf, str):
            return False
        return uf.upper() in UFS
