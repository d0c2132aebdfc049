"""
Validação de dados de contato: DDD, telefone/celular e e-mail.
Os padrões são compilados uma única vez e compartilhados entre chamadas.
"""
import re
from typing import Optional, Union

DDDS = frozenset({
    11, 14, 16, 18, 19,
    21, 22, 24, 27, 28,
    31, 32, 33, 34, 35, 37, 38,
    41, 44, 46, 48, 49,
    51, 53, 54, 55,
    61, 63, 64, 65, 66, 67, 68, 69,
    71, 73, 74, 75, 77, 79,
    81, 82, 83, 84, 85, 86, 87, 88, 89,
    91, 92, 93, 94, 95, 96, 97, 98, 99,
})
_DDDS_TEXTO = frozenset(str(ddd) for ddd in DDDS)

# 8 dígitos livres, ou prefixo 2-5 / 9X seguido de 3 dígitos, '-' opcional e 4 dígitos
TELEFONE_RE = re.compile(r"[0-9]{8}|(?:[2-5]|9[0-9])[0-9]{3}-?[0-9]{4}")
EMAIL_RE = re.compile(
    r"[A-Za-z0-9]+(?:[_.\-][A-Za-z0-9]+)*"
    r"@[A-Za-z0-9]+(?:[.\-][A-Za-z0-9]+)*"
    r"\.[A-Za-z]{2,}"
)


class ContatoUtils:
    @staticmethod
    def is_valid_ddd(ddd: Optional[int]) -> bool:
        """
        Valida o DDD contra a lista de códigos de área brasileiros.
        Parâmetros:
            ddd (int | None): DDD com dois dígitos
        Retorno:
            bool: True se o DDD existe, False caso contrário ou se ausente
        """
        if ddd is None or isinstance(ddd, bool):
            return False
        return str(ddd) in _DDDS_TEXTO

    @staticmethod
    def is_valid_telefone(telefone: Optional[Union[int, str]]) -> bool:
        """
        Valida telefone fixo ou celular, sem DDD.
        Parâmetros:
            telefone (int | None): número com 8 ou 9 dígitos
        Retorno:
            bool: True se o número tem formato válido, False caso contrário
        Exemplo: 987654321 -> True, 123456789 -> False
        """
        if telefone is None or isinstance(telefone, bool):
            return False
        return TELEFONE_RE.fullmatch(str(telefone)) is not None

    @staticmethod
    def is_valid_email(email: Optional[str]) -> bool:
        """
        Valida o formato do e-mail. Não consulta DNS.
        """
        if not isinstance(email, str):
            return False
        return EMAIL_RE.fullmatch(email) is not None
