"""
Serviço de validação: encapsula a escolha do validador, a checagem do payload e os logs.
Mantém os validadores puros livres de HTTP e de logging.
"""
from typing import Dict, Any, List
from fastapi import HTTPException
import logging
import os
from cadastro_br.utils.validacao_cadastro import VALIDADORES, TIPOS_INTEIROS, valida_cadastro


def resolve_log_level(name: str) -> int:
    """
    Converte o nome do nível de log em constante do logging.
    Nomes desconhecidos caem em INFO.
    Exemplo: 'debug' -> logging.DEBUG, 'verbose' -> logging.INFO
    """
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def build_logger(name: str = "validation_service") -> logging.Logger:
    """
    Cria o logger do serviço com nível definido por LOG_LEVEL (padrão INFO).
    O handler só é anexado uma vez.
    """
    logger = logging.getLogger(name)
    logger.setLevel(resolve_log_level(os.getenv("LOG_LEVEL", "INFO")))
    if not logger.hasHandlers():
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
        logger.addHandler(handler)
    return logger


class ValidationService:
    def __init__(self, logger=None):
        """
        Inicializa o serviço de validação.
        Parâmetros:
            logger (logging.Logger, opcional): Logger para logs
        """
        self.logger = logger if logger is not None else build_logger()

    def list_tipos(self) -> List[str]:
        """
        Lista os tipos de validação disponíveis.
        """
        return sorted(VALIDADORES)

    def _check_tipo(self, tipo: str) -> None:
        if tipo not in VALIDADORES:
            self.logger.warning(f"Tipo de validação desconhecido: tipo={tipo}")
            raise HTTPException(status_code=404, detail=f"Tipo de validação desconhecido: {tipo}")

    def _check_valor(self, tipo: str, valor: Any) -> None:
        # DDD e telefone chegam como inteiros; bool é subclasse de int
        if tipo in TIPOS_INTEIROS and valor is not None and (not isinstance(valor, int) or isinstance(valor, bool)):
            self.logger.warning(f"Valor não inteiro para {tipo}: value={valor!r}")
            raise HTTPException(status_code=400, detail=f"{tipo} deve ser inteiro")

    def validate(self, tipo: str, payload: Any) -> Dict[str, Any]:
        """
        Valida um único valor.
        Parâmetros:
            tipo (str): nome do validador (cpf, cnpj, ddd, telefone, email, cep, uf)
            payload (dict): {"value": ...}; sem "value" o valor é tratado como ausente
        Retorno:
            dict: tipo, valor recebido e resultado da validação
        """
        self.logger.info(f"Recebendo validação: tipo={tipo}, payload={payload}")
        self._check_tipo(tipo)
        if not isinstance(payload, dict):
            self.logger.warning(f"Payload não é objeto: {payload!r}")
            raise HTTPException(status_code=400, detail="Payload deve ser um objeto JSON")
        valor = payload.get("value")
        self._check_valor(tipo, valor)
        valid = VALIDADORES[tipo](valor)
        result = {"tipo": tipo, "value": valor, "valid": valid}
        self.logger.info(f"Validação concluída: {result}")
        return result

    def validate_cadastro(self, payload: Any) -> Dict[str, Any]:
        """
        Valida vários campos de um cadastro.
        Parâmetros:
            payload (dict): tipo -> valor, ex.: {"cpf": "111.444.777-35", "uf": "SP"}
        Retorno:
            dict: resultado por campo e se o cadastro inteiro é válido
        """
        self.logger.info(f"Recebendo validação de cadastro: {payload}")
        if not isinstance(payload, dict) or not payload:
            self.logger.warning(f"Payload vazio ou inválido: {payload!r}")
            raise HTTPException(status_code=400, detail="Informe ao menos um campo para validar")
        desconhecidos = sorted(tipo for tipo in payload if tipo not in VALIDADORES)
        if desconhecidos:
            self.logger.warning(f"Campos sem validador: {desconhecidos}")
            raise HTTPException(status_code=400, detail=f"Campos sem validador: {', '.join(desconhecidos)}")
        for tipo, valor in payload.items():
            self._check_valor(tipo, valor)
        results = valida_cadastro(payload)
        result = {"results": results, "valid": all(results.values())}
        self.logger.info(f"Validação de cadastro concluída: {result}")
        return result
