from typing import List, Dict, Any
from fastapi import FastAPI, Body, Depends, Path
import os
import uvicorn
from cadastro_br.auth.basic import basic_auth
from cadastro_br.api.services.validation_service import ValidationService, build_logger

logger = build_logger("cadastro_api")

app = FastAPI(title="Validação de Cadastro API", version="1.0.0")

validation_service = ValidationService(build_logger("validation_service"))


@app.get("/")
async def root(_: str = Depends(basic_auth)) -> dict:
    """
    Endpoint de status da API.
    Parâmetros:
        _: autenticação básica
    Retorno:
        dict: status da API
    """
    logger.info("Endpoint / chamado, status=ok")
    return {"status": "ok"}


# Endpoints de validação (prefixo /api/v1)
#########
@app.get("/api/v1/validations")
async def list_validations(_: str = Depends(basic_auth)) -> List[str]:
    """
    Lista os tipos de validação disponíveis.
    Parâmetros:
        _: autenticação básica
    Retorno:
        List[str]: tipos suportados
    """
    tipos = validation_service.list_tipos()
    logger.info(f"Listando tipos de validação: total={len(tipos)}")
    return tipos


#########
@app.post("/api/v1/validations")
async def validate_cadastro(payload: Any = Body(...), _: str = Depends(basic_auth)) -> Dict[str, Any]:
    """
    Valida vários campos de um cadastro de uma vez.
    Parâmetros:
        payload (dict): tipo -> valor
        _: autenticação básica
    Retorno:
        dict: resultado por campo e resultado geral
    """
    return validation_service.validate_cadastro(payload)


#########
@app.post("/api/v1/validations/{tipo}")
async def validate_value(payload: Any = Body(...), tipo: str = Path(..., description="Tipo de validação"), _: str = Depends(basic_auth)) -> Dict[str, Any]:
    """
    Valida um único valor.
    Parâmetros:
        payload (dict): {"value": ...}
        tipo (str): tipo de validação
        _: autenticação básica
    Retorno:
        dict: tipo, valor e resultado
    """
    return validation_service.validate(tipo, payload)


######### ------------------------------ #########
if __name__ == "__main__":
    """
    Inicializa o servidor Uvicorn para rodar a API.
    """
    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "3000"))
    logger.info(f"Starting Uvicorn server on {host}:{port}")
    uvicorn.run(app, host=host, port=port)
