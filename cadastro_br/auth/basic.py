from typing import Dict
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials
import os
import secrets

DEFAULT_CREDENTIALS_FILE = "cadastro_br/credentials/basic_auth.txt"

security = HTTPBasic()
_credentials_cache: Dict[str, str] = {}
_cache_file_path: str = ""


def parse_credentials(text: str) -> Dict[str, str]:
	"""
	Lê credenciais no formato 'usuario:senha', uma por linha.
	Linhas vazias, comentários (#) e linhas sem ':' são ignorados.
	"""
	credentials: Dict[str, str] = {}
	for line in text.splitlines():
		line = line.strip()
		if not line or line.startswith("#") or ":" not in line:
			continue
		username, password = line.split(":", 1)
		credentials[username] = password
	return credentials


def _load_credentials(file_path: str) -> None:
	global _credentials_cache, _cache_file_path
	if file_path == _cache_file_path and _credentials_cache:
		return
	_cache_file_path = file_path
	try:
		with open(file_path, "r", encoding="utf-8") as f:
			_credentials_cache = parse_credentials(f.read())
	except FileNotFoundError:
		_credentials_cache = {}


async def basic_auth(credentials: HTTPBasicCredentials = Depends(security)) -> str:
	credentials_file = os.getenv("BASIC_AUTH_CREDENTIALS_FILE", DEFAULT_CREDENTIALS_FILE)
	_load_credentials(credentials_file)
	expected = _credentials_cache.get(credentials.username)
	if expected is None or not secrets.compare_digest(expected.encode("utf-8"), credentials.password.encode("utf-8")):
		raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Credenciais inválidas", headers={"WWW-Authenticate": "Basic"})
	return credentials.username
