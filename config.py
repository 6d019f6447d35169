"""
Programa: «Itens» – aplicação web para cadastro de usuários e itens.
Módulo: config.py – configuração da aplicação.

Finalidade do módulo:
- Definição dos parâmetros básicos do Flask (chave secreta, conexão com o banco).
- Política do cookie de sessão (persistência, tempo de vida, sessões vazias).
- Parâmetros do hash de senha e do servidor de desenvolvimento.
"""

import os
import warnings

from dotenv import load_dotenv

load_dotenv()


def _get_env_bool(name: str, default: bool = False) -> bool:
    """Lê flags como SESSION_PERMANENT ou SESSION_SAVE_UNINITIALIZED ("1", "true", "yes", "on")."""
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_env_int(name: str, default: int) -> int:
    """Lê inteiros como PORT ou SESSION_LIFETIME_MINUTES; valor inválido cai no padrão."""
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


def _is_production() -> bool:
    """Produção (FLASK_ENV=production) exige SECRET_KEY e cookie Secure."""
    return os.environ.get("FLASK_ENV", "").strip().lower() == "production"


def _database_url() -> str:
    """Lê DATABASE_URL e normaliza o esquema legado `postgres://`."""
    url = os.environ.get("DATABASE_URL", "").strip() or "sqlite:///itens.db"
    if url.startswith("postgres://"):
        url = "postgresql://" + url[len("postgres://"):]
    return url


class Config:
    """Configuração lida do ambiente (e do .env): banco, cookie de sessão e hash de senha."""

    _PRODUCTION = _is_production()

    SECRET_KEY = os.environ.get("SECRET_KEY")
    if not SECRET_KEY:
        if _PRODUCTION:
            raise RuntimeError(
                "SECRET_KEY must be set in production: it signs the session cookie "
                "that carries the login of every user."
            )
        SECRET_KEY = "dev-insecure-secret-key"
        warnings.warn(
            "SECRET_KEY is not set; session cookies are signed with a development-only key.",
            RuntimeWarning,
            stacklevel=1,
        )

    SQLALCHEMY_DATABASE_URI = _database_url()
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {"pool_pre_ping": True}

    HOST = os.environ.get("HOST", "127.0.0.1")
    PORT = _get_env_int("PORT", 3000)
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"

    # Método do werkzeug, p.ex. "scrypt" ou "pbkdf2:sha256:600000" (fator de trabalho)
    PASSWORD_HASH_METHOD = os.environ.get("PASSWORD_HASH_METHOD", "scrypt").strip() or "scrypt"

    SESSION_COOKIE_NAME = os.environ.get("SESSION_COOKIE_NAME", "session").strip() or "session"
    SESSION_COOKIE_SECURE = _get_env_bool("SESSION_COOKIE_SECURE", default=_PRODUCTION)
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = os.environ.get("SESSION_COOKIE_SAMESITE", "Lax")
    SESSION_PERMANENT = _get_env_bool("SESSION_PERMANENT", default=False)
    SESSION_LIFETIME_MINUTES = _get_env_int("SESSION_LIFETIME_MINUTES", 480)
    SESSION_SAVE_UNINITIALIZED = _get_env_bool("SESSION_SAVE_UNINITIALIZED", default=False)
