"""
Programa: «Itens» – aplicação web para cadastro de usuários e itens.
Módulo: stores/errors.py – erros da camada de persistência.

Finalidade do módulo:
- Conjunto fechado de tipos de falha do banco (chave duplicada, indisponível, outro).
- Tradução das exceções do SQLAlchemy/driver para esses tipos na fronteira do store.
"""

from __future__ import annotations

import enum

from sqlalchemy.exc import (
    DisconnectionError,
    IntegrityError,
    InterfaceError,
    OperationalError,
    SQLAlchemyError,
)

# Códigos de violação de unicidade: PostgreSQL (SQLSTATE) e MySQL (errno)
_PG_UNIQUE_VIOLATION = "23505"
_MYSQL_DUPLICATE_ENTRY = 1062


class StoreErrorKind(enum.Enum):
    """Tipos abstratos de falha expostos acima da camada de persistência."""

    DUPLICATE_KEY = "duplicate_key"
    UNAVAILABLE = "unavailable"
    OTHER = "other"


class StoreError(Exception):
    """Falha de uma operação do store, já classificada."""

    def __init__(self, kind: StoreErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message


class DuplicateUsername(StoreError):
    """Login já cadastrado (violação da restrição UNIQUE de `usuarios`)."""

    def __init__(self, username: str):
        super().__init__(StoreErrorKind.DUPLICATE_KEY, f"username already exists: {username}")
        self.username = username


class StoreUnavailable(StoreError):
    """Banco inacessível (conexão recusada, perdida ou expirada)."""

    def __init__(self, message: str):
        super().__init__(StoreErrorKind.UNAVAILABLE, message)


def _is_unique_violation(exc: IntegrityError) -> bool:
    """Reconhece a violação de unicidade pelo código do driver ou pela mensagem do SQLite."""
    orig = exc.orig
    if getattr(orig, "pgcode", None) == _PG_UNIQUE_VIOLATION:
        return True
    if getattr(orig, "sqlstate", None) == _PG_UNIQUE_VIOLATION:
        return True
    args = getattr(orig, "args", ())
    if args and args[0] == _MYSQL_DUPLICATE_ENTRY:
        return True
    return "UNIQUE constraint failed" in str(orig)


def classify(exc: SQLAlchemyError) -> StoreErrorKind:
    """Determina o tipo abstrato de uma exceção do SQLAlchemy."""
    if isinstance(exc, IntegrityError):
        if _is_unique_violation(exc):
            return StoreErrorKind.DUPLICATE_KEY
        return StoreErrorKind.OTHER
    if isinstance(exc, (OperationalError, InterfaceError, DisconnectionError)):
        return StoreErrorKind.UNAVAILABLE
    return StoreErrorKind.OTHER


def describe(exc: SQLAlchemyError) -> str:
    """Mensagem legível do erro, sem o SQL e os parâmetros do comando."""
    orig = getattr(exc, "orig", None)
    return str(orig if orig is not None else exc).strip().splitlines()[0]


def to_store_error(exc: SQLAlchemyError) -> StoreError:
    """Converte a exceção do SQLAlchemy no StoreError correspondente."""
    kind = classify(exc)
    if kind is StoreErrorKind.UNAVAILABLE:
        return StoreUnavailable(describe(exc))
    return StoreError(kind, describe(exc))
