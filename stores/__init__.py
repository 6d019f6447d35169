"""
Módulo: `stores/__init__.py`.
Finalidade: Camada de persistência (usuários e itens) sobre o SQLAlchemy.
"""

from .credentials import CredentialStore
from .errors import DuplicateUsername, StoreError, StoreErrorKind, StoreUnavailable
from .items import ItemStore

__all__ = [
    "CredentialStore",
    "ItemStore",
    "StoreError",
    "StoreErrorKind",
    "DuplicateUsername",
    "StoreUnavailable",
]
