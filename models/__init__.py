"""
Módulo: `models/__init__.py`.
Finalidade: Importa os modelos para registrá-los no metadata do SQLAlchemy.
"""

from .user import User
from .item import Item
from .session_record import SessionRecord

__all__ = ["User", "Item", "SessionRecord"]
