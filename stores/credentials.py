"""
Programa: «Itens» – aplicação web para cadastro de usuários e itens.
Módulo: stores/credentials.py – armazenamento de credenciais.

Finalidade do módulo:
- Criação de usuários com um único INSERT; a unicidade do login é garantida
  pela restrição UNIQUE da tabela `usuarios`, nunca por consulta prévia.
- Busca de usuários por login e por identificador.
"""

from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError

from models.user import User
from stores.errors import DuplicateUsername, StoreErrorKind, to_store_error


class CredentialStore:
    """Mapeamento login -> hash de senha persistido em `usuarios`."""

    def __init__(self, db):
        self._db = db

    def create_user(self, username: str, password_hash: str) -> int:
        """Insere o usuário e devolve o id; DuplicateUsername se o login já existir."""
        user = User(username=username, password_hash=password_hash)
        session = self._db.session
        try:
            session.add(user)
            session.commit()
        except SQLAlchemyError as exc:
            session.rollback()
            error = to_store_error(exc)
            if error.kind is StoreErrorKind.DUPLICATE_KEY:
                raise DuplicateUsername(username) from exc
            raise error from exc
        return user.id

    def find_user_by_username(self, username: str) -> User | None:
        """Busca pelo login exato (sensível a maiúsculas); None se não existir."""
        try:
            return User.query.filter_by(username=username).first()
        except SQLAlchemyError as exc:
            self._db.session.rollback()
            raise to_store_error(exc) from exc

    def get_user(self, user_id: int) -> User | None:
        """Busca pelo identificador; usado ao restaurar a sessão."""
        try:
            return self._db.session.get(User, user_id)
        except SQLAlchemyError as exc:
            self._db.session.rollback()
            raise to_store_error(exc) from exc
