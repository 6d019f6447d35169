"""
Programa: «Itens» – aplicação web para cadastro de usuários e itens.
Módulo: stores/items.py – armazenamento de itens.

Finalidade do módulo:
- Inserção de itens vinculados ao usuário que os criou.
- Listagem de todos os itens do sistema, do mais recente ao mais antigo.
"""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy.exc import SQLAlchemyError

from models.item import Item
from stores.errors import to_store_error


class ItemStore:
    """Itens persistidos em `itens`, cada um vinculado ao usuário que o criou."""

    def __init__(self, db):
        self._db = db

    def create_item(self, owner_id: int, name: str, description: str, price: Decimal) -> int:
        """Insere um item; o preço já deve vir validado pelo chamador."""
        if not price.is_finite() or price < 0:
            raise ValueError(f"price must be a finite non-negative number, got {price!r}")

        item = Item(user_id=owner_id, name=name, description=description, price=price)
        session = self._db.session
        try:
            session.add(item)
            session.commit()
        except SQLAlchemyError as exc:
            session.rollback()
            raise to_store_error(exc) from exc
        return item.id

    def list_items_newest_first(self) -> list[Item]:
        """Todos os itens do sistema, ordenados por id decrescente."""
        # Sem filtro por dono: todos os usuários autenticados veem todos os itens
        try:
            return Item.query.order_by(Item.id.desc()).all()
        except SQLAlchemyError as exc:
            self._db.session.rollback()
            raise to_store_error(exc) from exc
