"""
Programa: «Itens» – aplicação web para cadastro de usuários e itens.
Módulo: models/item.py – modelo de item.

Finalidade do módulo:
- Descrição do modelo ORM Item sobre a tabela `itens`.
- Cada item pertence a exatamente um usuário (`user_id`).
"""

from extensions import db


class Item(db.Model):
    """Classe `Item` descreve um registro de item com nome, descrição e preço."""
    __tablename__ = "itens"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("usuarios.id"), nullable=False, index=True)
    name = db.Column(db.String(200))
    description = db.Column(db.Text)
    price = db.Column(db.Numeric(10, 2), nullable=False)
