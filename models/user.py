"""
Programa: «Itens» – aplicação web para cadastro de usuários e itens.
Módulo: models/user.py – modelo de usuário do sistema.

Finalidade do módulo:
- Descrição do modelo ORM User sobre a tabela `usuarios`.
- Armazena o login (único) e o hash da senha na coluna `senha`.
"""

from flask_login import UserMixin
from extensions import db


class User(UserMixin, db.Model):
    """Classe `User` descreve a conta de um usuário."""
    __tablename__ = "usuarios"

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(80), unique=True, nullable=False)
    password_hash = db.Column("senha", db.String(255), nullable=False)
    items = db.relationship("Item", backref="owner", lazy=True)
