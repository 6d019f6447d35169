"""
Programa: «Itens» – aplicação web para cadastro de usuários e itens.
Módulo: models/session_record.py – sessões autenticadas ativas.
"""

from datetime import datetime

from extensions import db


class SessionRecord(db.Model):
    """Classe `SessionRecord` guarda o token de uma sessão vinculada a um usuário."""
    __tablename__ = "sessoes"

    token = db.Column(db.String(64), primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("usuarios.id"), nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
