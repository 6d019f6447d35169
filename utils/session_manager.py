"""
Programa: «Itens» – aplicação web para cadastro de usuários e itens.
Módulo: utils/session_manager.py – sessões e mensagens flash.

Finalidade do módulo:
- Configuração explícita do cookie de sessão (SessionSettings).
- Vínculo da sessão a um usuário via Flask-Login, com token rotacionado a cada
  login e registrado na tabela `sessoes`; o logout apaga o registro, então um
  cookie antigo reapresentado volta a ser anônimo.
- Mensagens flash de leitura única, agrupadas por severidade.
"""

from __future__ import annotations

import secrets
from dataclasses import dataclass
from datetime import timedelta

from flask import Flask, flash, get_flashed_messages, session
from flask.sessions import SessionMixin
from flask_login import LoginManager, current_user, login_user, logout_user
from sqlalchemy.exc import SQLAlchemyError

from models.session_record import SessionRecord
from models.user import User
from stores.credentials import CredentialStore
from stores.errors import to_store_error

FLASH_CATEGORIES = ("success", "error", "warning")
SESSION_TOKEN_KEY = "sid"
USERNAME_KEY = "username"


@dataclass(frozen=True)
class SessionSettings:
    """Política do cookie de sessão."""

    secret_key: str
    cookie_name: str = "session"
    permanent: bool = False
    lifetime: timedelta = timedelta(hours=8)
    save_uninitialized: bool = False

    @classmethod
    def from_config(cls, config) -> "SessionSettings":
        return cls(
            secret_key=config["SECRET_KEY"],
            cookie_name=config.get("SESSION_COOKIE_NAME", "session"),
            permanent=bool(config.get("SESSION_PERMANENT", False)),
            lifetime=timedelta(minutes=int(config.get("SESSION_LIFETIME_MINUTES", 480))),
            save_uninitialized=bool(config.get("SESSION_SAVE_UNINITIALIZED", False)),
        )


def _new_token() -> str:
    return secrets.token_urlsafe(32)


class SessionManager:
    """Liga o token de sessão (cookie) à identidade do usuário autenticado."""

    def __init__(self, db, credentials: CredentialStore, login_manager: LoginManager, settings: SessionSettings):
        self._db = db
        self._credentials = credentials
        self._login_manager = login_manager
        self.settings = settings

    def init_app(self, app: Flask) -> None:
        """Aplica a política do cookie e registra o user_loader e o hook de sessão."""
        app.secret_key = self.settings.secret_key
        app.config["SESSION_COOKIE_NAME"] = self.settings.cookie_name
        app.config["PERMANENT_SESSION_LIFETIME"] = self.settings.lifetime

        self._login_manager.init_app(app)
        self._login_manager.user_loader(self._load_user)
        app.before_request(self._ensure_session)
        app.extensions["session_manager"] = self

    def _load_user(self, user_id: str) -> User | None:
        """user_loader do Flask-Login: só aceita sessões com registro ativo."""
        token = session.get(SESSION_TOKEN_KEY)
        if not token:
            return None
        try:
            record = self._db.session.get(SessionRecord, token)
        except SQLAlchemyError as exc:
            self._db.session.rollback()
            raise to_store_error(exc) from exc
        if record is None or str(record.user_id) != str(user_id):
            return None
        return self._credentials.get_user(record.user_id)

    def _ensure_session(self) -> None:
        self.get_or_create_session()

    def get_or_create_session(self) -> SessionMixin:
        """Sessão da requisição; com save_uninitialized, recebe um token já na primeira visita."""
        if self.settings.save_uninitialized and SESSION_TOKEN_KEY not in session:
            session.permanent = self.settings.permanent
            session[SESSION_TOKEN_KEY] = _new_token()
        return session

    def _write_record(self, token: str, user_id: int) -> None:
        db_session = self._db.session
        try:
            db_session.add(SessionRecord(token=token, user_id=user_id))
            db_session.commit()
        except SQLAlchemyError as exc:
            db_session.rollback()
            raise to_store_error(exc) from exc

    def _delete_record(self, token: str) -> None:
        db_session = self._db.session
        try:
            SessionRecord.query.filter_by(token=token).delete(synchronize_session=False)
            db_session.commit()
        except SQLAlchemyError as exc:
            db_session.rollback()
            raise to_store_error(exc) from exc

    def bind(self, user: User) -> None:
        """Vincula a sessão atual ao usuário, emitindo um novo token."""
        previous = session.get(SESSION_TOKEN_KEY)
        if previous:
            self._delete_record(previous)

        token = _new_token()
        self._write_record(token, user.id)
        session.permanent = self.settings.permanent
        session[SESSION_TOKEN_KEY] = token
        login_user(user)
        session[USERNAME_KEY] = user.username

    def is_authenticated(self) -> bool:
        """Verdadeiro se a sessão estiver vinculada a um usuário com registro ativo."""
        return bool(current_user.is_authenticated)

    def current_username(self) -> str | None:
        if not self.is_authenticated():
            return None
        return session.get(USERNAME_KEY)

    def destroy(self) -> None:
        """Revoga o token no banco e limpa o cookie: a sessão volta a ser anônima."""
        token = session.get(SESSION_TOKEN_KEY)
        if token:
            self._delete_record(token)
        logout_user()
        session.clear()

    def push_flash(self, severity: str, message: str) -> None:
        """Enfileira uma mensagem para a próxima página (success, error ou warning)."""
        if severity not in FLASH_CATEGORIES:
            raise ValueError(f"unknown flash severity: {severity}")
        flash(message, severity)

    def drain_flash(self) -> dict[str, list[str]]:
        """Devolve e descarta as mensagens pendentes, agrupadas por severidade."""
        drained: dict[str, list[str]] = {category: [] for category in FLASH_CATEGORIES}
        for category, message in get_flashed_messages(with_categories=True):
            drained.setdefault(category, []).append(message)
        return drained
