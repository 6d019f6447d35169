"""
Programa: «Itens» – aplicação web para cadastro de usuários e itens.
Módulo: services/auth_flow.py – fluxo de cadastro e login.

Finalidade do módulo:
- Cadastro: validação dos campos, hash da senha (com sal) e inserção do usuário.
- Login: busca do usuário, verificação da senha em tempo constante e vínculo
  da sessão.
- Cada resultado informa a rota de destino; as notificações ficam no flash.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property

from flask import current_app
from werkzeug.security import check_password_hash, generate_password_hash

from stores.credentials import CredentialStore
from stores.errors import DuplicateUsername, StoreError
from utils.session_manager import SessionManager


MSG_FILL_ALL_FIELDS = "Preencha todos os campos."
MSG_REGISTERED = "✅ Cadastro realizado com sucesso! Faça login."
MSG_USER_EXISTS = "⚠️ Usuário já existe."
MSG_REGISTER_FAILED = "Erro ao cadastrar: {error}"
MSG_INVALID_CREDENTIALS = "Usuário ou senha inválidos."
MSG_LOGIN_FAILED = "Erro ao entrar: {error}"
MSG_WELCOME = "Bem-vindo, {username}!"


class ValidationError(Exception):
    """Campos obrigatórios ausentes ou inválidos."""


class InvalidCredentials(Exception):
    """Usuário inexistente ou senha incorreta (não se distingue qual)."""


@dataclass(frozen=True)
class FlowResult:
    """Resultado do fluxo: sucesso e rota para onde redirecionar."""

    ok: bool
    endpoint: str


def _require_fields(username: str | None, password: str | None) -> None:
    if not username or not password:
        raise ValidationError(MSG_FILL_ALL_FIELDS)


class AuthFlow:
    """Cadastro e login sobre o CredentialStore e o SessionManager."""

    def __init__(self, credentials: CredentialStore, sessions: SessionManager, hash_method: str = "scrypt"):
        self._credentials = credentials
        self._sessions = sessions
        self._hash_method = hash_method

    @cached_property
    def _dummy_hash(self) -> str:
        # Verificado quando o usuário não existe, para igualar o tempo de resposta
        return generate_password_hash("dummy-password", method=self._hash_method)

    def hash_password(self, password: str) -> str:
        return generate_password_hash(password, method=self._hash_method)

    def register(self, username: str | None, password: str | None) -> FlowResult:
        """Valida, gera o hash e cadastra; em caso de sucesso segue para o login."""
        try:
            _require_fields(username, password)
        except ValidationError as exc:
            self._sessions.push_flash("warning", str(exc))
            return FlowResult(False, "register")

        password_hash = self.hash_password(password)
        try:
            user_id = self._credentials.create_user(username, password_hash)
        except DuplicateUsername:
            current_app.logger.info("Cadastro recusado: usuário %r já existe", username)
            self._sessions.push_flash("error", MSG_USER_EXISTS)
            return FlowResult(False, "register")
        except StoreError as exc:
            current_app.logger.error("Falha ao cadastrar %r: %s", username, exc.message)
            self._sessions.push_flash("error", MSG_REGISTER_FAILED.format(error=exc.message))
            return FlowResult(False, "register")

        current_app.logger.info("Usuário cadastrado: %r (id=%s)", username, user_id)
        self._sessions.push_flash("success", MSG_REGISTERED)
        return FlowResult(True, "login")

    def authenticate(self, username: str, password: str):
        """Devolve o usuário se a senha confere; senão InvalidCredentials."""
        user = self._credentials.find_user_by_username(username)
        if user is None:
            check_password_hash(self._dummy_hash, password)
            raise InvalidCredentials()
        if not check_password_hash(user.password_hash, password):
            raise InvalidCredentials()
        return user

    def login(self, username: str | None, password: str | None) -> FlowResult:
        """Confere as credenciais e vincula a sessão; em caso de sucesso segue para a lista."""
        try:
            _require_fields(username, password)
        except ValidationError as exc:
            self._sessions.push_flash("warning", str(exc))
            return FlowResult(False, "login")

        try:
            user = self.authenticate(username, password)
            self._sessions.bind(user)
        except InvalidCredentials:
            current_app.logger.warning("Login recusado para %r", username)
            self._sessions.push_flash("error", MSG_INVALID_CREDENTIALS)
            return FlowResult(False, "login")
        except StoreError as exc:
            current_app.logger.error("Falha ao entrar como %r: %s", username, exc.message)
            self._sessions.push_flash("error", MSG_LOGIN_FAILED.format(error=exc.message))
            return FlowResult(False, "login")

        current_app.logger.info("Login de %r", username)
        self._sessions.push_flash("success", MSG_WELCOME.format(username=user.username))
        return FlowResult(True, "list_items")
