"""
Nome: «Itens»
Linguagem: Python (Flask)
Descrição: aplicação web renderizada no servidor com cadastro de usuários,
login por sessão e cadastro/listagem de itens (nome, descrição, preço).
"""

import os

from flask import Flask, redirect, render_template, session, url_for

from config import Config
from extensions import db, login_manager
import models  # noqa: F401 - registra os modelos para db.create_all()
from routes.pages import register_routes as register_page_routes
from routes.auth import register_routes as register_auth_routes
from routes.items import register_routes as register_item_routes
from services.auth_flow import AuthFlow
from stores import CredentialStore, ItemStore, StoreError, StoreErrorKind
from utils.session_manager import USERNAME_KEY, SessionManager, SessionSettings


def create_app(config_overrides: dict | None = None) -> Flask:
    """Fábrica da aplicação: monta stores, sessão, fluxo de auth e rotas."""
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    app.logger.setLevel(app.config["LOG_LEVEL"])

    # Garante a existência do diretório de instância (banco SQLite local)
    os.makedirs(app.instance_path, exist_ok=True)

    # Inicialização das extensões
    db.init_app(app)

    credentials = CredentialStore(db)
    items = ItemStore(db)
    sessions = SessionManager(db, credentials, login_manager, SessionSettings.from_config(app.config))
    sessions.init_app(app)
    auth_flow = AuthFlow(credentials, sessions, hash_method=app.config["PASSWORD_HASH_METHOD"])

    # Registro das rotas por módulo, com as dependências explícitas
    register_page_routes(app, sessions)
    register_auth_routes(app, auth_flow, sessions)
    register_item_routes(app, items, sessions)

    with app.app_context():
        # Cria as tabelas ausentes (sem alterar colunas existentes)
        db.create_all()

    @login_manager.unauthorized_handler
    def handle_unauthorized():
        """Rotas protegidas sem sessão: volta ao login sem efeitos colaterais."""
        return redirect(url_for("login_form"))

    @app.context_processor
    def inject_template_globals():
        """Mensagens flash pendentes e o nome do usuário logado para os templates."""
        try:
            authenticated = sessions.is_authenticated()
        except StoreError:
            # Banco fora do ar ao carregar o usuário: a página de erro sai como anônima
            authenticated = False
        return {
            "flashes": sessions.drain_flash(),
            "username": session.get(USERNAME_KEY) if authenticated else None,
        }

    @app.errorhandler(StoreError)
    def handle_store_error(exc: StoreError):
        """Falhas do banco não tratadas pela rota: página de erro com 503 ou 500."""
        app.logger.exception("Erro do banco de dados: %s", exc.message)
        status = 503 if exc.kind is StoreErrorKind.UNAVAILABLE else 500
        return render_template("error.html", message=exc.message), status

    @app.after_request
    def apply_security_headers(response):
        """Cabeçalhos de segurança em todas as respostas."""
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "strict-origin-when-cross-origin")
        response.headers.setdefault("Permissions-Policy", "camera=(), microphone=(), geolocation=()")
        return response

    return app


if __name__ == "__main__":
    app = create_app()
    app.logger.info("Servidor rodando em http://%s:%s", app.config["HOST"], app.config["PORT"])
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=app.config.get("DEBUG", False))
