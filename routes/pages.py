"""
Programa: «Itens» – aplicação web para cadastro de usuários e itens.
Módulo: routes/pages.py – página inicial e verificação de saúde.
"""

from flask import redirect, url_for

from utils.session_manager import SessionManager


def register_routes(app, sessions: SessionManager):
    """Registra a página inicial e a verificação de saúde."""

    @app.get("/")
    def index():
        """Redireciona para a lista de itens ou para o login, conforme a sessão."""
        if sessions.is_authenticated():
            return redirect(url_for("list_items"))
        return redirect(url_for("login_form"))

    @app.get("/healthz")
    def healthz():
        """Verificação de saúde para o orquestrador."""
        return {"status": "ok"}, 200
