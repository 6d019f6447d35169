"""
Programa: «Itens» – aplicação web para cadastro de usuários e itens.
Módulo: routes/auth.py – rotas de autenticação e de sessão.

Finalidade do módulo:
- Formulários de cadastro e login.
- Encaminhamento dos envios ao fluxo de autenticação.
- Logout com destruição da sessão.
"""

from flask import current_app, redirect, render_template, request, url_for

from services.auth_flow import AuthFlow
from utils.session_manager import SessionManager


def register_routes(app, auth_flow: AuthFlow, sessions: SessionManager):
    """Registra as rotas de cadastro, login e logout."""

    @app.get("/register")
    def register_form():
        """Formulário de cadastro."""
        return render_template("register.html")

    @app.post("/register")
    def register():
        """Envio do cadastro; redireciona para o login ou de volta ao formulário."""
        result = auth_flow.register(
            request.form.get("username"),
            request.form.get("password"),
        )
        return redirect(url_for(result.endpoint))

    @app.get("/login")
    def login_form():
        """Formulário de login."""
        return render_template("login.html")

    @app.post("/login")
    def login():
        """Envio do login; redireciona para a lista de itens ou de volta ao formulário."""
        result = auth_flow.login(
            request.form.get("username"),
            request.form.get("password"),
        )
        return redirect(url_for(result.endpoint))

    @app.get("/logout")
    def logout():
        """Destrói a sessão e volta ao login."""
        username = sessions.current_username()
        sessions.destroy()
        if username:
            current_app.logger.info("Logout de %r", username)
        return redirect(url_for("login_form"))
