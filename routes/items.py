"""
Programa: «Itens» – aplicação web para cadastro de usuários e itens.
Módulo: routes/items.py – rotas de itens (exigem sessão autenticada).
"""

from flask import current_app, redirect, render_template, request, url_for
from flask_login import current_user, login_required

from stores.errors import StoreError
from stores.items import ItemStore
from utils.price import parse_price
from utils.session_manager import SessionManager


def register_routes(app, items: ItemStore, sessions: SessionManager):
    """Registra as rotas de itens, todas protegidas por login_required."""

    @app.get("/items")
    @login_required
    def add_item_form():
        """Formulário de novo item."""
        return render_template("add_item.html")

    @app.post("/items")
    @login_required
    def add_item():
        """Valida nome e preço e grava o item do usuário logado."""
        name = (request.form.get("nome") or "").strip()
        description = (request.form.get("descricao") or "").strip()
        raw_price = request.form.get("preco") or ""

        if not name or not raw_price.strip():
            sessions.push_flash("warning", "Preencha nome e preço.")
            return redirect(url_for("add_item_form"))

        price = parse_price(raw_price)
        if price is None:
            sessions.push_flash("warning", "Preço inválido.")
            return redirect(url_for("add_item_form"))

        try:
            item_id = items.create_item(current_user.id, name, description, price)
        except StoreError as exc:
            current_app.logger.error("Falha ao adicionar item: %s", exc.message)
            sessions.push_flash("error", f"Erro ao adicionar: {exc.message}")
            return redirect(url_for("add_item_form"))

        current_app.logger.info("Item %s adicionado por %r", item_id, current_user.username)
        sessions.push_flash("success", "✅ Item adicionado com sucesso!")
        return redirect(url_for("list_items"))

    @app.get("/list_items")
    @login_required
    def list_items():
        """Lista todos os itens, do mais recente ao mais antigo."""
        # Falhas do store sobem para o errorhandler de StoreError
        return render_template("list_items.html", items=items.list_items_newest_first())
