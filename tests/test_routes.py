import pytest
from sqlalchemy.exc import OperationalError

from extensions import db
from models import Item
from stores import ItemStore, StoreError, StoreErrorKind, StoreUnavailable, CredentialStore


def _location(response) -> str:
    return response.headers["Location"]


def test_root_redirects_anonymous_to_login(client):
    r = client.get("/")
    assert r.status_code == 302
    assert _location(r).endswith("/login")


def test_root_redirects_authenticated_to_item_list(client, auth):
    auth.register_and_login()
    r = client.get("/")
    assert _location(r).endswith("/list_items")


@pytest.mark.parametrize(
    ("method", "path"),
    [("get", "/items"), ("post", "/items"), ("get", "/list_items")],
)
def test_item_routes_require_session(client, method, path):
    r = getattr(client, method)(path, data={"nome": "x", "preco": "1"} if method == "post" else None)
    assert r.status_code == 302
    assert _location(r).endswith("/login")

    # sem efeitos colaterais: nenhuma mensagem e nenhum cookie de sessão
    with client.session_transaction() as sess:
        assert "_flashes" not in sess
    assert client.get_cookie("session") is None


def test_anonymous_post_does_not_create_item(app, client):
    client.post("/items", data={"nome": "Widget", "preco": "1"})
    with app.app_context():
        assert Item.query.count() == 0


def test_add_item_form_renders(client, auth):
    auth.register_and_login()
    r = client.get("/items")
    assert r.status_code == 200
    assert 'name="preco"' in r.get_data(as_text=True)


@pytest.mark.parametrize(
    ("form", "message"),
    [
        ({"nome": "", "preco": "1"}, "Preencha nome e preço."),
        ({"nome": "Widget", "preco": ""}, "Preencha nome e preço."),
        ({"nome": "Widget", "preco": "abc"}, "Preço inválido."),
        ({"nome": "Widget", "preco": "-5"}, "Preço inválido."),
        ({"nome": "Widget", "preco": "1" * 30}, "Preço inválido."),
    ],
)
def test_invalid_item_is_rejected(app, client, auth, form, message):
    auth.register_and_login()
    r = client.post("/items", data=form, follow_redirects=True)
    assert r.request.path == "/items"
    assert message in r.get_data(as_text=True)
    with app.app_context():
        assert Item.query.count() == 0


def test_item_list_is_not_filtered_by_owner(make_app):
    app = make_app()
    alice = app.test_client()
    bob = app.test_client()

    for c, name in ((alice, "alice"), (bob, "bob")):
        c.post("/register", data={"username": name, "password": "pw"})
        c.post("/login", data={"username": name, "password": "pw"})

    alice.post("/items", data={"nome": "Alice item", "preco": "1,00"})
    page = bob.get("/list_items").get_data(as_text=True)
    assert "Alice item" in page


def test_store_failure_on_create_is_flashed(client, auth, monkeypatch):
    auth.register_and_login()

    def boom(self, *args, **kwargs):
        raise StoreError(StoreErrorKind.OTHER, "disk full")

    monkeypatch.setattr(ItemStore, "create_item", boom)
    r = client.post("/items", data={"nome": "Widget", "preco": "1"}, follow_redirects=True)
    assert r.request.path == "/items"
    assert "Erro ao adicionar: disk full" in r.get_data(as_text=True)


def test_store_failure_on_register_is_flashed(client, auth, monkeypatch):
    def boom(self, *args, **kwargs):
        raise StoreError(StoreErrorKind.OTHER, "disk full")

    monkeypatch.setattr(CredentialStore, "create_user", boom)
    r = auth.register("alice", "secret1", follow_redirects=True)
    assert r.request.path == "/register"
    assert "Erro ao cadastrar: disk full" in r.get_data(as_text=True)


def test_unhandled_store_failure_renders_error_page(client, auth, monkeypatch):
    auth.register_and_login()

    def boom(self):
        raise StoreUnavailable("connection refused")

    monkeypatch.setattr(ItemStore, "list_items_newest_first", boom)
    r = client.get("/list_items")
    assert r.status_code == 503
    assert "connection refused" in r.get_data(as_text=True)


def test_database_outage_while_loading_user_renders_error_page(client, auth, monkeypatch):
    auth.register_and_login()

    def unavailable(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("connection refused"))

    monkeypatch.setattr(db.session, "get", unavailable)
    r = client.get("/list_items")
    assert r.status_code == 503
    page = r.get_data(as_text=True)
    assert "connection refused" in page
    assert "Algo deu errado" in page


def test_healthz(client):
    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.get_json() == {"status": "ok"}


def test_security_headers(client):
    r = client.get("/login")
    assert r.headers["X-Frame-Options"] == "DENY"
    assert r.headers["X-Content-Type-Options"] == "nosniff"
