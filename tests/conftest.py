import pytest
from app import create_app

# Creates a Flask app configured for tests.
@pytest.fixture()
def app(monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "test-secret")
    monkeypatch.delenv("WIDGET_TEMPLATE", raising=False)
    monkeypatch.delenv("WIDGET_STYLESHEET", raising=False)
    app = create_app()
    app.config.update(TESTING=True)
    yield app

@pytest.fixture()
def client(app):
    return app.test_client()

@pytest.fixture()
def runner(app):
    return app.test_cli_runner()
