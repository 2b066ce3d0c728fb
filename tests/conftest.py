import pytest

from backend.app import create_app


@pytest.fixture
def app():
    app = create_app({"TESTING": True, "CORS_ORIGINS": ["https://example.vercel.app"]})
    return app


@pytest.fixture
def client(app):
    return app.test_client()
