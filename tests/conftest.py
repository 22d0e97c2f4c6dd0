import pytest
from fastapi.testclient import TestClient

from inventory_app.config import Settings
from inventory_app.main import create_app


@pytest.fixture(scope="function")
def settings(tmp_path):
    """Settings backed by in-memory SQLite and a temporary working directory."""
    static_dir = tmp_path / "public"
    static_dir.mkdir()
    (static_dir / "index.html").write_text("<h1>InventoryApp</h1>")

    return Settings(
        _env_file=None,
        DATABASE_URL="sqlite://",
        RECAPTCHA_SECRET="test-secret",
        RECAPTCHA_VERIFY_URL="https://captcha.test/siteverify",
        CONTACT_LOG_PATH=str(tmp_path / "messages.txt"),
        STATIC_DIR=str(static_dir),
    )


@pytest.fixture(scope="function")
def client(settings):
    """Create test client with a fresh database for each test."""
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def db_session(client):
    """Database session on the same database the client is using."""
    session = client.app.state.context.session_factory()

    yield session

    session.close()


@pytest.fixture(scope="function")
def message_log_path(settings):
    return settings.CONTACT_LOG_PATH
