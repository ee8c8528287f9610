import pytest

from password_analyzer.analyzer import PasswordAnalyzer
from password_analyzer.api import create_app


@pytest.fixture
def analyzer():
    return PasswordAnalyzer()


@pytest.fixture
def app(analyzer):
    app = create_app(analyzer)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def password_file(tmp_path):
    path = tmp_path / "passwords.txt"
    path.write_text("# company specific\nAcme2024\n\ncorrecthorse\n", encoding="utf-8")
    return path
