import json
import pytest
from sqlalchemy import create_engine
from pginit.connectors import postgres


class EngineRecorder:
    """Stands in for sqlalchemy.create_engine, serving SQLite engines."""

    def __init__(self, target_url: str = "sqlite:///:memory:"):
        self.target_url = target_url
        self.urls = []
        self.descriptors = []
        self.engines = []

    def __call__(self, url, **kwargs):
        self.urls.append(url)
        self.descriptors.append(url.render_as_string(hide_password=False))
        engine = create_engine(self.target_url)
        self.engines.append(engine)
        return engine


@pytest.fixture(autouse=True)
def _clear_pginit_env(monkeypatch):
    """Keep PGINIT_* variables from the host environment out of the tests."""
    for name in ("PGINIT_CREDENTIALS_PATH", "PGINIT_HOST", "PGINIT_PORT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def credentials_file(tmp_path):
    """Write a valid credentials file and return its path."""
    path = tmp_path / "DBCredentials.json"
    path.write_text(json.dumps({"Username": "alice", "Password": "s3cret"}))
    return path


@pytest.fixture
def recorder(monkeypatch):
    recorder = EngineRecorder()
    monkeypatch.setattr(postgres, "create_engine", recorder)
    return recorder


@pytest.fixture
def unreachable_recorder(monkeypatch, tmp_path):
    # SQLite cannot open a file inside a directory that does not exist
    recorder = EngineRecorder(f"sqlite:///{tmp_path / 'missing' / 'db.sqlite'}")
    monkeypatch.setattr(postgres, "create_engine", recorder)
    return recorder
