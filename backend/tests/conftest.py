import importlib
import pytest
from fastapi.testclient import TestClient


@pytest.fixture()
def client(tmp_path, monkeypatch):
    # isolate data dir per test
    monkeypatch.setenv("APP_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("JWT_SECRET", "dev-secret-for-tests")
    monkeypatch.setenv("JWT_EXP_MINUTES", "15")

    # reload modules so that the api stores pick up the new data dir
    import smartnotes.api.notes
    import smartnotes.api.auth
    import smartnotes.main
    importlib.reload(smartnotes.api.notes)
    importlib.reload(smartnotes.api.auth)
    importlib.reload(smartnotes.main)

    return TestClient(smartnotes.main.app)
