# tests/conftest.py
from __future__ import annotations
import base64

import pytest
from fastapi.testclient import TestClient

from uxread.main import app
from uxread.services.extract import ExtractionError

# 1x1 transparent PNG
PNG_1X1 = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
)

E2E_TEXT = (
    "We leverage cutting-edge technology to facilitate seamless experiences. "
    "This is a " + "very " * 20 + "long sentence that exceeds the word threshold easily."
)


# --------------------------------------------------------------------
# FastAPI test client available as fixture `client`
# --------------------------------------------------------------------
@pytest.fixture(scope="session")
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def png_bytes() -> bytes:
    return PNG_1X1


@pytest.fixture
def e2e_text() -> str:
    return E2E_TEXT


# --------------------------------------------------------------------
# Stub OCR client: maps image bytes to text (or an ExtractionError to raise)
# --------------------------------------------------------------------
class FakeOCR:
    def __init__(self, outcomes: dict, default: str = ""):
        self.outcomes = outcomes
        self.default = default
        self.calls = 0
        self.closed = False

    def extract(self, image: bytes, on_progress=None) -> str:
        self.calls += 1
        if on_progress:
            on_progress(100)
        item = self.outcomes.get(image, self.default)
        if isinstance(item, ExtractionError):
            raise item
        return item

    def check_health(self) -> dict:
        return {"healthy": True}

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_ocr(monkeypatch):
    from uxread.api import routes_upload

    def _install(outcomes: dict, default: str = ""):
        fake = FakeOCR(outcomes, default)
        monkeypatch.setattr(routes_upload, "get_client", lambda: fake)
        return fake

    return _install
