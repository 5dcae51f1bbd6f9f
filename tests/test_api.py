"""
FastAPI endpoint tests for the Number Speller API.

Uses httpx + FastAPI TestClient — no real server needed.
"""

from __future__ import annotations

from pathlib import Path

import api
import pytest
from api import app
from fastapi.testclient import TestClient

from number_speller.converter import NumberConverter
from number_speller.lexicon import LEXICON_ENV_VAR

client = TestClient(app)


@pytest.fixture(scope="module", autouse=True)
def _warm_converter() -> None:
    """Initialise the converter once for all API tests (bypasses lifespan)."""
    api._converter = NumberConverter()
    yield  # type: ignore[misc]
    api._converter = None


class TestHealthEndpoint:
    def test_health_returns_200(self) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200

    def test_health_response_shape(self) -> None:
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert data["lexicon_words"] == 35

    def test_uninitialised_returns_503(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(api, "_converter", None)
        assert client.get("/health").status_code == 503


class TestFormatEndpoints:
    def test_format_integer(self) -> None:
        resp = client.post("/format/integer", json={"value": 142})
        assert resp.status_code == 200
        assert resp.json() == {"value": 142, "text": "one hundred forty two"}

    def test_format_negative_integer(self) -> None:
        data = client.post("/format/integer", json={"value": -355}).json()
        assert data["text"] == "negative three hundred fifty five"

    def test_format_out_of_range(self) -> None:
        resp = client.post("/format/integer", json={"value": 10**18})
        assert resp.status_code == 422
        assert resp.json()["detail"]["code"] == "OUT_OF_RANGE"

    def test_format_decimal(self) -> None:
        resp = client.post("/format/decimal", json={"value": 3.14, "precision": 2})
        assert resp.status_code == 200
        assert resp.json()["text"] == "three point one four"

    def test_format_decimal_default_precision(self) -> None:
        data = client.post("/format/decimal", json={"value": 0.42}).json()
        assert data["precision"] == 2
        assert data["text"] == "zero point four two"

    def test_precision_too_large_returns_422(self) -> None:
        resp = client.post("/format/decimal", json={"value": 3.14, "precision": 16})
        assert resp.status_code == 422


class TestParseEndpoints:
    def test_parse_integer_with_typos(self) -> None:
        resp = client.post(
            "/parse/integer", json={"text": "negativ three hundre and fifty fiv"}
        )
        assert resp.status_code == 200
        assert resp.json()["value"] == -355

    def test_parse_decimal(self) -> None:
        data = client.post("/parse/decimal", json={"text": "zero point four two"}).json()
        assert data["value"] == pytest.approx(0.42)

    def test_unknown_word_suggestion(self) -> None:
        resp = client.post("/parse/integer", json={"text": "one hured and forty two"})
        assert resp.status_code == 422
        detail = resp.json()["detail"]
        assert detail["code"] == "UNKNOWN_WORD"
        assert detail["message"] == "Did you mean hundred?"
        assert detail["details"]["suggestion"] == "hundred"

    def test_misplaced_negation(self) -> None:
        resp = client.post("/parse/integer", json={"text": "ten negative"})
        assert resp.status_code == 422
        assert resp.json()["detail"]["message"] == "Invalid input"

    def test_misspelled_separator(self) -> None:
        resp = client.post("/parse/decimal", json={"text": "three poin sixty two"})
        assert resp.json()["detail"]["message"] == "Did you mean point?"

    def test_invalid_tail(self) -> None:
        resp = client.post("/parse/decimal", json={"text": "three point sixty two"})
        detail = resp.json()["detail"]
        assert detail["code"] == "INVALID_DECIMAL_TAIL"
        assert detail["message"] == "Invalid value in tail string."

    def test_whitespace_only_text_is_zero(self) -> None:
        resp = client.post("/parse/integer", json={"text": "   "})
        assert resp.status_code == 200
        assert resp.json()["value"] == 0


class TestRequestValidation:
    def test_empty_body_returns_422(self) -> None:
        resp = client.post("/parse/integer", json={})
        assert resp.status_code == 422

    def test_empty_text_returns_422(self) -> None:
        resp = client.post("/parse/integer", json={"text": ""})
        assert resp.status_code == 422

    def test_non_integer_value_returns_422(self) -> None:
        resp = client.post("/format/integer", json={"value": "forty"})
        assert resp.status_code == 422


class TestLifespan:
    def test_startup_loads_lexicon_from_env(
        self, monkeypatch: pytest.MonkeyPatch, minus_lexicon_file
    ) -> None:
        monkeypatch.setattr(api, "_converter", None)
        monkeypatch.setenv(LEXICON_ENV_VAR, str(minus_lexicon_file))
        with TestClient(app) as started:
            data = started.post("/format/integer", json={"value": -5}).json()
        assert data["text"] == "minus five"

    def test_startup_without_env_uses_default(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(api, "_converter", None)
        monkeypatch.delenv(LEXICON_ENV_VAR, raising=False)
        with TestClient(app) as started:
            assert started.get("/health").json()["lexicon_words"] == 35


class TestPackaging:
    def test_server_is_an_optional_extra(self) -> None:
        tomllib = pytest.importorskip("tomllib")
        pyproject = Path(__file__).resolve().parent.parent / "pyproject.toml"
        project = tomllib.loads(pyproject.read_text())["project"]
        assert not any(dep.startswith("uvicorn") for dep in project["dependencies"])
        assert any(
            dep.startswith("uvicorn") for dep in project["optional-dependencies"]["serve"]
        )
