"""
FastAPI endpoint tests for the Digit Speller API.

Uses httpx + FastAPI TestClient — no real server needed.
"""

from __future__ import annotations

import json

import api
import pytest
from api import app
from fastapi.testclient import TestClient

from digit_speller.config import Settings
from digit_speller.models import Symbol, SymbolsDictionary
from digit_speller.transformer import Transformer

client = TestClient(app)


@pytest.fixture(scope="module", autouse=True)
def _warm_transformers() -> None:
    """Build the transformers once for all API tests (bypasses lifespan)."""
    api._settings = Settings()
    api._transformers = api.build_transformers(api._settings)
    yield  # type: ignore[misc]
    api._settings = None
    api._transformers = None


class TestHealthEndpoint:
    def test_health_returns_200(self) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200

    def test_health_response_shape(self) -> None:
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert data["cultures_loaded"] == 3
        assert data["default_culture"] == "en-US"


class TestCulturesEndpoint:
    def test_lists_bundled_cultures(self) -> None:
        data = client.get("/cultures").json()
        assert [c["culture"] for c in data] == ["de-DE", "en-US", "ru-RU"]
        assert all(c["missing_symbols"] == [] for c in data)


class TestTransformEndpoint:
    def test_default_culture(self) -> None:
        resp = client.post("/transform", json={"number": 123.78})
        assert resp.status_code == 200
        data = resp.json()
        assert data["culture"] == "en-US"
        assert data["words"] == "one two three point seven eight"

    def test_symbols_returned(self) -> None:
        data = client.post("/transform", json={"number": -0.78}).json()
        assert data["symbols"] == ["Minus", "Zero", "Point", "Seven", "Eight"]

    def test_german(self) -> None:
        data = client.post("/transform", json={"number": 123.78, "culture": "de-DE"}).json()
        assert data["words"] == "eins zwei drei komma sieben acht"

    def test_culture_name_is_normalized(self) -> None:
        data = client.post("/transform", json={"number": -12.78, "culture": "ru_ru"}).json()
        assert data["words"] == "минус один два запятая семь восемь"

    def test_scientific(self) -> None:
        data = client.post("/transform", json={"number": 6.673e-11}).json()
        assert data["words"] == "six point six seven three exponent minus one one"

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("NaN", "not a number"),
            ("Infinity", "positive infinity"),
            ("-inf", "negative infinity"),
            ("5e-324", "epsilon"),
            ("1e-323", "one exponent minus three two three"),
        ],
    )
    def test_numbers_as_strings(self, text: str, expected: str) -> None:
        data = client.post("/transform", json={"number": text}).json()
        assert data["words"] == expected

    def test_unknown_culture_returns_404(self) -> None:
        resp = client.post("/transform", json={"number": 1, "culture": "fr-FR"})
        assert resp.status_code == 404

    def test_incomplete_dictionary_returns_500(self, monkeypatch) -> None:
        partial = Transformer(
            SymbolsDictionary(dictionary={Symbol.One: "one"}, culture_name="en-GB")
        )
        monkeypatch.setitem(api._transformers, "en-gb", partial)
        resp = client.post("/transform", json={"number": 1.5, "culture": "en-GB"})
        assert resp.status_code == 500
        detail = resp.json()["detail"]
        assert detail["code"] == "MISSING_DICTIONARY_ENTRY"
        assert detail["details"]["symbol"] == "Point"


class TestRequestValidation:
    def test_empty_body_returns_422(self) -> None:
        resp = client.post("/transform", json={})
        assert resp.status_code == 422

    def test_text_that_is_not_a_number_returns_422(self) -> None:
        resp = client.post("/transform", json={"number": "twelve"})
        assert resp.status_code == 422

    def test_missing_content_type_returns_422(self) -> None:
        resp = client.post("/transform")
        assert resp.status_code == 422


class TestNotInitialised:
    def test_returns_503(self, monkeypatch) -> None:
        monkeypatch.setattr(api, "_transformers", None)
        assert client.get("/health").status_code == 503

    def test_missing_settings_return_503(self, monkeypatch) -> None:
        monkeypatch.setattr(api, "_settings", None)
        assert client.get("/health").status_code == 503
        assert client.post("/transform", json={"number": 1}).status_code == 503


class TestBuildTransformers:
    def test_broken_file_is_skipped(self, tmp_path) -> None:
        (tmp_path / "fr-FR.json").write_text("{not json", encoding="utf-8")
        transformers = api.build_transformers(Settings(dictionary_dir=str(tmp_path)))
        assert sorted(transformers) == ["de-de", "en-us", "ru-ru"]

    def test_unknown_culture_file_is_skipped(self, tmp_path) -> None:
        (tmp_path / "xx-QQ.json").write_text(
            json.dumps({"CultureName": "xx-QQ", "Dictionary": {"One": "one"}}), encoding="utf-8"
        )
        transformers = api.build_transformers(Settings(dictionary_dir=str(tmp_path)))
        assert "xx-qq" not in transformers
        assert len(transformers) == 3

    def test_broken_override_falls_back_to_bundled(self, tmp_path) -> None:
        (tmp_path / "en-US.json").write_text("[]", encoding="utf-8")
        transformers = api.build_transformers(Settings(dictionary_dir=str(tmp_path)))
        assert transformers["en-us"].transform(1.5) == "one point five"
