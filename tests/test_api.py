"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

import main


@pytest.fixture
def client():
    main.history.clear()
    with TestClient(main.app) as test_client:
        yield test_client
    main.history.clear()


class TestHealth:
    """Health endpoints."""

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_health(self, client):
        response = client.get("/health")
        assert response.json() == {"status": "healthy", "version": main.settings.VERSION}


class TestConjugate:
    """POST /conjugate."""

    def test_success(self, client):
        response = client.post("/conjugate", json={"verb": "書く"})
        assert response.status_code == 200
        data = response.json()
        assert data["verb"]["type"] == "godan"
        assert len(data["forms"]) == 34
        assert data["forms"][1]["id"] == "te"
        assert data["forms"][1]["kanji"] == "書いて"
        assert isinstance(data["timestamp"], int)

    @pytest.mark.parametrize("verb,code", [
        ("   ", "EMPTY_INPUT"),
        ("taberu", "INVALID_CHARACTERS"),
        ("本", "UNKNOWN_VERB"),
    ])
    def test_user_errors(self, client, verb, code):
        response = client.post("/conjugate", json={"verb": verb})
        assert response.status_code == 400
        assert response.json()["detail"]["code"] == code
        assert response.json()["detail"]["message"]

    def test_internal_failure(self, client, monkeypatch):
        def boom(verb):
            raise RuntimeError("boom")

        monkeypatch.setattr("conjugator.engine._generate_forms", boom)
        response = client.post("/conjugate", json={"verb": "書く"})
        assert response.status_code == 500
        assert response.json()["detail"]["code"] == "CONJUGATION_FAILED"

    def test_too_long(self, client):
        response = client.post("/conjugate", json={"verb": "あ" * 51})
        assert response.status_code == 422


class TestConjugateQuery:
    """GET /conjugate?verb= restores a shared link."""

    def test_matches_post(self, client):
        by_query = client.get("/conjugate", params={"verb": "食べる"}).json()
        by_body = client.post("/conjugate", json={"verb": "食べる"}).json()
        assert by_query["verb"] == by_body["verb"]
        assert by_query["forms"] == by_body["forms"]

    def test_records_history(self, client):
        client.get("/conjugate", params={"verb": "書く"})
        assert [e["verb"] for e in client.get("/history").json()] == ["書く"]

    def test_error(self, client):
        response = client.get("/conjugate", params={"verb": "abc"})
        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "INVALID_CHARACTERS"

    def test_missing_parameter(self, client):
        assert client.get("/conjugate").status_code == 422


class TestConjugateForm:
    """POST /conjugate/form."""

    def test_single_form(self, client):
        response = client.post("/conjugate/form", json={"verb": "行く", "form_id": "te"})
        assert response.status_code == 200
        assert response.json()["kanji"] == "行って"
        assert response.json()["hiragana"] == "いって"

    def test_colloquial_potential(self, client):
        response = client.post(
            "/conjugate/form", json={"verb": "食べる", "form_id": "potential-colloquial"},
        )
        assert response.status_code == 200
        assert response.json()["kanji"] == "食べれる"

    def test_colloquial_potential_for_godan(self, client):
        response = client.post(
            "/conjugate/form", json={"verb": "書く", "form_id": "potential-colloquial"},
        )
        assert response.status_code == 404

    def test_unknown_form(self, client):
        response = client.post("/conjugate/form", json={"verb": "書く", "form_id": "nope"})
        assert response.status_code == 404

    def test_invalid_verb(self, client):
        response = client.post("/conjugate/form", json={"verb": "abc", "form_id": "te"})
        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "INVALID_CHARACTERS"


class TestClassify:
    """POST /classify."""

    def test_compound(self, client):
        response = client.post("/classify", json={"verb": "勉強する"})
        assert response.status_code == 200
        data = response.json()
        assert data["type"] == "irregular"
        assert data["irregular_type"] == "suru"
        assert data["compound_prefix"] == "勉強"

    def test_empty(self, client):
        response = client.post("/classify", json={"verb": ""})
        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "EMPTY_INPUT"


class TestCatalogueAndScripts:
    """GET /forms, POST /romaji, POST /kana."""

    def test_forms(self, client):
        data = client.get("/forms").json()
        assert len(data) == 34
        assert data[0] == {
            "id": "dictionary",
            "category": "basic",
            "name": "Dictionary Form",
            "name_japanese": "辞書形",
            "formality": "plain",
        }

    def test_romaji(self, client):
        response = client.post("/romaji", json={"text": "たべる"})
        assert response.json() == {"text": "たべる", "romaji": "taberu"}

    def test_kana(self, client):
        response = client.post("/kana", json={"text": "taberu"})
        assert response.json() == {"text": "taberu", "hiragana": "たべる", "katakana": "タベル"}


class TestHistory:
    """History endpoints."""

    def test_records_successful_conjugations(self, client):
        client.post("/conjugate", json={"verb": "書く"})
        client.post("/conjugate", json={"verb": "食べる"})
        client.post("/conjugate", json={"verb": "本"})

        entries = client.get("/history").json()
        assert [e["verb"] for e in entries] == ["食べる", "書く"]
        assert entries[0]["verb_type"] == "ichidan"

    def test_delete_entry(self, client):
        client.post("/conjugate", json={"verb": "書く"})
        entry_id = client.get("/history").json()[0]["id"]

        assert client.delete(f"/history/{entry_id}").status_code == 204
        assert client.get("/history").json() == []
        assert client.delete(f"/history/{entry_id}").status_code == 404

    def test_clear(self, client):
        client.post("/conjugate", json={"verb": "書く"})
        assert client.delete("/history").status_code == 204
        assert client.get("/history").json() == []
