"""Tests for the FastAPI backend (generator mocked)."""

import pytest
from fastapi.testclient import TestClient

from backend.app import main
from backend.app.config import Settings
from backend.app.copy_generator import CopyGenerator
from backend.app.errors import GENERIC_GENERATION_ERROR

from conftest import FakeLLM


@pytest.fixture
def fake_llm() -> FakeLLM:
    return FakeLLM(content="**Buy now**")


@pytest.fixture
def client(fake_llm):
    with TestClient(main.app) as test_client:
        main.copy_generator = CopyGenerator(settings=Settings(api_key="test-key"), llm=fake_llm)
        yield test_client


def _payload(**overrides) -> dict:
    payload = {
        "topic": "Wireless Earbuds",
        "description": "",
        "framework": "PAS",
        "pillar": "Promotional",
        "language": "en",
        "tone": "Witty",
    }
    payload.update(overrides)
    return payload


def test_root_and_health(client):
    assert client.get("/").json()["message"] == "CopyCraft API"
    health = client.get("/health").json()
    assert health == {"status": "healthy", "llm_configured": True}


def test_options_localized(client):
    data = client.get("/options", params={"lang": "th"}).json()
    assert len(data["frameworks"]) == 8
    assert len(data["pillars"]) == 6
    assert len(data["tones"]) == 6
    assert [lang["value"] for lang in data["languages"]] == ["en", "my", "th"]
    assert {"value": "Witty", "label": "ชาญฉลาด"} in data["tones"]


class TestBrands:

    def test_list_seeded(self, client):
        data = client.get("/brands").json()
        assert [b["id"] for b in data["brands"]] == ["demo-1", "demo-2"]
        assert data["selected_brand_id"] is None

    def test_add_then_delete(self, client):
        created = client.post("/brands", json={"name": "Nova", "default_tone": "Luxury"})
        assert created.status_code == 201
        brand_id = created.json()["id"]
        assert client.get("/brands").json()["selected_brand_id"] == brand_id

        assert client.delete(f"/brands/{brand_id}").status_code == 204
        data = client.get("/brands").json()
        assert data["selected_brand_id"] is None
        assert brand_id not in [b["id"] for b in data["brands"]]

    def test_delete_unknown(self, client):
        assert client.delete("/brands/nope").status_code == 404


class TestPromptAndGenerate:

    def test_prompt_preview(self, client, fake_llm):
        data = client.post("/prompt", json=_payload()).json()
        assert "Target Audience: General Audience" in data["prompt"]
        assert "Apply the PAS framework" in data["prompt"]
        assert data["system_instruction"].startswith("You are a world-class copywriter")
        assert fake_llm.calls == []

    def test_prompt_with_registered_brand(self, client):
        data = client.post("/prompt", json=_payload(brand_id="demo-2")).json()
        assert "- Brand Name: GreenLeaf Organics" in data["prompt"]
        assert "Target Audience: Health-conscious individuals, Eco-friendly consumers" in data["prompt"]

    def test_unknown_brand_id(self, client):
        assert client.post("/prompt", json=_payload(brand_id="nope")).status_code == 404

    def test_generate(self, client, fake_llm):
        response = client.post("/generate", json=_payload())
        assert response.status_code == 200
        data = response.json()
        assert data["content"] == "**Buy now**"
        assert data["framework"] == "PAS"
        assert "timestamp" in data
        assert len(fake_llm.calls) == 1

    def test_generate_failure_is_generic(self, client, fake_llm):
        fake_llm.error = TimeoutError("upstream timed out")
        response = client.post("/generate", json=_payload())
        assert response.status_code == 500
        assert response.json()["detail"] == GENERIC_GENERATION_ERROR

    def test_empty_fields_accepted(self, client):
        response = client.post("/generate", json=_payload(topic="", description=""))
        assert response.status_code == 200

    def test_invalid_framework_rejected(self, client):
        assert client.post("/generate", json=_payload(framework="SWOT")).status_code == 422


def test_dotenv_loaded_only_by_config():
    from backend.app import config
    assert hasattr(config, "load_dotenv")
    assert not hasattr(main, "load_dotenv")
