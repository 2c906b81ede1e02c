"""
Tests for the HTTP surface.
"""
import pytest
from fastapi.testclient import TestClient

from wordora.api.routers import markov_router
from wordora.app import app
from wordora.config import settings


@pytest.fixture
def client():
    """Client with the lifespan run, so the default model is trained."""
    with TestClient(app) as c:
        yield c


class TestHealth:
    def test_health(self, client):
        resp = client.get("/health")

        assert resp.status_code == 200
        body = resp.json()
        assert body["ok"] == True
        assert body["data"]["status"] == "healthy"
        assert "default" in body["data"]["models"]


class TestMarkovRouter:
    """Test suite for /markov endpoints."""

    def test_train_string_corpus(self, client, sample_corpus):
        resp = client.post("/markov/train", json={"corpus": sample_corpus, "model_name": "t1"})

        assert resp.status_code == 200
        assert resp.json()["model"] == "t1"
        assert resp.json()["vocab_size"] > 0
        assert "t1" in markov_router.MODEL_CACHE

    def test_train_list_corpus(self, client):
        resp = client.post("/markov/train", json={"corpus": ["今日は。", "天気です。"], "model_name": "t2"})

        assert resp.status_code == 200

    def test_train_empty_corpus(self, client):
        resp = client.post("/markov/train", json={"corpus": "   "})

        assert resp.status_code == 400

    def test_train_corpus_without_tokens(self, client):
        resp = client.post("/markov/train", json={"corpus": "123 😊"})

        assert resp.status_code == 400

    def test_generate_default_model(self, client):
        resp = client.post("/markov/generate", json={"seed": "。", "length": 5})

        assert resp.status_code == 200
        text = resp.json()["data"]["text"]
        assert text.split(" ")[0] == "。"

    def test_generate_zero_length(self, client):
        resp = client.post("/markov/generate", json={"seed": "天気", "length": 0})

        assert resp.json()["data"]["text"] == "天気"

    def test_generate_unknown_seed_restarts(self, client):
        resp = client.post("/markov/generate", json={"seed": "unknown_token", "length": 5})

        assert resp.status_code == 200
        assert resp.json()["data"]["text"].startswith("。")

    def test_generate_length_capped(self, client):
        resp = client.post("/markov/generate", json={"seed": "。", "length": 10**8})

        assert resp.status_code == 422

    def test_generate_length_at_cap(self, client):
        resp = client.post("/markov/generate", json={"seed": "。", "length": settings.MAX_GENERATE_LENGTH})

        assert resp.status_code == 200

    def test_generate_model_not_found(self, client):
        resp = client.post("/markov/generate", json={"model_name": "missing"})

        assert resp.status_code == 404

    def test_generate_dead_end(self, client):
        client.post("/markov/train", json={"corpus": "hello world", "model_name": "dead"})

        resp = client.post("/markov/generate", json={"model_name": "dead", "seed": "nope"})

        assert resp.status_code == 422

    def test_reply(self, client):
        resp = client.post("/markov/reply", json={"message": "天気はどう？"})

        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["seed"] == "天気は"
        assert isinstance(data["text"], str)

    def test_stats(self, client):
        resp = client.get("/markov/stats/default", params={"top_n": 3})

        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["vocab_size"] > 0
        assert len(data["top_tokens"]) == 3
        assert data["fallback_ready"] == True

    def test_stats_not_found(self, client):
        resp = client.get("/markov/stats/missing")

        assert resp.status_code == 404
