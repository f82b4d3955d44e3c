"""Shared fixtures: fake OpenAI client, configured settings, API client."""
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from conflict_scanner.core.config import settings
from conflict_scanner.main import app
from conflict_scanner.services.ai_service import AIService


class FakeCompletions:
    def __init__(self, contents=None, error=None):
        self.contents = list(contents or [])
        self.error = error
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        content = self.contents.pop(0) if self.contents else None
        return SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content=content))]
        )


class FakeOpenAI:
    """Stands in for AsyncOpenAI: exposes chat.completions.create."""

    def __init__(self, *contents, error=None):
        self.completions = FakeCompletions(contents, error)
        self.chat = SimpleNamespace(completions=self.completions)

    @property
    def calls(self):
        return self.completions.calls


@pytest.fixture
def fake_openai():
    return FakeOpenAI


@pytest.fixture
def make_ai():
    def _make(*contents, error=None):
        client = FakeOpenAI(*contents, error=error)
        return AIService(model="test-model", client=client), client
    return _make


@pytest.fixture
def configured(monkeypatch):
    monkeypatch.setattr(settings, "NEWS_API_KEY", "news-key")
    monkeypatch.setattr(settings, "OPENAI_API_KEY", "openai-key")
    monkeypatch.setattr(settings, "PARTY_EXTRACTION_WEBHOOK_URL", "https://hooks.example.test/extract-terms")
    return settings


@pytest.fixture
def unconfigured(monkeypatch):
    monkeypatch.setattr(settings, "NEWS_API_KEY", None)
    monkeypatch.setattr(settings, "OPENAI_API_KEY", None)
    monkeypatch.setattr(settings, "PARTY_EXTRACTION_WEBHOOK_URL", None)
    return settings


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


SAMPLE_ARTICLES = [
    {
        "title": "Acme Corp sued over patent dispute",
        "description": "Rival files suit in Delaware.",
        "source": {"id": None, "name": "Reuters"},
        "url": "https://news.example.test/acme-suit",
        "publishedAt": "2026-09-01T10:00:00Z",
    },
    {
        "title": "Acme Corp to acquire Widget Inc",
        "description": None,
        "source": {"name": "Bloomberg"},
        "url": "https://news.example.test/acme-widget",
        "publishedAt": "2026-09-15T12:30:00Z",
    },
]


@pytest.fixture
def sample_articles():
    return [dict(a) for a in SAMPLE_ARTICLES]
