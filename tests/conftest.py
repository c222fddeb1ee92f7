from __future__ import annotations

from types import SimpleNamespace
from typing import List, Optional

import pytest

from scamcheck.config import Settings


class FakeCompletions:
    def __init__(self, content: Optional[str] = None, error: Optional[Exception] = None) -> None:
        self.content = content
        self.error = error
        self.choices: Optional[list] = None
        self.calls: List[dict] = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        if self.choices is not None:
            return SimpleNamespace(choices=self.choices)
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.fixture
def fake_openai(monkeypatch):
    """Replace the OpenAI client class used by the adapter; returns the completions stub."""
    completions = FakeCompletions()
    constructed: List[dict] = []

    class FakeOpenAI:
        def __init__(self, **kwargs) -> None:
            constructed.append(kwargs)
            self.chat = SimpleNamespace(completions=completions)

    monkeypatch.setattr("scamcheck.llm.OpenAI", FakeOpenAI)
    completions.constructed = constructed
    return completions


@pytest.fixture
def remote_settings() -> Settings:
    return Settings(gemini_api_key="test-key", gemini_model="gemini-test", http_timeout_seconds=5.0)


@pytest.fixture
def local_settings() -> Settings:
    return Settings(gemini_api_key="")
