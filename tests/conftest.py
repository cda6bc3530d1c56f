import json

import pytest
import requests

from salesboard.core.models import DashboardData
from salesboard.data.fallback import fallback_payload


class FakeResponse:
    def __init__(self, status_code=200, text="", reason="OK"):
        self.status_code = status_code
        self.text = text
        self.reason = reason

    @property
    def ok(self):
        return 200 <= self.status_code < 400


class FakeSession:
    """
    Stand-in for requests.Session. Each ``get`` pops the next queued
    outcome: a FakeResponse or an exception to raise.
    """

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.calls = []
        self.closed = False

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def close(self):
        self.closed = True


class FakeLLMClient:
    """Records prompts and returns a canned JSON body (or raises)."""

    def __init__(self, reply='{"advice": ["a", "b", "c"]}'):
        self.reply = reply
        self.prompts = []

    def generate_json(self, prompt, schema):
        self.prompts.append((prompt, schema))
        if isinstance(self.reply, Exception):
            raise self.reply
        return self.reply


# -------------------------------------------------
# Fixtures
# -------------------------------------------------

@pytest.fixture
def payload():
    """
    Deterministic dashboard payload (the embedded fallback dataset).
    """
    return fallback_payload()


@pytest.fixture
def dashboard(payload):
    return DashboardData.from_dict(payload)


@pytest.fixture
def live_payload():
    """
    Payload that differs from the fallback so tests can tell them apart.
    Independent of the ``payload`` fixture.
    """
    payload = fallback_payload()
    payload["periodProgress"] = {"current": 5200, "target": 6500, "unit": "P", "official": 4800}
    return payload


@pytest.fixture
def json_response():
    def make(body, status_code=200):
        text = body if isinstance(body, str) else json.dumps(body, ensure_ascii=False)
        return FakeResponse(status_code=status_code, text=text)
    return make


@pytest.fixture
def fake_session():
    return FakeSession


@pytest.fixture
def fake_llm():
    return FakeLLMClient


@pytest.fixture
def network_error():
    return requests.ConnectionError("connection refused")


@pytest.fixture(autouse=True)
def no_api_keys(monkeypatch):
    """
    Tests never see real credentials from the environment.
    """
    for name in ("GEMINI_API_KEY", "OPENAI_API_KEY", "SALESBOARD_DATA_URL",
                 "SALESBOARD_REFRESH_INTERVAL", "SALESBOARD_AI_PROVIDER", "SALESBOARD_AI_MODEL"):
        monkeypatch.delenv(name, raising=False)
