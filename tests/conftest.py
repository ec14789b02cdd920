"""Shared test fixtures for CopyCraft."""

import os
import sys
import tempfile
from pathlib import Path

import pytest

# Ensure the backend packages are importable and logs stay out of the repo
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))
os.environ.setdefault("COPYCRAFT_LOG_DIR", tempfile.mkdtemp(prefix="copycraft-logs-"))

from backend.app.config import Settings
from backend.app.models import BrandProfile, ContentPillar, ContentRequest, Framework, Language, Tone


class FakeMessage:
    """Stand-in for a LangChain AIMessage."""

    def __init__(self, content):
        self.content = content


class FakeLLM:
    """Records invocations and returns a canned response (or raises)."""

    def __init__(self, content="## Great copy", error=None):
        self.content = content
        self.error = error
        self.calls = []

    def invoke(self, messages):
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        return FakeMessage(self.content)


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key="test-key")


@pytest.fixture
def fake_llm() -> FakeLLM:
    return FakeLLM()


@pytest.fixture
def sample_brand() -> BrandProfile:
    return BrandProfile(
        id="brand-sonic",
        name="SonicWave",
        industry="Audio",
        description="Premium sound for people on the move.",
        default_tone=Tone.LUXURY,
        default_audience="Commuters and gym-goers",
    )


@pytest.fixture
def earbuds_request() -> ContentRequest:
    return ContentRequest(
        topic="Wireless Earbuds",
        description="30h battery, active noise cancelling",
        framework=Framework.PAS,
        pillar=ContentPillar.PROMOTIONAL,
        language=Language.EN,
        tone=Tone.WITTY,
    )
