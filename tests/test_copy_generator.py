"""Tests for the Gemini-backed copy generator (LLM mocked)."""

from unittest.mock import MagicMock, patch

import pytest
from langchain_core.messages import HumanMessage, SystemMessage

from backend.agents.prompt_builder import build_prompt
from backend.app.config import Settings
from backend.app.copy_generator import FALLBACK_TEXT, TEMPERATURE, TOP_K, TOP_P, CopyGenerator
from backend.app.errors import GENERIC_GENERATION_ERROR, GenerationError
from backend.app.models import Framework, GeneratedResponse

from conftest import FakeLLM


class TestInitialization:

    def test_builds_gemini_client_with_fixed_sampling(self, settings):
        with patch("backend.app.copy_generator.ChatGoogleGenerativeAI") as chat_cls:
            generator = CopyGenerator(settings=settings)

        chat_cls.assert_called_once_with(
            model="gemini-2.5-flash",
            temperature=0.75,
            top_k=40,
            top_p=0.95,
            google_api_key="test-key",
        )
        assert generator.enabled
        assert (TEMPERATURE, TOP_K, TOP_P) == (0.75, 40, 0.95)

    def test_missing_key_defers_failure(self):
        with patch("backend.app.copy_generator.ChatGoogleGenerativeAI") as chat_cls:
            generator = CopyGenerator(settings=Settings(api_key=None))

        chat_cls.assert_not_called()
        assert not generator.enabled

    def test_missing_key_fails_on_generate(self, earbuds_request):
        generator = CopyGenerator(settings=Settings(api_key=None))
        with pytest.raises(GenerationError) as exc_info:
            generator.generate(earbuds_request)
        assert str(exc_info.value) == GENERIC_GENERATION_ERROR


class TestGenerate:

    def test_sends_system_and_prompt(self, settings, fake_llm, earbuds_request):
        generator = CopyGenerator(settings=settings, llm=fake_llm)
        result = generator.generate(earbuds_request)

        assert result == "## Great copy"
        assert len(fake_llm.calls) == 1
        system, human = fake_llm.calls[0]
        built = build_prompt(earbuds_request)
        assert isinstance(system, SystemMessage)
        assert isinstance(human, HumanMessage)
        assert system.content == built.system_instruction
        assert human.content == built.prompt

    @pytest.mark.parametrize("content", ["", "   ", None, []])
    def test_empty_output_uses_fallback(self, settings, earbuds_request, content):
        generator = CopyGenerator(settings=settings, llm=FakeLLM(content=content))
        assert generator.generate(earbuds_request) == FALLBACK_TEXT

    def test_text_returned_unchanged(self, settings, earbuds_request):
        content = "\n## Headline\n\nBody line  \n"
        generator = CopyGenerator(settings=settings, llm=FakeLLM(content=content))
        assert generator.generate(earbuds_request) == content

    def test_list_content_is_joined(self, settings, earbuds_request):
        llm = FakeLLM(content=[{"type": "text", "text": "Hello "}, "world"])
        generator = CopyGenerator(settings=settings, llm=llm)
        assert generator.generate(earbuds_request) == "Hello world"

    def test_api_error_becomes_generic_error(self, settings, earbuds_request):
        llm = FakeLLM(error=ConnectionError("DNS failure"))
        generator = CopyGenerator(settings=settings, llm=llm)

        with pytest.raises(GenerationError) as exc_info:
            generator.generate(earbuds_request)

        assert str(exc_info.value) == GENERIC_GENERATION_ERROR
        assert isinstance(exc_info.value.__cause__, ConnectionError)

    def test_no_retry_on_failure(self, settings, earbuds_request):
        llm = MagicMock()
        llm.invoke.side_effect = RuntimeError("429 quota")
        generator = CopyGenerator(settings=settings, llm=llm)

        with pytest.raises(GenerationError):
            generator.generate(earbuds_request)
        assert llm.invoke.call_count == 1

    def test_generate_response_wraps_content(self, settings, fake_llm, earbuds_request):
        generator = CopyGenerator(settings=settings, llm=fake_llm)
        response = generator.generate_response(earbuds_request)

        assert isinstance(response, GeneratedResponse)
        assert response.content == "## Great copy"
        assert response.framework == Framework.PAS
        assert response.timestamp is not None
