"""Copy generation service using Gemini 2.5 Flash through LangChain."""
from typing import Any, Optional

from langchain_core.messages import HumanMessage, SystemMessage
from langchain_google_genai import ChatGoogleGenerativeAI

from backend.agents.prompt_builder import build_prompt
from backend.app.config import Settings, get_settings
from backend.app.errors import GenerationError
from backend.app.logger import get_logger
from backend.app.models import ContentRequest, GeneratedResponse, enum_value

logger = get_logger(__name__)

TEMPERATURE = 0.75
TOP_K = 40
TOP_P = 0.95

FALLBACK_TEXT = "Sorry, I couldn't generate the content at this time."


class CopyGenerator:
    """Generate marketing copy for a content request with one model call."""

    def __init__(self, settings: Optional[Settings] = None, llm: Any = None):
        self.settings = settings or get_settings()
        self.llm = llm if llm is not None else self._initialize_llm()

    def _initialize_llm(self):
        """Initialize the Gemini chat model, or None when no key is configured."""
        if not self.settings.has_api_key:
            logger.warning("GEMINI_API_KEY not found, generation requests will fail until it is set")
            logger.warning("Get a key from: https://aistudio.google.com/app/apikey")
            return None

        llm = ChatGoogleGenerativeAI(
            model=self.settings.model_name,
            temperature=TEMPERATURE,
            top_k=TOP_K,
            top_p=TOP_P,
            google_api_key=self.settings.api_key,
        )
        logger.info(f"✓ Copy generator: Google Gemini LLM ({self.settings.model_name}) initialized")
        return llm

    @property
    def enabled(self) -> bool:
        return self.llm is not None

    def generate(self, request: ContentRequest) -> str:
        """
        Generate copy for a content request.

        Args:
            request: The content request to write copy for

        Returns:
            The generated markdown, or a fixed fallback sentence if the model
            returned no text

        Raises:
            GenerationError: on any transport or API failure, with a generic message
        """
        built = build_prompt(request)

        if self.llm is None:
            logger.error("✗ Cannot generate copy: no Gemini API key configured")
            raise GenerationError()

        try:
            logger.info(f"Generating {enum_value(request.framework)} copy for topic: {request.topic!r}")
            logger.debug(f"Full prompt: {built.prompt}")

            response = self.llm.invoke([
                SystemMessage(content=built.system_instruction),
                HumanMessage(content=built.prompt),
            ])
        except Exception as e:
            logger.error(f"✗ Gemini API error: {e}", exc_info=True)
            raise GenerationError() from e

        text = self._extract_text(response)
        if not text.strip():
            logger.warning("Model returned no text, using fallback message")
            return FALLBACK_TEXT

        logger.info(f"✓ Copy generated successfully ({len(text)} characters)")
        return text

    def generate_response(self, request: ContentRequest) -> GeneratedResponse:
        """Generate copy and wrap it with the framework and a timestamp."""
        content = self.generate(request)
        return GeneratedResponse(content=content, framework=request.framework)

    def _extract_text(self, response) -> str:
        """Pull plain text out of a chat model response."""
        content = response.content if hasattr(response, 'content') else response
        if isinstance(content, list):
            parts = []
            for part in content:
                if isinstance(part, str):
                    parts.append(part)
                elif isinstance(part, dict) and part.get("type", "text") == "text":
                    parts.append(part.get("text", ""))
            content = "".join(parts)
        if content is None:
            return ""
        return str(content)
