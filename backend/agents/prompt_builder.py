"""Prompt builder - turns a content request into the prompt sent to the model."""
from typing import Optional

from backend.agents.prompt_template import (
    BRAND_CONTEXT_TEMPLATE,
    COPY_REQUEST_TEMPLATE,
    DEFAULT_FRAMEWORK_INSTRUCTION,
    DEFAULT_LANGUAGE_INSTRUCTION,
    DEFAULT_PILLAR_INSTRUCTION,
    FALLBACK_AUDIENCE,
    FRAMEWORK_INSTRUCTIONS,
    LANGUAGE_INSTRUCTIONS,
    NO_BRAND_CONTEXT,
    PILLAR_INSTRUCTIONS,
    SYSTEM_INSTRUCTION,
)
from backend.app.models import BrandProfile, BuiltPrompt, ContentRequest, enum_value


def get_framework_instruction(framework) -> str:
    """Instruction block for ``framework``; empty for unknown values."""
    return FRAMEWORK_INSTRUCTIONS.get(enum_value(framework), DEFAULT_FRAMEWORK_INSTRUCTION)


def get_pillar_instruction(pillar) -> str:
    """Focus instruction for ``pillar``; empty for unknown values."""
    return PILLAR_INSTRUCTIONS.get(enum_value(pillar), DEFAULT_PILLAR_INSTRUCTION)


def get_language_instruction(language) -> str:
    """Language requirement for ``language``; English for unknown values."""
    return LANGUAGE_INSTRUCTIONS.get(enum_value(language), DEFAULT_LANGUAGE_INSTRUCTION)


def resolve_audience(request: ContentRequest) -> str:
    """Explicit audience, else the brand's default audience, else a generic fallback."""
    if request.target_audience:
        return request.target_audience
    if request.brand is not None and request.brand.default_audience:
        return request.brand.default_audience
    return FALLBACK_AUDIENCE


def build_brand_context(brand: Optional[BrandProfile]) -> str:
    if brand is None:
        return NO_BRAND_CONTEXT
    return BRAND_CONTEXT_TEMPLATE.format(
        name=brand.name,
        industry=brand.industry,
        description=brand.description,
        default_audience=brand.default_audience,
    )


def build_prompt(request: ContentRequest) -> BuiltPrompt:
    """
    Assemble the full prompt for a content request.

    Field contents are not validated: empty topic or description end up in the
    prompt exactly as given.

    Args:
        request: The current form state

    Returns:
        The prompt text and the system instruction to send with it
    """
    tone = enum_value(request.tone)
    pillar = enum_value(request.pillar)

    prompt = COPY_REQUEST_TEMPLATE.format(
        brand_context=build_brand_context(request.brand),
        topic=request.topic,
        description=request.description,
        audience=resolve_audience(request),
        tone=tone,
        pillar=pillar,
        framework_instruction=get_framework_instruction(request.framework),
        pillar_instruction=get_pillar_instruction(request.pillar),
        language_instruction=get_language_instruction(request.language),
    )
    return BuiltPrompt(prompt=prompt, system_instruction=SYSTEM_INSTRUCTION)
