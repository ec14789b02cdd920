"""Data models for content requests, brand profiles and generated copy."""
from datetime import datetime
from enum import Enum
from typing import Any, List, Optional
from uuid import uuid4

from pydantic import BaseModel, Field


# ============================================================================
# ENUMS
# ============================================================================

class Language(str, Enum):
    """Output (and UI) language."""
    EN = "en"
    MY = "my"
    TH = "th"


class Framework(str, Enum):
    """Persuasive copywriting structures."""
    AIDA = "AIDA"
    PAS = "PAS"
    BAB = "BAB"
    FAB = "FAB"
    QUEST = "QUEST"
    FOUR_P = "FOUR_P"
    PASTOR = "PASTOR"
    FREESTYLE = "FREESTYLE"


class ContentPillar(str, Enum):
    """Thematic category of a post."""
    EDUCATIONAL = "Educational"
    PROMOTIONAL = "Promotional"
    INSPIRATIONAL = "Inspirational"
    ENTERTAINMENT = "Entertainment"
    BEHIND_SCENES = "BehindTheScenes"
    COMMUNITY = "Community"


class Tone(str, Enum):
    """Tone of voice."""
    PROFESSIONAL = "Professional"
    FRIENDLY = "Friendly"
    URGENT = "Urgent"
    WITTY = "Witty"
    EMOTIONAL = "Emotional"
    LUXURY = "Luxury"


def enum_value(value: Any) -> str:
    """Return the raw string behind an enum member (or the value itself)."""
    if isinstance(value, Enum):
        return value.value
    return "" if value is None else str(value)


# ============================================================================
# BRAND MODELS
# ============================================================================

class BrandProfile(BaseModel):
    """Reusable brand identity applied to generation requests."""
    id: str = Field(default_factory=lambda: uuid4().hex, description="Brand identifier")
    name: str = Field(default="", description="Brand name")
    industry: str = Field(default="", description="Industry sector")
    description: str = Field(default="", description="Brand story or boilerplate")
    default_tone: Tone = Field(default=Tone.PROFESSIONAL, description="Tone applied when the brand is selected")
    default_audience: str = Field(default="", description="Audience applied when the brand is selected")


# ============================================================================
# CONTENT MODELS
# ============================================================================

class ContentRequest(BaseModel):
    """Everything the form collects for one generation."""
    topic: str = Field(default="", description="Product or topic")
    description: str = Field(default="", description="Additional context / details")
    framework: Framework = Field(default=Framework.AIDA, description="Copywriting framework")
    pillar: ContentPillar = Field(default=ContentPillar.PROMOTIONAL, description="Content pillar")
    language: Language = Field(default=Language.EN, description="Output language")
    tone: Tone = Field(default=Tone.PROFESSIONAL, description="Tone of voice")
    target_audience: Optional[str] = Field(default="", description="Explicit target audience")
    brand: Optional[BrandProfile] = Field(default=None, description="Selected brand context")


class BuiltPrompt(BaseModel):
    """Prompt text plus the system instruction sent alongside it."""
    prompt: str
    system_instruction: str


class GeneratedResponse(BaseModel):
    """Copy returned by the model for the active request."""
    content: str
    framework: Framework
    timestamp: datetime = Field(default_factory=datetime.now)


# ============================================================================
# API REQUEST/RESPONSE MODELS
# ============================================================================

class GenerateRequest(ContentRequest):
    """Request model for copy generation.

    ``brand_id`` is resolved against the brand registry when ``brand`` is not
    sent inline.
    """
    brand_id: Optional[str] = Field(default=None, description="Registered brand to apply")

    def to_content_request(self, brand: Optional[BrandProfile] = None) -> ContentRequest:
        data = self.model_dump(exclude={"brand_id", "brand"})
        return ContentRequest(**data, brand=self.brand or brand)


class BrandCreateRequest(BaseModel):
    """Request model for registering a brand."""
    id: Optional[str] = Field(default=None, description="Caller-supplied identifier")
    name: str = Field(description="Brand name")
    industry: str = Field(default="", description="Industry sector")
    description: str = Field(default="", description="Brand story or boilerplate")
    default_tone: Tone = Field(default=Tone.PROFESSIONAL)
    default_audience: str = Field(default="")

    def to_profile(self) -> BrandProfile:
        data = self.model_dump(exclude_none=True)
        return BrandProfile(**data)


class BrandListResponse(BaseModel):
    """Registered brands and the current selection."""
    brands: List[BrandProfile] = Field(default_factory=list)
    selected_brand_id: Optional[str] = None


class FrameworkOption(BaseModel):
    """Selector entry for one framework."""
    value: Framework
    title: str
    description: str


class LabelledOption(BaseModel):
    """Selector entry with a label in the requested UI language."""
    value: str
    label: str


class OptionsResponse(BaseModel):
    """Everything a client needs to render the form."""
    frameworks: List[FrameworkOption] = Field(default_factory=list)
    pillars: List[LabelledOption] = Field(default_factory=list)
    tones: List[LabelledOption] = Field(default_factory=list)
    languages: List[LabelledOption] = Field(default_factory=list)
