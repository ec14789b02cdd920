"""Prompt templates and instruction fragments for marketing copy generation."""
from types import MappingProxyType
from typing import Mapping

from backend.app.models import ContentPillar, Framework, Language

SYSTEM_INSTRUCTION = """You are a world-class copywriter and content strategist.
Your goal is to write persuasive, high-converting marketing copy.
You are fluent in English, Myanmar, and Thai.
Always format the output using Markdown (headers, bullet points, bold text).
Do not explain the framework, just use it to structure the content."""

FALLBACK_AUDIENCE = "General Audience"

NO_BRAND_CONTEXT = "BRAND IDENTITY: Generic / Not specified"

BRAND_CONTEXT_TEMPLATE = """BRAND IDENTITY:
- Brand Name: {name}
- Industry: {industry}
- Brand Story/Context: {description}
- Standard Audience: {default_audience}"""

COPY_REQUEST_TEMPLATE = """{brand_context}

CONTENT REQUEST:
Product/Topic: {topic}
Additional Context/Details: {description}
Target Audience: {audience}
Tone of Voice: {tone}
Content Pillar/Theme: {pillar}

TASK:
{framework_instruction}

CONTENT FOCUS (Pillar):
{pillar_instruction}

LANGUAGE REQUIREMENT:
{language_instruction}

IMPORTANT RULES:
- Make it creative and engaging.
- If using Myanmar language, ensure it reads naturally to native speakers, not like a machine translation.
- Use appropriate emojis for the {tone} tone and {pillar} theme.
- Ensure the content aligns with the Brand Identity provided above.
"""


# ============================================================================
# FRAMEWORK INSTRUCTIONS
# ============================================================================

FRAMEWORK_INSTRUCTIONS: Mapping[str, str] = MappingProxyType({
    Framework.AIDA.value: (
        "Apply the AIDA framework:\n"
        "1. Attention: Grab attention with a hook.\n"
        "2. Interest: Build interest with facts/details.\n"
        "3. Desire: Create desire by showing benefits.\n"
        "4. Action: Clear Call to Action (CTA)."
    ),
    Framework.PAS.value: (
        "Apply the PAS framework:\n"
        "1. Problem: Identify a pain point.\n"
        "2. Agitation: Agitate the pain, make it visceral.\n"
        "3. Solution: Present the product/service as the ultimate solution."
    ),
    Framework.BAB.value: (
        "Apply the BAB framework:\n"
        "1. Before: Describe the current negative situation.\n"
        "2. After: Describe the ideal future situation.\n"
        "3. Bridge: Show how the product gets them from Before to After."
    ),
    Framework.FAB.value: (
        "Apply the FAB framework:\n"
        "1. Features: What it does.\n"
        "2. Advantages: Why it helps.\n"
        "3. Benefits: The underlying emotional or tangible payoff."
    ),
    Framework.QUEST.value: (
        "Apply the QUEST framework:\n"
        "1. Qualify the audience.\n"
        "2. Understand their problem.\n"
        "3. Educate them on the solution.\n"
        "4. Stimulate desire.\n"
        "5. Transition to action."
    ),
    Framework.FOUR_P.value: (
        "Apply the 4 Ps framework:\n"
        "1. Promise: Make a bold claim or promise about what the product does.\n"
        "2. Picture: Paint a vivid visual picture of the user enjoying the benefits.\n"
        "3. Proof: Provide evidence (social proof, facts, logic) that the promise is true.\n"
        "4. Push: A strong call to action."
    ),
    Framework.PASTOR.value: (
        "Apply the PASTOR framework:\n"
        "1. Problem: Describe the problem.\n"
        "2. Amplify: Amplify the consequences of not solving it.\n"
        "3. Story: Tell a story related to the solution.\n"
        "4. Transformation: Describe the transformation.\n"
        "5. Offer: Describe exactly what you are offering.\n"
        "6. Response: Ask for a response (CTA)."
    ),
    Framework.FREESTYLE.value: (
        "Create engaging, high-quality content optimized for social media or blogs. "
        "Use short paragraphs, emojis where appropriate, and a compelling structure."
    ),
})
DEFAULT_FRAMEWORK_INSTRUCTION = ""


# ============================================================================
# PILLAR INSTRUCTIONS
# ============================================================================

PILLAR_INSTRUCTIONS: Mapping[str, str] = MappingProxyType({
    ContentPillar.EDUCATIONAL.value: (
        "Focus on teaching the audience something valuable. "
        "Use a helpful, authoritative voice. Include tips or steps."
    ),
    ContentPillar.PROMOTIONAL.value: (
        "Focus on conversion and sales. Highlight offers, scarcity, and value proposition."
    ),
    ContentPillar.INSPIRATIONAL.value: (
        "Focus on storytelling and motivation. Connect on an emotional level."
    ),
    ContentPillar.ENTERTAINMENT.value: (
        "Focus on engagement. Be lighthearted, relatable, or humorous."
    ),
    ContentPillar.BEHIND_SCENES.value: (
        "Focus on authenticity. Show the process, the people, or the 'why' behind the product."
    ),
    ContentPillar.COMMUNITY.value: (
        "Focus on social proof and belonging. Highlight user experiences or testimonials."
    ),
})
DEFAULT_PILLAR_INSTRUCTION = ""


# ============================================================================
# LANGUAGE INSTRUCTIONS
# ============================================================================

LANGUAGE_INSTRUCTIONS: Mapping[str, str] = MappingProxyType({
    Language.EN.value: "Write the response in English.",
    Language.MY.value: (
        "Write the response in Myanmar (Burmese) language. "
        "Ensure the font encoding is standard Unicode. "
        "Use natural, flowing Burmese appropriate for marketing. "
        "Do NOT just transliterate English idioms, adapt them culturally."
    ),
    Language.TH.value: (
        "Write the response in Thai language. "
        "Use polite and persuasive Thai appropriate for marketing contexts."
    ),
})
DEFAULT_LANGUAGE_INSTRUCTION = LANGUAGE_INSTRUCTIONS[Language.EN.value]
