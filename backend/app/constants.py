"""Static lookup tables: framework catalog, multi-locale labels and demo brands."""
from types import MappingProxyType
from typing import List, Mapping

from backend.app.models import BrandProfile, ContentPillar, Framework, Language, Tone, enum_value


def _frozen(table: dict) -> Mapping:
    return MappingProxyType({key: MappingProxyType(value) for key, value in table.items()})


# ============================================================================
# FRAMEWORK CATALOG
# ============================================================================

FRAMEWORK_DETAILS: Mapping[str, Mapping[str, str]] = _frozen({
    Framework.AIDA.value: {
        "title": "AIDA Model",
        "description": "Attention, Interest, Desire, Action. The classic copywriting formula.",
        "icon": "📣",
    },
    Framework.PAS.value: {
        "title": "PAS Formula",
        "description": "Problem, Agitation, Solution. Perfect for addressing pain points.",
        "icon": "⚠️",
    },
    Framework.BAB.value: {
        "title": "Before-After-Bridge",
        "description": "Show the current pain, the future benefit, and how to get there.",
        "icon": "➡️",
    },
    Framework.FAB.value: {
        "title": "Feature-Advantage-Benefit",
        "description": "Turn technical features into desirable benefits.",
        "icon": "🎁",
    },
    Framework.QUEST.value: {
        "title": "QUEST",
        "description": "Qualify, Understand, Educate, Stimulate, Transition.",
        "icon": "❓",
    },
    Framework.FOUR_P.value: {
        "title": "The 4 Ps",
        "description": "Promise, Picture, Proof, Push. Persuasive and visual.",
        "icon": "📖",
    },
    Framework.PASTOR.value: {
        "title": "PASTOR",
        "description": "Problem, Amplify, Story, Transformation, Offer, Response.",
        "icon": "📖",
    },
    Framework.FREESTYLE.value: {
        "title": "Freestyle / Social",
        "description": "Creative, engaging posts for social media without a strict structure.",
        "icon": "✨",
    },
})


# ============================================================================
# LABELS
# ============================================================================

LANGUAGE_LABELS: Mapping[str, str] = MappingProxyType({
    Language.EN.value: "English",
    Language.MY.value: "Myanmar (Burmese)",
    Language.TH.value: "Thai",
})

TONE_LABELS: Mapping[str, Mapping[str, str]] = _frozen({
    Tone.PROFESSIONAL.value: {"en": "Professional", "my": "ပရော်ဖက်ရှင်နယ်", "th": "มืออาชีพ"},
    Tone.FRIENDLY.value: {"en": "Friendly", "my": "ရင်းနှီးသော", "th": "เป็นกันเอง"},
    Tone.URGENT.value: {"en": "Urgent", "my": "အရေးကြီးသော", "th": "เร่งด่วน"},
    Tone.WITTY.value: {"en": "Witty", "my": "ဟာသဉာဏ်ရှိသော", "th": "ชาญฉลาด"},
    Tone.EMOTIONAL.value: {"en": "Emotional", "my": "ခံစားချက်ပါသော", "th": "มีอารมณ์ร่วม"},
    Tone.LUXURY.value: {"en": "Luxury", "my": "ခန့်ညားထည်ဝါသော", "th": "หรูหรา"},
})

PILLAR_LABELS: Mapping[str, Mapping[str, str]] = _frozen({
    ContentPillar.EDUCATIONAL.value: {"en": "Educational", "my": "ပညာပေး", "th": "การศึกษา"},
    ContentPillar.PROMOTIONAL.value: {"en": "Promotional", "my": "ကြော်ငြာ", "th": "โปรโมชั่น"},
    ContentPillar.INSPIRATIONAL.value: {"en": "Inspirational", "my": "စိတ်ဓာတ်ခွန်အား", "th": "สร้างแรงบันดาลใจ"},
    ContentPillar.ENTERTAINMENT.value: {"en": "Entertainment", "my": "ဖျော်ဖြေရေး", "th": "บันเทิง"},
    ContentPillar.BEHIND_SCENES.value: {"en": "Behind the Scenes", "my": "နောက်ကွယ်", "th": "เบื้องหลัง"},
    ContentPillar.COMMUNITY.value: {"en": "Community/Reviews", "my": "သုံးသပ်ချက်များ", "th": "ชุมชน/รีวิว"},
})

TRANSLATIONS: Mapping[str, Mapping[str, str]] = _frozen({
    "app_title": {"en": "CopyCraft AI", "my": "CopyCraft AI", "th": "CopyCraft AI"},
    "app_subtitle": {
        "en": "Professional Content Generator",
        "my": "အဆင့်မြင့် စာရေးလက်ထောက်",
        "th": "ผู้ช่วยเขียนคอนเทนต์มืออาชีพ",
    },
    "select_framework": {"en": "Select Framework", "my": "Framework ရွေးချယ်ပါ", "th": "เลือกโครงสร้าง"},
    "product_topic": {
        "en": "What are you writing about?",
        "my": "အကြောင်းအရာခေါင်းစဉ်",
        "th": "หัวข้อคอนเทนต์",
    },
    "product_desc": {"en": "Product Details / Context", "my": "အကြောင်းအရာအသေးစိတ်", "th": "รายละเอียด"},
    "tone": {"en": "Tone of Voice", "my": "လေသံ (Tone)", "th": "น้ำเสียง"},
    "target_audience": {"en": "Target Audience", "my": "ဦးတည်ပရိသတ်", "th": "กลุ่มเป้าหมาย"},
    "output_language": {"en": "Output Language", "my": "ဘာသာစကားရွေးရန်", "th": "ภาษาผลลัพธ์"},
    "generate_btn": {"en": "Generate Content", "my": "စာရေးပါ", "th": "สร้างคอนเทนต์"},
    "generating": {"en": "Writing magic...", "my": "ရေးသားနေပါသည်...", "th": "กำลังเขียน..."},
    "result_title": {"en": "Generated Content", "my": "ရလဒ်", "th": "คอนเทนต์ที่ได้"},
    "copy_btn": {"en": "Copy", "my": "ကူးယူမည်", "th": "คัดลอก"},
    "copied": {"en": "Copied!", "my": "ကူးယူပြီး", "th": "คัดลอกแล้ว!"},
    "clear_btn": {"en": "Clear", "my": "ရှင်းမည်", "th": "ล้าง"},
    "pillar": {"en": "Content Pillar", "my": "Content အမျိုးအစား", "th": "ประเภทคอนเทนต์"},
    "brand_section": {"en": "Brand Identity", "my": "Brand အချက်အလက်", "th": "ข้อมูลแบรนด์"},
    "add_new_brand": {"en": "+ Add New", "my": "+ အသစ်ထည့်မည်", "th": "+ เพิ่มใหม่"},
    "select_brand": {
        "en": "Select a Brand Profile (Optional)",
        "my": "Brand Profile ရွေးပါ (မရွေးလဲရသည်)",
        "th": "เลือกโปรไฟล์แบรนด์ (ไม่บังคับ)",
    },
})


def _localized(table: Mapping[str, Mapping[str, str]], key, language) -> str:
    entry = table.get(enum_value(key))
    if entry is None:
        return enum_value(key)
    return entry.get(enum_value(language)) or entry[Language.EN.value]


def translate(key: str, language=Language.EN) -> str:
    """UI string for ``key`` in ``language``; English when a locale is missing."""
    return _localized(TRANSLATIONS, key, language)


def tone_label(tone, language=Language.EN) -> str:
    return _localized(TONE_LABELS, tone, language)


def pillar_label(pillar, language=Language.EN) -> str:
    return _localized(PILLAR_LABELS, pillar, language)


# ============================================================================
# DEMO BRANDS
# ============================================================================

DEFAULT_BRANDS = (
    BrandProfile(
        id="demo-1",
        name="TechNova",
        industry="Consumer Electronics",
        description="Innovative gadgets for the modern lifestyle. High-tech meets minimal design.",
        default_tone=Tone.WITTY,
        default_audience="Tech enthusiasts, Early adopters, Ages 18-35",
    ),
    BrandProfile(
        id="demo-2",
        name="GreenLeaf Organics",
        industry="Health & Wellness",
        description="100% organic supplements and superfoods sourced sustainably.",
        default_tone=Tone.FRIENDLY,
        default_audience="Health-conscious individuals, Eco-friendly consumers",
    ),
)


def default_brands() -> List[BrandProfile]:
    """Fresh copies of the demo brands, safe to mutate."""
    return [brand.model_copy() for brand in DEFAULT_BRANDS]
