"""Tests for the static lookup tables."""

import pytest

from backend.app.constants import (
    FRAMEWORK_DETAILS,
    PILLAR_LABELS,
    TONE_LABELS,
    TRANSLATIONS,
    default_brands,
    pillar_label,
    tone_label,
    translate,
)
from backend.app.models import ContentPillar, Framework, Language, Tone


def test_every_framework_has_details():
    assert set(FRAMEWORK_DETAILS) == {fw.value for fw in Framework}
    for details in FRAMEWORK_DETAILS.values():
        assert details["title"] and details["description"]


@pytest.mark.parametrize("table, enum_cls", [(TONE_LABELS, Tone), (PILLAR_LABELS, ContentPillar)])
def test_labels_cover_every_value_and_locale(table, enum_cls):
    assert set(table) == {member.value for member in enum_cls}
    for labels in table.values():
        assert set(labels) == {lang.value for lang in Language}


def test_translations_have_all_locales():
    for labels in TRANSLATIONS.values():
        assert all(labels[lang.value] for lang in Language)


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        FRAMEWORK_DETAILS["NEW"] = {}
    with pytest.raises(TypeError):
        TONE_LABELS["Witty"]["en"] = "Funny"


def test_label_helpers():
    assert tone_label(Tone.WITTY, Language.TH) == "ชาญฉลาด"
    assert pillar_label(ContentPillar.BEHIND_SCENES) == "Behind the Scenes"
    assert translate("copied", Language.EN) == "Copied!"
    assert translate("copy_btn", "th") == "คัดลอก"


def test_unknown_keys_fall_back():
    assert translate("missing_key") == "missing_key"
    assert translate("clear_btn", "fr") == "Clear"


def test_default_brands_are_fresh_copies():
    first, second = default_brands(), default_brands()
    assert [b.name for b in first] == ["TechNova", "GreenLeaf Organics"]
    assert first[0] is not second[0]
    assert first[0].default_tone == Tone.WITTY
    assert first[1].default_tone == Tone.FRIENDLY
