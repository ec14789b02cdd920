"""Streamlit frontend for CopyCraft."""
import streamlit as st
import streamlit.components.v1 as components

from backend.agents.prompt_template import FALLBACK_AUDIENCE
from backend.app.constants import (
    FRAMEWORK_DETAILS,
    LANGUAGE_LABELS,
    pillar_label,
    tone_label,
    translate,
)
from backend.app.copy_generator import CopyGenerator
from backend.app.models import BrandProfile, ContentPillar, Framework, Language, Tone
from backend.app.session import COPIED_RESET_SECONDS, ComposerSession
from frontend.browser import anchor_html, clipboard_script, scroll_script

NO_BRAND = ""
# the copy button re-renders on its own so "Copied!" reverts without user input
COPY_REFRESH_SECONDS = COPIED_RESET_SECONDS / 4

# Custom CSS for better UI
PAGE_CSS = """
    <style>
    .main-header {
        font-size: 2.5rem;
        font-weight: bold;
        color: #1E2A38;
        text-align: center;
        margin-bottom: 0.25rem;
    }
    .sub-header {
        text-align: center;
        color: #64748b;
        margin-bottom: 2rem;
    }
    .section-header {
        font-size: 1.25rem;
        font-weight: bold;
        color: #2c3e50;
        margin-top: 1.5rem;
        margin-bottom: 0.75rem;
        padding-bottom: 0.5rem;
        border-bottom: 2px solid #31d190;
    }
    </style>
"""


@st.cache_resource
def get_copy_generator() -> CopyGenerator:
    """Get or create the CopyGenerator instance."""
    return CopyGenerator()


def _composer() -> ComposerSession:
    return st.session_state.composer


def _ui_lang() -> Language:
    return st.session_state.get("ui_language", Language.EN)


def _sync_widgets():
    """Push the composer's request into the form widgets."""
    composer = _composer()
    request = composer.request
    st.session_state.field_topic = request.topic
    st.session_state.field_description = request.description
    st.session_state.field_framework = request.framework
    st.session_state.field_pillar = request.pillar
    st.session_state.field_tone = request.tone
    st.session_state.field_language = request.language
    st.session_state.field_audience = request.target_audience or ""
    st.session_state.brand_choice = composer.registry.selected_id or NO_BRAND


def _init_state():
    if "composer" not in st.session_state:
        st.session_state.composer = ComposerSession()
        _sync_widgets()
    if "clipboard_payload" not in st.session_state:
        st.session_state.clipboard_payload = None
    if "scroll_pending" not in st.session_state:
        st.session_state.scroll_pending = False


# ---------------------------------------------------------------------------
# Callbacks
# ---------------------------------------------------------------------------

def _on_field_change():
    ss = st.session_state
    _composer().update(
        topic=ss.field_topic,
        description=ss.field_description,
        framework=ss.field_framework,
        pillar=ss.field_pillar,
        tone=ss.field_tone,
        language=ss.field_language,
        target_audience=ss.field_audience,
    )


def _on_brand_change():
    choice = st.session_state.brand_choice
    _composer().select_brand(choice or None)
    _sync_widgets()


def _on_add_brand():
    ss = st.session_state
    name = ss.new_brand_name.strip()
    if not name:
        ss.brand_form_error = "Please enter a brand name"
        return
    ss.brand_form_error = None
    _composer().add_brand(BrandProfile(
        name=name,
        industry=ss.new_brand_industry,
        description=ss.new_brand_description,
        default_tone=ss.new_brand_tone,
        default_audience=ss.new_brand_audience,
    ))
    _sync_widgets()


def _on_delete_brand():
    brand_id = st.session_state.brand_choice
    if brand_id:
        _composer().delete_brand(brand_id)
        _sync_widgets()


def _on_clear():
    _composer().clear()
    _sync_widgets()


def _on_copy():
    st.session_state.clipboard_payload = _composer().copy_output()


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------

def render_brand_manager():
    lang = _ui_lang()
    composer = _composer()
    brands = {brand.id: brand for brand in composer.registry.list()}

    st.markdown(f'<div class="section-header">🏷️ {translate("brand_section", lang)}</div>', unsafe_allow_html=True)
    st.selectbox(
        translate("select_brand", lang),
        options=[NO_BRAND] + list(brands),
        format_func=lambda bid: "—" if bid == NO_BRAND else brands[bid].name,
        key="brand_choice",
        on_change=_on_brand_change,
    )

    selected = composer.selected_brand
    if selected is not None:
        st.caption(f"**{selected.industry}** · {selected.description}")
        st.button("🗑️ Delete brand", key="delete_brand", on_click=_on_delete_brand, use_container_width=True)

    with st.expander(translate("add_new_brand", lang)):
        with st.form("new_brand_form", clear_on_submit=True):
            st.text_input("Brand Name", key="new_brand_name")
            st.text_input("Industry", key="new_brand_industry")
            st.text_area("Brand Story / Context", key="new_brand_description", height=80)
            st.selectbox(
                translate("tone", lang),
                options=list(Tone),
                format_func=lambda t: tone_label(t, lang),
                key="new_brand_tone",
            )
            st.text_input(translate("target_audience", lang), key="new_brand_audience")
            st.form_submit_button("Save", on_click=_on_add_brand, use_container_width=True)
        if st.session_state.get("brand_form_error"):
            st.error(st.session_state.brand_form_error)


def render_framework_selector():
    lang = _ui_lang()
    st.markdown(f'<div class="section-header">🧭 {translate("select_framework", lang)}</div>', unsafe_allow_html=True)
    st.radio(
        translate("select_framework", lang),
        options=list(Framework),
        format_func=lambda fw: f'{FRAMEWORK_DETAILS[fw.value]["icon"]} {FRAMEWORK_DETAILS[fw.value]["title"]}',
        key="field_framework",
        on_change=_on_field_change,
        label_visibility="collapsed",
    )
    framework = st.session_state.field_framework
    st.caption(FRAMEWORK_DETAILS[framework.value]["description"])


def render_input_form():
    lang = _ui_lang()
    composer = _composer()

    st.text_input(
        translate("product_topic", lang),
        placeholder="Wireless Earbuds",
        key="field_topic",
        on_change=_on_field_change,
    )
    st.text_area(
        translate("product_desc", lang),
        placeholder="Key features, offers, context...",
        key="field_description",
        on_change=_on_field_change,
        height=120,
    )

    col_a, col_b = st.columns(2)
    with col_a:
        st.selectbox(
            translate("pillar", lang),
            options=list(ContentPillar),
            format_func=lambda p: pillar_label(p, lang),
            key="field_pillar",
            on_change=_on_field_change,
        )
        st.selectbox(
            translate("output_language", lang),
            options=list(Language),
            format_func=lambda code: LANGUAGE_LABELS[code.value],
            key="field_language",
            on_change=_on_field_change,
        )
    with col_b:
        st.selectbox(
            translate("tone", lang),
            options=list(Tone),
            format_func=lambda t: tone_label(t, lang),
            key="field_tone",
            on_change=_on_field_change,
        )
        audience_hint = composer.selected_brand.default_audience if composer.selected_brand else FALLBACK_AUDIENCE
        st.text_input(
            translate("target_audience", lang),
            placeholder=audience_hint,
            key="field_audience",
            on_change=_on_field_change,
        )

    # Streamlit serializes script runs per session, so a second click only
    # lands after this run has finished; the composer still rejects overlaps.
    generate_clicked = st.button(
        f"✨ {translate('generate_btn', lang)}",
        key="generate",
        type="primary",
        use_container_width=True,
    )
    if generate_clicked:
        with st.spinner(translate("generating", lang)):
            result = composer.generate(get_copy_generator())
        if result is not None:
            st.session_state.scroll_pending = True


def render_output():
    lang = _ui_lang()
    composer = _composer()

    st.markdown(anchor_html(), unsafe_allow_html=True)

    if composer.error:
        st.error(composer.error)

    if composer.output is None:
        st.info(
            "**Ready to Create** \n"
            "Select a framework, choose your Content Pillar and Language, and let the AI do the rest."
        )
        return

    st.markdown(f'<div class="section-header">📝 {translate("result_title", lang)}</div>', unsafe_allow_html=True)
    details = FRAMEWORK_DETAILS[composer.output.framework.value]
    st.caption(f"{details['title']} · {composer.output.timestamp.strftime('%Y-%m-%d %H:%M:%S')}")

    col_copy, col_clear = st.columns(2)
    with col_copy:
        render_copy_button()
    with col_clear:
        st.button(
            f"🧹 {translate('clear_btn', lang)}",
            key="clear_output",
            on_click=_on_clear,
            use_container_width=True,
        )

    with st.container(border=True):
        st.markdown(composer.output.content)


@st.fragment(run_every=COPY_REFRESH_SECONDS)
def render_copy_button():
    """Copy button and clipboard injection, refreshed on a timer."""
    lang = _ui_lang()
    composer = _composer()
    if composer.output is None:
        return

    copy_label = translate("copied", lang) if composer.copied else translate("copy_btn", lang)
    st.button(f"📋 {copy_label}", key="copy_output", on_click=_on_copy, use_container_width=True)

    payload = st.session_state.clipboard_payload
    if payload:
        components.html(clipboard_script(payload), height=0)
        st.toast(translate("copied", lang))
        st.session_state.clipboard_payload = None


def main():
    st.set_page_config(
        page_title="CopyCraft AI",
        page_icon="✍️",
        layout="wide"
    )
    st.markdown(PAGE_CSS, unsafe_allow_html=True)
    _init_state()

    with st.sidebar:
        st.selectbox(
            "Interface language",
            options=list(Language),
            format_func=lambda code: LANGUAGE_LABELS[code.value],
            key="ui_language",
        )
        render_brand_manager()

    lang = _ui_lang()
    st.markdown(f'<div class="main-header">✍️ {translate("app_title", lang)}</div>', unsafe_allow_html=True)
    st.markdown(f'<div class="sub-header">{translate("app_subtitle", lang)}</div>', unsafe_allow_html=True)

    col1, col2 = st.columns([5, 7])
    with col1:
        render_framework_selector()
        render_input_form()
    with col2:
        render_output()

    if st.session_state.scroll_pending:
        components.html(scroll_script(), height=0)
        st.session_state.scroll_pending = False

    # Footer
    st.markdown("---")
    st.markdown(
        "<div style='text-align: center; color: #7f8c8d;'>Powered by <b>PrimeNova Digital Solution</b></div>",
        unsafe_allow_html=True
    )
