import logging

import streamlit as st

from core.copy_builders import generate_creative_package
from core.data_models import FormInputs, FunnelStage, Platform, ToneMode
from core.presets import FUNNEL_STAGES, PLATFORMS, TONE_MODES
from core.validation import MIN_DESCRIPTION_CHARS, validate_form
from ui.session import PLATFORM_KEY_PREFIX, show_package

logger = logging.getLogger(__name__)

GENERATE_LABEL = "⚡ Generate creative package"


def render_section_1():
    st.header("1) Product, platforms & angle")

    with st.form("creative_form"):
        st.subheader("Product / Service details")
        product_name = st.text_input(
            "Product / Service name *",
            key="product_name",
            placeholder="e.g. FitPro Protein Powder, SaaS Dashboard Tool...",
        )
        description = st.text_area(
            "Description *",
            key="description",
            height=140,
            placeholder="Describe your product/service, its key benefits, unique selling points, and target audience. "
                        "The more detail you provide, the better the output.",
        )
        st.caption(f"{len((description or '').strip())} characters · minimum {MIN_DESCRIPTION_CHARS}")

        st.subheader("Target platforms *")
        cols = st.columns(3)
        for i, (p, meta) in enumerate(PLATFORMS.items()):
            with cols[i % 3]:
                st.checkbox(f"{meta['icon']} {meta['label']}", key=f"{PLATFORM_KEY_PREFIX}{p.value}")

        colF, colT = st.columns(2)
        with colF:
            funnel_stage = st.radio(
                "Funnel stage",
                [s.value for s in FunnelStage],
                format_func=lambda s: f"{FUNNEL_STAGES[s]['label']}: {FUNNEL_STAGES[s]['desc']}",
                key="funnel_stage",
            )
        with colT:
            tone_mode = st.radio(
                "Tone",
                [t.value for t in ToneMode],
                format_func=lambda t: f"{TONE_MODES[t]['label']}: {TONE_MODES[t]['desc']}",
                key="tone_mode",
            )

        competitor_info = st.text_input(
            "Competitor (optional)",
            key="competitor_info",
            placeholder="e.g. BrandX Whey",
        )
        submitted = st.form_submit_button(GENERATE_LABEL, type="primary")

    if not submitted:
        return

    platforms = [p.value for p in Platform if st.session_state.get(f"{PLATFORM_KEY_PREFIX}{p.value}")]
    errors = validate_form(product_name, description, platforms)
    if errors:
        for msg in errors.values():
            st.error(msg)
        return

    inputs = FormInputs(
        product_name=product_name.strip(),
        description=description.strip(),
        platforms=platforms,
        funnel_stage=funnel_stage,
        tone_mode=tone_mode,
        competitor_info=(competitor_info or "").strip() or None,
    )
    logger.info("Generating package for %r (%s/%s)", inputs.product_name, funnel_stage, tone_mode)
    show_package(generate_creative_package(inputs), inputs)
    st.rerun()
