# -*- coding: utf-8 -*-
import logging

import streamlit as st

from core.asset_codec import new_package_id, serialize_package_to_assets
from core.data_models import CreativePackageData, FormInputs, GOOGLE_SHORT_HEADLINE_LIMIT
from core.env_loader import reset_caches
from core.presets import funnel_label, tone_label
from core.project_io import StorageError, export_zip, save_creative_package
from core.text_utils import _safe_name, build_full_text
from ui.session import show_history, start_new_creative

logger = logging.getLogger(__name__)


def _save_package():
    data: CreativePackageData = st.session_state.creative_data
    inputs: FormInputs = st.session_state.form_inputs
    if st.session_state.saved_package_id:
        return

    package_id = new_package_id()
    assets = serialize_package_to_assets(data, inputs, package_id)
    try:
        save_creative_package(
            package_id,
            inputs.product_name,
            inputs.description,
            inputs.funnel_stage.value,
            inputs.tone_mode.value,
            assets.script_assets,
            assets.copy_assets,
            assets.persona_assets,
            assets.shot_assets,
        )
    except StorageError as e:
        logger.error("Saving %s failed: %s", package_id, e)
        st.toast("Failed to save package", icon="❌")
        return

    st.session_state.saved_package_id = package_id
    reset_caches()
    st.toast("Creative package saved!", icon="✅")


def _copy_block(title: str, text: str):
    st.caption(title)
    st.code(text or "", language=None)


def _tab_persona(data: CreativePackageData):
    p = data.persona
    col1, col2 = st.columns(2)
    with col1:
        _copy_block("🎯 Target segments", "\n".join(f"• {s}" for s in p.target_segments))
        _copy_block("😣 Pain points", "\n".join(f"• {s}" for s in p.pain_points))
    with col2:
        _copy_block("✨ Desires", "\n".join(f"• {s}" for s in p.desires))
        _copy_block("🤔 Objections", "\n".join(f"• {s}" for s in p.objections))


def _tab_hooks(data: CreativePackageData):
    for i, h in enumerate(data.hooks, 1):
        with st.expander(f"{i}. {h.type}", expanded=(i == 1)):
            st.caption(h.pattern)
            st.code(h.hook, language=None)


def _tab_scripts(data: CreativePackageData):
    s = data.scripts
    _copy_block("⏱️ 30-second script", s.thirty_second)
    _copy_block("⏱️ 15-second script", s.fifteen_second)
    _copy_block("⚡ 6-second bumper", s.six_second)
    with st.expander("▶️ YouTube long-form outline"):
        yt = s.youtube_outline
        st.code("\n\n".join([yt.intro, *yt.body, yt.cta]), language=None)


def _tab_meta(data: CreativePackageData):
    m = data.meta_ads
    for i, t in enumerate(m.primary_texts, 1):
        _copy_block(f"Primary text {i}", t)
    col1, col2 = st.columns(2)
    with col1:
        _copy_block("Headlines", "\n".join(m.headlines))
    with col2:
        _copy_block("Descriptions", "\n".join(m.descriptions))
    st.markdown(f"**CTA button:** `{m.cta_button}`")


def _tab_google(data: CreativePackageData):
    g = data.google_ads
    st.caption(f"Short headlines (max {GOOGLE_SHORT_HEADLINE_LIMIT} chars)")
    for h in g.short_headlines:
        colH, colN = st.columns([5, 1])
        with colH:
            st.code(h.text, language=None)
        with colN:
            flag = "✅" if h.within_limit else "⚠️"
            st.markdown(f"{flag} {h.char_count}/{GOOGLE_SHORT_HEADLINE_LIMIT}")
    _copy_block("Long headlines", "\n".join(g.long_headlines))
    _copy_block("Descriptions", "\n".join(g.descriptions))
    _copy_block("5-second hook (before skip)", g.five_second_hook)


def _tab_shots(data: CreativePackageData):
    sb = data.shot_breakdown
    for label, sec in (("🪝 Hook", sb.hook), ("🧩 Body", sb.body), ("📣 CTA", sb.cta)):
        with st.expander(label, expanded=True):
            st.markdown(f"**Camera:** {sec.camera_angle}")
            st.markdown(f"**B-roll:** {sec.b_roll}")
            st.markdown(f"**Expression:** {sec.expression_cue}")
    _copy_block("On-screen text", "\n".join(sb.on_screen_text))
    _copy_block("Thumbnail ideas", "\n".join(sb.thumbnail_ideas))


def _tab_ctas(data: CreativePackageData):
    for i, c in enumerate(data.cta_variations, 1):
        _copy_block(f"CTA {i}", c)


def render_section_2():
    data: CreativePackageData = st.session_state.creative_data
    inputs: FormInputs = st.session_state.form_inputs

    st.header(f"2) Creative package: {inputs.product_name}")
    st.caption(
        f"{funnel_label(inputs.funnel_stage)} · {tone_label(inputs.tone_mode)} · "
        f"{len(inputs.platforms)} platforms"
    )

    saved = bool(st.session_state.saved_package_id)
    col1, col2, col3, col4, col5 = st.columns(5)
    with col1:
        st.button(
            "✅ Saved!" if saved else "💾 Save package",
            type="primary",
            disabled=saved,
            on_click=_save_package,
            width="stretch",
        )
    with col2:
        st.download_button(
            "📄 Download text",
            data=build_full_text(data, inputs),
            file_name=f"{_safe_name(inputs.product_name) or 'creative'}_package.txt",
            mime="text/plain",
            width="stretch",
        )
    with col3:
        st.download_button(
            "📦 Export ZIP",
            data=export_zip(data, inputs),
            file_name=f"{_safe_name(inputs.product_name) or 'creative'}_package.zip",
            mime="application/zip",
            width="stretch",
        )
    with col4:
        st.button("📚 History", on_click=show_history, width="stretch")
    with col5:
        st.button("✨ New", on_click=start_new_creative, width="stretch")

    tabs = st.tabs(["👤 Persona", "🪝 Hooks", "🎬 Scripts", "📘 Meta Ads", "🎯 Google Video", "🎥 Shots", "📣 CTAs"])
    renderers = [_tab_persona, _tab_hooks, _tab_scripts, _tab_meta, _tab_google, _tab_shots, _tab_ctas]
    for tab, render in zip(tabs, renderers):
        with tab:
            render(data)
