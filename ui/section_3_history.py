from pathlib import Path
from typing import List

import streamlit as st

from core.data_models import CreativePackage
from core.env_loader import get_data_dir
from core.presets import funnel_label, tone_label
from core.project_io import StorageError, get_all_creative_packages
from core.text_utils import clip
from ui.session import open_saved_package, start_new_creative


@st.cache_data(show_spinner=False)
def load_packages(data_dir: str) -> List[CreativePackage]:
    return get_all_creative_packages(Path(data_dir))


def render_section_3():
    st.header("📚 Saved packages")

    if st.session_state.get("load_error"):
        st.error(st.session_state.load_error)

    try:
        packages = load_packages(str(get_data_dir()))
    except StorageError as e:
        st.error(f"Could not load saved packages: {e}")
        return

    st.caption(f"{len(packages)} creative package{'s' if len(packages) != 1 else ''} saved")
    if not packages:
        st.info("No packages saved yet. Generate a creative and hit “Save package”.")
        st.button("✨ New creative", on_click=start_new_creative, key="history_new")
        return

    # newest first
    for pkg in reversed(packages):
        with st.container(border=True):
            colI, colB = st.columns([5, 1])
            with colI:
                st.markdown(f"**{pkg.product_name}**")
                st.caption(
                    f"{funnel_label(pkg.funnel_stage, short=True)} · {tone_label(pkg.tone, short=True)} · "
                    f"{pkg.asset_count} assets"
                )
                st.write(clip(pkg.description, 140))
            with colB:
                st.button("Open ▸", key=f"open_{pkg.id}", on_click=open_saved_package, args=(pkg,))
