import streamlit as st

from core.env_loader import get_data_dir
from core.presets import funnel_label, tone_label
from core.project_io import StorageError
from ui.section_3_history import load_packages
from ui.session import open_saved_package, show_history, start_new_creative

_PICK_NONE = "(Choose)"


def _open_from_sidebar():
    pick = st.session_state.get("sidebar_open_pkg", _PICK_NONE)
    st.session_state.sidebar_open_pkg = _PICK_NONE
    if pick == _PICK_NONE:
        return
    for pkg in load_packages(str(get_data_dir())):
        if pkg.id == pick:
            if not open_saved_package(pkg):
                st.session_state.view = "history"
            return


def render_sidebar():
    st.sidebar.title("🎬 Ad Creative Studio")

    st.sidebar.button("✨ New creative", on_click=start_new_creative, width="stretch")
    st.sidebar.button("📚 Saved packages", on_click=show_history, width="stretch")

    st.sidebar.markdown("---")
    st.sidebar.subheader("📁 Saved")
    try:
        packages = load_packages(str(get_data_dir()))
    except StorageError as e:
        st.sidebar.error(f"Store unavailable: {e}")
        return

    st.sidebar.caption(f"{len(packages)} creative package{'s' if len(packages) != 1 else ''} saved")
    if packages:
        labels = {p.id: f"{p.product_name} · {funnel_label(p.funnel_stage, short=True)} · {tone_label(p.tone, short=True)}"
                  for p in reversed(packages)}
        st.sidebar.selectbox(
            "Open package",
            [_PICK_NONE] + list(labels.keys()),
            format_func=lambda pid: labels.get(pid, pid),
            key="sidebar_open_pkg",
            on_change=_open_from_sidebar,
        )
    st.sidebar.caption(f"Store: {get_data_dir()}")
