import logging
from typing import Optional

import streamlit as st

from core.asset_codec import deserialize_package_from_assets
from core.data_models import CreativePackage, CreativePackageData, FormInputs

logger = logging.getLogger(__name__)

# widget keys owned by the input form; cleared when starting over
FORM_KEYS = ("product_name", "description", "funnel_stage", "tone_mode", "competitor_info")
PLATFORM_KEY_PREFIX = "platform_"


def init_session():
    defaults = {
        "view": "form",             # form | results | history
        "creative_data": None,
        "form_inputs": None,
        "saved_package_id": None,   # set once per package; a save is never undone
        "load_error": "",
    }
    for k, v in defaults.items():
        if k not in st.session_state:
            st.session_state[k] = v


def start_new_creative():
    st.session_state.view = "form"
    st.session_state.creative_data = None
    st.session_state.form_inputs = None
    st.session_state.saved_package_id = None
    for k in list(st.session_state.keys()):
        if k in FORM_KEYS or str(k).startswith(PLATFORM_KEY_PREFIX):
            del st.session_state[k]


def show_history():
    st.session_state.load_error = ""
    st.session_state.view = "history"


def show_package(data: CreativePackageData, inputs: FormInputs, saved_package_id: Optional[str] = None):
    st.session_state.creative_data = data
    st.session_state.form_inputs = inputs
    st.session_state.saved_package_id = saved_package_id
    st.session_state.load_error = ""
    st.session_state.view = "results"


def open_saved_package(pkg: CreativePackage) -> bool:
    loaded = deserialize_package_from_assets(
        pkg.scripts, pkg.ad_copy, pkg.personas, pkg.shots,
        pkg.product_name, pkg.description, pkg.funnel_stage, pkg.tone,
    )
    if loaded is None:
        st.session_state.load_error = f"Package “{pkg.product_name}” could not be loaded: its stored content is unreadable."
        return False
    logger.info("Opened creative package %s", pkg.id)
    show_package(loaded.data, loaded.inputs, saved_package_id=pkg.id)
    return True
