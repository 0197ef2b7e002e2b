import streamlit as st

from core.env_loader import configure_logging
from ui.session import init_session
from ui.sidebar import render_sidebar
from ui.section_1_form import render_section_1
from ui.section_2_results import render_section_2
from ui.section_3_history import render_section_3

configure_logging()
st.set_page_config(page_title="UGC Ad Creative Studio", page_icon="🎬", layout="wide")

# Session init
init_session()

render_sidebar()

st.title("🎬 UGC Ad Creative Studio — scripts, hooks & ad copy")

view = st.session_state.view
if view == "results" and st.session_state.creative_data is not None:
    render_section_2()
elif view == "history":
    render_section_3()
else:
    render_section_1()
