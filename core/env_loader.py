import logging
import os
from pathlib import Path

import streamlit as st
from dotenv import load_dotenv

APP_DIR = Path(__file__).resolve().parents[1]

DATA_DIR_VAR = "ADSTUDIO_DATA_DIR"
LOG_LEVEL_VAR = "ADSTUDIO_LOG_LEVEL"


def load_env():
    # variables already set in the process win over .env
    load_dotenv(override=False)


def get_data_dir() -> Path:
    """Root folder of the package store; relative paths resolve against the app dir."""
    load_env()
    raw = os.getenv(DATA_DIR_VAR, "").strip()
    if not raw:
        return APP_DIR / "packages"
    p = Path(raw).expanduser()
    return p if p.is_absolute() else APP_DIR / p


def get_log_level() -> str:
    load_env()
    return os.getenv(LOG_LEVEL_VAR, "INFO").strip().upper() or "INFO"


def configure_logging():
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # streamlit's file watcher is chatty at DEBUG
    logging.getLogger("watchdog").setLevel(logging.WARNING)


def reset_caches():
    """Drop cached store reads so the next render sees new saves."""
    st.cache_data.clear()
