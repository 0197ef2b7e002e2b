from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from core.asset_codec import AUDIENCE_PERSONA, serialize_package_to_assets
from core.project_io import PACKAGES_SUBDIR, save_creative_package
from ui.section_1_form import GENERATE_LABEL

APP_PATH = str(Path(__file__).resolve().parents[2] / "app.py")
SAVE_LABEL = "💾 Save package"
SAVED_LABEL = "✅ Saved!"
PKG_ID = "pkg_1700000000000_ab12c"


def _start(monkeypatch, store):
    monkeypatch.setenv("ADSTUDIO_DATA_DIR", str(store))
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    return at.run()


@pytest.fixture
def app(monkeypatch, data_dir):
    return _start(monkeypatch, data_dir)


def _button(at, label):
    return next(b for b in at.button if b.label == label)


def _submit(at):
    _button(at, GENERATE_LABEL).click().run()


def _fill_valid_form(at):
    at.text_input(key="product_name").input("FitPro")
    at.text_area(key="description").input("A 20+ character description of protein powder.")
    at.checkbox(key="platform_youtube").check()
    _submit(at)


def _store_package(data, inputs, data_dir, assets=None):
    assets = assets or serialize_package_to_assets(data, inputs, PKG_ID)
    save_creative_package(
        PKG_ID,
        inputs.product_name,
        inputs.description,
        inputs.funnel_stage.value,
        inputs.tone_mode.value,
        *assets,
        data_dir=data_dir,
    )


def test_form_renders(app):
    assert not app.exception
    assert app.session_state["view"] == "form"
    assert app.text_input(key="product_name").value == ""


def test_empty_submit_shows_field_errors(app):
    _submit(app)
    messages = [e.value for e in app.error]
    assert "Product name is required" in messages
    assert "Select at least one platform" in messages
    assert app.session_state["view"] == "form"


def test_valid_submit_shows_generated_package(app):
    _fill_valid_form(app)

    assert not app.exception
    assert app.session_state["view"] == "results"
    snippets = [c.value for c in app.code]
    assert "Stop wasting money on FitPro that doesn't work. FitPro changes everything. Learn More Now now." in snippets


def test_save_happens_once(app, data_dir):
    _fill_valid_form(app)
    assert app.session_state["saved_package_id"] is None

    _button(app, SAVE_LABEL).click().run()

    assert not app.exception
    pkg_id = app.session_state["saved_package_id"]
    assert pkg_id
    assert (data_dir / PACKAGES_SUBDIR / f"{pkg_id}.json").exists()
    assert _button(app, SAVED_LABEL).disabled
    assert "Creative package saved!" in [t.value for t in app.toast]


def test_failed_save_keeps_package_unsaved(monkeypatch, tmp_path):
    # a plain file where the store folder should be makes every write fail
    blocker = tmp_path / "blocker"
    blocker.write_text("not a folder", encoding="utf-8")
    at = _start(monkeypatch, blocker / "store")
    _fill_valid_form(at)

    _button(at, SAVE_LABEL).click().run()

    assert not at.exception
    assert "Failed to save package" in [t.value for t in at.toast]
    assert at.session_state["saved_package_id"] is None
    assert at.session_state["view"] == "results"
    assert not _button(at, SAVE_LABEL).disabled


def test_open_from_history_counts_as_saved(monkeypatch, data_dir, fitpro_package, fitpro_inputs):
    _store_package(fitpro_package, fitpro_inputs, data_dir)
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    monkeypatch.setenv("ADSTUDIO_DATA_DIR", str(data_dir))
    at.session_state["view"] = "history"
    at.run()

    at.button(key=f"open_{PKG_ID}").click().run()

    assert not at.exception
    assert at.session_state["view"] == "results"
    assert at.session_state["saved_package_id"] == PKG_ID
    assert at.session_state["creative_data"] == fitpro_package
    assert _button(at, SAVED_LABEL).disabled


def test_unreadable_package_stays_on_history(monkeypatch, data_dir, fitpro_package, fitpro_inputs):
    assets = serialize_package_to_assets(fitpro_package, fitpro_inputs, PKG_ID)
    broken = [a.model_copy(update={"content": "{not json"}) for a in assets.persona_assets]
    assert broken[0].name == AUDIENCE_PERSONA
    _store_package(fitpro_package, fitpro_inputs, data_dir, assets._replace(persona_assets=broken))

    at = AppTest.from_file(APP_PATH, default_timeout=30)
    monkeypatch.setenv("ADSTUDIO_DATA_DIR", str(data_dir))
    at.session_state["view"] = "history"
    at.run()

    at.button(key=f"open_{PKG_ID}").click().run()

    assert not at.exception
    assert at.session_state["view"] == "history"
    assert at.session_state["saved_package_id"] is None
    assert any("could not be loaded" in e.value for e in at.error)
