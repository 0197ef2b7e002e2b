import pytest

from core.copy_builders import (
    FIFTEEN_SECOND_DESC_BUDGET,
    THIRTY_SECOND_DESC_BUDGET,
    build_short_headlines,
    generate_creative_package,
)
from core.data_models import FormInputs, FunnelStage, ShortHeadline, ToneMode
from core.text_utils import ELLIPSIS


def _section(script: str, header: str) -> str:
    """Body text under one [HEADER] block of a timed script."""
    after = script.split(header + "\n", 1)[1]
    return after.split("\n\n", 1)[0]


def test_six_second_bumper_example(fitpro_package):
    assert fitpro_package.scripts.six_second == (
        "Stop wasting money on FitPro that doesn't work. FitPro changes everything. Learn More Now now."
    )


def test_generation_is_deterministic(fitpro_inputs):
    first = generate_creative_package(fitpro_inputs)
    second = generate_creative_package(fitpro_inputs)
    assert first == second
    assert first.model_dump_json() == second.model_dump_json()


@pytest.mark.parametrize("length", [0, 20, 79, 80, 81, 119, 120, 121, 500])
def test_script_description_slices_stay_within_budget(fitpro_inputs, length):
    desc = "x" * length
    pkg = generate_creative_package(fitpro_inputs.model_copy(update={"description": desc}))

    solution_30 = _section(pkg.scripts.thirty_second, "[SOLUTION — 10–20s]")
    excerpt_30 = solution_30.removeprefix("That's exactly why FitPro exists. ").split(" It's designed")[0]
    assert len(excerpt_30) <= THIRTY_SECOND_DESC_BUDGET + len(ELLIPSIS)

    solution_15 = _section(pkg.scripts.fifteen_second, "[SOLUTION — 3–10s]")
    excerpt_15 = solution_15.removeprefix("FitPro is the answer. ").split(" Real results")[0]
    assert len(excerpt_15) <= FIFTEEN_SECOND_DESC_BUDGET + len(ELLIPSIS)

    assert excerpt_30.endswith(ELLIPSIS) == (length > THIRTY_SECOND_DESC_BUDGET)


def test_thirty_second_script_layout(fitpro_package):
    script = fitpro_package.scripts.thirty_second
    assert script.startswith("[HOOK — 0–3s]\nStop wasting money on FitPro")
    assert "You might not know this yet, but most people" in script
    assert script.endswith("Tap the link below. Learn More Now.")


def test_short_headlines_example(fitpro_package):
    headlines = fitpro_package.google_ads.short_headlines
    assert headlines[0].text == "Try FitPro Today"
    assert headlines[0].char_count == len("Try FitPro Today")
    for h in headlines:
        assert h.char_count == len(h.text)


def test_short_headlines_are_cut_to_thirty_chars():
    headlines = build_short_headlines("Ultra Premium Grass-Fed Whey Isolate")
    assert headlines[0].text == "Try Ultra Premium Grass-Fed Wh"
    for h in headlines:
        assert h.char_count == len(h.text) <= 30
        assert h.within_limit


def test_over_limit_headline_is_flagged_not_rejected():
    h = ShortHeadline(text="x" * 31, char_count=31)
    assert not h.within_limit


def test_competitor_objection(fitpro_inputs):
    plain = generate_creative_package(fitpro_inputs)
    assert "different from what's already out there" in plain.persona.objections[2]

    named = generate_creative_package(fitpro_inputs.model_copy(update={"competitor_info": "BrandX"}))
    assert named.persona.objections[2].startswith("\"I've heard BrandX is just as good")


@pytest.mark.parametrize("stage,button", [
    (FunnelStage.COLD, "Learn More"),
    (FunnelStage.WARM, "Get Offer"),
    (FunnelStage.HOT, "Shop Now"),
])
def test_meta_cta_button_follows_funnel_stage(fitpro_inputs, stage, button):
    pkg = generate_creative_package(fitpro_inputs.model_copy(update={"funnel_stage": stage}))
    assert pkg.meta_ads.cta_button == button


def test_every_group_is_filled(fitpro_package):
    assert len(fitpro_package.hooks) == 6
    assert all("FitPro" in h.hook for h in fitpro_package.hooks)
    assert len(fitpro_package.scripts.youtube_outline.body) == 4
    assert len(fitpro_package.meta_ads.primary_texts) == 3
    assert len(fitpro_package.google_ads.long_headlines) == 5
    assert len(fitpro_package.shot_breakdown.on_screen_text) == 6
    assert len(fitpro_package.cta_variations) == 5


def test_cta_variation_lowercases_phrase():
    inputs = FormInputs(
        product_name="Aura",
        description="Hand-poured candles that smell like a forest after rain.",
        funnel_stage=FunnelStage.WARM,
        tone_mode=ToneMode.LUXURY,
    )
    pkg = generate_creative_package(inputs)
    assert pkg.cta_variations[1] == "Don't wait. Click the link and request exclusive access right now."
    assert pkg.scripts.six_second.startswith("Discover the Aura experience")
    assert "AURA" in pkg.scripts.youtube_outline.body[1]
