import pytest

from core.data_models import FunnelStage, ToneMode
from core.presets import (
    FUNNEL_CTAS,
    funnel_context,
    funnel_cta,
    funnel_label,
    meta_cta_button,
    tone_label,
    tone_opener,
    tone_urgency,
)


@pytest.mark.parametrize("stage", list(FunnelStage))
@pytest.mark.parametrize("tone", list(ToneMode))
def test_every_stage_and_tone_resolves(stage, tone):
    assert funnel_cta(stage, tone).strip()
    assert funnel_context(stage).strip()
    assert tone_urgency(tone).strip()
    assert "Glow" in tone_opener(tone, "Glow")
    assert meta_cta_button(stage).strip()


def test_cta_matrix_has_twelve_distinct_phrases():
    assert len(FUNNEL_CTAS) == 12
    assert len(set(FUNNEL_CTAS.values())) == 12


def test_known_phrases():
    assert tone_opener(ToneMode.AGGRESSIVE, "FitPro") == "Stop wasting money on FitPro that doesn't work."
    assert funnel_cta(FunnelStage.COLD, ToneMode.AGGRESSIVE) == "Learn More Now"
    assert funnel_cta(FunnelStage.HOT, ToneMode.LUXURY) == "Secure Your Order"
    assert funnel_context(FunnelStage.COLD) == "You might not know this yet, but"
    assert meta_cta_button(FunnelStage.HOT) == "Shop Now"
    assert meta_cta_button(FunnelStage.WARM) == "Get Offer"


def test_plain_strings_work_as_enum_keys():
    assert funnel_cta("warm", "soft") == "Get Started Today"
    assert tone_urgency("authority") == tone_urgency(ToneMode.AUTHORITY)


def test_unknown_tone_is_a_key_error():
    with pytest.raises(KeyError):
        tone_urgency("sarcastic")
    with pytest.raises(KeyError):
        funnel_cta("lukewarm", ToneMode.SOFT)


def test_labels_fall_back_to_raw_value():
    assert tone_label("soft") == "Soft Persuasive"
    assert funnel_label("hot", short=True) == "Hot"
    assert tone_label("mystery") == "mystery"
