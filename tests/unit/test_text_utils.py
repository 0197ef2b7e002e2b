from core.text_utils import _safe_name, build_full_text, clip


def test_clip_adds_ellipsis_only_when_cut():
    assert clip("short", 10) == "short"
    assert clip("exactly10!", 10) == "exactly10!"
    assert clip("a bit too long", 5) == "a bit..."
    assert clip("", 5) == ""


def test_safe_name():
    assert _safe_name("FitPro: Protein/Powder!") == "FitPro_ProteinPowder"
    assert len(_safe_name("x" * 200)) == 60


def test_full_text_covers_every_group(fitpro_package, fitpro_inputs):
    text = build_full_text(fitpro_package, fitpro_inputs)

    assert text.startswith("=== UGC CREATIVE PACKAGE: FITPRO ===\nFunnel Stage: cold | Tone: aggressive")
    for heading in (
        "--- AUDIENCE PERSONA ---",
        "--- HOOK VARIATIONS ---",
        "--- 30-SECOND SCRIPT ---",
        "--- 15-SECOND SCRIPT ---",
        "--- 6-SECOND BUMPER ---",
        "--- META ADS COPY ---",
        "--- GOOGLE VIDEO ADS ---",
        "--- SHOT BREAKDOWN ---",
    ):
        assert heading in text
    assert "1. [Pattern Interrupt] Wait" in text
    assert "  • Try FitPro Today (16 chars)" in text
    assert "CTA Button: Learn More" in text
