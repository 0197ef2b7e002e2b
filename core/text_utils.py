import re
from typing import List

from core.data_models import CreativePackageData, FormInputs

ELLIPSIS = "..."


def clip(text: str, limit: int) -> str:
    """First `limit` chars of text, plus an ellipsis when anything was cut."""
    if len(text) > limit:
        return text[:limit] + ELLIPSIS
    return text


def _safe_name(s: str) -> str:
    s = re.sub(r"[^\w\- ]+", "", s, flags=re.U)
    return s.strip().replace(" ", "_")[:60]


def _bullets(lines: List[str], items: List[str]):
    for it in items:
        lines.append(f"  • {it}")


def build_full_text(data: CreativePackageData, inputs: FormInputs) -> str:
    """Plain-text rendering of the whole package, used for "copy all" and exports."""
    lines: List[str] = []
    lines.append(f"=== UGC CREATIVE PACKAGE: {inputs.product_name.upper()} ===")
    lines.append(f"Funnel Stage: {inputs.funnel_stage.value} | Tone: {inputs.tone_mode.value}")
    lines.append("")

    lines.append("--- AUDIENCE PERSONA ---")
    lines.append("Pain Points:")
    _bullets(lines, data.persona.pain_points)
    lines.append("Desires:")
    _bullets(lines, data.persona.desires)
    lines.append("Objections:")
    _bullets(lines, data.persona.objections)
    lines.append("")

    lines.append("--- HOOK VARIATIONS ---")
    for i, h in enumerate(data.hooks, 1):
        lines.append(f"{i}. [{h.type}] {h.hook}")
    lines.append("")

    for title, body in (
        ("30-SECOND SCRIPT", data.scripts.thirty_second),
        ("15-SECOND SCRIPT", data.scripts.fifteen_second),
        ("6-SECOND BUMPER", data.scripts.six_second),
    ):
        lines.append(f"--- {title} ---")
        lines.append(body)
        lines.append("")

    meta = data.meta_ads
    lines.append("--- META ADS COPY ---")
    for i, t in enumerate(meta.primary_texts, 1):
        lines.append(f"Primary Text {i}:\n{t}\n")
    lines.append("Headlines:")
    _bullets(lines, meta.headlines)
    lines.append("Descriptions:")
    _bullets(lines, meta.descriptions)
    lines.append(f"CTA Button: {meta.cta_button}")
    lines.append("")

    google = data.google_ads
    lines.append("--- GOOGLE VIDEO ADS ---")
    lines.append("Short Headlines:")
    _bullets(lines, [f"{h.text} ({h.char_count} chars)" for h in google.short_headlines])
    lines.append("Long Headlines:")
    _bullets(lines, google.long_headlines)
    lines.append("Descriptions:")
    _bullets(lines, google.descriptions)
    lines.append(f"5-Second Hook: {google.five_second_hook}")
    lines.append("")

    shots = data.shot_breakdown
    lines.append("--- SHOT BREAKDOWN ---")
    for label, sec in (("HOOK SHOT", shots.hook), ("BODY SHOT", shots.body), ("CTA SHOT", shots.cta)):
        lines.append(f"{label}:")
        lines.append(f"  Camera: {sec.camera_angle}")
        lines.append(f"  B-Roll: {sec.b_roll}")
        lines.append(f"  Expression: {sec.expression_cue}")
    lines.append("")
    lines.append("On-Screen Text:")
    _bullets(lines, shots.on_screen_text)
    lines.append("Thumbnail Ideas:")
    _bullets(lines, shots.thumbnail_ideas)

    return "\n".join(lines)
