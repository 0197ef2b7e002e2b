# -*- coding: utf-8 -*-
from typing import List, Optional

from core.data_models import (
    AudiencePersona,
    CreativePackageData,
    FormInputs,
    FunnelStage,
    GoogleAdsCopy,
    HookVariation,
    MetaAdsCopy,
    Scripts,
    ShortHeadline,
    ShotBreakdown,
    ShotSection,
    YoutubeOutline,
    GOOGLE_SHORT_HEADLINE_LIMIT,
)
from core.presets import funnel_context, funnel_cta, meta_cta_button, tone_opener, tone_urgency
from core.text_utils import clip

# character budgets for description excerpts
THIRTY_SECOND_DESC_BUDGET = 120
FIFTEEN_SECOND_DESC_BUDGET = 80
META_PRIMARY_DESC_BUDGET = 100
META_TESTIMONIAL_DESC_BUDGET = 80
AD_DESCRIPTION_BUDGET = 90


def build_persona(pn: str, competitor_info: Optional[str] = None) -> AudiencePersona:
    if competitor_info:
        third_objection = f'"I\'ve heard {competitor_info} is just as good — why should I switch?"'
    else:
        third_objection = "\"I'm not sure this is different from what's already out there.\""
    return AudiencePersona(
        target_segments=[
            f"Primary buyers actively searching for {pn} solutions",
            "People frustrated with current alternatives in the market",
            "Early adopters and trend-conscious consumers aged 25–44",
        ],
        pain_points=[
            "Wasting time and money on solutions that don't deliver real results",
            "Feeling overwhelmed by too many options with no clear winner",
            "Struggling to see measurable progress despite consistent effort",
            "Lack of trust in brands that overpromise and underdeliver",
        ],
        desires=[
            "A proven, reliable solution that actually works as advertised",
            "Fast, visible results without complicated processes",
            "Confidence and peace of mind knowing they made the right choice",
            "To be seen as smart, ahead of the curve, and successful",
        ],
        objections=[
            "\"I've tried similar products before and they didn't work for me.\"",
            '"It seems too expensive compared to other options."',
            third_objection,
        ],
    )


def build_hooks(pn: str) -> List[HookVariation]:
    return [
        HookVariation(
            type="Pattern Interrupt",
            pattern="Unexpected visual or statement that breaks scroll behavior",
            hook=f"Wait — before you scroll past this, you need to hear what {pn} just did for me.",
        ),
        HookVariation(
            type="Bold Claim",
            pattern="Make a specific, surprising promise upfront",
            hook=f"I went from zero to results in 7 days using {pn} — and I have proof.",
        ),
        HookVariation(
            type="Pain Point Question",
            pattern="Ask a question that mirrors the audience's frustration",
            hook=f"Tired of spending money on things that just don't work? Same. Until I found {pn}.",
        ),
        HookVariation(
            type="FOMO Trigger",
            pattern="Create urgency by showing what others are already experiencing",
            hook=f"Everyone is switching to {pn} right now — and here's exactly why you should too.",
        ),
        HookVariation(
            type="Authority Proof",
            pattern="Lead with credibility and social proof numbers",
            hook=f"Over 10,000 people have already transformed their results with {pn}. Here's their story.",
        ),
        HookVariation(
            type="Curiosity Gap",
            pattern="Tease information without revealing it fully",
            hook=f"There's one thing nobody tells you about {pn} — and it changes everything.",
        ),
    ]


def build_youtube_outline(pn: str, opener: str, urgency: str, cta: str) -> YoutubeOutline:
    intro = f"""
[0:00–0:30] HOOK & PATTERN INTERRUPT
Open with: "{opener}"
Immediately address the viewer's pain: "If you've been struggling with [problem], this video is going to change how you think about it."
Tease the payoff: "By the end of this, you'll know exactly how to get [desired result] using {pn}."
""".strip()

    body = [
        """
[0:30–2:00] THE PROBLEM DEEP DIVE
Walk through the core pain points your audience faces.
Use relatable storytelling: "I used to think [common misconception]..."
Build empathy and establish authority.
Reference competitor shortfalls if applicable.
""".strip(),
        f"""
[2:00–5:00] THE SOLUTION — {pn.upper()}
Introduce {pn} as the definitive answer.
Break down key features as benefits: "What this means for YOU is..."
Show before/after or demonstration.
Stack benefits using the AIDA framework.
""".strip(),
        """
[5:00–7:00] SOCIAL PROOF & RESULTS
Share real testimonials or case studies.
Use specific numbers: "In just X days, customers saw Y result."
Address the top 2 objections directly.
Build trust with transparency.
""".strip(),
        """
[7:00–8:30] OBJECTION HANDLING
"You might be thinking: [objection 1]" — here's the truth.
"And if you're worried about [objection 2]" — here's why that's not an issue.
Reinforce value proposition.
""".strip(),
    ]

    outro = f"""
[8:30–9:00] STRONG CTA
"Here's what I want you to do right now:"
{cta} — link in the description below.
"If you found this helpful, smash that like button and subscribe for more."
{urgency}
""".strip()

    return YoutubeOutline(intro=intro, body=body, cta=outro)


def build_scripts(pn: str, desc: str, opener: str, urgency: str, cta: str, context: str) -> Scripts:
    thirty_second = f"""
[HOOK — 0–3s]
{opener}

[PROBLEM — 3–10s]
{context} most people dealing with this are stuck in the same cycle — trying everything, getting nowhere. Sound familiar?

[SOLUTION — 10–20s]
That's exactly why {pn} exists. {clip(desc, THIRTY_SECOND_DESC_BUDGET)} It's designed to give you real results, fast — without the guesswork.

[SOCIAL PROOF — 20–25s]
Thousands of people just like you have already made the switch. The results speak for themselves.

[CTA — 25–30s]
{urgency} Tap the link below. {cta}.
""".strip()

    fifteen_second = f"""
[HOOK — 0–3s]
{opener}

[SOLUTION — 3–10s]
{pn} is the answer. {clip(desc, FIFTEEN_SECOND_DESC_BUDGET)} Real results, proven by thousands.

[CTA — 10–15s]
{urgency} {cta} — link in bio.
""".strip()

    six_second = f"{opener} {pn} changes everything. {cta} now."

    return Scripts(
        thirty_second=thirty_second,
        fifteen_second=fifteen_second,
        six_second=six_second,
        youtube_outline=build_youtube_outline(pn, opener, urgency, cta),
    )


def build_meta_ads(pn: str, desc: str, opener: str, urgency: str, cta: str, context: str,
                   stage: FunnelStage) -> MetaAdsCopy:
    primary_texts = [
        (
            f"🔥 {opener}\n\n{clip(desc, META_PRIMARY_DESC_BUDGET)}\n\n"
            f"Join thousands of people who've already made the switch to {pn}. "
            f"The results are real, the process is simple, and the time to act is NOW.\n\n👇 {cta}"
        ),
        (
            f"{context} there's a smarter way to get the results you've been chasing.\n\n"
            f"{pn} was built for people who are done settling for \"good enough.\" Here's what makes it different:\n"
            "✅ Proven results backed by real customers\n"
            "✅ Simple to use from day one\n"
            "✅ Designed to deliver fast, visible outcomes\n\n"
            f"{urgency}\n\n👉 {cta}"
        ),
        (
            "\"I wish I'd found this sooner.\" — That's what our customers keep telling us.\n\n"
            f"{pn} has helped thousands of people finally crack the code on [their goal]. "
            f"{clip(desc, META_TESTIMONIAL_DESC_BUDGET)}\n\n"
            f"Don't be the last one to find out. {cta} today."
        ),
    ]
    return MetaAdsCopy(
        primary_texts=primary_texts,
        headlines=[
            f"{pn}: Results That Actually Work",
            "Stop Guessing. Start Getting Results.",
            f"Join 10,000+ Happy {pn} Users",
        ],
        descriptions=[
            f"{clip(desc, AD_DESCRIPTION_BUDGET)} Proven results. Real customers. {cta}.",
            f"Tired of solutions that don't deliver? {pn} is different. See why thousands trust us.",
            f"{urgency} Limited time offer. {cta} and transform your results today.",
        ],
        cta_button=meta_cta_button(stage),
    )


def build_short_headlines(pn: str) -> List[ShortHeadline]:
    texts = [
        f"Try {pn} Today",
        "Real Results Fast",
        "Join Thousands Now",
        f"{pn} — It Works",
        "Limited Offer Inside",
    ]
    out = []
    for t in texts:
        t = t[:GOOGLE_SHORT_HEADLINE_LIMIT]
        out.append(ShortHeadline(text=t, char_count=len(t)))
    return out


def build_google_ads(pn: str, desc: str, opener: str, urgency: str, cta: str) -> GoogleAdsCopy:
    return GoogleAdsCopy(
        short_headlines=build_short_headlines(pn),
        long_headlines=[
            f"Discover Why {pn} Is the #1 Choice for Real Results",
            f"Stop Wasting Time — {pn} Delivers What Others Promise",
            f"Join Over 10,000 People Who Transformed Their Results with {pn}",
            f"The Smarter Way to Get Results: Introducing {pn}",
            f"{pn}: Proven, Fast, and Built for People Who Demand More",
        ],
        descriptions=[
            f"{clip(desc, AD_DESCRIPTION_BUDGET)} Thousands of satisfied customers. {cta} today.",
            f"Tired of products that overpromise? {pn} delivers real, measurable results from day one. {urgency}",
            f"Join the movement. {pn} has helped thousands achieve their goals faster than they thought possible. {cta}.",
            f"Don't miss out — {pn} is the solution you've been searching for. Proven results, simple process, real impact.",
        ],
        five_second_hook=f"{opener} [SKIP THIS and miss out on {pn}.]",
    )


def build_shot_breakdown(pn: str) -> ShotBreakdown:
    return ShotBreakdown(
        hook=ShotSection(
            camera_angle="Close-up selfie angle, slightly below eye level — creates intimacy and urgency. Handheld, slight shake for authenticity.",
            b_roll="Quick cut to the problem being experienced (e.g., frustrated person, messy desk, failed attempt). 1–2 second flash cuts.",
            expression_cue="Surprised or concerned expression. Wide eyes, leaning slightly toward camera. Speak with urgency — like you're sharing a secret.",
        ),
        body=ShotSection(
            camera_angle="Medium shot, waist-up. Natural lighting (window light preferred). Slight movement — walk and talk or gesture naturally.",
            b_roll="Product in use, close-up of key features, before/after visuals, screen recordings of results, happy customer reactions.",
            expression_cue="Confident, enthusiastic, nodding. Use hand gestures to emphasize key points. Smile when mentioning results.",
        ),
        cta=ShotSection(
            camera_angle="Return to close-up selfie angle. Direct eye contact with camera. Point toward screen or gesture to link.",
            b_roll="Product packaging or app screen, order confirmation, happy customer using product.",
            expression_cue="High energy, direct, urgent. Lean in slightly. Speak faster with conviction. End with a genuine smile.",
        ),
        on_screen_text=[
            f'"{pn.upper()}" — bold text, center screen, first 2 seconds',
            '"WAIT 🛑" — pattern interrupt text overlay at hook',
            '"✅ PROVEN RESULTS" — appears during social proof section',
            '"⚡ LIMITED TIME" — flashing text during CTA',
            '"LINK IN BIO 👇" — persistent lower-third during CTA',
            '"10,000+ HAPPY CUSTOMERS" — social proof overlay',
        ],
        thumbnail_ideas=[
            'BEFORE vs AFTER split image with bold text: "This Changed Everything"',
            f'Close-up shocked face with text overlay: "{pn.upper()} — WHY DIDN\'T I KNOW THIS SOONER?"',
            f'Product hero shot with bold text: "The #1 {pn} Secret Nobody Talks About"',
            'Results screenshot/graphic with text: "10,000 People Can\'t Be Wrong"',
        ],
    )


def build_cta_variations(cta: str) -> List[str]:
    return [
        f"{cta} — tap the link below before this offer disappears.",
        f"Don't wait. Click the link and {cta.lower()} right now.",
        f"Your results are one click away. {cta} today.",
        f"Join thousands who already made the smart choice. {cta}.",
        f"The only thing standing between you and results is one click. {cta}.",
    ]


def generate_creative_package(inputs: FormInputs) -> CreativePackageData:
    """
    Assemble the full creative package for one set of form inputs.
    Pure function: the same inputs always give the same package.
    """
    pn = inputs.product_name
    desc = inputs.description

    opener = tone_opener(inputs.tone_mode, pn)
    urgency = tone_urgency(inputs.tone_mode)
    cta = funnel_cta(inputs.funnel_stage, inputs.tone_mode)
    context = funnel_context(inputs.funnel_stage)

    return CreativePackageData(
        persona=build_persona(pn, inputs.competitor_info),
        hooks=build_hooks(pn),
        scripts=build_scripts(pn, desc, opener, urgency, cta, context),
        meta_ads=build_meta_ads(pn, desc, opener, urgency, cta, context, inputs.funnel_stage),
        google_ads=build_google_ads(pn, desc, opener, urgency, cta),
        shot_breakdown=build_shot_breakdown(pn),
        cta_variations=build_cta_variations(cta),
    )
