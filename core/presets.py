# -*- coding: utf-8 -*-
"""
Template registry for the ad creative studio.
Tone and funnel stage pick the fixed phrases that the copy builders splice
into every script, ad and CTA. Labels below are what the UI shows.
"""
from core.data_models import FunnelStage, Platform, ToneMode

PLATFORMS = {
    Platform.YOUTUBE: {"label": "YouTube", "icon": "▶️"},
    Platform.INSTAGRAM: {"label": "Instagram", "icon": "📸"},
    Platform.FACEBOOK: {"label": "Facebook", "icon": "👥"},
    Platform.TIKTOK: {"label": "TikTok", "icon": "🎵"},
    Platform.META_ADS: {"label": "Meta Ads", "icon": "📊"},
    Platform.GOOGLE_VIDEO: {"label": "Google Video", "icon": "🎯"},
}

FUNNEL_STAGES = {
    FunnelStage.COLD: {
        "label": "Cold Audience",
        "short": "Cold",
        "desc": "Brand new, never heard of you",
        "context": "You might not know this yet, but",
        "meta_button": "Learn More",
    },
    FunnelStage.WARM: {
        "label": "Warm Retargeting",
        "short": "Warm",
        "desc": "Engaged but haven't converted",
        "context": "You've seen what we can do — now",
        "meta_button": "Get Offer",
    },
    FunnelStage.HOT: {
        "label": "Hot Conversion",
        "short": "Hot",
        "desc": "Ready to buy, push them over",
        "context": "You're ready to transform your results —",
        "meta_button": "Shop Now",
    },
}

TONE_MODES = {
    ToneMode.AGGRESSIVE: {
        "label": "Aggressive Hard Sell",
        "short": "Aggressive",
        "desc": "High urgency, direct, FOMO-driven",
        "opener": "Stop wasting money on {product_name} that doesn't work.",
        "urgency": "Act NOW — this offer expires soon and spots are limited.",
    },
    ToneMode.SOFT: {
        "label": "Soft Persuasive",
        "short": "Soft Persuasive",
        "desc": "Empathetic, friendly, benefit-led",
        "opener": "What if getting results with {product_name} was actually easy?",
        "urgency": "Join thousands who already made the switch — before it's too late.",
    },
    ToneMode.AUTHORITY: {
        "label": "Authority-Driven",
        "short": "Authority",
        "desc": "Expert positioning, trust-building",
        "opener": "After helping thousands of customers, here's what we know about {product_name}.",
        "urgency": "Trusted by industry leaders. Limited availability for new clients.",
    },
    ToneMode.LUXURY: {
        "label": "Luxury Positioning",
        "short": "Luxury",
        "desc": "Premium, exclusive, aspirational",
        "opener": "Discover the {product_name} experience that redefines excellence.",
        "urgency": "Exclusively available to a select few. Reserve your place today.",
    },
}

# (funnel stage, tone) -> call to action
FUNNEL_CTAS = {
    (FunnelStage.COLD, ToneMode.AGGRESSIVE): "Learn More Now",
    (FunnelStage.COLD, ToneMode.SOFT): "See How It Works",
    (FunnelStage.COLD, ToneMode.AUTHORITY): "Discover the Method",
    (FunnelStage.COLD, ToneMode.LUXURY): "Explore the Experience",
    (FunnelStage.WARM, ToneMode.AGGRESSIVE): "Claim Your Discount",
    (FunnelStage.WARM, ToneMode.SOFT): "Get Started Today",
    (FunnelStage.WARM, ToneMode.AUTHORITY): "Book a Consultation",
    (FunnelStage.WARM, ToneMode.LUXURY): "Request Exclusive Access",
    (FunnelStage.HOT, ToneMode.AGGRESSIVE): "Buy Now — Limited Stock",
    (FunnelStage.HOT, ToneMode.SOFT): "Start Your Journey",
    (FunnelStage.HOT, ToneMode.AUTHORITY): "Get Instant Access",
    (FunnelStage.HOT, ToneMode.LUXURY): "Secure Your Order",
}


def tone_opener(tone: ToneMode, product_name: str) -> str:
    return TONE_MODES[tone]["opener"].format(product_name=product_name)


def tone_urgency(tone: ToneMode) -> str:
    return TONE_MODES[tone]["urgency"]


def funnel_cta(stage: FunnelStage, tone: ToneMode) -> str:
    return FUNNEL_CTAS[(stage, tone)]


def funnel_context(stage: FunnelStage) -> str:
    return FUNNEL_STAGES[stage]["context"]


def meta_cta_button(stage: FunnelStage) -> str:
    return FUNNEL_STAGES[stage]["meta_button"]


def tone_label(tone: str, short: bool = False) -> str:
    """Display label for a stored tone string; unknown values are shown as-is."""
    p = TONE_MODES.get(tone)
    if not p:
        return tone
    return p["short"] if short else p["label"]


def funnel_label(stage: str, short: bool = False) -> str:
    p = FUNNEL_STAGES.get(stage)
    if not p:
        return stage
    return p["short"] if short else p["label"]
