from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

GOOGLE_SHORT_HEADLINE_LIMIT = 30


class Platform(str, Enum):
    YOUTUBE = "youtube"
    INSTAGRAM = "instagram"
    FACEBOOK = "facebook"
    TIKTOK = "tiktok"
    META_ADS = "meta_ads"
    GOOGLE_VIDEO = "google_video"


class FunnelStage(str, Enum):
    COLD = "cold"
    WARM = "warm"
    HOT = "hot"


class ToneMode(str, Enum):
    AGGRESSIVE = "aggressive"
    SOFT = "soft"
    AUTHORITY = "authority"
    LUXURY = "luxury"


class AssetType(str, Enum):
    SCRIPT = "script"
    COPY = "copy"
    PERSONA = "persona"
    SHOT = "shot"


class _Record(BaseModel):
    # JSON keys stay camelCase so stored packages read the same everywhere
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class FormInputs(_Record):
    product_name: str
    description: str
    platforms: List[Platform] = Field(default_factory=lambda: list(Platform))
    funnel_stage: FunnelStage = FunnelStage.COLD
    tone_mode: ToneMode = ToneMode.AGGRESSIVE
    competitor_info: Optional[str] = None


class AudiencePersona(_Record):
    pain_points: List[str] = []
    desires: List[str] = []
    objections: List[str] = []
    target_segments: List[str] = []


class HookVariation(_Record):
    type: str = ""
    hook: str = ""
    pattern: str = ""


class YoutubeOutline(_Record):
    intro: str = ""
    body: List[str] = []
    cta: str = ""


class Scripts(_Record):
    thirty_second: str = ""
    fifteen_second: str = ""
    six_second: str = ""
    youtube_outline: YoutubeOutline = YoutubeOutline()


class MetaAdsCopy(_Record):
    primary_texts: List[str] = []
    headlines: List[str] = []
    descriptions: List[str] = []
    cta_button: str = ""


class ShortHeadline(_Record):
    text: str
    char_count: int

    @property
    def within_limit(self) -> bool:
        """Google caps short headlines at 30 chars; over-limit is flagged, not rejected."""
        return self.char_count <= GOOGLE_SHORT_HEADLINE_LIMIT


class GoogleAdsCopy(_Record):
    short_headlines: List[ShortHeadline] = []
    long_headlines: List[str] = []
    descriptions: List[str] = []
    five_second_hook: str = ""


class ShotSection(_Record):
    camera_angle: str = ""
    b_roll: str = ""
    expression_cue: str = ""


class ShotBreakdown(_Record):
    hook: ShotSection = ShotSection()
    body: ShotSection = ShotSection()
    cta: ShotSection = ShotSection()
    on_screen_text: List[str] = []
    thumbnail_ideas: List[str] = []


class CreativePackageData(_Record):
    persona: AudiencePersona = AudiencePersona()
    hooks: List[HookVariation] = []
    scripts: Scripts = Scripts()
    meta_ads: MetaAdsCopy = MetaAdsCopy()
    google_ads: GoogleAdsCopy = GoogleAdsCopy()
    shot_breakdown: ShotBreakdown = ShotBreakdown()
    cta_variations: List[str] = []


class Asset(_Record):
    id: str
    name: str
    content: str
    asset_type: AssetType


class CreativePackage(_Record):
    """Saved bundle: originating inputs plus the four asset lists."""
    id: str
    product_name: str
    description: str
    funnel_stage: str
    tone: str
    scripts: List[Asset] = []
    ad_copy: List[Asset] = []
    personas: List[Asset] = []
    shots: List[Asset] = []

    @property
    def asset_count(self) -> int:
        return len(self.scripts) + len(self.ad_copy) + len(self.personas) + len(self.shots)
