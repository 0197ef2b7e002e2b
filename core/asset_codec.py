# -*- coding: utf-8 -*-
"""
Flattens a generated package into named assets for the store, and back.

Assets are looked up by display name, so the names below are the storage
contract. Structured groups are JSON (camelCase keys); plain scripts are raw text.
"""
import logging
import time
import uuid
from typing import List, NamedTuple, Optional, Sequence

from pydantic import BaseModel, TypeAdapter, ValidationError

from core.data_models import (
    Asset,
    AssetType,
    AudiencePersona,
    CreativePackageData,
    FormInputs,
    FunnelStage,
    GoogleAdsCopy,
    HookVariation,
    MetaAdsCopy,
    Platform,
    Scripts,
    ShotBreakdown,
    ToneMode,
    YoutubeOutline,
)

logger = logging.getLogger(__name__)

SCRIPT_30S = "30-Second Script"
SCRIPT_15S = "15-Second Script"
SCRIPT_6S = "6-Second Bumper"
YOUTUBE_OUTLINE = "YouTube Outline"
HOOK_VARIATIONS = "Hook Variations"
CTA_VARIATIONS = "CTA Variations"
META_ADS = "Meta Ads Copy"
GOOGLE_ADS = "Google Video Ads Copy"
AUDIENCE_PERSONA = "Audience Persona"
SHOT_BREAKDOWN = "Shot Breakdown"

_HOOKS = TypeAdapter(List[HookVariation])
_STRINGS = TypeAdapter(List[str])


class PackageAssets(NamedTuple):
    script_assets: List[Asset]
    copy_assets: List[Asset]
    persona_assets: List[Asset]
    shot_assets: List[Asset]


class LoadedPackage(NamedTuple):
    data: CreativePackageData
    inputs: FormInputs


def new_package_id() -> str:
    return f"pkg_{int(time.time() * 1000)}_{uuid.uuid4().hex[:5]}"


def _json(model: BaseModel) -> str:
    return model.model_dump_json(by_alias=True)


def _asset(package_id: str, suffix: str, name: str, content: str, asset_type: AssetType) -> Asset:
    return Asset(id=f"{package_id}_{suffix}", name=name, content=content, asset_type=asset_type)


def serialize_package_to_assets(data: CreativePackageData, inputs: FormInputs, package_id: str) -> PackageAssets:
    """
    Split a package into the four asset lists the store keeps.
    `inputs` travel separately (name/description/stage/tone) and are not encoded here.
    """
    script = AssetType.SCRIPT
    script_assets = [
        _asset(package_id, "script_30s", SCRIPT_30S, data.scripts.thirty_second, script),
        _asset(package_id, "script_15s", SCRIPT_15S, data.scripts.fifteen_second, script),
        _asset(package_id, "script_6s", SCRIPT_6S, data.scripts.six_second, script),
        _asset(package_id, "script_yt", YOUTUBE_OUTLINE, _json(data.scripts.youtube_outline), script),
        _asset(package_id, "hooks", HOOK_VARIATIONS, _HOOKS.dump_json(data.hooks, by_alias=True).decode(), script),
        _asset(package_id, "ctas", CTA_VARIATIONS, _STRINGS.dump_json(data.cta_variations).decode(), script),
    ]
    copy_assets = [
        _asset(package_id, "meta", META_ADS, _json(data.meta_ads), AssetType.COPY),
        _asset(package_id, "google", GOOGLE_ADS, _json(data.google_ads), AssetType.COPY),
    ]
    persona_assets = [
        _asset(package_id, "persona", AUDIENCE_PERSONA, _json(data.persona), AssetType.PERSONA),
    ]
    shot_assets = [
        _asset(package_id, "shots", SHOT_BREAKDOWN, _json(data.shot_breakdown), AssetType.SHOT),
    ]
    return PackageAssets(script_assets, copy_assets, persona_assets, shot_assets)


def _content(assets: Sequence[Asset], name: str, default: str) -> str:
    for a in assets:
        if a.name == name:
            return a.content
    return default


def deserialize_package_from_assets(
    script_assets: Sequence[Asset],
    copy_assets: Sequence[Asset],
    persona_assets: Sequence[Asset],
    shot_assets: Sequence[Asset],
    product_name: str,
    description: str,
    funnel_stage: str,
    tone: str,
) -> Optional[LoadedPackage]:
    """
    Rebuild a package from stored assets.

    Missing assets fall back to empty text/structures. Any structured asset
    that does not decode makes the whole load fail and returns None.
    Platform choice is not stored, so the returned inputs list every platform.
    """
    try:
        scripts = Scripts(
            thirty_second=_content(script_assets, SCRIPT_30S, ""),
            fifteen_second=_content(script_assets, SCRIPT_15S, ""),
            six_second=_content(script_assets, SCRIPT_6S, ""),
            youtube_outline=YoutubeOutline.model_validate_json(_content(script_assets, YOUTUBE_OUTLINE, "{}")),
        )
        data = CreativePackageData(
            persona=AudiencePersona.model_validate_json(_content(persona_assets, AUDIENCE_PERSONA, "{}")),
            hooks=_HOOKS.validate_json(_content(script_assets, HOOK_VARIATIONS, "[]")),
            scripts=scripts,
            meta_ads=MetaAdsCopy.model_validate_json(_content(copy_assets, META_ADS, "{}")),
            google_ads=GoogleAdsCopy.model_validate_json(_content(copy_assets, GOOGLE_ADS, "{}")),
            shot_breakdown=ShotBreakdown.model_validate_json(_content(shot_assets, SHOT_BREAKDOWN, "{}")),
            cta_variations=_STRINGS.validate_json(_content(script_assets, CTA_VARIATIONS, "[]")),
        )
        inputs = FormInputs(
            product_name=product_name,
            description=description,
            platforms=list(Platform),
            funnel_stage=FunnelStage(funnel_stage),
            tone_mode=ToneMode(tone),
        )
    except (ValidationError, ValueError) as e:
        logger.warning("Could not decode creative package %r: %s", product_name, e)
        return None
    return LoadedPackage(data=data, inputs=inputs)
