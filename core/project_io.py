# -*- coding: utf-8 -*-
"""
JSON-file store for saved creative packages and their assets.

Layout under the data dir:
    creative_packages/<package id>.json
    assets/<asset id>.json

Packages are create-only: there is no update or delete.
"""
import io
import json
import logging
import re
import zipfile
from pathlib import Path
from typing import List, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel, ValidationError

from core.asset_codec import SCRIPT_15S, SCRIPT_30S, SCRIPT_6S
from core.data_models import Asset, AssetType, CreativePackage, CreativePackageData, FormInputs
from core.env_loader import get_data_dir
from core.text_utils import _safe_name, build_full_text

logger = logging.getLogger(__name__)

PACKAGES_SUBDIR = "creative_packages"
ASSETS_SUBDIR = "assets"

_ID_RE = re.compile(r"^[\w\-]+$")

M = TypeVar("M", bound=BaseModel)


class StorageError(RuntimeError):
    pass


class PackageNotFoundError(StorageError):
    pass


class PackageExistsError(StorageError):
    pass


class AssetNotFoundError(StorageError):
    pass


def _subdir(name: str, data_dir: Optional[Path]) -> Path:
    d = Path(data_dir) if data_dir else get_data_dir()
    d = d / name
    try:
        d.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StorageError(f"Cannot create store folder {d}: {e}") from e
    return d


def _record_path(folder: Path, record_id: str) -> Path:
    if not record_id or not _ID_RE.match(record_id):
        raise StorageError(f"Invalid id {record_id!r}: use letters, digits, '_' or '-'")
    return folder / f"{record_id}.json"


def _write(path: Path, model: BaseModel):
    try:
        with path.open("w", encoding="utf-8") as fp:
            fp.write(model.model_dump_json(by_alias=True, indent=2))
    except OSError as e:
        raise StorageError(f"Cannot write {path}: {e}") from e


def _read(path: Path, cls: Type[M]) -> M:
    try:
        with path.open("r", encoding="utf-8") as fp:
            return cls.model_validate_json(fp.read())
    except OSError as e:
        raise StorageError(f"Cannot read {path}: {e}") from e
    except ValidationError as e:
        raise StorageError(f"Corrupted record {path.name}: {e.error_count()} error(s)") from e
    except UnicodeDecodeError as e:
        raise StorageError(f"Corrupted record {path.name}: not UTF-8 text") from e


def _read_all(folder: Path, cls: Type[M]) -> List[M]:
    out = []
    for f in sorted(folder.glob("*.json")):
        try:
            out.append(_read(f, cls))
        except StorageError as e:
            # one bad file must not hide the rest of the history
            logger.error("Skipping %s: %s", f.name, e)
    return out


# ===================== Creative packages =====================

def save_creative_package(
    id: str,
    product_name: str,
    description: str,
    funnel_stage: str,
    tone: str,
    script_assets: Sequence[Asset],
    copy_assets: Sequence[Asset],
    persona_assets: Sequence[Asset],
    shot_assets: Sequence[Asset],
    data_dir: Optional[Path] = None,
) -> CreativePackage:
    f = _record_path(_subdir(PACKAGES_SUBDIR, data_dir), id)
    if f.exists():
        raise PackageExistsError(f"Creative package {id} already exists")

    pkg = CreativePackage(
        id=id,
        product_name=product_name,
        description=description,
        funnel_stage=funnel_stage,
        tone=tone,
        scripts=list(script_assets),
        ad_copy=list(copy_assets),
        personas=list(persona_assets),
        shots=list(shot_assets),
    )
    # assets first: a package file on disk means its assets are indexed too
    for a in [*pkg.scripts, *pkg.ad_copy, *pkg.personas, *pkg.shots]:
        _write(_record_path(_subdir(ASSETS_SUBDIR, data_dir), a.id), a)
    _write(f, pkg)
    logger.info("Saved creative package %s (%s, %d assets)", id, product_name, pkg.asset_count)
    return pkg


def get_creative_package(id: str, data_dir: Optional[Path] = None) -> CreativePackage:
    f = _record_path(_subdir(PACKAGES_SUBDIR, data_dir), id)
    if not f.exists():
        logger.debug("Creative package %s not found", id)
        raise PackageNotFoundError(f"Creative package {id} not found")
    return _read(f, CreativePackage)


def get_all_creative_packages(data_dir: Optional[Path] = None) -> List[CreativePackage]:
    """All saved packages ordered by id, which is creation order for generated ids."""
    return _read_all(_subdir(PACKAGES_SUBDIR, data_dir), CreativePackage)


# ===================== Assets =====================

def save_asset(id: str, name: str, content: str, asset_type: str, data_dir: Optional[Path] = None) -> Asset:
    try:
        asset = Asset(id=id, name=name, content=content, asset_type=AssetType(asset_type))
    except ValueError as e:
        raise StorageError(f"Invalid asset {id}: {e}") from e
    _write(_record_path(_subdir(ASSETS_SUBDIR, data_dir), id), asset)
    logger.info("Saved asset %s (%s)", id, asset_type)
    return asset


def get_asset(id: str, data_dir: Optional[Path] = None) -> Asset:
    f = _record_path(_subdir(ASSETS_SUBDIR, data_dir), id)
    if not f.exists():
        logger.debug("Asset %s not found", id)
        raise AssetNotFoundError(f"Asset {id} not found")
    return _read(f, Asset)


def get_all_assets(data_dir: Optional[Path] = None) -> List[Asset]:
    return _read_all(_subdir(ASSETS_SUBDIR, data_dir), Asset)


def filter_assets_by_type(asset_type: str, data_dir: Optional[Path] = None) -> List[Asset]:
    return [a for a in get_all_assets(data_dir) if a.asset_type == asset_type]


# ===================== Export =====================

def export_zip(data: CreativePackageData, inputs: FormInputs) -> bytes:
    """ZIP with the package JSON, one text file per script and the full plain-text copy."""
    mem = io.BytesIO()
    with zipfile.ZipFile(mem, "w", zipfile.ZIP_DEFLATED) as z:
        payload = {
            "inputs": inputs.model_dump(mode="json", by_alias=True),
            "package": data.model_dump(mode="json", by_alias=True),
        }
        z.writestr("package.json", json.dumps(payload, ensure_ascii=False, indent=2))

        for name, text in (
            (SCRIPT_30S, data.scripts.thirty_second),
            (SCRIPT_15S, data.scripts.fifteen_second),
            (SCRIPT_6S, data.scripts.six_second),
        ):
            z.writestr(f"scripts/{_safe_name(name)}.txt", text or "")

        z.writestr("creative_package.txt", build_full_text(data, inputs))

    mem.seek(0)
    return mem.read()
