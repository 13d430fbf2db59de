"""Load items and banners from JSON definitions."""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Sequence

from ..config import BannerDefaults
from ..domain.banners import GachaBanner, PullCost, create_gacha_banner
from ..domain.items import GachaItem, ItemType, Rarity, create_gacha_item
from ..registry import GachaRegistry

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CatalogDefinition:
    items: Sequence[GachaItem]
    banners: Sequence[GachaBanner]


def load_catalog_from_json(
    registry: GachaRegistry, path: str | Path, *, defaults: BannerDefaults | None = None
) -> CatalogDefinition:
    """Load items/banners from a JSON file and register them."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    definition = parse_catalog_dict(data, defaults=defaults)
    for item in definition.items:
        registry.item(item)
    for banner in definition.banners:
        registry.banner(banner)
    logger.info(
        "Loaded %d items and %d banners from %s",
        len(definition.items),
        len(definition.banners),
        path,
    )
    return definition


def parse_catalog_dict(
    data: dict[str, Any], *, defaults: BannerDefaults | None = None
) -> CatalogDefinition:
    """Parse a JSON dict (already decoded) into domain objects."""
    errors = validate_catalog_dict(data)
    if errors:
        raise ValueError(_format_errors("Catalog validation failed", errors))
    items = tuple(parse_item(entry) for entry in data.get("items", []))
    banners = tuple(parse_banner(entry, defaults=defaults) for entry in data.get("banners", []))
    return CatalogDefinition(items=items, banners=banners)


def parse_item(entry: dict[str, Any]) -> GachaItem:
    return create_gacha_item(
        entry["name"],
        Rarity(entry["rarity"]),
        ItemType(entry.get("type", ItemType.CHARACTER.value)),
        description=entry.get("description", ""),
        art_cost=entry.get("artCost"),
        design_cost=entry.get("designCost"),
        item_id=entry["id"],
    )


def parse_banner(entry: dict[str, Any], *, defaults: BannerDefaults | None = None) -> GachaBanner:
    pull_cost_data = entry.get("pullCost")
    pull_cost = None
    if pull_cost_data is not None:
        base = PullCost()
        pull_cost = PullCost(
            gems=int(pull_cost_data.get("gems", base.gems)),
            tickets=int(pull_cost_data.get("tickets", base.tickets)),
        )
    rates = entry.get("rates")
    return create_gacha_banner(
        entry.get("name", entry["id"]),
        entry.get("gameId", ""),
        item_pool=tuple(entry["itemPool"]),
        featured_items=tuple(entry.get("featuredItems", ())),
        start_date=int(entry.get("startDate", 0)),
        duration=int(entry["duration"]),
        rates={str(k): float(v) for k, v in rates.items()} if rates else None,
        rate_up_multiplier=_optional_float(entry.get("rateUpMultiplier")),
        pull_cost=pull_cost,
        pity_counter=entry.get("pityCounter"),
        is_limited=bool(entry.get("isLimited", False)),
        soft_pity_start_ratio=_optional_float(entry.get("softPityStartRatio")),
        soft_pity_peak=_optional_float(entry.get("softPityPeak")),
        banner_id=entry["id"],
        defaults=defaults,
    )


def validate_catalog_file(path: str | Path) -> list[str]:
    """Validate catalog JSON file and return a list of errors."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return validate_catalog_dict(data)


def validate_catalog_dict(data: dict[str, Any]) -> list[str]:
    errors: list[str] = []

    items_raw = data.get("items")
    item_ids: set[str] = set()
    if not isinstance(items_raw, list) or not items_raw:
        errors.append("Catalog must contain non-empty 'items' array.")
    else:
        for idx, entry in enumerate(items_raw, start=1):
            if not isinstance(entry, dict):
                errors.append(f"Item #{idx} must be an object.")
                continue
            item_id = entry.get("id")
            if not isinstance(item_id, str) or not item_id.strip():
                errors.append(f"Item #{idx} must define non-empty 'id'.")
                continue
            if item_id in item_ids:
                errors.append(f"Item id '{item_id}' defined multiple times.")
            item_ids.add(item_id)

            name = entry.get("name")
            if not isinstance(name, str) or not name.strip():
                errors.append(f"Item '{item_id}' must define non-empty 'name'.")

            rarity_value = entry.get("rarity")
            try:
                Rarity(rarity_value)
            except ValueError:
                errors.append(f"Item '{item_id}' has invalid rarity '{rarity_value}'.")

            type_value = entry.get("type", ItemType.CHARACTER.value)
            try:
                ItemType(type_value)
            except ValueError:
                errors.append(f"Item '{item_id}' has invalid type '{type_value}'.")

            for cost_field in ("artCost", "designCost"):
                cost = entry.get(cost_field)
                if cost is not None and (not isinstance(cost, int) or cost < 0):
                    errors.append(f"Item '{item_id}' has invalid '{cost_field}' value '{cost}'.")

    banners_raw = data.get("banners")
    if not isinstance(banners_raw, list) or not banners_raw:
        errors.append("Catalog must contain non-empty 'banners' array.")
        return errors

    banner_ids: set[str] = set()
    for idx, entry in enumerate(banners_raw, start=1):
        if not isinstance(entry, dict):
            errors.append(f"Banner #{idx} must be an object.")
            continue
        banner_id = entry.get("id")
        if not isinstance(banner_id, str) or not banner_id.strip():
            errors.append(f"Banner #{idx} must define non-empty 'id'.")
            continue
        if banner_id in banner_ids:
            errors.append(f"Banner id '{banner_id}' defined multiple times.")
        banner_ids.add(banner_id)

        pool = entry.get("itemPool")
        if not isinstance(pool, list) or not pool:
            errors.append(f"Banner '{banner_id}' must define non-empty 'itemPool' array.")
            pool = []
        for item_id in pool:
            if item_ids and item_id not in item_ids:
                errors.append(f"Banner '{banner_id}' references unknown item '{item_id}'.")

        featured = entry.get("featuredItems", [])
        if not isinstance(featured, list):
            errors.append(f"Banner '{banner_id}' has invalid 'featuredItems' definition.")
        else:
            for item_id in featured:
                if item_id not in pool:
                    errors.append(f"Banner '{banner_id}' features '{item_id}' outside its itemPool.")

        duration = entry.get("duration")
        if not isinstance(duration, int) or duration < 0:
            errors.append(f"Banner '{banner_id}' has invalid 'duration' value '{duration}'.")

        pity_counter = entry.get("pityCounter")
        if pity_counter is not None and (not isinstance(pity_counter, int) or pity_counter < 1):
            errors.append(f"Banner '{banner_id}' has invalid 'pityCounter' value '{pity_counter}'.")

        multiplier = entry.get("rateUpMultiplier")
        if multiplier is not None and not (_is_finite_number(multiplier) and multiplier > 0):
            errors.append(f"Banner '{banner_id}' has invalid 'rateUpMultiplier' value '{multiplier}'.")

        start_ratio = entry.get("softPityStartRatio")
        if start_ratio is not None and not (_is_finite_number(start_ratio) and 0 < start_ratio <= 1):
            errors.append(
                f"Banner '{banner_id}' softPityStartRatio must be within (0, 1], got '{start_ratio}'."
            )

        peak = entry.get("softPityPeak")
        if peak is not None and not (_is_finite_number(peak) and 0 <= peak <= 1):
            errors.append(f"Banner '{banner_id}' softPityPeak must be within [0, 1], got '{peak}'.")

        pull_cost = entry.get("pullCost")
        if pull_cost is not None:
            if not isinstance(pull_cost, dict):
                errors.append(f"Banner '{banner_id}' pullCost must be an object.")
            else:
                for currency, amount in pull_cost.items():
                    if currency not in ("gems", "tickets"):
                        errors.append(f"Banner '{banner_id}' pullCost has unknown currency '{currency}'.")
                    if not isinstance(amount, int) or amount < 0:
                        errors.append(
                            f"Banner '{banner_id}' pullCost '{currency}' must be non-negative integer."
                        )

        rates = entry.get("rates")
        if rates is not None:
            if not isinstance(rates, dict) or not rates:
                errors.append(f"Banner '{banner_id}' has invalid 'rates' definition.")
            else:
                for rarity_code, rate in rates.items():
                    try:
                        Rarity(rarity_code)
                    except ValueError:
                        errors.append(f"Banner '{banner_id}' rates contain invalid rarity '{rarity_code}'.")
                    if not (_is_finite_number(rate) and 0 <= rate <= 1):
                        errors.append(
                            f"Banner '{banner_id}' rate for '{rarity_code}' must be within [0, 1]."
                        )

    return errors


def _is_finite_number(value: Any) -> bool:
    # json.loads accepts NaN and Infinity literals.
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def _optional_float(value: Any) -> float | None:
    return float(value) if value is not None else None


def _format_errors(prefix: str, errors: Iterable[str]) -> str:
    formatted = "\n".join(f"- {err}" for err in errors)
    return f"{prefix}:\n{formatted}"
