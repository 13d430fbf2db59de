"""Validation utilities for GachaForge banners."""

from __future__ import annotations

from .domain.banners import GachaBanner, tuning_errors, validate_rates
from .domain.items import ItemCatalog, Rarity
from .registry import GachaRegistry


def validate_banner(
    banner: GachaBanner, catalog: ItemCatalog, *, tolerance: float = 0.001
) -> list[str]:
    """Return list of configuration errors that would make pulls on ``banner`` fail."""
    errors: list[str] = [
        f"Banner '{banner.banner_id}': {error}"
        for error in validate_rates(banner.rates, tolerance=tolerance)
    ]

    if banner.pity_counter < 1:
        errors.append(f"Banner '{banner.banner_id}' has non-positive pity_counter '{banner.pity_counter}'.")
    errors.extend(
        f"Banner '{banner.banner_id}': {error}"
        for error in tuning_errors(
            banner.rate_up_multiplier, banner.soft_pity_start_ratio, banner.soft_pity_peak
        )
    )
    if banner.end_date < banner.start_date:
        errors.append(f"Banner '{banner.banner_id}' ends before it starts.")

    if not banner.item_pool:
        errors.append(f"Banner '{banner.banner_id}' does not contain any items.")
        return errors

    rarities: set[Rarity] = set()
    for item_id in banner.item_pool:
        if item_id not in catalog:
            errors.append(f"Banner '{banner.banner_id}' references unknown item '{item_id}'.")
            continue
        rarities.add(catalog.get_item(item_id).rarity)

    for item_id in banner.featured_items:
        if item_id not in banner.item_pool:
            errors.append(f"Banner '{banner.banner_id}' features item '{item_id}' outside its pool.")

    for rarity in Rarity:
        if banner.rates.get(rarity) > 0 and rarity not in rarities:
            errors.append(
                f"Banner '{banner.banner_id}' has a '{rarity.value}' rate but no '{rarity.value}' items."
            )

    if Rarity.LEGENDARY not in rarities and banner.rates.legendary <= 0:
        errors.append(
            f"Banner '{banner.banner_id}' cannot honour hard pity without a legendary item."
        )

    return errors


def validate_registry(registry: GachaRegistry) -> list[str]:
    errors: list[str] = []
    for banner in registry.banners.iter_banners():
        errors.extend(validate_banner(banner, registry.catalog))
    return errors


__all__ = ["validate_banner", "validate_registry"]
