"""Minimal GachaForge example: one banner, a handful of pulls for one player."""

from __future__ import annotations

from random import Random

from gachaforge import (
    GachaRegistry,
    ItemType,
    Rarity,
    calculate_banner_revenue,
    create_gacha_banner,
    create_gacha_item,
    simulate_pull,
)
from gachaforge.validators import validate_banner


def build_registry() -> GachaRegistry:
    registry = GachaRegistry()
    roster = [
        ("Star Knight", Rarity.LEGENDARY, ItemType.CHARACTER),
        ("Moon Archer", Rarity.LEGENDARY, ItemType.CHARACTER),
        ("Ember Staff", Rarity.EPIC, ItemType.WEAPON),
        ("Silver Charm", Rarity.RARE, ItemType.ARTIFACT),
        ("Festival Coat", Rarity.UNCOMMON, ItemType.COSTUME),
        ("Wooden Sword", Rarity.COMMON, ItemType.WEAPON),
    ]
    for name, rarity, item_type in roster:
        registry.item(
            create_gacha_item(name, rarity, item_type, item_id=name.lower().replace(" ", "-"))
        )
    registry.banner(
        create_gacha_banner(
            "Starfall",
            "game-1",
            item_pool=[item.item_id for item in registry.catalog.iter_items()],
            featured_items=["star-knight"],
            duration=14,
            is_limited=True,
            banner_id="starfall",
        )
    )
    return registry


def main() -> None:
    registry = build_registry()
    banner = registry.banners.get_banner("starfall")
    errors = validate_banner(banner, registry.catalog)
    if errors:
        raise SystemExit("\n".join(errors))

    items = registry.items_for(banner.banner_id)
    rng = Random(7)
    owned: set[str] = set()
    pity = 0
    for number in range(1, 11):
        outcome = simulate_pull(banner, items, pity, owned, rng)
        result = outcome.result
        tag = "dup" if result.is_duplicate else "new"
        print(f"#{number:02d} {result.item.name} ({result.item.rarity.value}, {tag})")
        owned.add(result.item.item_id)
        pity = outcome.new_pity

    revenue = calculate_banner_revenue(banner, 40, 10_000, 0.01)
    print(f"Projected revenue: {revenue:,.2f}")


if __name__ == "__main__":
    main()
