import math

from gachaforge.domain.banners import GachaBanner, RateTable, create_gacha_banner
from gachaforge.domain.items import ItemType, Rarity, create_gacha_item
from gachaforge.registry import GachaRegistry
from gachaforge.validators import validate_banner, validate_registry


def _registry_with_items(*rarities: Rarity) -> GachaRegistry:
    registry = GachaRegistry()
    for idx, rarity in enumerate(rarities):
        registry.item(
            create_gacha_item(f"{rarity.value} {idx}", rarity, ItemType.WEAPON, item_id=f"{rarity.value}-{idx}")
        )
    return registry


def test_validate_banner_success():
    registry = _registry_with_items(*Rarity)
    banner = create_gacha_banner(
        "Full",
        "game-1",
        item_pool=[item.item_id for item in registry.catalog.iter_items()],
        featured_items=["legendary-4"],
        duration=7,
        banner_id="full",
    )
    registry.banner(banner)
    assert validate_banner(banner, registry.catalog) == []
    assert validate_registry(registry) == []
    assert set(registry.items_for("full")) == {item.item_id for item in registry.catalog.iter_items()}


def test_validate_banner_detects_missing_rarity_and_unknown_item():
    registry = _registry_with_items(Rarity.COMMON)
    banner = create_gacha_banner(
        "Sparse", "game-1", item_pool=["common-0", "ghost"], duration=7, banner_id="sparse"
    )
    errors = validate_banner(banner, registry.catalog)
    assert any("unknown item 'ghost'" in err for err in errors)
    assert any("no 'legendary' items" in err for err in errors)
    assert any("no 'epic' items" in err for err in errors)


def test_validate_banner_detects_empty_pool():
    registry = GachaRegistry()
    banner = create_gacha_banner("Empty", "game-1", item_pool=[], duration=1, banner_id="empty")
    errors = validate_banner(banner, registry.catalog)
    assert errors == ["Banner 'empty' does not contain any items."]


def test_validate_banner_detects_bad_rates_built_by_hand():
    registry = _registry_with_items(*Rarity)
    banner = GachaBanner(
        banner_id="manual",
        name="Manual",
        game_id="game-1",
        featured_items=("outsider",),
        item_pool=tuple(item.item_id for item in registry.catalog.iter_items()),
        start_date=0,
        end_date=10,
        rates=RateTable(common=0.5, uncommon=0.1, rare=0.1, epic=0.1, legendary=0.1),
        rate_up_multiplier=0.0,
    )
    errors = validate_banner(banner, registry.catalog)
    assert any("sum to 1.0" in err for err in errors)
    assert any("rate_up_multiplier" in err for err in errors)
    assert any("outside its pool" in err for err in errors)


def test_validate_banner_detects_bad_tuning_built_by_hand():
    registry = _registry_with_items(*Rarity)
    banner = GachaBanner(
        banner_id="tuned",
        name="Tuned",
        game_id="game-1",
        featured_items=(),
        item_pool=tuple(item.item_id for item in registry.catalog.iter_items()),
        start_date=0,
        end_date=10,
        rates=RateTable(common=math.nan, uncommon=0.2, rare=0.07, epic=0.02, legendary=0.01),
        rate_up_multiplier=math.nan,
        soft_pity_start_ratio=-1.0,
        soft_pity_peak=2.0,
    )
    errors = validate_banner(banner, registry.catalog)
    assert any("Rate for 'common'" in err for err in errors)
    assert any("sum to 1.0" in err for err in errors)
    assert any("rate_up_multiplier" in err for err in errors)
    assert any("soft_pity_start_ratio" in err for err in errors)
    assert any("soft_pity_peak" in err for err in errors)
