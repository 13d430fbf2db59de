"""Domain models and services."""

from .items import COST_MULTIPLIERS, GachaItem, ItemCatalog, ItemType, Rarity, create_gacha_item
from .banners import (
    BannerRegistry,
    GachaBanner,
    PullCost,
    RateTable,
    create_gacha_banner,
    validate_rates,
)
from .rates import PityInfo, is_hard_pity, pity_info, resolve_banner_rates, resolve_rates, soft_pity_start
from .pulls import PullOutcome, PullResult, RandomSource, simulate_pull
from .revenue import calculate_banner_revenue
from .exceptions import (
    EmptyItemPool,
    GachaForgeError,
    InvalidBannerConfig,
    InvalidPityState,
    InvalidRateTable,
    NoEligibleItems,
)

__all__ = [
    "COST_MULTIPLIERS",
    "GachaItem",
    "ItemCatalog",
    "ItemType",
    "Rarity",
    "create_gacha_item",
    "BannerRegistry",
    "GachaBanner",
    "PullCost",
    "RateTable",
    "create_gacha_banner",
    "validate_rates",
    "PityInfo",
    "is_hard_pity",
    "pity_info",
    "resolve_banner_rates",
    "resolve_rates",
    "soft_pity_start",
    "PullOutcome",
    "PullResult",
    "RandomSource",
    "simulate_pull",
    "calculate_banner_revenue",
    "EmptyItemPool",
    "GachaForgeError",
    "InvalidBannerConfig",
    "InvalidPityState",
    "InvalidRateTable",
    "NoEligibleItems",
]
