"""GachaForge pull resolution engine public API."""

from .config import BannerDefaults, GachaForgeConfig
from .domain.banners import GachaBanner, PullCost, RateTable, create_gacha_banner
from .domain.items import GachaItem, ItemType, Rarity, create_gacha_item
from .domain.pulls import PullOutcome, PullResult, simulate_pull
from .domain.revenue import calculate_banner_revenue
from .registry import GachaRegistry

__all__ = [
    "BannerDefaults",
    "GachaForgeConfig",
    "GachaBanner",
    "PullCost",
    "RateTable",
    "create_gacha_banner",
    "GachaItem",
    "ItemType",
    "Rarity",
    "create_gacha_item",
    "PullOutcome",
    "PullResult",
    "simulate_pull",
    "calculate_banner_revenue",
    "GachaRegistry",
]
