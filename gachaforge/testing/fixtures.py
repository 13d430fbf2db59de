"""Pytest fixtures for GachaForge."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

import pytest

from ..domain.banners import GachaBanner, create_gacha_banner
from ..domain.items import GachaItem, Rarity
from .factory import ItemFactory, build_item_pool


@dataclass(slots=True)
class PityScenario:
    banner: GachaBanner
    items: dict[str, GachaItem]

    def ids_of(self, rarity: Rarity) -> list[str]:
        return [item_id for item_id, item in self.items.items() if item.rarity is rarity]


def pity_scenario(
    pity_counter: int = 90,
    *,
    sizes: Mapping[Rarity, int] | None = None,
    featured: int = 0,
    rate_up_multiplier: float = 2.0,
    rates: Mapping[str, float] | None = None,
) -> PityScenario:
    """Banner over a generated pool; the first ``featured`` legendaries are featured."""
    items = build_item_pool(sizes, factory=ItemFactory())
    legendaries = [item.item_id for item in items if item.rarity is Rarity.LEGENDARY]
    banner = create_gacha_banner(
        "Test Banner",
        "game-1",
        item_pool=[item.item_id for item in items],
        featured_items=legendaries[:featured],
        duration=14,
        rates=rates,
        rate_up_multiplier=rate_up_multiplier,
        pity_counter=pity_counter,
        banner_id="test-banner",
    )
    return PityScenario(banner=banner, items={item.item_id: item for item in items})


@pytest.fixture()
def default_scenario() -> PityScenario:
    return pity_scenario()
