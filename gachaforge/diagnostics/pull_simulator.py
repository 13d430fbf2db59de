"""Monte-Carlo pull simulation helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from random import Random
from typing import Dict, Mapping

from ..domain.banners import GachaBanner
from ..domain.items import GachaItem, Rarity
from ..domain.pulls import PullResult, RandomSource, simulate_pull
from ..domain.revenue import calculate_banner_revenue

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SimulationReport:
    banner_id: str
    pulls: int = 0
    rarity_counts: Dict[str, int] = field(
        default_factory=lambda: {rarity.value: 0 for rarity in Rarity}
    )
    item_counts: Dict[str, int] = field(default_factory=dict)
    pity_triggers: int = 0
    duplicates: int = 0
    uniques: int = 0
    final_pity: int = 0
    revenue: float | None = None

    def record(self, result: PullResult) -> None:
        self.pulls += 1
        self.rarity_counts[result.item.rarity.value] += 1
        self.item_counts[result.item.item_id] = self.item_counts.get(result.item.item_id, 0) + 1
        if result.pity_used:
            self.pity_triggers += 1
        if result.is_duplicate:
            self.duplicates += 1
        else:
            self.uniques += 1

    def rarity_rate(self, rarity: Rarity) -> float:
        if not self.pulls:
            return 0.0
        return self.rarity_counts[Rarity(rarity).value] / self.pulls

    @property
    def pity_trigger_rate(self) -> float:
        return self.pity_triggers / self.pulls if self.pulls else 0.0

    def popular_items(self, limit: int = 5) -> list[tuple[str, int]]:
        ranked = sorted(self.item_counts.items(), key=lambda pair: (-pair[1], pair[0]))
        return ranked[:limit]


class PullSimulator:
    """Run repeated single pulls for one player the way a caller would."""

    def __init__(
        self, items: Mapping[str, GachaItem], *, rng: RandomSource | None = None
    ) -> None:
        self._items = items
        self._rng = rng or Random()

    def simulate(
        self,
        banner: GachaBanner,
        *,
        pulls: int = 1000,
        pity: int = 0,
        owned: set[str] | None = None,
        gem_value: float | None = None,
        active_users: int = 1,
    ) -> SimulationReport:
        if pulls < 0:
            raise ValueError("pulls cannot be negative")
        owned = set(owned or ())
        report = SimulationReport(banner_id=banner.banner_id)
        for _ in range(pulls):
            outcome = simulate_pull(banner, self._items, pity, owned, self._rng)
            report.record(outcome.result)
            owned.add(outcome.result.item.item_id)
            pity = outcome.new_pity
        report.final_pity = pity
        if gem_value is not None:
            report.revenue = calculate_banner_revenue(banner, pulls, active_users, gem_value)
        logger.info(
            "Simulated %d pulls on banner %s: %d legendary, %d pity triggers",
            report.pulls,
            banner.banner_id,
            report.rarity_counts[Rarity.LEGENDARY.value],
            report.pity_triggers,
        )
        return report
