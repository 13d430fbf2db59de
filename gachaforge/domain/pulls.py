"""Single pull resolution."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import AbstractSet, Mapping, Protocol, Sequence, TypeVar

from .banners import GachaBanner, RateTable
from .exceptions import EmptyItemPool, NoEligibleItems
from .items import GachaItem, Rarity
from .rates import check_pity, is_hard_pity, resolve_banner_rates

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Rarest first, so the cumulative walk checks legendary before common.
_DRAW_ORDER = tuple(reversed(Rarity))


class RandomSource(Protocol):
    """Injected randomness. ``random.Random`` satisfies it."""

    def random(self) -> float: ...

    def choice(self, seq: Sequence[T]) -> T: ...


@dataclass(frozen=True, slots=True)
class PullResult:
    item: GachaItem
    is_duplicate: bool
    pity_used: bool


@dataclass(frozen=True, slots=True)
class PullOutcome:
    result: PullResult
    new_pity: int


def simulate_pull(
    banner: GachaBanner,
    items: Mapping[str, GachaItem],
    pity: int,
    owned_items: AbstractSet[str],
    rng: RandomSource,
) -> PullOutcome:
    """Resolve one pull on ``banner`` and return the award with the next pity.

    At most two draws are taken from ``rng``: one for the rarity (skipped
    under hard pity) and one for the item within that rarity.
    """
    if not banner.item_pool:
        raise EmptyItemPool(f"Banner {banner.banner_id} has an empty item pool")
    check_pity(pity, banner.pity_counter)

    pity_used = is_hard_pity(pity, banner.pity_counter)
    if pity_used:
        rarity = Rarity.LEGENDARY
        logger.debug("Hard pity on banner %s at pity %s", banner.banner_id, pity)
    else:
        rarity = roll_rarity(resolve_banner_rates(banner, pity), rng)

    candidates = [
        items[item_id]
        for item_id in banner.item_pool
        if item_id in items and items[item_id].rarity == rarity
    ]
    if not candidates:
        raise NoEligibleItems(rarity.value, banner.banner_id)

    weights = [
        banner.rate_up_multiplier if banner.is_featured(item.item_id) else 1.0
        for item in candidates
    ]
    item = candidates[weighted_index(weights, rng)]

    new_pity = 0 if rarity is Rarity.LEGENDARY else pity + 1
    logger.debug(
        "Pull on banner %s: %s (%s), pity %s -> %s",
        banner.banner_id,
        item.item_id,
        rarity.value,
        pity,
        new_pity,
    )
    return PullOutcome(
        result=PullResult(
            item=item,
            is_duplicate=item.item_id in owned_items,
            pity_used=pity_used,
        ),
        new_pity=new_pity,
    )


def roll_rarity(rates: RateTable, rng: RandomSource) -> Rarity:
    roll = rng.random()
    cumulative = 0.0
    fallback = Rarity.COMMON
    for rarity in _DRAW_ORDER:
        rate = rates.get(rarity)
        if rate <= 0:
            continue
        fallback = rarity
        cumulative += rate
        if roll < cumulative:
            return rarity
    # Rounding left the roll past the last bucket.
    return fallback


def weighted_index(weights: Sequence[float], rng: RandomSource) -> int:
    total = sum(weights)
    threshold = rng.random() * total
    cumulative = 0.0
    for idx, weight in enumerate(weights):
        cumulative += weight
        if threshold < cumulative:
            return idx
    return len(weights) - 1
