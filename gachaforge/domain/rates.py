"""Effective rarity distribution for a single pull.

Three regimes depend on the pity counter (pulls since the last legendary):

* ``pity < soft_pity_start``: the banner's base rates, untouched.
* ``soft_pity_start <= pity < pity_counter - 1``: the legendary rate is
  raised linearly from its base value at ``soft_pity_start`` up to the
  banner's ``soft_pity_peak`` at ``pity_counter - 2``. The added mass is
  taken from the other rarities in proportion to their base rates.
* ``pity == pity_counter - 1``: hard pity, legendary with probability 1.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .banners import GachaBanner, RateTable
from .exceptions import InvalidPityState
from .items import Rarity


def soft_pity_start(pity_counter: int, ratio: float = 0.75) -> int:
    return math.floor(pity_counter * ratio)


def is_hard_pity(pity: int, pity_counter: int) -> bool:
    return pity == pity_counter - 1


def check_pity(pity: int, pity_counter: int) -> None:
    if pity < 0 or pity >= pity_counter:
        raise InvalidPityState(pity, pity_counter)


def resolve_rates(
    rates: RateTable,
    pity: int,
    pity_counter: int,
    *,
    start_ratio: float = 0.75,
    peak: float = 0.5,
) -> RateTable:
    """Return the rarity distribution in effect at ``pity``."""
    check_pity(pity, pity_counter)
    if is_hard_pity(pity, pity_counter):
        return RateTable.guaranteed(Rarity.LEGENDARY)

    start = soft_pity_start(pity_counter, start_ratio)
    if pity < start:
        return rates

    base = rates.legendary
    if base >= 1.0:
        return rates

    last_soft = pity_counter - 2
    span = last_soft - start
    progress = (pity - start) / span if span > 0 else 0.0
    target = max(base, min(peak, 1.0))
    legendary = base + (target - base) * progress

    scale = (1.0 - legendary) / (1.0 - base)
    return RateTable(
        common=rates.common * scale,
        uncommon=rates.uncommon * scale,
        rare=rates.rare * scale,
        epic=rates.epic * scale,
        legendary=legendary,
    )


def resolve_banner_rates(banner: GachaBanner, pity: int) -> RateTable:
    return resolve_rates(
        banner.rates,
        pity,
        banner.pity_counter,
        start_ratio=banner.soft_pity_start_ratio,
        peak=banner.soft_pity_peak,
    )


@dataclass(frozen=True, slots=True)
class PityInfo:
    current_pity: int
    pity_max: int
    progress: float
    pulls_until_guaranteed: int
    in_soft_pity: bool


def pity_info(banner: GachaBanner, pity: int) -> PityInfo:
    """Summarise where ``pity`` sits relative to the banner's guarantees."""
    check_pity(pity, banner.pity_counter)
    start = soft_pity_start(banner.pity_counter, banner.soft_pity_start_ratio)
    return PityInfo(
        current_pity=pity,
        pity_max=banner.pity_counter,
        progress=100.0 * pity / banner.pity_counter,
        pulls_until_guaranteed=banner.pity_counter - pity,
        in_soft_pity=start <= pity < banner.pity_counter - 1,
    )
