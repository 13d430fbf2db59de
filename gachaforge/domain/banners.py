"""Banner configuration: rate tables, pull costs and time-boxed banners."""

from __future__ import annotations

import math
import uuid
from dataclasses import dataclass, field
from typing import Iterable, Mapping, Sequence

from .exceptions import InvalidBannerConfig, InvalidRateTable
from .items import Rarity
from ..config import BannerDefaults


@dataclass(frozen=True, slots=True)
class RateTable:
    """Probability of each rarity on a single pull."""

    common: float
    uncommon: float
    rare: float
    epic: float
    legendary: float

    @classmethod
    def from_mapping(cls, rates: Mapping[str, float]) -> "RateTable":
        unknown = set(rates) - {rarity.value for rarity in Rarity}
        if unknown:
            raise InvalidRateTable(f"Unknown rarities in rate table: {sorted(unknown)}")
        values: dict[str, float] = {}
        for rarity in Rarity:
            raw = rates.get(rarity.value, 0.0)
            try:
                values[rarity.value] = float(raw)
            except (TypeError, ValueError) as exc:
                raise InvalidRateTable(
                    f"Rate for '{rarity.value}' must be a number, got {raw!r}"
                ) from exc
        return cls(**values)

    @classmethod
    def guaranteed(cls, rarity: Rarity) -> "RateTable":
        return cls(**{other.value: 1.0 if other is rarity else 0.0 for other in Rarity})

    def get(self, rarity: Rarity) -> float:
        return getattr(self, Rarity(rarity).value)

    def total(self) -> float:
        return math.fsum(self.get(rarity) for rarity in Rarity)

    def as_dict(self) -> dict[str, float]:
        return {rarity.value: self.get(rarity) for rarity in Rarity}


def validate_rates(rates: RateTable, *, tolerance: float = 0.001) -> list[str]:
    """Return problems that stop the table from being a distribution."""
    errors: list[str] = []
    for rarity in Rarity:
        value = rates.get(rarity)
        if not math.isfinite(value) or value < 0 or value > 1:
            errors.append(f"Rate for '{rarity.value}' must be within [0, 1], got {value}.")
    total = rates.total()
    # NaN compares false, so test for the accepting case.
    if not abs(total - 1.0) <= tolerance:
        errors.append(f"Rates must sum to 1.0, got {total:.3f}.")
    return errors


def tuning_errors(
    rate_up_multiplier: float, soft_pity_start_ratio: float, soft_pity_peak: float
) -> list[str]:
    """Return problems with a banner's rate-up and soft pity parameters."""
    errors: list[str] = []
    if not (math.isfinite(rate_up_multiplier) and rate_up_multiplier > 0):
        errors.append(f"rate_up_multiplier must be positive, got {rate_up_multiplier}.")
    if not (math.isfinite(soft_pity_start_ratio) and 0 < soft_pity_start_ratio <= 1):
        errors.append(
            f"soft_pity_start_ratio must be within (0, 1], got {soft_pity_start_ratio}."
        )
    if not (math.isfinite(soft_pity_peak) and 0 <= soft_pity_peak <= 1):
        errors.append(f"soft_pity_peak must be within [0, 1], got {soft_pity_peak}.")
    return errors


@dataclass(frozen=True, slots=True)
class PullCost:
    gems: int = 300
    tickets: int = 1


@dataclass(frozen=True, slots=True)
class GachaBanner:
    """A time-boxed pull event with its own pool, featured items and rates."""

    banner_id: str
    name: str
    game_id: str
    featured_items: tuple[str, ...]
    item_pool: tuple[str, ...]
    start_date: int
    end_date: int
    rates: RateTable
    rate_up_multiplier: float = 2.0
    pull_cost: PullCost = field(default_factory=PullCost)
    pity_counter: int = 90
    is_limited: bool = False
    soft_pity_start_ratio: float = 0.75
    soft_pity_peak: float = 0.5

    @property
    def duration(self) -> int:
        return self.end_date - self.start_date

    def is_active(self, tick: int) -> bool:
        return self.start_date <= tick < self.end_date

    def ticks_remaining(self, tick: int) -> int:
        return max(0, self.end_date - tick)

    def is_featured(self, item_id: str) -> bool:
        return item_id in self.featured_items


def create_gacha_banner(
    name: str,
    game_id: str,
    *,
    item_pool: Sequence[str],
    featured_items: Sequence[str] = (),
    start_date: int = 0,
    duration: int,
    rates: RateTable | Mapping[str, float] | None = None,
    rate_up_multiplier: float | None = None,
    pull_cost: PullCost | None = None,
    pity_counter: int | None = None,
    is_limited: bool = False,
    soft_pity_start_ratio: float | None = None,
    soft_pity_peak: float | None = None,
    banner_id: str | None = None,
    defaults: BannerDefaults | None = None,
) -> GachaBanner:
    """Build a banner, applying defaults and rejecting invalid configuration."""
    defaults = defaults or BannerDefaults()

    if rates is None:
        rates = defaults.rates
    table = rates if isinstance(rates, RateTable) else RateTable.from_mapping(rates)
    errors = validate_rates(table, tolerance=defaults.rate_tolerance)
    if errors:
        raise InvalidRateTable(_format_errors("Invalid rate table", errors))

    pity_counter = defaults.pity_counter if pity_counter is None else pity_counter
    rate_up_multiplier = (
        defaults.rate_up_multiplier if rate_up_multiplier is None else rate_up_multiplier
    )
    soft_pity_start_ratio = (
        defaults.soft_pity_start_ratio if soft_pity_start_ratio is None else soft_pity_start_ratio
    )
    soft_pity_peak = defaults.soft_pity_peak if soft_pity_peak is None else soft_pity_peak
    pool = tuple(item_pool)
    featured = tuple(featured_items)

    problems: list[str] = []
    if pity_counter < 1:
        problems.append(f"pity_counter must be at least 1, got {pity_counter}.")
    problems.extend(tuning_errors(rate_up_multiplier, soft_pity_start_ratio, soft_pity_peak))
    if duration < 0:
        problems.append(f"duration cannot be negative, got {duration}.")
    if len(set(pool)) != len(pool):
        problems.append("item_pool contains duplicate ids.")
    stray = [item_id for item_id in featured if item_id not in pool]
    if stray:
        problems.append(f"featured_items not in item_pool: {', '.join(stray)}.")
    if problems:
        raise InvalidBannerConfig(_format_errors(f"Invalid banner '{name}'", problems))

    return GachaBanner(
        banner_id=banner_id or uuid.uuid4().hex,
        name=name,
        game_id=game_id,
        featured_items=featured,
        item_pool=pool,
        start_date=start_date,
        end_date=start_date + duration,
        rates=table,
        rate_up_multiplier=float(rate_up_multiplier),
        pull_cost=pull_cost
        or PullCost(gems=defaults.pull_cost_gems, tickets=defaults.pull_cost_tickets),
        pity_counter=pity_counter,
        is_limited=is_limited,
        soft_pity_start_ratio=float(soft_pity_start_ratio),
        soft_pity_peak=float(soft_pity_peak),
    )


class BannerRegistry:
    """Registry of banners keyed by id."""

    def __init__(self) -> None:
        self._banners: dict[str, GachaBanner] = {}

    def register_banner(self, banner: GachaBanner) -> None:
        if banner.banner_id in self._banners:
            raise ValueError(f"Banner {banner.banner_id} already registered")
        self._banners[banner.banner_id] = banner

    def get_banner(self, banner_id: str) -> GachaBanner:
        try:
            return self._banners[banner_id]
        except KeyError as exc:
            raise KeyError(f"Banner {banner_id} not found") from exc

    def active_banners(self, tick: int) -> list[GachaBanner]:
        return [banner for banner in self._banners.values() if banner.is_active(tick)]

    def iter_banners(self) -> Iterable[GachaBanner]:
        return self._banners.values()


def _format_errors(prefix: str, errors: Iterable[str]) -> str:
    formatted = "\n".join(f"- {err}" for err in errors)
    return f"{prefix}:\n{formatted}"
