"""Configuration models for GachaForge."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from typing import Mapping


DEFAULT_RATES: Mapping[str, float] = {
    "common": 0.60,
    "uncommon": 0.25,
    "rare": 0.10,
    "epic": 0.04,
    "legendary": 0.01,
}


@dataclass(slots=True)
class BannerDefaults:
    """Values applied by create_gacha_banner when a field is omitted."""

    pity_counter: int = 90
    pull_cost_gems: int = 300
    pull_cost_tickets: int = 1
    rate_up_multiplier: float = 2.0
    soft_pity_start_ratio: float = 0.75
    soft_pity_peak: float = 0.5
    rates: Mapping[str, float] = field(default_factory=lambda: dict(DEFAULT_RATES))
    rate_tolerance: float = 0.001


@dataclass(slots=True)
class SimulationConfig:
    """Defaults for Monte-Carlo pull simulations."""

    pulls: int = 1000
    gem_value: float = 0.01
    active_users: int = 1000


@dataclass(slots=True)
class GachaForgeConfig:
    """Top-level configuration container."""

    banner: BannerDefaults = field(default_factory=BannerDefaults)
    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    rng_seed: int | None = None

    @classmethod
    def from_env(cls) -> "GachaForgeConfig":
        """Create config from environment variables prefixed with GACHAFORGE_."""
        prefix = "GACHAFORGE_"

        banner = BannerDefaults(
            pity_counter=int(os.getenv(f"{prefix}PITY_COUNTER", "90")),
            pull_cost_gems=int(os.getenv(f"{prefix}PULL_COST_GEMS", "300")),
            pull_cost_tickets=int(os.getenv(f"{prefix}PULL_COST_TICKETS", "1")),
            rate_up_multiplier=float(os.getenv(f"{prefix}RATE_UP_MULTIPLIER", "2.0")),
            soft_pity_start_ratio=float(os.getenv(f"{prefix}SOFT_PITY_START_RATIO", "0.75")),
            soft_pity_peak=float(os.getenv(f"{prefix}SOFT_PITY_PEAK", "0.5")),
            rates=_parse_rates(os.getenv(f"{prefix}RATES")),
            rate_tolerance=float(os.getenv(f"{prefix}RATE_TOLERANCE", "0.001")),
        )

        simulation = SimulationConfig(
            pulls=int(os.getenv(f"{prefix}SIM_PULLS", "1000")),
            gem_value=float(os.getenv(f"{prefix}SIM_GEM_VALUE", "0.01")),
            active_users=int(os.getenv(f"{prefix}SIM_ACTIVE_USERS", "1000")),
        )

        return cls(
            banner=banner,
            simulation=simulation,
            rng_seed=(
                int(os.getenv(f"{prefix}RNG_SEED")) if os.getenv(f"{prefix}RNG_SEED") else None
            ),
        )


def _parse_rates(raw: str | None) -> Mapping[str, float]:
    if not raw:
        return dict(DEFAULT_RATES)
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError("Invalid JSON for GACHAFORGE_RATES") from exc
    if not isinstance(data, dict):
        raise ValueError("GACHAFORGE_RATES must be a JSON object")
    return {str(k): float(v) for k, v in data.items()}
