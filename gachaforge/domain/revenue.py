"""Revenue projection for banners."""

from __future__ import annotations

from .banners import GachaBanner


def calculate_banner_revenue(
    banner: GachaBanner,
    avg_pulls_per_user: float,
    active_users: int,
    gem_value: float,
) -> float:
    """Project revenue from aggregate pull volume.

    ``gem_value`` is the real-money price of one gem. The projection ignores
    individual pull outcomes and scales linearly in every argument.
    """
    for label, value in (
        ("avg_pulls_per_user", avg_pulls_per_user),
        ("active_users", active_users),
        ("gem_value", gem_value),
    ):
        if value < 0:
            raise ValueError(f"{label} cannot be negative")
    total_pulls = avg_pulls_per_user * active_users
    total_gems = total_pulls * banner.pull_cost.gems
    return total_gems * gem_value
