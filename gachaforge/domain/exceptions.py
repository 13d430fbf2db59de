"""Exceptions raised by GachaForge domain services."""

from __future__ import annotations


class GachaForgeError(RuntimeError):
    """Base class for domain exceptions."""


class InvalidRateTable(GachaForgeError):
    """Raised when a rate table does not form a probability distribution."""


class InvalidBannerConfig(GachaForgeError):
    """Raised when banner parameters are rejected at creation time."""


class EmptyItemPool(GachaForgeError):
    """Raised when a pull is attempted on a banner without items."""


class NoEligibleItems(GachaForgeError):
    """Raised when the drawn rarity has no candidates in the banner pool."""

    def __init__(self, rarity: str, banner_id: str) -> None:
        super().__init__(f"Banner {banner_id} has no '{rarity}' items to award")
        self.rarity = rarity
        self.banner_id = banner_id


class InvalidPityState(GachaForgeError):
    """Raised when a pity counter falls outside [0, pity_counter)."""

    def __init__(self, pity: int, pity_counter: int) -> None:
        super().__init__(f"Pity {pity} is outside the range [0, {pity_counter})")
        self.pity = pity
        self.pity_counter = pity_counter
