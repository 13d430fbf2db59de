"""Gacha item models and the item catalog."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Mapping


class Rarity(str, Enum):
    """Rarity tiers, declared from most to least common."""

    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"

    @property
    def rank(self) -> int:
        return _RARITY_ORDER.index(self)


_RARITY_ORDER = tuple(Rarity)


class ItemType(str, Enum):
    CHARACTER = "character"
    WEAPON = "weapon"
    ARTIFACT = "artifact"
    COSTUME = "costume"


# Production cost multiplier relative to a common item.
COST_MULTIPLIERS: Mapping[Rarity, int] = {
    Rarity.COMMON: 1,
    Rarity.UNCOMMON: 2,
    Rarity.RARE: 4,
    Rarity.EPIC: 8,
    Rarity.LEGENDARY: 16,
}

BASE_ART_COST = 1000
BASE_DESIGN_COST = 500


@dataclass(frozen=True, slots=True)
class GachaItem:
    """An item that can be awarded by a banner pull."""

    item_id: str
    name: str
    rarity: Rarity
    item_type: ItemType
    description: str = ""
    art_cost: int = BASE_ART_COST
    design_cost: int = BASE_DESIGN_COST

    def __post_init__(self) -> None:
        object.__setattr__(self, "rarity", Rarity(self.rarity))
        object.__setattr__(self, "item_type", ItemType(self.item_type))

    @property
    def development_cost(self) -> int:
        return self.art_cost + self.design_cost


def create_gacha_item(
    name: str,
    rarity: Rarity | str,
    item_type: ItemType | str,
    *,
    description: str = "",
    art_cost: int | None = None,
    design_cost: int | None = None,
    item_id: str | None = None,
) -> GachaItem:
    """Build an item, deriving production costs from its rarity unless overridden."""
    rarity = Rarity(rarity)
    multiplier = COST_MULTIPLIERS[rarity]
    return GachaItem(
        item_id=item_id or uuid.uuid4().hex,
        name=name,
        rarity=rarity,
        item_type=ItemType(item_type),
        description=description,
        art_cost=art_cost if art_cost is not None else BASE_ART_COST * multiplier,
        design_cost=design_cost if design_cost is not None else BASE_DESIGN_COST * multiplier,
    )


class ItemCatalog:
    """Registry of gacha items keyed by id."""

    def __init__(self) -> None:
        self._items: dict[str, GachaItem] = {}

    def register_item(self, item: GachaItem) -> None:
        if item.item_id in self._items:
            raise ValueError(f"Item {item.item_id} already registered")
        self._items[item.item_id] = item

    def register_items(self, items: Iterable[GachaItem]) -> None:
        for item in items:
            self.register_item(item)

    def get_item(self, item_id: str) -> GachaItem:
        try:
            return self._items[item_id]
        except KeyError as exc:
            raise KeyError(f"Item {item_id} not found") from exc

    def item_map(self, item_ids: Iterable[str]) -> dict[str, GachaItem]:
        """Return the lookup a pull needs, scoped to the given ids."""
        return {item_id: self._items[item_id] for item_id in item_ids if item_id in self._items}

    def iter_items(self) -> Iterable[GachaItem]:
        return self._items.values()

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def __len__(self) -> int:
        return len(self._items)
