"""Testing utilities for GachaForge."""

from .factory import ItemFactory, build_item_pool
from .fixtures import PityScenario, default_scenario, pity_scenario
from .scripted import ScriptedRandom

__all__ = [
    "ItemFactory",
    "build_item_pool",
    "PityScenario",
    "default_scenario",
    "pity_scenario",
    "ScriptedRandom",
]
