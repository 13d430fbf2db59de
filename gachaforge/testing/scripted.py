"""Deterministic random source that replays fixed draws."""

from __future__ import annotations

from typing import Iterable, Sequence, TypeVar

T = TypeVar("T")


class ScriptedRandom:
    """Return queued uniform draws in order, then repeat ``default``.

    Lets a test force a rarity: with the default rates a draw of ``0.999``
    always lands on common and ``0.0`` always lands on legendary.
    """

    def __init__(self, draws: Iterable[float] = (), *, default: float = 0.999) -> None:
        self._draws = list(draws)
        self._default = default
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        if self._draws:
            return self._draws.pop(0)
        return self._default

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[int(self.random() * len(seq))]
