from __future__ import annotations

from typing import Protocol


class Smoother(Protocol):
    """
    Adaptive low-pass stage. Besides the smoothed value it exposes its
    coefficient: current (last used) and floor (resting bandwidth).
    """

    def tick(self, value: int) -> int: ...

    def current_coefficient(self) -> int: ...

    def floor_coefficient(self) -> int: ...


class DeadbandFilter(Protocol):
    def update(self, value: int) -> int: ...
