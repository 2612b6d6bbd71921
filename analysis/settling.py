from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

import numpy as np

from control.conditioner import PotConditioner


@dataclass
class SettleTrace:
    ticks: np.ndarray
    raw: np.ndarray
    value: np.ndarray
    delta: np.ndarray
    velocity: np.ndarray
    moved: np.ndarray


@dataclass
class SettleStats:
    final_value: int
    settling_tick: Optional[int]
    overshoot: int
    max_abs_delta: int
    movement_ticks: List[int]
    is_monotonic: bool


class TraceRecorder:
    """
    Collects one row per update; trace() packs the rows into numpy arrays.
    """

    def __init__(self):
        self._ticks: List[int] = []
        self._raw: List[int] = []
        self._value: List[int] = []
        self._delta: List[int] = []
        self._velocity: List[int] = []
        self._moved: List[bool] = []

    def record(self, tick: int, raw: int, pot: PotConditioner) -> None:
        self._ticks.append(tick)
        self._raw.append(raw)
        self._value.append(pot.value)
        self._delta.append(pot.delta)
        self._velocity.append(pot.velocity)
        self._moved.append(pot.moved)

    def __len__(self) -> int:
        return len(self._ticks)

    def trace(self) -> SettleTrace:
        return SettleTrace(
            ticks=np.asarray(self._ticks, dtype=np.int64),
            raw=np.asarray(self._raw, dtype=np.int64),
            value=np.asarray(self._value, dtype=np.int64),
            delta=np.asarray(self._delta, dtype=np.int64),
            velocity=np.asarray(self._velocity, dtype=np.int64),
            moved=np.asarray(self._moved, dtype=bool),
        )


def run_trace(pot: PotConditioner, samples: Iterable[int], start_tick: int = 0) -> SettleTrace:
    """
    Feed samples at consecutive ticks and record every reading.
    """
    rec = TraceRecorder()
    for tick, raw in enumerate(samples, start=start_tick):
        pot.update(raw, tick)
        rec.record(tick, raw, pot)
    return rec.trace()


def settle_stats(trace: SettleTrace, tolerance: int = 0) -> SettleStats:
    """
    settling_tick: first tick from which every value stays within
    `tolerance` of the final value (None for an empty trace).
    overshoot: largest excursion past the final value in the direction of
    travel from the first value.
    """
    if trace.value.size == 0:
        return SettleStats(
            final_value=0,
            settling_tick=None,
            overshoot=0,
            max_abs_delta=0,
            movement_ticks=[],
            is_monotonic=True,
        )

    values = trace.value
    final = int(values[-1])

    outside = np.where(np.abs(values - final) > int(tolerance))[0]
    if outside.size == 0:
        settle_idx = 0
    else:
        settle_idx = int(outside.max()) + 1
    settling_tick = int(trace.ticks[settle_idx])

    direction = int(np.sign(final - int(values[0])))
    if direction == 0:
        overshoot = 0
    else:
        overshoot = max(0, int(((values - final) * direction).max()))

    steps = np.diff(values)
    is_monotonic = bool(np.all(steps >= 0) or np.all(steps <= 0))

    return SettleStats(
        final_value=final,
        settling_tick=settling_tick,
        overshoot=overshoot,
        max_abs_delta=int(np.abs(trace.delta).max()),
        movement_ticks=[int(t) for t in trace.ticks[trace.moved]],
        is_monotonic=is_monotonic,
    )
