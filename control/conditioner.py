from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from filters.backlash import Backlash
from filters.base import DeadbandFilter, Smoother
from filters.dynamic_smoother import DynamicSmoother
from filters.fixed_point import FRAC_BITS, to_fixed

from .config import ConditionerConfig
from .mapping import rescale_and_clamp

SMOOTHER_BASE_FREQ = to_fixed(0.1)
SMOOTHER_SENSITIVITY = to_fixed(0.02)

MOVEMENT_THRESHOLD_DEFAULT = 30

# extra fractional bits kept in the raw velocity
VELOCITY_FRAC_BITS = 8

# deadband width = input span / 512
DEADBAND_DIVISOR = 512


@dataclass
class ConditionerReading:
    value: int
    delta: int
    velocity: int
    moved: bool
    last_movement: Optional[int]


class PotConditioner:
    """
    Turns raw ADC readings of a potentiometer into a stable parameter value.

    Per sample: dynamic smoother -> backlash (deadband) -> rescale + clamp,
    then delta / velocity / movement detection on the result.

    One instance per pot, driven from a single sampling loop at the rate
    given to the constructor. Nothing is validated: min < max for both
    ranges and a positive sampling rate are the caller's job.
    """

    def __init__(
        self,
        sampling_rate: int,
        input_range: Tuple[int, int],
        output_range: Tuple[int, int],
        *,
        smoother: Optional[Smoother] = None,
        deadband: Optional[DeadbandFilter] = None,
    ):
        assert input_range[0] < input_range[1], "input_range must be (min, max)"
        assert output_range[0] < output_range[1], "output_range must be (min, max)"

        deadband_width = (input_range[1] - input_range[0]) // DEADBAND_DIVISOR

        self._input_range = (input_range[0], input_range[1])
        self._output_range = (output_range[0], output_range[1])

        if smoother is None:
            smoother = DynamicSmoother(
                SMOOTHER_BASE_FREQ,
                sampling_rate << FRAC_BITS,
                SMOOTHER_SENSITIVITY,
            )
        self._smoother = smoother

        self._deadband_half_width = deadband_width // 2
        self._deadband = deadband if deadband is not None else Backlash(deadband_width)

        self._value = 0
        self._delta = 0
        self._velocity = 0
        self._movement_threshold = MOVEMENT_THRESHOLD_DEFAULT
        self._moved = False
        self._last_movement: Optional[int] = None

    @classmethod
    def from_config(cls, cfg: ConditionerConfig) -> "PotConditioner":
        pot = cls(cfg.sampling_rate_hz, cfg.input_range, cfg.output_range)
        pot.set_movement_threshold(cfg.movement_threshold)
        return pot

    def update(self, raw_value: int, tick: int) -> int:
        """
        Feed one raw sample taken at `tick` and return the conditioned value.
        Ticks should be non-decreasing for last_movement to make sense.
        """
        value = self._smoother.tick(raw_value)
        value = self._deadband.update(value)

        in_min, in_max = self._input_range
        out_min, out_max = self._output_range
        value = rescale_and_clamp(
            value,
            in_min + self._deadband_half_width,
            in_max - self._deadband_half_width,
            out_min,
            out_max,
        )

        prev = self._value
        self._delta = value - prev

        # smoother coefficient ratio as speed proxy, averaged with the last one
        g = self._smoother.current_coefficient()
        g0 = max(self._smoother.floor_coefficient(), 1)
        self._velocity = (self._velocity + (g << VELOCITY_FRAC_BITS) // g0) // 2

        # leaving a range end counts even when slow
        self._moved = self._delta != 0 and (
            self.velocity > self._movement_threshold
            or prev == out_min
            or prev == out_max
        )

        if self._moved:
            self._last_movement = tick

        self._value = value
        return self._value

    # ---------------------------------------------------------
    # Readings
    # ---------------------------------------------------------

    @property
    def value(self) -> int:
        return self._value

    @property
    def delta(self) -> int:
        return self._delta

    @property
    def velocity(self) -> int:
        return self._velocity >> VELOCITY_FRAC_BITS

    @property
    def moved(self) -> bool:
        return self._moved

    @property
    def last_movement(self) -> Optional[int]:
        return self._last_movement

    def reading(self) -> ConditionerReading:
        return ConditionerReading(
            value=self._value,
            delta=self._delta,
            velocity=self.velocity,
            moved=self._moved,
            last_movement=self._last_movement,
        )

    # ---------------------------------------------------------
    # Configuration
    # ---------------------------------------------------------

    @property
    def movement_threshold(self) -> int:
        return self._movement_threshold

    def set_movement_threshold(self, threshold: int) -> None:
        """Recommended range is 10-255, not enforced."""
        self._movement_threshold = threshold

    @property
    def output_range(self) -> Tuple[int, int]:
        return self._output_range

    def set_output_range(self, out_min: int, out_max: int) -> None:
        # value/delta/velocity are kept; the next update may jump
        self._output_range = (out_min, out_max)

    @property
    def input_range(self) -> Tuple[int, int]:
        return self._input_range

    @property
    def deadband_half_width(self) -> int:
        return self._deadband_half_width
