from __future__ import annotations

from .fixed_point import FRAC_BITS, ONE, PI_FIXED


class DynamicSmoother:
    """
    Dynamic smoothing filter, economy variant, fixed point.

    Two cascaded one-pole low-pass stages share one coefficient g.
    At rest g sits at its floor g0 (set by base_freq); when the band signal
    (low1 - low2) grows, g opens up towards 1.0 so fast moves pass through
    quickly while jitter at rest is heavily filtered.

    base_freq, sample_rate and sensitivity are fixed point (FRAC_BITS).
    Samples fed to tick() are plain integers.
    """

    def __init__(self, base_freq: int, sample_rate: int, sensitivity: int):
        wc = (base_freq << FRAC_BITS) // sample_rate
        # tan(pi * wc) ~= pi * wc for small wc
        gc = (wc * PI_FIXED) >> FRAC_BITS

        self._g0 = max(((2 * gc) << FRAC_BITS) // (ONE + gc), 0)
        self._sense = sensitivity * 4
        self._g = self._g0

        self._low1 = 0
        self._low2 = 0

    def tick(self, value: int) -> int:
        low1z = self._low1
        low2z = self._low2
        band = low1z - low2z

        g = min(self._g0 + ((self._sense * abs(band)) >> FRAC_BITS), ONE)

        self._low1 = low1z + ((g * ((value << FRAC_BITS) - low1z)) >> FRAC_BITS)
        self._low2 = low2z + ((g * (self._low1 - low2z)) >> FRAC_BITS)
        self._g = g

        return self._low2 >> FRAC_BITS

    def current_coefficient(self) -> int:
        return self._g

    def floor_coefficient(self) -> int:
        return self._g0

    @property
    def value(self) -> int:
        return self._low2 >> FRAC_BITS
