from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import config


@dataclass(frozen=True)
class ConditionerConfig:
    # rate update() is called at; baked into the smoother time constant
    sampling_rate_hz: int = config.POT_SAMPLING_RATE_HZ

    # (min, max), min < max
    input_range: Tuple[int, int] = config.POT_INPUT_RANGE
    output_range: Tuple[int, int] = config.POT_OUTPUT_RANGE

    movement_threshold: int = config.POT_MOVEMENT_THRESHOLD
