# control/mapping.py

from filters.fixed_point import div_trunc


def clamp(value: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, value))


def rescale_and_clamp(value: int, in_min: int, in_max: int, out_min: int, out_max: int) -> int:
    # truncating division, same rounding as integer firmware
    scaled = div_trunc((value - in_min) * (out_max - out_min), in_max - in_min) + out_min
    return clamp(scaled, out_min, out_max)
