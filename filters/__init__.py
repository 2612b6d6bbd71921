from .backlash import Backlash
from .base import DeadbandFilter, Smoother
from .dynamic_smoother import DynamicSmoother
from .fixed_point import FRAC_BITS, ONE, div_trunc, to_fixed

__all__ = [
    "Backlash",
    "DeadbandFilter",
    "Smoother",
    "DynamicSmoother",
    "FRAC_BITS",
    "ONE",
    "div_trunc",
    "to_fixed",
]
