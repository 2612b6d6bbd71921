"""
Offline characterization of the pot conditioner.

Feeds recorded or synthetic raw samples through a PotConditioner and
summarizes how the output settles, without any hardware attached.
"""

from .settling import SettleStats, SettleTrace, TraceRecorder, run_trace, settle_stats

__all__ = [
    "SettleStats",
    "SettleTrace",
    "TraceRecorder",
    "run_trace",
    "settle_stats",
]
