# app/replay.py

import sys
from typing import BinaryIO, Iterable, Iterator, Optional, Union

from analysis.cli import ReplayConfig, parse_config
from analysis.settling import SettleStats, SettleTrace, TraceRecorder, settle_stats
from app.event_logger import EventLogger
from control.conditioner import PotConditioner


# =========================================================
# Helpers
# =========================================================

def read_samples(lines: Iterable[Union[str, bytes]]) -> Iterator[int]:
    """
    One integer per line. Blank lines and '#' comments are skipped,
    anything else unparsable (bad encoding included) is reported and dropped.
    """
    for lineno, line in enumerate(lines, start=1):
        try:
            if isinstance(line, bytes):
                line = line.decode("utf-8")
            text = line.split("#", 1)[0].strip()
            if not text:
                continue
            sample = int(text)
        except (UnicodeDecodeError, ValueError):
            print(f"[WARN] line {lineno}: not a sample: {line!r}")
            continue
        yield sample


def replay(
    pot: PotConditioner,
    samples: Iterable[int],
    start_tick: int = 0,
    print_every: int = 10,
    logger: Optional[EventLogger] = None,
) -> SettleTrace:
    rec = TraceRecorder()

    tick = start_tick
    try:
        for sample in samples:
            value = pot.update(sample, tick)
            rec.record(tick, sample, pot)

            if pot.moved or (tick - start_tick) % print_every == 0:
                print(
                    f"[POT] tick={tick} raw={sample} value={value} "
                    f"delta={pot.delta:+d} vel={pot.velocity} "
                    f"moved={pot.moved}"
                )

            if logger and pot.moved:
                logger.movement(tick, pot.reading())

            tick += 1

    except KeyboardInterrupt:
        print("[REPLAY] Keyboard interrupt")

    return rec.trace()


def print_summary(stats: SettleStats, tolerance: int) -> None:
    print(f"[REPLAY] final={stats.final_value} settled_at={stats.settling_tick} (±{tolerance})")
    print(
        f"[REPLAY] overshoot={stats.overshoot} "
        f"max_delta={stats.max_abs_delta} "
        f"monotonic={stats.is_monotonic}"
    )
    last = stats.movement_ticks[-1] if stats.movement_ticks else None
    print(f"[REPLAY] movements={len(stats.movement_ticks)} last={last}")


def _open_source(source: str) -> BinaryIO:
    # bytes; lines are decoded one by one in read_samples
    if source == "-":
        return sys.stdin.buffer
    return open(source, "rb")


# =========================================================
# Main
# =========================================================

def main(argv=None) -> int:
    cfg: ReplayConfig = parse_config(argv)
    pot = PotConditioner.from_config(cfg.pot_cfg)

    print(
        f"[REPLAY] rate={cfg.pot_cfg.sampling_rate_hz}Hz "
        f"in={cfg.pot_cfg.input_range} out={cfg.pot_cfg.output_range} "
        f"threshold={pot.movement_threshold}"
    )

    try:
        f = _open_source(cfg.source)
    except OSError as e:
        print("[WARN] Cannot read samples:", e)
        return 1

    logger = None
    if cfg.event_log:
        try:
            logger = EventLogger(cfg.log_dir, source=cfg.source)
        except OSError as e:
            print("[WARN] Event log not available:", e)
            logger = None

    try:
        trace = replay(
            pot,
            read_samples(f),
            start_tick=cfg.start_tick,
            print_every=cfg.print_every,
            logger=logger,
        )
    finally:
        if cfg.source != "-":
            f.close()
        if logger:
            logger.close()

    print_summary(settle_stats(trace, cfg.tolerance), cfg.tolerance)
    return 0


if __name__ == "__main__":
    sys.exit(main())
