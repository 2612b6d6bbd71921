from dataclasses import dataclass
from typing import Optional
import argparse

import config
from control.config import ConditionerConfig


@dataclass(frozen=True)
class ReplayConfig:
    source: str
    print_every: int
    event_log: bool
    log_dir: str
    tolerance: int
    start_tick: int

    pot_cfg: ConditionerConfig


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Replay raw pot samples through the conditioner")

    p.add_argument("source", nargs="?", default="-", help="File with one raw sample per line, '-' for stdin.")
    p.add_argument("--print-every", type=int, default=config.REPLAY_PRINT_EVERY)
    p.add_argument("--event-log", action="store_true", help="Write movement events as JSONL.")
    p.add_argument("--log-dir", default=config.REPLAY_LOG_DIR)
    p.add_argument("--tolerance", type=int, default=config.SETTLE_TOLERANCE,
                   help="Band around the final value counted as settled.")
    p.add_argument("--start-tick", type=int, default=0)

    # Conditioner
    p.add_argument("--rate", type=int, default=config.POT_SAMPLING_RATE_HZ, help="Sampling rate, Hz.")
    p.add_argument("--in-min", type=int, default=config.POT_INPUT_RANGE[0])
    p.add_argument("--in-max", type=int, default=config.POT_INPUT_RANGE[1])
    p.add_argument("--out-min", type=int, default=config.POT_OUTPUT_RANGE[0])
    p.add_argument("--out-max", type=int, default=config.POT_OUTPUT_RANGE[1])
    p.add_argument("--threshold", type=int, default=config.POT_MOVEMENT_THRESHOLD,
                   help="Movement threshold (10-255 recommended).")

    return p


def parse_config(argv: Optional[list] = None) -> ReplayConfig:
    args = build_arg_parser().parse_args(argv)

    pot_cfg = ConditionerConfig(
        sampling_rate_hz=args.rate,
        input_range=(args.in_min, args.in_max),
        output_range=(args.out_min, args.out_max),
        movement_threshold=args.threshold,
    )

    return ReplayConfig(
        source=args.source,
        print_every=max(1, int(args.print_every)),
        event_log=args.event_log,
        log_dir=args.log_dir,
        tolerance=max(0, int(args.tolerance)),
        start_tick=args.start_tick,
        pot_cfg=pot_cfg,
    )
