import json
import os
import time
from dataclasses import asdict
from typing import Optional

from control.conditioner import ConditionerReading


class EventLogger:
    """
    Pot events as JSON Lines, one record per line:
    {"ts": ..., "event": ..., "tick": ..., <fields>}
    """

    def __init__(self, log_dir: str = "logs", filename: Optional[str] = None, source: Optional[str] = None):
        os.makedirs(log_dir, exist_ok=True)
        if filename is None:
            filename = time.strftime("pot_%Y%m%d_%H%M%S.jsonl")
        self.path = os.path.join(log_dir, filename)
        self._f = open(self.path, "a", buffering=1)  # line-buffered
        print(f"[LOG] Writing events to: {self.path}")
        self.source = source
        self.count = 0

    def close(self):
        try:
            self._f.close()
        except OSError:
            pass

    def write(self, event: str, tick: int, **fields):
        rec = {
            "ts": time.time(),
            "event": event,
            "tick": tick,
            **fields,
        }
        if self.source and "source" not in rec:
            rec["source"] = self.source
        self._f.write(json.dumps(rec, ensure_ascii=False) + "\n")
        self.count += 1

    def movement(self, tick: int, reading: ConditionerReading):
        fields = asdict(reading)
        fields.pop("last_movement", None)
        self.write("movement", tick, **fields)
