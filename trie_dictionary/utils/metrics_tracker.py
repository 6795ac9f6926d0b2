# metrics_tracker.py - running sum/count per key (operation timings etc)

import json
import os
from collections import defaultdict
from typing import Dict, Optional


class Metrics:
    def __init__(self, path: Optional[str] = None):
        self.path = path
        self.m = defaultdict(float)
        self.n = defaultdict(int)
        self._load()

    def _load(self):
        if not self.path or not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                d = json.load(f)
            for k, v in d.items():
                self.m[k] = v["sum"]
                self.n[k] = v["count"]
        except (OSError, ValueError, KeyError, TypeError):
            # unreadable metrics file, start fresh
            self.m.clear()
            self.n.clear()

    def save(self):
        if not self.path:
            return
        d = {k: {"sum": self.m[k], "count": self.n[k]} for k in self.m}
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(d, f, indent=2)

    def record(self, key, val):
        self.m[key] += val
        self.n[key] += 1

    def count(self, key) -> int:
        return self.n.get(key, 0)

    def avg(self, key) -> float:
        if self.n.get(key, 0) == 0:
            return 0.0
        return self.m[key] / self.n[key]

    def snapshot(self) -> Dict[str, Dict[str, float]]:
        return {k: {"count": self.n[k], "avg": self.avg(k)} for k in sorted(self.m)}
