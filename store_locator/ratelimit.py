"""
Fixed-interval gate for vendor API calls.

The Places jobs run strictly one store at a time; the gate guarantees a
minimum spacing between stores instead of sleeping unconditionally.
"""

import time
from typing import Callable
from dataclasses import dataclass, field


@dataclass
class FixedIntervalGate:
    """Blocks until at least `interval` seconds have passed since the last pass.

    The first call to wait() never blocks.
    """

    interval: float = 0.2
    clock: Callable[[], float] = time.monotonic
    sleep: Callable[[float], None] = time.sleep

    _last: float = field(default=None, init=False)

    def wait(self) -> float:
        """Block if needed, then mark a pass. Returns the time slept."""
        slept = 0.0
        if self._last is not None:
            remaining = self.interval - (self.clock() - self._last)
            if remaining > 0:
                self.sleep(remaining)
                slept = remaining
        self._last = self.clock()
        return slept

    def reset(self):
        self._last = None
