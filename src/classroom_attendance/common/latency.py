from __future__ import annotations

import time
from typing import Callable, Mapping


class SimulatedLatency:
    """Sleeps for the per-operation delay the mock backend used to impose.

    ``scale`` multiplies every delay; 0 disables sleeping entirely.
    """

    def __init__(
        self,
        delays_ms: Mapping[str, int],
        *,
        scale: float = 0.0,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._delays_ms = dict(delays_ms)
        self._scale = float(scale)
        self._sleep = sleep

    def __call__(self, operation: str) -> None:
        if self._scale <= 0:
            return
        ms = self._delays_ms.get(operation, 0)
        if ms:
            self._sleep(ms * self._scale / 1000.0)
