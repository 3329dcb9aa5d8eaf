"""
Decorative progress bar shown while a scan runs.

The bar is time driven and does not reflect the real scan progress.
"""

from __future__ import annotations

import logging
import random
import threading
from typing import Optional, TextIO

from tqdm import tqdm


logger = logging.getLogger(__name__)


class ProgressIndicator:
    """Animate a tqdm bar to 100% on a background thread."""

    def __init__(
        self,
        step: int = 3,
        total: int = 100,
        min_delay_ms: int = 20,
        max_delay_ms: int = 200,
        file: Optional[TextIO] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        if step <= 0:
            raise ValueError("step must be positive")
        self.step = step
        self.total = total
        self.min_delay_ms = min_delay_ms
        self.max_delay_ms = max_delay_ms
        self.file = file
        self.rng = rng or random.Random()
        self.progress = 0
        self._cancelled = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def run(self) -> None:
        """Tick until the bar is full or the indicator is cancelled."""
        with tqdm(total=self.total, ncols=80, file=self.file, leave=False) as bar:
            while self.progress < self.total:
                delay = self.rng.randint(self.min_delay_ms, self.max_delay_ms) / 1000
                if self._cancelled.wait(delay):
                    logger.debug("Progress indicator cancelled at %d%%", self.progress)
                    return
                advance = min(self.step, self.total - self.progress)
                bar.update(advance)
                self.progress += advance

    def start(self) -> "ProgressIndicator":
        self._thread = threading.Thread(target=self.run, name="progress", daemon=True)
        self._thread.start()
        return self

    def cancel(self) -> None:
        self._cancelled.set()
        self.wait()

    def wait(self, timeout: Optional[float] = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)


def simulate_progress(step: int = 3) -> None:
    """Run the decorative bar to completion in the calling thread."""
    ProgressIndicator(step=step).run()
