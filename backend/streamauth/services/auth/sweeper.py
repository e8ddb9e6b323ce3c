"""Optional background eviction of expired revocation entries."""

from __future__ import annotations

import logging
import threading

from streamauth.services._shared.ports import RevocationStore

log = logging.getLogger(__name__)


class RevocationSweeper:
    """
    Periodically call :meth:`RevocationStore.sweep` on a daemon thread.

    Correctness never depends on the sweeper: expired entries already read
    as absent. It only bounds memory between logouts. ``start`` and ``stop``
    are idempotent; ``stop`` waits for the current pass to finish.

    :param store: Store to sweep.
    :param interval: Seconds between passes (must be positive).
    """

    def __init__(self, store: RevocationStore, interval: float) -> None:
        if interval <= 0:
            raise ValueError("Sweep interval must be positive.")
        self.store = store
        self.interval = interval
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(
            target=self._run, name="revocation-sweeper", daemon=True
        )
        self._thread.start()

    def stop(self, timeout: float | None = 5.0) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
        self._thread = None

    def run_once(self) -> int:
        evicted = self.store.sweep()
        if evicted:
            log.info("auth.revocation.sweep", extra={"evicted": evicted})
        return evicted

    def _run(self) -> None:
        while not self._stop.wait(self.interval):
            try:
                self.run_once()
            except Exception:
                # keep sweeping; the next pass retries
                log.exception("auth.revocation.sweep_failed")
