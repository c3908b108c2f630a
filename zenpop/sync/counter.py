from __future__ import annotations
import logging
import threading
from pathlib import Path
from typing import Protocol

import yaml

log = logging.getLogger(__name__)

DEFAULT_FLUSH_PERIOD_SEC = 5.0


class CounterStore(Protocol):
    """Aggregate pop counter shared by every client."""

    def increment(self, amount: int) -> None: ...
    def total(self) -> int: ...


class PopCounter:
    """
    Local pop accumulator. The game records into it from the frame loop; a
    flusher thread drains it into a CounterStore.

    Draining happens after the store call returns: if `increment` raises, the
    pending amount stays put and goes out with the next flush. A store that
    applied the increment but still raised will see it twice (at-least-once).
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._pending = 0
        self._recorded = 0

    def record(self, n: int = 1) -> None:
        if n <= 0:
            return
        with self._lock:
            self._pending += n
            self._recorded += n

    @property
    def pending(self) -> int:
        with self._lock:
            return self._pending

    @property
    def recorded(self) -> int:
        """Everything recorded this session, flushed or not."""
        with self._lock:
            return self._recorded

    def drain_and_flush(self, store: CounterStore) -> int:
        """Send the pending amount to `store`; return how much was flushed."""
        with self._lock:
            amount = self._pending
        if amount <= 0:
            return 0
        store.increment(amount)
        with self._lock:
            # pops recorded while the store call ran stay pending
            self._pending -= amount
        return amount


class YamlCounterStore:
    """
    File-backed CounterStore. Keeps `{total_pops: N}` in
    runtime/cache/counters/<name>.yaml and creates it on first increment.
    """

    def __init__(self, name: str = "global", root: Path | None = None):
        if root is None:
            root = Path(__file__).resolve().parents[2] / "runtime" / "cache" / "counters"
        root.mkdir(parents=True, exist_ok=True)
        self.path = root / f"{name}.yaml"
        self._lock = threading.Lock()

    def total(self) -> int:
        with self._lock:
            return self._read()

    def increment(self, amount: int) -> None:
        with self._lock:
            value = self._read() + int(amount)
            tmp = self.path.with_suffix(".tmp")
            with open(tmp, "w", encoding="utf-8") as f:
                yaml.safe_dump({"total_pops": value}, f)
            tmp.replace(self.path)

    def _read(self) -> int:
        if not self.path.exists():
            return 0
        with open(self.path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return int(data.get("total_pops", 0))


class CounterFlusher:
    """
    Background thread flushing a PopCounter every `period_sec`, plus one last
    flush when stopped. Also caches the store total for the HUD.
    """

    def __init__(self, counter: PopCounter, store: CounterStore,
                 period_sec: float = DEFAULT_FLUSH_PERIOD_SEC):
        self.counter = counter
        self.store = store
        self.period_sec = period_sec
        self.last_total = 0
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def start(self) -> None:
        if self._thread is not None:
            return
        self._refresh_total()
        self._thread = threading.Thread(target=self._run, name="counter-flush", daemon=True)
        self._thread.start()

    def flush(self) -> int:
        try:
            sent = self.counter.drain_and_flush(self.store)
        except Exception as e:
            log.warning("Pop counter flush failed, will retry: %s", e)
            return 0
        if sent:
            log.debug("Flushed %d pops", sent)
        self._refresh_total()
        return sent

    def stop(self) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout=self.period_sec + 1.0)
            self._thread = None
        self.flush()

    def _run(self) -> None:
        while not self._stop.wait(self.period_sec):
            self.flush()

    def _refresh_total(self) -> None:
        try:
            self.last_total = self.store.total()
        except Exception as e:
            log.warning("Could not read pop total: %s", e)
