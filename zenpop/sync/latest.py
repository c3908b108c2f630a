from __future__ import annotations
import threading
import time
from typing import Generic, Optional, Tuple, TypeVar

T = TypeVar("T")


class LatestValue(Generic[T]):
    """
    Single-slot cell shared between a producer thread and the frame loop.
    Writes overwrite; reads never block on the producer and never consume.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._value: Optional[T] = None
        self._stamp: float = 0.0

    def put(self, value: T) -> None:
        with self._lock:
            self._value = value
            self._stamp = time.monotonic()

    def get(self, max_age: float | None = None) -> Optional[T]:
        value, age = self.get_with_age()
        if value is None:
            return None
        if max_age is not None and age > max_age:
            return None
        return value

    def get_with_age(self) -> Tuple[Optional[T], float]:
        with self._lock:
            value, stamp = self._value, self._stamp
        if value is None:
            return None, float("inf")
        return value, time.monotonic() - stamp

    def clear(self) -> None:
        with self._lock:
            self._value = None
            self._stamp = 0.0
