import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "hide")

import pytest


class MemoryStore:
    def __init__(self, fail_times: int = 0):
        self.value = 0
        self.calls = []
        self.fail_times = fail_times

    def increment(self, amount: int) -> None:
        self.calls.append(amount)
        if self.fail_times > 0:
            self.fail_times -= 1
            raise ConnectionError("store offline")
        self.value += amount

    def total(self) -> int:
        return self.value


class RecordingListener:
    def __init__(self):
        self.events = []

    def on_pop(self):
        self.events.append("pop")

    def on_golden_pop(self):
        self.events.append("golden")


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def listener():
    return RecordingListener()
