import random
from datetime import datetime

import pytest

from wanderguide.chat.dialogue_manager import DialogueManager
from wanderguide.providers.random_transit import RandomTransitProvider

FIXED_NOW = datetime(2024, 5, 1, 9, 10)


class ManualHandle:
    def __init__(self, delay, callback):
        self.delay = delay
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True

    def fire(self):
        if not self.cancelled:
            return self.callback()
        return None


class ManualScheduler:
    """Collects scheduled callbacks so tests decide when the bot answers."""

    def __init__(self):
        self.handles = []

    def __call__(self, delay, callback):
        handle = ManualHandle(delay, callback)
        self.handles.append(handle)
        return handle

    @property
    def last(self) -> ManualHandle:
        return self.handles[-1]


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def provider(rng):
    return RandomTransitProvider(rng=rng, clock=lambda: FIXED_NOW)


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def manager(provider, scheduler):
    return DialogueManager(provider=provider, scheduler=scheduler, rng=random.Random(7))
