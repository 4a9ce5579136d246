import logging

import pytest

from tui_engine import Screen


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class FakeTerminal:
    """Scripted stand-in for CursesTerminal.

    Each poll consumes one (seconds, key) step from the script: the clock
    moves forward by `seconds` and `key` is returned (None for a timeout).
    An exhausted script answers with 'q'.
    """

    def __init__(self, clock, script=(), draw_cost=0.0, fail_on_draw=None, fail_on_poll=None, size=(24, 80)):
        self.clock = clock
        self.script = list(script)
        self.draw_cost = draw_cost
        self.fail_on_draw = fail_on_draw
        self.fail_on_poll = fail_on_poll
        self.size = size
        self.frames = []
        self.timeouts = []
        self.enter_calls = 0
        self.restore_calls = 0

    def __enter__(self):
        self.enter_calls += 1
        return self

    def __exit__(self, exc_type, exc, tb):
        self.restore_calls += 1
        return False

    def draw(self, fn):
        if self.fail_on_draw is not None:
            raise self.fail_on_draw
        screen = Screen(*self.size)
        fn(screen)
        self.frames.append(screen.lines())
        self.clock.advance(self.draw_cost)

    def poll_key(self, timeout):
        self.timeouts.append(timeout)
        if self.fail_on_poll is not None:
            raise self.fail_on_poll
        if not self.script:
            return ord("q")
        seconds, key = self.script.pop(0)
        self.clock.advance(seconds)
        return key


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def make_terminal(clock):
    def _make(script=(), **kwargs):
        return FakeTerminal(clock, script, **kwargs)

    return _make


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("FLUX_TICK_RATE_MS", "FLUX_LAYOUT", "FLUX_LOG_LEVEL", "FLUX_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def root_logging():
    """Close any log files a test opened and put the root level back."""
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in list(root.handlers):
        if isinstance(handler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
