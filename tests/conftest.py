import pytest


class FakeTerm:
    """Stand-in for blessed.Terminal with readable capability strings."""

    hide_cursor = '<hide>'
    normal_cursor = '<show>'
    home = '<home>'
    clear = '<clear>'
    clear_eol = '<eol>'
    reverse = '<rev>'
    normal = '<norm>'
    enter_fullscreen = '<fullscreen>'
    exit_fullscreen = '<exit-fullscreen>'
    width = 40
    height = 10

    def move_yx(self, y, x):
        return f'<move {y},{x}>'


class FakeClock:
    """Manually advanced time source."""

    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def fake_term():
    return FakeTerm()


@pytest.fixture
def clock():
    return FakeClock()

