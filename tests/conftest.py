import pytest


class ScriptedRandom:
    """Random source that replays a fixed list of draws."""

    def __init__(self, draws):
        self._draws = list(draws)
        self.calls = 0

    def __call__(self):
        if self.calls >= len(self._draws):
            raise AssertionError(f"random source exhausted after {self.calls} draws")
        value = self._draws[self.calls]
        self.calls += 1
        return value

    @property
    def remaining(self):
        return len(self._draws) - self.calls


@pytest.fixture()
def scripted():
    """Factory: scripted(0.1, 0.9, ...) -> a callable random source."""
    return lambda *draws: ScriptedRandom(draws)
