import attr
import pytest


@attr.s
class Counter:
    calls: int = attr.ib(default=0)

    def __call__(self):
        self.calls += 1


@pytest.fixture
def on_success() -> Counter:
    return Counter()


@pytest.fixture
def on_failure() -> Counter:
    return Counter()
