import pytest
from pyfakefs.fake_filesystem_unittest import Patcher

from trunkops.outcome import Success, Failure


class FakeExecutor:
    """Records every call and returns scripted outcomes.

    ``fail_on`` maps a 1-based call number to the stderr text that call
    should fail with. Every other call succeeds with ``output``.
    """

    def __init__(self, fail_on=None, output=""):
        self.fail_on = fail_on or {}
        self.output = output
        self.calls = []

    def execute(self, operation, args=""):
        self.calls.append((operation, tuple(args)))
        if len(self.calls) in self.fail_on:
            return Failure(self.fail_on[len(self.calls)])
        return Success(self.output)

    @property
    def operations(self):
        return [operation for operation, _ in self.calls]


@pytest.fixture
def fs():
    with Patcher() as patcher:
        yield patcher.fs


@pytest.fixture
def executor():
    return FakeExecutor()


@pytest.fixture
def make_executor():
    return FakeExecutor
