import pytest
from fntransduce import Reducer


class Recorder(Reducer):
    """
    Collects into a list like conj_r, but remembers how it was driven.
    """

    def __init__(self):
        self.initials = 0
        self.steps = []
        self.finishes = []

    def initial(self):
        self.initials += 1
        return []

    def step(self, result, input):
        self.steps.append(input)
        result.append(input)
        return result

    def finish(self, result):
        self.finishes.append(list(result))
        return result


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def out_path(tmp_path):
    return str(tmp_path / "out.txt")
