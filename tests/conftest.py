import logging
import random
from unittest import mock

import pytest

from oneship.ship import Orientation


def scripted_rng(orientation, offset, lane, *more):
    """Random source that places ships exactly where a test wants them."""
    rng = mock.Mock(spec=random.Random)
    rng.choice.side_effect = [orientation] + [m[0] for m in more]
    rng.randint.side_effect = [offset, lane] + [v for m in more for v in m[1:]]
    return rng


def feed(*tokens):
    """Input callable returning each item in turn, then raising EOFError."""
    answers = iter(tokens)

    def read(prompt=""):
        try:
            return str(next(answers))
        except StopIteration:
            raise EOFError from None

    return read


@pytest.fixture
def vertical_rng():
    # Vertical ship in column 3, rows 1-4
    return scripted_rng(Orientation.VERTICAL, 1, 3)


class Output(list):
    """Collects everything written to the screen."""

    def write(self, text=""):
        self.append(text)

    @property
    def text(self):
        return "\n".join(self)


@pytest.fixture
def output():
    return Output()


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("oneship")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
