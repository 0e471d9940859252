import logging

import pytest
from faker import Faker

from notifier import Notifier
from tests.helpers import ListenerHistory

logging.basicConfig(level=logging.DEBUG)


@pytest.fixture(scope="function", autouse=True)
def setup_faker():
    Faker.seed(0)


@pytest.fixture(scope="function")
def notifier() -> Notifier:
    return Notifier()


@pytest.fixture(scope="function")
def listener_history(notifier) -> ListenerHistory:
    history = ListenerHistory()
    notifier.subscribe(history)
    return history
