import pytest

from fazuh.checkin.config import Config
from fazuh.checkin.model import Account


def pytest_addoption(parser):
    parser.addoption(
        "--run-live",
        action="store_true",
        default=False,
        help="run tests against the real service (needs ACCOUNTS)",
    )


def pytest_configure(config):
    config.addinivalue_line("markers", "live: mark test as hitting the real service")


def pytest_collection_modifyitems(config, items):
    skip_live = pytest.mark.skip(reason="need --run-live option to run")

    run_live = config.getoption("--run-live")

    for item in items:
        if "live" in item.keywords and not run_live:
            item.add_marker(skip_live)


@pytest.fixture
def conf():
    return Config(accounts_json="[]", host="ikuuu.test", user_agent="TestAgent/1.0")


@pytest.fixture
def account():
    return Account(name="main", email="main@example.com", passwd="hunter2")
