"""
Fixtures used in the tests
"""
import pytest

from chainparams.params import NetworkSelector, default_selector, get_registry


@pytest.fixture(scope="session")
def registry():
    """The process-wide registry; every network is built once per test session"""
    return get_registry()


@pytest.fixture()
def selector(registry):
    return NetworkSelector(registry)


@pytest.fixture()
def clean_default_selector():
    default_selector.reset()
    yield default_selector
    default_selector.reset()
