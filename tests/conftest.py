import pytest

from tests.fakes import FakeDriver, FakeFactory, trace_logger


@pytest.fixture
def trace():
    return []


@pytest.fixture
def fake_driver(trace):
    return FakeDriver("D1", trace)


@pytest.fixture
def fake_factory(trace, fake_driver):
    return FakeFactory(trace, driver=fake_driver)


@pytest.fixture
def logger(trace):
    return trace_logger(trace)


pytest_plugins = ["selenium_rules.pytest_plugin", "pytester"]
