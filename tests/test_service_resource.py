import pytest

from selenium_rules import ConfigurationError, DriverServiceResource
from tests.fakes import FakeService


def test_null_driver_service_should_not_be_allowed():
    with pytest.raises(ConfigurationError) as excinfo:
        DriverServiceResource(None)

    assert str(excinfo.value) == "The DriverService should not be null"


def test_setup_should_start_the_service(trace):
    resource = DriverServiceResource(FakeService(trace))

    resource.setup("test_x")

    assert trace == ["service start"]


def test_teardown_should_stop_the_service(trace):
    resource = DriverServiceResource(FakeService(trace))
    resource.setup("test_x")

    resource.teardown()

    assert trace == ["service start", "service stop"]


def test_teardown_without_start_is_noop(trace):
    resource = DriverServiceResource(FakeService(trace))

    resource.teardown()

    assert trace == []
