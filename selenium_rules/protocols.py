from typing import Protocol, runtime_checkable


@runtime_checkable
class DriverFactory(Protocol):
    """Creates a ready-to-use driver; called once per test execution."""

    def create(self):
        ...


@runtime_checkable
class DriverProvider(Protocol):
    """Gives access to an initialized driver."""

    def get_driver(self):
        ...
