from selenium_rules.driver.driver_factory import BrowserDriverFactory
from selenium_rules.driver.driver_resource import DriverResource, ResourceState
from selenium_rules.driver.service_resource import DriverServiceResource
from selenium_rules.protocols import DriverFactory, DriverProvider

__all__ = [
    "BrowserDriverFactory",
    "DriverFactory",
    "DriverProvider",
    "DriverResource",
    "DriverServiceResource",
    "ResourceState",
]
