from selenium_rules.chain import ChainState, ComposedLifecycle, LifecycleChain
from selenium_rules.driver import (
    BrowserDriverFactory,
    DriverFactory,
    DriverProvider,
    DriverResource,
    DriverServiceResource,
    ResourceState,
)
from selenium_rules.errors import (
    ConfigurationError,
    DiagnosticCaptureError,
    NotReadyError,
    ProvisioningError,
    SeleniumRuleError,
)
from selenium_rules.outcome import OutcomeStatus, TestOutcome
from selenium_rules.rules import LifecycleRule, ScreenshotOnFailureRule, TestLoggerRule
from selenium_rules.utils.screenshot import OutputType

__version__ = "0.1.0"

__all__ = [
    "BrowserDriverFactory",
    "ChainState",
    "ComposedLifecycle",
    "ConfigurationError",
    "DiagnosticCaptureError",
    "DriverFactory",
    "DriverProvider",
    "DriverResource",
    "DriverServiceResource",
    "LifecycleChain",
    "LifecycleRule",
    "NotReadyError",
    "OutcomeStatus",
    "OutputType",
    "ProvisioningError",
    "ResourceState",
    "ScreenshotOnFailureRule",
    "SeleniumRuleError",
    "TestLoggerRule",
    "TestOutcome",
]
