from selenium_rules.rules.base import LifecycleRule
from selenium_rules.rules.screenshot import ScreenshotOnFailureRule, log_screenshot
from selenium_rules.rules.test_logger import TestLoggerRule

__all__ = ["LifecycleRule", "ScreenshotOnFailureRule", "TestLoggerRule", "log_screenshot"]
