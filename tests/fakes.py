"""Fake collaborators recording every call into a shared trace list."""

import base64
import logging
import uuid

from selenium.common.exceptions import WebDriverException

from selenium_rules.rules.base import LifecycleRule

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake"


class FakeDriver:
    def __init__(self, name, trace, fail_screenshot=False, fail_quit=False):
        self.name = name
        self.trace = trace
        self.fail_screenshot = fail_screenshot
        self.fail_quit = fail_quit
        self.quit_count = 0
        self.screenshot_count = 0
        self.alive_at_screenshot = []

    def _screenshot(self):
        self.screenshot_count += 1
        self.alive_at_screenshot.append(self.quit_count == 0)
        self.trace.append(f"screenshot {self.name}")
        if self.fail_screenshot:
            raise WebDriverException("screenshot failed")

    def save_screenshot(self, path):
        self._screenshot()
        with open(path, "wb") as f:
            f.write(PNG_BYTES)
        return True

    def get_screenshot_as_png(self):
        self._screenshot()
        return PNG_BYTES

    def get_screenshot_as_base64(self):
        self._screenshot()
        return base64.b64encode(PNG_BYTES).decode("ascii")

    def quit(self):
        self.quit_count += 1
        self.trace.append(f"quit {self.name}")
        if self.fail_quit:
            raise WebDriverException("quit failed")

    def __repr__(self):
        return f"FakeDriver({self.name})"


class FakeFactory:
    """create() returns ``driver``, returns None, or raises ``error``."""

    def __init__(self, trace, driver=None, error=None, returns_none=False):
        self.trace = trace
        self.driver = driver
        self.error = error
        self.returns_none = returns_none
        self.calls = 0

    def create(self):
        self.calls += 1
        if self.error is not None:
            self.trace.append("create raises")
            raise self.error
        if self.returns_none:
            self.trace.append("create None")
            return None
        self.trace.append(f"create {self.driver.name}")
        return self.driver


class FakeService:
    def __init__(self, trace, fail_start=False):
        self.trace = trace
        self.fail_start = fail_start
        self.service_url = "http://localhost:9515"

    def start(self):
        self.trace.append("service start")
        if self.fail_start:
            raise WebDriverException("service did not start")

    def stop(self):
        self.trace.append("service stop")


class RecordingRule(LifecycleRule):
    def __init__(self, name, trace, fail_setup=None, fail_teardown=None):
        self.name = name
        self.trace = trace
        self.fail_setup = fail_setup
        self.fail_teardown = fail_teardown
        self.outcomes = []

    def setup(self, description):
        self.trace.append(f"setup {self.name}")
        if self.fail_setup is not None:
            raise self.fail_setup

    def teardown(self, outcome):
        self.outcomes.append(outcome)
        self.trace.append(f"teardown {self.name}")
        if self.fail_teardown is not None:
            raise self.fail_teardown


class TraceHandler(logging.Handler):
    def __init__(self, trace):
        super().__init__(level=logging.DEBUG)
        self.trace = trace

    def emit(self, record):
        self.trace.append(f"log {record.getMessage()}")


class BrokenHandler(logging.Handler):
    def emit(self, record):
        raise OSError("disk full")


def trace_logger(trace):
    logger = logging.getLogger(f"tests.trace.{uuid.uuid4().hex}")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    logger.addHandler(TraceHandler(trace))
    return logger


def broken_logger():
    logger = logging.getLogger(f"tests.broken.{uuid.uuid4().hex}")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    logger.addHandler(BrokenHandler())
    return logger
