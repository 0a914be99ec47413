"""
Rule chain composing the lifecycle rules around one test execution.

Setup runs outermost-to-innermost, teardown innermost-to-outermost.
Every rule whose setup completed gets its teardown, whatever happens
further in: an inner setup error, a failing body, another rule's
teardown error.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional, Sequence, Tuple

from selenium_rules.driver.driver_resource import DriverResource
from selenium_rules.driver.service_resource import DriverServiceResource
from selenium_rules.errors import ConfigurationError, DiagnosticCaptureError, NotReadyError
from selenium_rules.outcome import TestOutcome
from selenium_rules.rules.base import LifecycleRule
from selenium_rules.rules.screenshot import ScreenshotOnFailureRule
from selenium_rules.rules.test_logger import TestLoggerRule
from selenium_rules.utils.logger import get_logger
from selenium_rules.utils.screenshot import OutputType

log = get_logger()


class ChainState(Enum):
    IDLE = "idle"
    SETTING_UP = "setting_up"
    RUNNING = "running"
    FAILED = "failed"
    TEARING_DOWN = "tearing_down"
    DONE = "done"


class ComposedLifecycle:
    """
    中文：按固定顺序组合的规则链，一次用例执行使用一个实例。
    English: Single-use execution unit wrapping a test with an ordered tuple of rules.

    Use :meth:`builder` (or :class:`LifecycleChain`) to instantiate.
    """

    def __init__(self, rules: Sequence[LifecycleRule], driver_resource: DriverResource):
        if driver_resource is None:
            raise ConfigurationError("The DriverResource should not be null")
        if driver_resource not in rules:
            raise ConfigurationError("The DriverResource must be part of the rule chain")
        self._rules: Tuple[LifecycleRule, ...] = tuple(rules)
        self._driver_resource = driver_resource
        self._entered: list[LifecycleRule] = []
        self._state = ChainState.IDLE
        self._setup_diagnostics: list[BaseException] = []

    @staticmethod
    def builder(factory) -> "LifecycleChain":
        return LifecycleChain(factory)

    @property
    def rules(self) -> Tuple[LifecycleRule, ...]:
        return self._rules

    @property
    def state(self) -> ChainState:
        return self._state

    @property
    def driver_resource(self) -> DriverResource:
        return self._driver_resource

    def get_driver(self):
        return self._driver_resource.get_driver()

    def setup(self, description: str) -> None:
        """
        中文：按顺序执行各规则的 setup。
        参数:
            description: 用例名称（如 pytest nodeid）。
        异常:
            任一规则 setup 失败时，先逆序 teardown 已完成 setup 的规则，再抛出原始异常。
        """

        if self._state is not ChainState.IDLE:
            raise NotReadyError(f"Rule chain already used, current state: {self._state.value}")

        self._state = ChainState.SETTING_UP
        for rule in self._rules:
            try:
                rule.setup(description)
            except DiagnosticCaptureError as exc:
                log.warning("[CHAIN] %r setup diagnostic failure: %s", rule, exc)
                self._setup_diagnostics.append(exc)
            except BaseException as exc:
                # pytest.skip / KeyboardInterrupt included: completed rules still get teardown
                self._state = ChainState.FAILED
                log.error("[CHAIN] %r setup failed: %r", rule, exc)
                outcome = TestOutcome.setup_failure(exc)
                outcome.diagnostics.extend(self._setup_diagnostics)
                self._state = ChainState.TEARING_DOWN
                try:
                    self._sweep(outcome)
                finally:
                    self._state = ChainState.DONE
                raise
            self._entered.append(rule)

        self._state = ChainState.RUNNING

    def teardown(self, outcome: TestOutcome) -> None:
        """
        中文：逆序执行已进入规则的 teardown。
        参数:
            outcome: 用例执行结果。
        异常:
            仅当用例通过时抛出第一个非诊断类 teardown 异常；
            截图/日志失败只记录在 outcome.diagnostics 中。
        """

        if self._state is ChainState.DONE:
            return
        if self._state is not ChainState.RUNNING:
            raise NotReadyError(
                f"Cannot tear down rule chain in state: {self._state.value}"
            )

        outcome.diagnostics.extend(self._setup_diagnostics)
        self._state = ChainState.TEARING_DOWN
        try:
            first_error = self._sweep(outcome)
        finally:
            self._state = ChainState.DONE

        if first_error is not None and outcome.passed:
            raise first_error

    def run(self, body: Callable[[], object], description: str) -> TestOutcome:
        """Run the whole setup / body / teardown protocol around ``body``."""

        self.setup(description)
        try:
            body()
        except BaseException as exc:
            outcome = TestOutcome.failure(exc)
            self.teardown(outcome)
            raise

        outcome = TestOutcome.success()
        self.teardown(outcome)
        return outcome

    def _sweep(self, outcome: TestOutcome) -> Optional[BaseException]:
        """
        Tear down every entered rule, innermost first.

        Returns the first ordinary teardown error. A BaseException
        (KeyboardInterrupt, pytest outcomes) is raised only after the
        remaining rules have been torn down.
        """
        first_error = None
        interrupt = None
        while self._entered:
            rule = self._entered.pop()
            try:
                rule.teardown(outcome)
            except DiagnosticCaptureError as exc:
                log.warning("[CHAIN] %r diagnostic failure: %s", rule, exc)
                outcome.diagnostics.append(exc)
            except Exception as exc:
                log.error("[CHAIN] %r teardown failed: %s", rule, exc)
                outcome.teardown_errors.append(exc)
                if first_error is None:
                    first_error = exc
            except BaseException as exc:
                log.error("[CHAIN] %r teardown interrupted: %r", rule, exc)
                if interrupt is None:
                    interrupt = exc
        if interrupt is not None:
            raise interrupt
        return first_error


class LifecycleChain:
    """
    Builder for :class:`ComposedLifecycle`.

    Nesting order is fixed: test logger, driver service, driver
    resource, screenshot on failure. Rules not configured are left out.
    """

    def __init__(self, factory):
        if factory is None:
            raise ConfigurationError("The DriverFactory should not be null")
        self._driver_resource = DriverResource(factory)
        self._test_logger: Optional[TestLoggerRule] = None
        self._driver_service: Optional[DriverServiceResource] = None
        self._screenshot: Optional[ScreenshotOnFailureRule] = None
        self._built = False

    def with_logger(self, logger=None) -> "LifecycleChain":
        self._test_logger = TestLoggerRule(logger)
        return self

    def with_driver_service(self, service) -> "LifecycleChain":
        self._driver_service = DriverServiceResource(service)
        return self

    def with_screenshot_on_failure(
        self,
        output_type=OutputType.FILE,
        sink=None,
        folder: str | None = None,
    ) -> "LifecycleChain":
        self._screenshot = ScreenshotOnFailureRule(
            self._driver_resource, output_type, sink=sink, folder=folder
        )
        return self

    def build(self) -> ComposedLifecycle:
        if self._built:
            raise ConfigurationError("build() can be called only once per LifecycleChain")
        self._built = True

        candidates = (
            self._test_logger,
            self._driver_service,
            self._driver_resource,
            self._screenshot,
        )
        rules = [rule for rule in candidates if rule is not None]
        return ComposedLifecycle(rules, self._driver_resource)
