from enum import Enum

from selenium_rules.errors import ConfigurationError, NotReadyError, ProvisioningError
from selenium_rules.protocols import DriverFactory
from selenium_rules.rules.base import LifecycleRule
from selenium_rules.utils.logger import get_logger

log = get_logger()


class ResourceState(Enum):
    IDLE = "idle"
    READY = "ready"
    CLOSED = "closed"


class DriverResource(LifecycleRule):
    """
    驱动资源规则：用例开始前创建浏览器驱动，用例结束后关闭。
    Rule owning exactly one driver for one test execution.

    The driver is created through the given factory before the test and
    quit after it. Not thread safe and single use: build a new instance
    for every test.
    """

    name = "driver"

    def __init__(self, factory):
        if factory is None:
            raise ConfigurationError("The DriverFactory should not be null")
        if not isinstance(factory, DriverFactory):
            raise ConfigurationError(
                f"The DriverFactory must provide a create() method, got {type(factory).__name__}"
            )
        self._factory = factory
        self._driver = None
        self._state = ResourceState.IDLE

    @property
    def state(self) -> ResourceState:
        return self._state

    @property
    def factory(self):
        return self._factory

    def setup(self, description: str | None = None) -> None:
        """
        中文：通过工厂创建驱动。
        参数:
            description: 当前用例名称，仅用于日志。
        异常:
            ProvisioningError: 工厂抛出异常或返回 None。
            NotReadyError: 实例已被使用过。
        """

        if self._state is not ResourceState.IDLE:
            raise NotReadyError(
                f"DriverResource is single use, current state: {self._state.value}"
            )

        try:
            created = self._factory.create()
        except Exception as exc:
            raise ProvisioningError(
                f"DriverFactory failed creating a new driver: {exc}"
            ) from exc

        if created is None:
            raise ProvisioningError(
                "DriverFactory failed creating a new driver. The driver returned was null."
            )

        self._driver = created
        self._state = ResourceState.READY
        log.debug("[DRIVER] created %r for %s", created, description or "-")

    def get_driver(self):
        if self._state is not ResourceState.READY:
            raise NotReadyError(
                f"The driver is not available, resource state: {self._state.value}"
            )
        return self._driver

    def teardown(self, outcome=None) -> None:
        """Quit the driver if one was created; otherwise do nothing."""

        if self._state is not ResourceState.READY:
            self._state = ResourceState.CLOSED
            return

        driver = self._driver
        self._driver = None
        self._state = ResourceState.CLOSED
        log.debug("[DRIVER] quit %r", driver)
        driver.quit()
