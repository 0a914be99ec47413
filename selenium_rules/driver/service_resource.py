from selenium_rules.errors import ConfigurationError
from selenium_rules.rules.base import LifecycleRule
from selenium_rules.utils.logger import get_logger

log = get_logger()


class DriverServiceResource(LifecycleRule):
    """
    Starts a driver service (chromedriver, geckodriver, ...) before the
    test and stops it afterwards.

    Typically a selenium ``Service``; anything with start()/stop() works.
    """

    name = "driver_service"

    def __init__(self, service):
        if service is None:
            raise ConfigurationError("The DriverService should not be null")
        self._service = service
        self._started = False

    @property
    def service(self):
        return self._service

    def setup(self, description=None) -> None:
        self._service.start()
        self._started = True
        log.debug("[SERVICE] started %r", self._service)

    def teardown(self, outcome=None) -> None:
        if not self._started:
            return
        self._started = False
        log.debug("[SERVICE] stopping %r", self._service)
        self._service.stop()
