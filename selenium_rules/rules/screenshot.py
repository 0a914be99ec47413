from selenium_rules.errors import ConfigurationError, DiagnosticCaptureError
from selenium_rules.outcome import TestOutcome
from selenium_rules.protocols import DriverProvider
from selenium_rules.rules.base import LifecycleRule
from selenium_rules.utils.logger import get_logger
from selenium_rules.utils.screenshot import OutputType, capture_screenshot

log = get_logger()

DEFAULT_FOLDER = "output/screenshots"


def log_screenshot(artifact) -> None:
    """Default sink: only reports what was captured."""

    if isinstance(artifact, bytes):
        log.info("[SCREENSHOT] captured %d bytes", len(artifact))
    elif isinstance(artifact, str) and len(artifact) > 256:
        log.info("[SCREENSHOT] captured base64 payload (%d chars)", len(artifact))
    else:
        log.info("[SCREENSHOT] saved %s", artifact)


class ScreenshotOnFailureRule(LifecycleRule):
    """
    失败截图规则：用例主体失败时，在驱动关闭前截图。
    Takes a screenshot when the test body failed.

    Must be nested inside the rule that owns the driver so the driver is
    still alive when teardown() runs. The artifact goes to ``sink``.
    """

    name = "screenshot_on_failure"

    def __init__(self, driver_provider, output_type=OutputType.FILE, sink=None, folder=None):
        """
        参数:
            driver_provider: 提供 get_driver() 的对象，一般为 DriverResource。
            output_type: 截图表示形式，OutputType 或 "file" / "png" / "base64"。
            sink: 接收截图结果的回调，默认仅写日志。
            folder: FILE 模式下的截图目录。
        """

        if driver_provider is None:
            raise ConfigurationError("The driver provider should not be null")
        if not isinstance(driver_provider, DriverProvider):
            raise ConfigurationError(
                f"The driver provider must provide get_driver(), got {type(driver_provider).__name__}"
            )
        self._provider = driver_provider
        self.output_type = OutputType.parse(output_type)
        self.sink = sink or log_screenshot
        self.folder = folder or DEFAULT_FOLDER
        self._description = None

    def setup(self, description: str) -> None:
        self._description = description

    def teardown(self, outcome: TestOutcome) -> None:
        # setup failures never reach the test body, nothing to capture
        if not outcome.body_failed:
            return

        try:
            driver = self._provider.get_driver()
            artifact = capture_screenshot(
                driver,
                self.output_type,
                folder=self.folder,
                prefix=self._description or "case",
            )
        except Exception as exc:
            raise DiagnosticCaptureError(
                f"Failed taking screenshot for {self._description or '-'}: {exc}"
            ) from exc

        try:
            self.sink(artifact)
        except Exception as exc:
            raise DiagnosticCaptureError(
                f"Screenshot sink failed for {self._description or '-'}: {exc}"
            ) from exc
