from selenium import webdriver
from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.edge.options import Options as EdgeOptions
from selenium.webdriver.firefox.options import Options as FirefoxOptions

from selenium_rules.errors import ConfigurationError
from selenium_rules.utils.config_loader import load_config
from selenium_rules.utils.logger import get_logger

log = get_logger()

_OPTIONS = {
    "chrome": ChromeOptions,
    "edge": EdgeOptions,
    "firefox": FirefoxOptions,
}

_DRIVERS = {
    "chrome": webdriver.Chrome,
    "edge": webdriver.Edge,
    "firefox": webdriver.Firefox,
}


class BrowserDriverFactory:
    """
    中文：根据参数或配置创建本地/远程浏览器驱动的工厂。
    English: Driver factory for Chrome, Edge and Firefox, local or against a running driver service.
    """

    def __init__(
        self,
        browser: str | None = None,
        arguments: list[str] | None = None,
        service=None,
        implicit_wait: float | None = None,
        page_load_timeout: float | None = None,
        config: dict | None = None,
    ):
        """
        参数:
            browser: chrome、edge、firefox，未传则读取配置 project.browser。
            arguments: 浏览器启动参数，未传则读取配置 browser.arguments。
            service: 已启动的 DriverService，传入时通过 Remote 连接其 service_url。
            implicit_wait: 隐式等待秒数，未传则读取配置 selenium.implicit_wait。
            page_load_timeout: 页面加载超时秒数，未传则读取配置。
            config: 配置字典，未传则调用 load_config()。
        """

        if config is None:
            config = load_config()

        if browser is None:
            browser = config.get("project", {}).get("browser", "chrome")
        browser = str(browser).lower()
        if browser not in _OPTIONS:
            raise ConfigurationError(f"Unsupported browser: {browser}")

        if arguments is None:
            arguments = list(config.get("browser", {}).get("arguments") or [])

        selenium_cfg = config.get("selenium", {}) or {}
        if implicit_wait is None:
            implicit_wait = selenium_cfg.get("implicit_wait")
        if page_load_timeout is None:
            page_load_timeout = selenium_cfg.get("page_load_timeout")

        self.browser = browser
        self.arguments = arguments
        self.service = service
        self.implicit_wait = implicit_wait
        self.page_load_timeout = page_load_timeout

    def _options(self):
        options = _OPTIONS[self.browser]()
        # firefox 不支持 --start-maximized
        for arg in self.arguments:
            if self.browser == "firefox" and arg == "--start-maximized":
                continue
            options.add_argument(arg)
        return options

    def create(self):
        options = self._options()

        if self.service is not None:
            log.info("[DRIVER] remote %s session at %s", self.browser, self.service.service_url)
            driver = webdriver.Remote(command_executor=self.service.service_url, options=options)
        else:
            log.info("[DRIVER] local %s session", self.browser)
            driver = _DRIVERS[self.browser](options=options)

        if self.implicit_wait is not None:
            driver.implicitly_wait(float(self.implicit_wait))
        if self.page_load_timeout is not None:
            driver.set_page_load_timeout(float(self.page_load_timeout))
        return driver

    def __repr__(self):
        return f"BrowserDriverFactory(browser={self.browser!r})"
