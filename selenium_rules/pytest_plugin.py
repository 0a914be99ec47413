"""
pytest 集成：把规则链挂到 pytest 的 setup / call / teardown 三个阶段上。

Enable with ``pytest_plugins = ["selenium_rules.pytest_plugin"]`` in a
conftest.py or ``-p selenium_rules.pytest_plugin`` on the command line.
"""

from __future__ import annotations

import pytest

from selenium_rules.chain import LifecycleChain
from selenium_rules.driver.driver_factory import BrowserDriverFactory
from selenium_rules.outcome import TestOutcome
from selenium_rules.utils.config_loader import load_config
from selenium_rules.utils.logger import enable_file_logging, get_logger

log = get_logger()


def pytest_addoption(parser):
    group = parser.getgroup("selenium-rules")
    group.addoption("--sr-browser", action="store", default=None, help="浏览器类型（覆盖 project.browser）")
    group.addoption("--sr-screenshot-dir", action="store", default=None, help="失败截图输出目录")
    group.addoption("--sr-config", action="store", default=None, help="config.yaml 路径")


def pytest_configure(config):
    cfg = load_config(config.getoption("--sr-config"))

    browser = config.getoption("--sr-browser")
    if browser:
        cfg["project"]["browser"] = browser

    screenshot_dir = config.getoption("--sr-screenshot-dir")
    if screenshot_dir:
        cfg["paths"]["screenshots"] = screenshot_dir

    config._sr_cfg = cfg

    log_dir = cfg["paths"].get("logs")
    if log_dir:
        log_file = enable_file_logging(log_dir)
        log.info("[SR] file logging enabled: %s", log_file)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    记录每个阶段的报告（rep_setup / rep_call / rep_teardown），
    供 selenium_rule fixture 在 teardown 时判断用例结果。
    """
    outcome = yield
    rep = outcome.get_result()
    setattr(item, f"rep_{rep.when}", rep)


def outcome_from_item(item) -> TestOutcome:
    """
    中文：根据已记录的阶段报告构造用例结果。
    参数:
        item: pytest 用例对象。
    """

    rep_setup = getattr(item, "rep_setup", None)
    if rep_setup is not None and rep_setup.failed:
        return TestOutcome.setup_failure(detail=rep_setup.longreprtext)
    if rep_setup is not None and rep_setup.skipped:
        # 跳过不算失败，不截图
        return TestOutcome.success()

    rep_call = getattr(item, "rep_call", None)
    if rep_call is None:
        return TestOutcome.setup_failure(detail="test body did not run")
    if rep_call.failed:
        return TestOutcome.failure(detail=rep_call.longreprtext)
    return TestOutcome.success()


@pytest.fixture(scope="session")
def sr_config(pytestconfig):
    return pytestconfig._sr_cfg


@pytest.fixture
def driver_factory(sr_config):
    """Override in a conftest.py to supply a custom factory."""

    return BrowserDriverFactory(config=sr_config)


@pytest.fixture
def selenium_rule(request, sr_config, driver_factory):
    """
    按配置组装规则链，用例前 setup、用例后带结果 teardown。

        request: pytest 请求对象。
        sr_config: 全局配置字典。
        driver_factory: 驱动工厂。
    """

    rules_cfg = sr_config.get("rules", {}) or {}
    builder = LifecycleChain(driver_factory)

    if rules_cfg.get("test_logger", True):
        builder.with_logger()

    output_type = rules_cfg.get("screenshot_on_failure")
    if output_type is True:
        output_type = "file"
    if output_type:
        builder.with_screenshot_on_failure(
            output_type,
            folder=sr_config["paths"]["screenshots"],
        )

    rule = builder.build()
    rule.setup(request.node.nodeid)
    yield rule
    rule.teardown(outcome_from_item(request.node))


@pytest.fixture
def driver(selenium_rule):
    return selenium_rule.get_driver()
