import logging
import os
from contextvars import ContextVar
from datetime import datetime

_CURRENT_TEST: ContextVar[str] = ContextVar("CURRENT_TEST", default="-")

LOGGER_NAME = "selenium_rules"

FORMAT = "%(asctime)s | %(levelname)-8s | %(test)s | %(filename)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def set_current_test(name: str | None) -> None:
    """
    设置当前测试名称上下文。

        name: 当前测试名称，为空时重置为 "-"。
    """

    _CURRENT_TEST.set(name or "-")


def get_current_test() -> str:
    return _CURRENT_TEST.get()


class _InjectTestNameFilter(logging.Filter):
    """
    日志过滤器，注入测试名称到记录中。
    Logger filter injecting test name into log records.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "test"):
            record.test = _CURRENT_TEST.get()
        return True


def get_logger() -> logging.Logger:
    """
    获取全局日志记录器（控制台输出，重复调用不会重复挂载 handler）。
    """

    logger = logging.getLogger(LOGGER_NAME)

    if getattr(logger, "_inited", False):
        return logger

    logger.setLevel(logging.DEBUG)

    formatter = logging.Formatter(fmt=FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(_InjectTestNameFilter())

    logger.addHandler(console_handler)
    logger.propagate = False

    logger._inited = True
    return logger


def enable_file_logging(log_dir: str) -> str:
    """
    中文：为全局日志记录器追加按运行时间命名的文件输出。
    参数:
        log_dir: 日志目录，不存在时自动创建。
    返回:
        日志文件路径；同一路径不会重复挂载。
    """

    logger = get_logger()
    os.makedirs(log_dir, exist_ok=True)

    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and getattr(handler, "_sr_log_dir", None) == log_dir:
            return handler.baseFilename

    log_file = os.path.join(
        log_dir,
        f"run_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
    )

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(fmt=FORMAT, datefmt=DATE_FORMAT))
    file_handler.addFilter(_InjectTestNameFilter())
    file_handler._sr_log_dir = log_dir

    logger.addHandler(file_handler)
    return log_file
