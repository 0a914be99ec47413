import os
import re
from datetime import datetime
from enum import Enum

from selenium_rules.errors import ConfigurationError


class OutputType(Enum):
    """Representation of a captured screenshot."""

    FILE = "file"
    PNG = "png"
    BASE64 = "base64"

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            raise ConfigurationError(
                f"Unsupported screenshot output type: {value!r} (expected one of: {choices})"
            ) from None


# 文件名上限 255 字节，需留出时间戳与 pid 的长度
MAX_PREFIX_LENGTH = 150


def safe_name(s: str) -> str:
    # 用于文件名：替换非法字符并截断
    return re.sub(r"[^A-Za-z0-9_.=-]+", "_", s.replace("::", "__"))[:MAX_PREFIX_LENGTH]


def take_screenshot(
    driver,
    folder: str,
    prefix: str = "case",
) -> str:
    """
    中文：保存截图并返回文件路径。
    参数:
        driver: WebDriver 实例。
        folder: 截图输出目录。
        prefix: 文件名前缀，过长时截断。
    """

    os.makedirs(folder, exist_ok=True)
    prefix = safe_name(prefix)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
    filename = f"{prefix}_{ts}_{os.getpid()}.png"

    path = os.path.join(folder, filename)
    if not driver.save_screenshot(path):
        raise OSError(f"Driver could not write screenshot to {path}")
    return path


def capture_screenshot(driver, output_type: OutputType, folder: str = "output/screenshots", prefix: str = "case"):
    """
    中文：按指定表示形式截图。
    参数:
        driver: WebDriver 实例。
        output_type: FILE 返回文件路径，PNG 返回 bytes，BASE64 返回字符串。
        folder: FILE 模式下的截图输出目录。
        prefix: FILE 模式下的文件名前缀。
    """

    if output_type is OutputType.FILE:
        return take_screenshot(driver, folder, prefix=prefix)
    if output_type is OutputType.PNG:
        return driver.get_screenshot_as_png()
    return driver.get_screenshot_as_base64()
