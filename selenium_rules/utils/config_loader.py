from __future__ import annotations

import copy
import os
from pathlib import Path

import yaml

from selenium_rules.errors import ConfigurationError


CONFIG_ENV_VAR = "SELENIUM_RULES_CONFIG"

DEFAULT_CONFIG = {
    "project": {"browser": "chrome"},
    "browser": {"arguments": ["--start-maximized"]},
    "selenium": {"implicit_wait": None, "page_load_timeout": None},
    "paths": {"screenshots": "output/screenshots", "logs": None},
    "rules": {"test_logger": True, "screenshot_on_failure": "file"},
}


def _merge(base: dict, override: dict) -> dict:
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(base.get(k), dict):
            _merge(base[k], v)
        else:
            base[k] = v
    return base


def load_config(path: str | Path | None = None) -> dict:
    """
    中文：加载 YAML 配置文件并与默认配置合并。
    参数:
        path: 配置文件路径；为空时读取环境变量 SELENIUM_RULES_CONFIG，
              再退回到当前目录下的 config.yaml。
    """

    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR) or "config.yaml"

    p = Path(path)
    if not p.is_absolute():
        p = (Path.cwd() / p).resolve()

    cfg = copy.deepcopy(DEFAULT_CONFIG)
    root = p.parent

    if p.exists():
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file must contain a mapping: {p}")
        _merge(cfg, data)
        cfg["_config_path"] = str(p)
    else:
        cfg["_config_path"] = None

    cfg["_project_root"] = str(root)

    for k, v in list(cfg["paths"].items()):
        if isinstance(v, str) and v and not Path(v).is_absolute():
            cfg["paths"][k] = str((root / v).resolve())

    return cfg
