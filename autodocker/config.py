"""配置管理模块

配置来源按优先级从低到高：内置默认值、dotenv配置文件、进程环境变量。
"""

import os
import shutil
from pathlib import Path
from typing import Dict, Mapping, Optional

from dotenv import dotenv_values
from loguru import logger

from .constants import CONFIG_FILE_ENV, DEFAULT_CONFIG_FILE, DEFAULT_SETTINGS, ENV_PREFIX, MESSAGES
from .errors import ConfigError

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings:
    """运行配置"""

    engine: str
    elevate: str
    log_level: str
    default_command: str

    def __init__(
        self,
        engine: str = DEFAULT_SETTINGS["engine"],
        elevate: str = DEFAULT_SETTINGS["elevate"],
        log_level: str = DEFAULT_SETTINGS["log_level"],
        default_command: str = DEFAULT_SETTINGS["default_command"],
    ) -> None:
        self.engine = engine
        self.elevate = elevate
        self.log_level = log_level.upper()
        self.default_command = default_command

        if self.log_level not in LOG_LEVELS:
            raise ConfigError(MESSAGES["invalid_log_level"].format(log_level))

    def __repr__(self) -> str:
        return (
            f"Settings(engine={self.engine!r}, elevate={self.elevate!r}, "
            f"log_level={self.log_level!r}, default_command={self.default_command!r})"
        )

    def resolve_engine(self) -> str:
        """
        获取引擎可执行文件路径

        仅给出命令名时在PATH中查找，找不到则原样返回，由执行时报错。

        Returns:
            str: 引擎路径
        """
        if os.sep in self.engine:
            return self.engine
        return shutil.which(self.engine) or self.engine

    def check_engine_is_not(self, program: Optional[str]) -> None:
        """
        确认引擎不是当前程序本身，避免无限转发

        Args:
            program: 当前程序路径

        Raises:
            ConfigError: 引擎指向当前程序时抛出
        """
        if not program:
            return
        engine = self.resolve_engine()
        if os.path.realpath(engine) == os.path.realpath(program):
            raise ConfigError(MESSAGES["engine_is_self"].format(engine))


def _read_config_file(path: Path) -> Dict[str, str]:
    """读取dotenv格式的配置文件，忽略空值"""
    if not path.is_file():
        return {}
    logger.debug(f"读取配置文件: {path}")
    return {key: value for key, value in dotenv_values(path).items() if value is not None}


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    加载运行配置

    Args:
        environ: 环境变量，默认为os.environ

    Returns:
        Settings: 合并后的配置

    Raises:
        ConfigError: 配置值不合法时抛出
    """
    if environ is None:
        environ = os.environ

    config_file = Path(environ.get(CONFIG_FILE_ENV, DEFAULT_CONFIG_FILE)).expanduser()
    values: Dict[str, str] = dict(_read_config_file(config_file))
    values.update({key: value for key, value in environ.items() if key.startswith(ENV_PREFIX)})

    options = {}
    for name in DEFAULT_SETTINGS:
        value = values.get(f"{ENV_PREFIX}{name.upper()}")
        if value:
            options[name] = value

    return Settings(**options)
