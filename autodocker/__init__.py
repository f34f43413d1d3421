"""容器引擎命令拦截工具包"""

from loguru import logger

from .log import configure_logging

# 默认配置，入口函数会按配置重新设置级别
configure_logging()

# 导入其他模块
from .cli import app, main

__version__ = "0.1.0"

__all__ = [
    "app",
    "main",
    "logger",
    "configure_logging",
]
