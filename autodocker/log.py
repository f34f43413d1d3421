"""日志配置模块"""

import sys

from loguru import logger

LOG_FORMAT = "<level>{level: <8}</level> | <level>{message}</level>"
DEBUG_LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def configure_logging(level: str = "INFO") -> None:
    """
    配置loguru日志输出

    日志写到标准错误，标准输出留给转发的引擎命令。

    Args:
        level: 日志级别
    """
    # 移除已有处理器
    logger.remove()
    logger.add(
        sink=lambda msg: print(msg, end="", file=sys.stderr),
        format=DEBUG_LOG_FORMAT if level in ("TRACE", "DEBUG") else LOG_FORMAT,
        colorize=sys.stderr.isatty(),
        level=level,
    )
