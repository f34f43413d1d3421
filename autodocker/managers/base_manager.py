"""基础管理器类"""

from loguru import logger

from .engine import Engine


class BaseManager:
    """所有管理器类的基类，包含共享的属性和方法"""

    engine: Engine

    def __init__(self, engine: Engine) -> None:
        """
        初始化基础管理器

        Args:
            engine: 容器引擎封装
        """
        self.engine = engine
        logger.debug(f"{type(self).__name__} 使用引擎 {engine.executable}")
