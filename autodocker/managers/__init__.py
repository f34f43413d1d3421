"""容器引擎管理器模块

该模块包含各种管理器类，用于管理目录对应的镜像和容器。
"""

from .base_manager import BaseManager
from .container_manager import ContainerManager, container_name_for
from .engine import Engine, running_as_root
from .image_manager import ImageManager

__all__ = [
    "BaseManager",
    "ContainerManager",
    "ImageManager",
    "Engine",
    "container_name_for",
    "running_as_root",
]
