"""镜像管理器类 - 门面模式实现"""

from pathlib import Path
from typing import List, Optional, Union

from .base_manager import BaseManager
from .engine import Engine
from .image.base import ImageName, SelectionMethod
from .image.build import ImageBuilder
from .image.cleanup import ImageCleaner
from .image.inventory import TagInventory
from .image.naming import EngineIdentityProvider, IdentityProvider, ImageNameResolver
from .image.push import ImagePusher


class ImageManager(BaseManager):
    """镜像管理器类，用于构建、推送和清理目录对应的镜像"""

    def __init__(self, engine: Engine, identity: Optional[IdentityProvider] = None) -> None:
        """
        初始化镜像管理器

        Args:
            engine: 容器引擎封装
            identity: 身份提供者，默认通过引擎info命令获取
        """
        super().__init__(engine)

        # 初始化子组件
        self.resolver = ImageNameResolver(identity or EngineIdentityProvider(engine))
        self.inventory = TagInventory(engine)
        self.builder = ImageBuilder(engine)
        self.pusher = ImagePusher(engine, self.inventory)
        self.cleaner = ImageCleaner(engine, self.inventory)

    def image_name(self, path: Union[str, Path], command: str = "autobuild") -> ImageName:
        """
        获取目录对应的镜像名称

        Raises:
            InvalidPathError: 路径不是已存在的目录时抛出
        """
        return self.resolver.resolve(path, command)

    def build_image(self, path: Union[str, Path]) -> List[str]:
        """
        构建目录对应的镜像

        Args:
            path: 构建目录

        Returns:
            List[str]: 新镜像的引用
        """
        image_name = self.image_name(path, "autobuild")
        return self.builder.build(path, image_name)

    def push_image(self, path: Union[str, Path]) -> List[str]:
        """
        推送目录对应的最新镜像

        Args:
            path: 构建目录

        Returns:
            List[str]: 已推送的镜像引用
        """
        image_name = self.image_name(path, "autopush")
        return self.pusher.push(image_name)

    def cleanup_images(
        self, path: Union[str, Path], method: Union[str, SelectionMethod] = SelectionMethod.OLD
    ) -> List[str]:
        """
        清理目录对应的镜像

        Args:
            path: 构建目录
            method: 选择方式，默认只清理旧镜像

        Returns:
            List[str]: 已删除的镜像引用
        """
        if not isinstance(method, SelectionMethod):
            method = SelectionMethod.parse(method)
        image_name = self.image_name(path, "autoprune")
        return self.cleaner.cleanup(image_name, method)
