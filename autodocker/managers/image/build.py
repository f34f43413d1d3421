"""镜像构建相关功能"""

from pathlib import Path
from typing import List, Optional, Union

from loguru import logger

from ...constants import LATEST_TAG
from ..engine import Engine
from .base import ImageName
from .tag import format_timestamp, image_ref


class ImageBuilder:
    """镜像构建器类"""

    def __init__(self, engine: Engine) -> None:
        """
        初始化镜像构建器

        Args:
            engine: 容器引擎封装
        """
        self.engine = engine

    def build(self, context_dir: Union[str, Path], image_name: ImageName, timestamp: Optional[str] = None) -> List[str]:
        """
        构建镜像，同时打上时间戳标签和latest标签

        Args:
            context_dir: 构建目录
            image_name: 镜像名称
            timestamp: 时间戳标签，默认为当前时间

        Returns:
            List[str]: 新镜像的引用，时间戳标签在前

        Raises:
            EngineError: 构建失败时抛出
        """
        versioned_image_name = image_ref(image_name, timestamp or format_timestamp())
        latest_image_name = image_ref(image_name, LATEST_TAG)

        logger.info(f"开始构建镜像 {versioned_image_name}...")
        self.engine.run(
            [
                "image",
                "build",
                "--tag",
                versioned_image_name,
                "--tag",
                latest_image_name,
                str(context_dir),
            ]
        )
        logger.success(f"镜像 {versioned_image_name} 构建成功，并设置为latest")
        return [versioned_image_name, latest_image_name]
