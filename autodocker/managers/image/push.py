"""镜像推送相关功能"""

from typing import List

from loguru import logger

from ...constants import LATEST_TAG, MESSAGES
from ..engine import Engine
from .base import ImageName
from .inventory import TagInventory
from .tag import image_ref


class ImagePusher:
    """镜像推送器类"""

    def __init__(self, engine: Engine, inventory: TagInventory):
        """
        初始化镜像推送器

        Args:
            engine: 容器引擎封装
            inventory: 标签清单读取器
        """
        self.engine = engine
        self.inventory = inventory

    def push(self, image_name: ImageName) -> List[str]:
        """
        推送最新的时间戳标签和latest标签

        Args:
            image_name: 镜像名称

        Returns:
            List[str]: 已推送的镜像引用，没有可推送的镜像时为空

        Raises:
            EngineError: 推送失败时抛出
        """
        newest = self.inventory.latest_timestamp_tag(image_name)
        if newest is None:
            logger.info(MESSAGES["no_images_to_push"])
            return []

        images_to_push = [image_ref(image_name, newest), image_ref(image_name, LATEST_TAG)]
        for image in images_to_push:
            logger.info(f"推送镜像 {image}...")
            self.engine.run(["image", "push", image])

        logger.success(f"镜像 {images_to_push[0]} 推送成功")
        return images_to_push
