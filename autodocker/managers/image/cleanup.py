"""镜像清理相关功能"""

from typing import Dict, List, Protocol, Union

from loguru import logger

from ...constants import MESSAGES
from ..engine import Engine
from .base import ImageName, SelectionMethod, Tag
from .inventory import TagInventory
from .tag import image_ref


class SelectionStrategy(Protocol):
    """标签选择策略协议"""

    def select(self, inventory: TagInventory, image_name: ImageName) -> List[Tag]:
        """筛选要删除的标签"""
        ...


class AllTagsStrategy:
    """选择全部自动管理的标签，包括latest"""

    def select(self, inventory: TagInventory, image_name: ImageName) -> List[Tag]:
        return inventory.list_auto_tags(image_name)


class OldTagsStrategy:
    """选择除最新一个以外的全部时间戳标签，latest保留"""

    def select(self, inventory: TagInventory, image_name: ImageName) -> List[Tag]:
        # 最多一个时间戳标签时结果为空
        return inventory.list_timestamp_tags(image_name)[:-1]


STRATEGIES: Dict[SelectionMethod, SelectionStrategy] = {
    SelectionMethod.ALL: AllTagsStrategy(),
    SelectionMethod.OLD: OldTagsStrategy(),
}


class ImageCleaner:
    """镜像清理器类"""

    def __init__(self, engine: Engine, inventory: TagInventory):
        """
        初始化镜像清理器

        Args:
            engine: 容器引擎封装
            inventory: 标签清单读取器
        """
        self.engine = engine
        self.inventory = inventory

    def select(self, image_name: ImageName, method: Union[str, SelectionMethod]) -> List[Tag]:
        """
        计算要处理的标签

        Args:
            image_name: 镜像名称
            method: 选择方式，可以是字符串或SelectionMethod

        Returns:
            List[Tag]: 升序排列的标签

        Raises:
            UnknownSelectionMethodError: 选择方式无法识别时抛出
        """
        if not isinstance(method, SelectionMethod):
            method = SelectionMethod.parse(method)
        return STRATEGIES[method].select(self.inventory, image_name)

    def cleanup(self, image_name: ImageName, method: Union[str, SelectionMethod]) -> List[str]:
        """
        删除选中的标签，一次调用删除全部

        Args:
            image_name: 镜像名称
            method: 选择方式

        Returns:
            List[str]: 已删除的镜像引用，无可删除镜像时为空

        Raises:
            EngineError: 删除失败时抛出
        """
        tags = self.select(image_name, method)
        if not tags:
            logger.info(MESSAGES["no_images_deleted"])
            return []

        refs = [image_ref(image_name, tag) for tag in tags]
        self.engine.run(["image", "rm", *refs])
        for ref in refs:
            logger.info(f"已删除镜像: {ref}")
        return refs
