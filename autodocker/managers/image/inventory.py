"""镜像标签清单相关功能"""

from typing import Callable, List, Optional

from loguru import logger

from ..engine import Engine
from .base import ImageName, Tag
from .tag import is_auto_tag, is_timestamp_tag, sort_tags


class TagInventory:
    """从引擎读取某个镜像的标签清单，每次调用都重新查询"""

    def __init__(self, engine: Engine):
        """
        初始化标签清单读取器

        Args:
            engine: 容器引擎封装
        """
        self.engine = engine

    def list_auto_tags(self, image_name: ImageName) -> List[Tag]:
        """
        获取自动管理的全部标签（包括latest）

        Args:
            image_name: 镜像名称

        Returns:
            List[Tag]: 升序排列的标签，无镜像时为空
        """
        return self._list_tags(image_name, is_auto_tag)

    def list_timestamp_tags(self, image_name: ImageName) -> List[Tag]:
        """
        获取全部时间戳标签

        Args:
            image_name: 镜像名称

        Returns:
            List[Tag]: 按时间升序排列的标签，无镜像时为空
        """
        return self._list_tags(image_name, is_timestamp_tag)

    def latest_timestamp_tag(self, image_name: ImageName) -> Optional[Tag]:
        """返回最新的时间戳标签，没有时返回None"""
        tags = self.list_timestamp_tags(image_name)
        return tags[-1] if tags else None

    def _list_tags(self, image_name: ImageName, keep: Callable[[str], bool]) -> List[Tag]:
        output = self.engine.capture(["image", "ls"])
        tags = [tag for tag in parse_image_rows(output, image_name) if keep(tag)]
        logger.debug(f"镜像 {image_name} 的标签: {tags}")
        return sort_tags(tags)


def parse_image_rows(output: str, image_name: ImageName) -> List[Tag]:
    """
    从 `image ls` 的输出中提取指定仓库的标签

    第一列为仓库名，第二列为标签，仓库名必须完全一致。

    Args:
        output: image ls 的标准输出
        image_name: 镜像名称

    Returns:
        List[Tag]: 原始顺序的标签
    """
    tags = []
    for line in output.splitlines():
        columns = line.split()
        if len(columns) < 2:
            continue
        repository, tag = columns[0], columns[1]
        if repository == image_name:
            tags.append(tag)
    return tags
