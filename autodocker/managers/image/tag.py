"""镜像标签编码相关功能

自动管理的标签包括时间戳标签和latest。时间戳标签定长补零，
字符串排序即时间排序，因此无需解析时间即可比较新旧。
"""

import re
from datetime import datetime
from typing import Iterable, List, Optional

from ...constants import LATEST_TAG, TIMESTAMP_TAG_PATTERN
from ...time_utils import get_timestamp
from .base import ImageName, Tag

_TIMESTAMP_RE = re.compile(TIMESTAMP_TAG_PATTERN)


def is_timestamp_tag(tag: str) -> bool:
    """是否为时间戳标签"""
    return _TIMESTAMP_RE.match(tag) is not None


def is_auto_tag(tag: str) -> bool:
    """是否为自动管理的标签（时间戳或latest）"""
    return is_timestamp_tag(tag) or tag == LATEST_TAG


def format_timestamp(now: Optional[datetime] = None) -> Tag:
    """生成时间戳标签"""
    return get_timestamp(now)


def sort_tags(tags: Iterable[Tag]) -> List[Tag]:
    """按字符串升序排列标签"""
    return sorted(tags)


def image_ref(image_name: ImageName, tag: Tag) -> str:
    """
    组合镜像引用

    Args:
        image_name: 镜像名称
        tag: 标签

    Returns:
        str: "镜像名:标签" 格式的引用
    """
    return f"{image_name}:{tag}"
