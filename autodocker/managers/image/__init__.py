"""Docker镜像管理相关功能模块

该子包包含镜像管理相关的各个功能模块，如命名、标签、构建、推送、清理等。
"""

from .base import ImageName, RunMethod, SelectionMethod, Tag
from .build import ImageBuilder
from .cleanup import AllTagsStrategy, ImageCleaner, OldTagsStrategy, SelectionStrategy
from .inventory import TagInventory, parse_image_rows
from .naming import EngineIdentityProvider, IdentityProvider, ImageNameResolver, StaticIdentityProvider
from .push import ImagePusher
from ...time_utils import parse_timestamp
from .tag import format_timestamp, image_ref, is_auto_tag, is_timestamp_tag, sort_tags

__all__ = [
    "ImageName",
    "Tag",
    "RunMethod",
    "SelectionMethod",
    "ImageBuilder",
    "ImageCleaner",
    "SelectionStrategy",
    "AllTagsStrategy",
    "OldTagsStrategy",
    "TagInventory",
    "parse_image_rows",
    "IdentityProvider",
    "EngineIdentityProvider",
    "StaticIdentityProvider",
    "ImageNameResolver",
    "ImagePusher",
    "format_timestamp",
    "image_ref",
    "is_auto_tag",
    "is_timestamp_tag",
    "parse_timestamp",
    "sort_tags",
]
