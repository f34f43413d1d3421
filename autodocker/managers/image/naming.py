"""镜像命名相关功能"""

import re
from pathlib import Path
from typing import Optional, Protocol, Union

from loguru import logger

from ...errors import InvalidPathError
from ..engine import Engine
from .base import ImageName

_USERNAME_RE = re.compile(r"^\s*Username:\s*(\S+)\s*$", re.MULTILINE)


class IdentityProvider(Protocol):
    """仓库登录身份提供者协议"""

    def current_username(self) -> Optional[str]:
        """返回当前登录的仓库用户名，未登录时返回None"""
        ...


class EngineIdentityProvider:
    """通过引擎的info命令获取登录身份"""

    def __init__(self, engine: Engine):
        """
        初始化身份提供者

        Args:
            engine: 容器引擎封装
        """
        self.engine = engine

    def current_username(self) -> Optional[str]:
        """
        获取当前登录的仓库用户名

        Returns:
            Optional[str]: 用户名，未登录时为None

        Raises:
            EngineError: info命令执行失败时抛出
        """
        output = self.engine.capture(["info"])
        match = _USERNAME_RE.search(output)
        if match is None:
            logger.debug("未登录镜像仓库")
            return None
        return match.group(1)


class StaticIdentityProvider:
    """固定身份，用于已知登录状态的场景"""

    def __init__(self, username: Optional[str] = None):
        self.username = username

    def current_username(self) -> Optional[str]:
        return self.username


class ImageNameResolver:
    """根据构建目录推导镜像名称"""

    def __init__(self, identity: IdentityProvider):
        """
        初始化名称解析器

        Args:
            identity: 身份提供者
        """
        self.identity = identity

    def resolve(self, path: Union[str, Path], command: str = "autobuild") -> ImageName:
        """
        解析镜像名称

        Args:
            path: 构建目录
            command: 出错时关联的命令名称

        Returns:
            ImageName: [用户名/]目录名

        Raises:
            InvalidPathError: 路径不是已存在的目录时抛出
        """
        directory = Path(path).expanduser()
        if not directory.is_dir():
            raise InvalidPathError(command, str(path))

        basename = directory.resolve().name
        if not basename:
            # 根目录没有可用的名称
            raise InvalidPathError(command, str(path))

        username = self.identity.current_username()
        image_name = f"{username}/{basename}" if username else basename
        logger.debug(f"目录 {path} 对应镜像 {image_name}")
        return image_name
