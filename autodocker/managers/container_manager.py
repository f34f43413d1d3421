"""容器管理器类"""

from pathlib import Path
from typing import List, Optional, Sequence, Union

from loguru import logger

from ..constants import LATEST_TAG, MESSAGES
from ..errors import UsageError
from .base_manager import BaseManager
from .engine import Engine
from .image.base import ImageName, RunMethod
from .image.naming import EngineIdentityProvider, IdentityProvider, ImageNameResolver
from .image.tag import image_ref


def container_name_for(image_name: ImageName) -> str:
    """容器名称不能包含 '/'，用 '-' 替换"""
    return image_name.replace("/", "-")


class ContainerManager(BaseManager):
    """容器管理器类，用于运行目录对应的镜像"""

    def __init__(self, engine: Engine, identity: Optional[IdentityProvider] = None) -> None:
        """
        初始化容器管理器

        Args:
            engine: 容器引擎封装
            identity: 身份提供者，默认通过引擎info命令获取
        """
        super().__init__(engine)
        self.resolver = ImageNameResolver(identity or EngineIdentityProvider(engine))

    def run_args(self, image_name: ImageName, method: RunMethod, extra: Sequence[str] = ()) -> List[str]:
        """
        生成 run 命令的参数

        Args:
            image_name: 镜像名称
            method: 运行方式
            extra: 额外参数

        Returns:
            List[str]: 引擎参数

        Raises:
            UsageError: entrypoint方式缺少入口程序时抛出
        """
        args = ["run", "--name", container_name_for(image_name)]
        extra = list(extra)

        if method.is_shell:
            args += ["--rm", "--interactive", "--tty", "--entrypoint", f"/bin/{method.value}"]
        elif method is RunMethod.DETACHED:
            args += ["--detach"]
        elif method is RunMethod.ENTRYPOINT:
            if not extra:
                raise UsageError("autorun", MESSAGES["missing_entrypoint"])
            args += ["--rm", "--interactive", "--tty", "--entrypoint", extra.pop(0)]
        else:
            args += ["--rm", "--interactive", "--tty"]

        return [*args, image_ref(image_name, LATEST_TAG), *extra]

    def run_container(
        self, path: Union[str, Path], method: Union[str, RunMethod], extra: Sequence[str] = ()
    ) -> None:
        """
        运行目录对应的镜像

        Args:
            path: 构建目录
            method: 运行方式
            extra: 额外参数

        Raises:
            UsageError: 参数不合法时抛出
            EngineError: 运行失败时抛出
        """
        if not isinstance(method, RunMethod):
            method = RunMethod.parse(method)
        # 先校验参数，再查询登录身份
        if method is RunMethod.ENTRYPOINT and not extra:
            raise UsageError("autorun", MESSAGES["missing_entrypoint"])

        image_name = self.resolver.resolve(path, "autorun")
        args = self.run_args(image_name, method, extra)
        logger.info(f"以 {method.value} 方式运行容器 {container_name_for(image_name)}")
        self.engine.run(args)
