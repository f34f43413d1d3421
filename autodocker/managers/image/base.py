"""镜像管理基础类型定义"""

from enum import Enum
from typing import Dict, List

from ...constants import RUN_METHOD_ALIASES, SELECTION_METHOD_ALIASES
from ...errors import UnknownRunMethodError, UnknownSelectionMethodError

# 镜像名称，格式为 [用户名/]目录名
ImageName = str
Tag = str


def _alias_table(aliases: Dict[str, List[str]]) -> Dict[str, str]:
    return {alias: canonical for canonical, names in aliases.items() for alias in names}


class SelectionMethod(str, Enum):
    """清理时的镜像选择方式"""

    ALL = "all"
    OLD = "old"

    @classmethod
    def parse(cls, token: str) -> "SelectionMethod":
        """
        解析选择方式，支持简写

        Raises:
            UnknownSelectionMethodError: 无法识别时抛出
        """
        canonical = _SELECTION_ALIASES.get(token.lower())
        if canonical is None:
            raise UnknownSelectionMethodError(token)
        return cls(canonical)


class RunMethod(str, Enum):
    """容器运行方式"""

    ASH = "ash"
    BASH = "bash"
    SH = "sh"
    DETACHED = "detached"
    ENTRYPOINT = "entrypoint"
    INTERACTIVE = "interactive"

    @classmethod
    def parse(cls, token: str) -> "RunMethod":
        """
        解析运行方式，支持简写

        Raises:
            UnknownRunMethodError: 无法识别时抛出
        """
        canonical = _RUN_ALIASES.get(token.lower())
        if canonical is None:
            raise UnknownRunMethodError(token)
        return cls(canonical)

    @property
    def is_shell(self) -> bool:
        return self in (RunMethod.ASH, RunMethod.BASH, RunMethod.SH)


_SELECTION_ALIASES = _alias_table(SELECTION_METHOD_ALIASES)
_RUN_ALIASES = _alias_table(RUN_METHOD_ALIASES)
