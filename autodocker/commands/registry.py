"""覆盖命令注册表"""

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Iterator, List, Optional

# 处理函数接收子命令之后的参数，返回退出码
Handler = Callable[[List[str]], Optional[int]]


@dataclass(frozen=True)
class CommandDefinition:
    """覆盖命令定义"""

    name: str
    handler: Handler
    short_help: str
    long_help: str


class CommandRegistry:
    """覆盖命令注册表，列举命令时不会调用处理函数"""

    def __init__(self, definitions: Iterable[CommandDefinition] = ()) -> None:
        self._commands: Dict[str, CommandDefinition] = {}
        for definition in definitions:
            self.register(definition)

    def register(self, definition: CommandDefinition) -> None:
        """
        注册命令

        Raises:
            ValueError: 命令重名时抛出
        """
        if definition.name in self._commands:
            raise ValueError(f"命令已注册: {definition.name}")
        self._commands[definition.name] = definition

    def get(self, name: str) -> Optional[CommandDefinition]:
        """获取命令定义，未注册时返回None"""
        return self._commands.get(name)

    def names(self) -> List[str]:
        """按名称排序的命令列表"""
        return sorted(self._commands)

    def definitions(self) -> List[CommandDefinition]:
        """按名称排序的命令定义"""
        return [self._commands[name] for name in self.names()]

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __iter__(self) -> Iterator[CommandDefinition]:
        return iter(self.definitions())

    def __len__(self) -> int:
        return len(self._commands)
