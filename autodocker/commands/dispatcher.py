"""子命令分发模块

已注册的覆盖命令在本进程内处理，其余命令原样转发给容器引擎。
"""

from typing import Sequence

import typer
from loguru import logger

from ..constants import DEFAULT_SETTINGS, HELP_COMMAND, HELP_FLAGS
from ..errors import UsageError
from ..managers.engine import Engine
from .registry import CommandRegistry


def wants_help(args: Sequence[str]) -> bool:
    """参数中任意位置出现帮助选项"""
    return any(arg in HELP_FLAGS for arg in args)


class Dispatcher:
    """子命令分发器"""

    def __init__(
        self,
        registry: CommandRegistry,
        engine: Engine,
        default_command: str = DEFAULT_SETTINGS["default_command"],
    ) -> None:
        """
        初始化分发器

        Args:
            registry: 覆盖命令注册表
            engine: 容器引擎封装
            default_command: 没有子命令时使用的命令
        """
        self.registry = registry
        self.engine = engine
        self.default_command = default_command

    def needs_elevation(self, subcommand: str, args: Sequence[str]) -> bool:
        """
        转发命令是否需要提权

        已是root、help命令或命令行任意位置带有帮助选项时都不需要提权。
        """
        if self.engine.is_root:
            return False
        return subcommand != HELP_COMMAND and not wants_help([subcommand, *args])

    def dispatch(self, argv: Sequence[str]) -> int:
        """
        分发一条命令

        Args:
            argv: 完整的命令参数，不含程序名

        Returns:
            int: 退出码

        Raises:
            UsageError: 覆盖命令参数不合法时抛出
            EngineError: 引擎执行失败时抛出
        """
        argv = list(argv) or [self.default_command]
        subcommand, args = argv[0], argv[1:]

        definition = self.registry.get(subcommand)
        if definition is None:
            elevated = self.needs_elevation(subcommand, args)
            logger.debug(f"转发命令 {subcommand}，提权: {elevated}")
            return self.engine.passthrough(argv, elevated=elevated)

        if wants_help(args):
            return self.dispatch([HELP_COMMAND, subcommand])

        logger.debug(f"执行覆盖命令 {subcommand} {args}")
        return definition.handler(args) or 0

    def run(self, argv: Sequence[str]) -> int:
        """
        分发命令并报告用法错误

        用法错误输出到标准错误，并附带对应命令的详细帮助。

        Returns:
            int: 退出码
        """
        try:
            return self.dispatch(argv)
        except UsageError as e:
            self.report_usage(e)
            return e.exit_code

    def report_usage(self, error: UsageError) -> None:
        """输出用法错误和对应命令的详细帮助"""
        typer.echo(f"Error: {error}", err=True)
        definition = self.registry.get(error.command)
        if definition is not None:
            typer.echo(definition.long_help, err=True)
