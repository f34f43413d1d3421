"""覆盖命令处理模块

autobuild/autoprune/autopush/autorun 以及合并后的 help 命令。
每个命令先校验参数，再调用引擎。
"""

from typing import List, Optional

import typer
from loguru import logger

from ..constants import DEFAULT_INSTALL_NAME, HELP_COMMAND, MESSAGES
from ..errors import UsageError
from ..managers.container_manager import ContainerManager
from ..managers.engine import Engine
from ..managers.image.base import SelectionMethod
from ..managers.image_manager import ImageManager
from .help import aggregate_help
from .registry import CommandDefinition, CommandRegistry

PROG = DEFAULT_INSTALL_NAME

AUTOBUILD_HELP = f"""
Usage:  {PROG} autobuild PATH

Build an image from the directory PATH.

The image is named after the last component of PATH, prefixed with the
registry username when logged in. The new image is tagged twice: with the
current UTC time (YYYY-MM-DDTHH-MM-SSZ) and with "latest".
"""

AUTOPRUNE_HELP = f"""
Usage:  {PROG} autoprune PATH [METHOD]

Remove automatically tagged images built from the directory PATH.

Methods:
  old, o      Remove every timestamp tag except the newest (default)
  all, a      Remove every timestamp tag and "latest"
"""

AUTOPUSH_HELP = f"""
Usage:  {PROG} autopush PATH

Push the newest timestamp tag and "latest" of the image built from the
directory PATH.
"""

AUTORUN_HELP = f"""
Usage:  {PROG} autorun PATH METHOD [ARG...]

Run the "latest" image built from the directory PATH. The container is
named after the image, with "/" replaced by "-".

Methods:
  ash, bash, sh               Interactive shell as entrypoint, removed on exit
  detached, detach, d         Run in the background
  entrypoint, e ENTRYPOINT    Interactive run with ENTRYPOINT, removed on exit
  interactive, it, i          Interactive run with a pseudo-TTY, removed on exit

Remaining ARGs are passed to the container.
"""

HELP_HELP = f"""
Usage:  {PROG} help [COMMAND]

Show the merged help of the container engine and the overwritten commands,
or the help of a single COMMAND.
"""


def _require_args(command: str, args: List[str], minimum: int, maximum: Optional[int], expected: str) -> None:
    """
    校验参数个数

    Raises:
        UsageError: 个数不符时抛出
    """
    if len(args) < minimum or (maximum is not None and len(args) > maximum):
        raise UsageError(command, MESSAGES["wrong_arg_count"].format(command, expected, len(args)))


class OverrideCommands:
    """覆盖命令的处理函数集合"""

    def __init__(
        self,
        engine: Engine,
        image_manager: Optional[ImageManager] = None,
        container_manager: Optional[ContainerManager] = None,
    ) -> None:
        """
        初始化覆盖命令

        Args:
            engine: 容器引擎封装
            image_manager: 镜像管理器，默认新建
            container_manager: 容器管理器，默认新建
        """
        self.engine = engine
        self.image_manager = image_manager or ImageManager(engine)
        self.container_manager = container_manager or ContainerManager(
            engine, self.image_manager.resolver.identity
        )
        self.registry = CommandRegistry()

    def autobuild(self, args: List[str]) -> int:
        _require_args("autobuild", args, 1, 1, "exactly one argument (PATH)")
        self.image_manager.build_image(args[0])
        return 0

    def autoprune(self, args: List[str]) -> int:
        _require_args("autoprune", args, 1, 2, "one or two arguments (PATH [METHOD])")
        method = SelectionMethod.parse(args[1]) if len(args) > 1 else SelectionMethod.OLD
        self.image_manager.cleanup_images(args[0], method)
        return 0

    def autopush(self, args: List[str]) -> int:
        _require_args("autopush", args, 1, 1, "exactly one argument (PATH)")
        self.image_manager.push_image(args[0])
        return 0

    def autorun(self, args: List[str]) -> int:
        _require_args("autorun", args, 2, None, "at least two arguments (PATH METHOD [ARG...])")
        path, method, extra = args[0], args[1], args[2:]
        self.container_manager.run_container(path, method, extra)
        return 0

    def help(self, args: List[str]) -> int:
        """不带参数时输出合并帮助，否则输出单个命令的帮助"""
        if not args:
            engine_help = self.engine.capture(["--help"], elevated=False)
            typer.echo(aggregate_help(engine_help, self.registry), nl=False)
            return 0

        definition = self.registry.get(args[0])
        if definition is None:
            return self.engine.passthrough([HELP_COMMAND, *args], elevated=False)

        typer.echo(definition.long_help)
        return 0


def build_registry(commands: OverrideCommands) -> CommandRegistry:
    """
    构建覆盖命令注册表

    Args:
        commands: 覆盖命令处理函数集合

    Returns:
        CommandRegistry: 已注册全部覆盖命令的注册表
    """
    registry = CommandRegistry(
        [
            CommandDefinition(
                "autobuild",
                commands.autobuild,
                "Build an image from a directory, tagged with a timestamp and latest",
                AUTOBUILD_HELP,
            ),
            CommandDefinition(
                "autoprune",
                commands.autoprune,
                "Remove old (or all) automatically tagged images of a directory",
                AUTOPRUNE_HELP,
            ),
            CommandDefinition(
                "autopush",
                commands.autopush,
                "Push the newest timestamp tag and latest of a directory's image",
                AUTOPUSH_HELP,
            ),
            CommandDefinition(
                "autorun",
                commands.autorun,
                "Run the latest image of a directory",
                AUTORUN_HELP,
            ),
            CommandDefinition(
                HELP_COMMAND,
                commands.help,
                "Show help, including the overwritten commands",
                HELP_HELP,
            ),
        ]
    )
    commands.registry = registry
    logger.debug(f"已注册覆盖命令: {registry.names()}")
    return registry
