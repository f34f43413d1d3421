"""帮助信息生成模块"""

from typing import List

from ..constants import OVERRIDES_HEADER
from .registry import CommandDefinition, CommandRegistry

# 与引擎帮助中的命令列对齐
NAME_COLUMN_WIDTH = 12


def short_help_line(definition: CommandDefinition) -> str:
    """生成单个命令的简要帮助行"""
    return f"  {definition.name:<{NAME_COLUMN_WIDTH}}{definition.short_help}"


def overrides_section(registry: CommandRegistry) -> List[str]:
    """覆盖命令列表，按名称排序"""
    return [OVERRIDES_HEADER] + [short_help_line(definition) for definition in registry.definitions()]


def aggregate_help(engine_help: str, registry: CommandRegistry) -> str:
    """
    合并引擎帮助和覆盖命令列表

    引擎帮助的最后一行非空内容视为结尾提示，覆盖命令列表插在它前面。

    Args:
        engine_help: 引擎自身的帮助文本
        registry: 覆盖命令注册表

    Returns:
        str: 合并后的帮助文本
    """
    lines = engine_help.rstrip().splitlines()
    trailer = lines.pop() if lines else ""

    while lines and not lines[-1].strip():
        lines.pop()

    body = lines + [""] + overrides_section(registry)
    if trailer:
        body += ["", trailer]
    return "\n".join(body) + "\n"
