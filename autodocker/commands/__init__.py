"""命令处理模块"""

from .dispatcher import Dispatcher, wants_help
from .help import aggregate_help, short_help_line
from .overrides import OverrideCommands, build_registry
from .registry import CommandDefinition, CommandRegistry

__all__ = [
    "Dispatcher",
    "wants_help",
    "aggregate_help",
    "short_help_line",
    "OverrideCommands",
    "build_registry",
    "CommandDefinition",
    "CommandRegistry",
]
