"""常量配置模块"""

from typing import Dict, List, Tuple, TypedDict


# 配置相关
class DefaultSettings(TypedDict):
    engine: str
    elevate: str
    log_level: str
    default_command: str


ENV_PREFIX: str = "AUTODOCKER_"
CONFIG_FILE_ENV: str = "AUTODOCKER_CONFIG"
DEFAULT_CONFIG_FILE: str = "~/.config/autodocker/config.env"

DEFAULT_SETTINGS: DefaultSettings = {
    "engine": "/usr/bin/docker",  # 被代理的容器引擎
    "elevate": "sudo",
    "log_level": "INFO",
    "default_command": "help",
}

# 安装相关
DEFAULT_INSTALL_DIR: str = "/usr/local/bin"
DEFAULT_INSTALL_NAME: str = "docker"
SHIM_ENV: str = "AUTODOCKER_SHIM"  # 启动脚本路径，由启动脚本设置

# 标签相关
LATEST_TAG: str = "latest"
TIMESTAMP_FORMAT: str = "%Y-%m-%dT%H-%M-%SZ"
TIMESTAMP_TAG_PATTERN: str = r"^\d{4}-\d{2}-\d{2}T\d{2}-\d{2}-\d{2}Z$"

# 命令行相关
HELP_COMMAND: str = "help"
HELP_FLAGS: Tuple[str, ...] = ("--help",)
OVERRIDES_HEADER: str = "Overwritten commands:"

# 方法别名
SELECTION_METHOD_ALIASES: Dict[str, List[str]] = {
    "all": ["a", "all"],
    "old": ["o", "old"],
}

RUN_METHOD_ALIASES: Dict[str, List[str]] = {
    "ash": ["ash"],
    "bash": ["bash"],
    "sh": ["sh"],
    "detached": ["d", "detach", "detached"],
    "entrypoint": ["e", "entrypoint"],
    "interactive": ["i", "it", "interactive"],
}


# 提示消息
class Messages(TypedDict):
    no_images_deleted: str
    no_images_to_push: str
    not_a_directory: str
    wrong_arg_count: str
    unknown_selection_method: str
    unknown_run_method: str
    missing_entrypoint: str
    engine_failed: str
    elevate_missing: str
    engine_is_self: str
    invalid_log_level: str


MESSAGES: Messages = {
    "no_images_deleted": "no images deleted",
    "no_images_to_push": "no images to push",
    "not_a_directory": "not a directory: {}",
    "wrong_arg_count": "'{}' requires {}, got {}",
    "unknown_selection_method": "unknown selection method: {}",
    "unknown_run_method": "unknown run method: {}",
    "missing_entrypoint": "the entrypoint method requires an entrypoint argument",
    "engine_failed": "engine command failed with exit status {}: {}",
    "elevate_missing": "privilege elevation command not found: {}",
    "engine_is_self": "engine {} resolves to this program, set AUTODOCKER_ENGINE to the real binary",
    "invalid_log_level": "invalid log level: {}",
}
