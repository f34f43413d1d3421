"""异常类型定义

所有异常均继承自AutoDockerError，命令入口据此决定退出码和输出内容。
"""

from typing import Optional, Sequence

from .constants import MESSAGES


class AutoDockerError(RuntimeError):
    """所有autodocker错误的基类"""

    exit_code: int = 1


# 用法错误
class UsageError(AutoDockerError):
    """参数个数或格式错误，会附带对应命令的详细帮助"""

    def __init__(self, command: str, message: str) -> None:
        self.command = command
        super().__init__(message)


class InvalidPathError(UsageError):
    """路径不是已存在的目录"""

    def __init__(self, command: str, path: str) -> None:
        self.path = path
        super().__init__(command, MESSAGES["not_a_directory"].format(path))


class UnknownSelectionMethodError(UsageError):
    """未知的镜像选择方式"""

    def __init__(self, token: str, command: str = "autoprune") -> None:
        self.token = token
        super().__init__(command, MESSAGES["unknown_selection_method"].format(token))


class UnknownRunMethodError(UsageError):
    """未知的容器运行方式"""

    def __init__(self, token: str, command: str = "autorun") -> None:
        self.token = token
        super().__init__(command, MESSAGES["unknown_run_method"].format(token))


# 引擎错误
class EngineError(AutoDockerError):
    """容器引擎子进程执行失败，退出码原样传递"""

    def __init__(self, args: Sequence[str], returncode: int, stderr: Optional[str] = None) -> None:
        self.command = list(args)
        self.returncode = returncode
        self.stderr = stderr or ""
        self.exit_code = returncode or 1
        super().__init__(MESSAGES["engine_failed"].format(returncode, " ".join(self.command)))


class PrivilegeError(AutoDockerError):
    """无法提升权限"""

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(MESSAGES["elevate_missing"].format(command))


class ConfigError(AutoDockerError):
    """配置错误"""

    pass


class InstallError(AutoDockerError):
    """启动脚本安装失败"""

    pass
