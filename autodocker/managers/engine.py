"""容器引擎调用模块

所有对容器引擎的调用都经过Engine，统一处理权限提升和错误。
"""

import os
import shutil
import subprocess
from typing import List, Optional, Sequence

from loguru import logger

from ..errors import EngineError, PrivilegeError


def exit_status(returncode: int) -> int:
    """将被信号终止的负退出码转换为shell惯用的128+信号值"""
    return 128 - returncode if returncode < 0 else returncode


def launch_failure_status(error: OSError) -> int:
    """无法启动引擎时的退出码，无执行权限为126，其余为127"""
    return 126 if isinstance(error, PermissionError) else 127


def running_as_root() -> bool:
    """当前进程是否已具有root权限"""
    geteuid = getattr(os, "geteuid", None)
    return geteuid is not None and geteuid() == 0


class Engine:
    """容器引擎子进程封装"""

    executable: str
    elevate: str
    is_root: bool

    def __init__(self, executable: str, elevate: str = "sudo", is_root: Optional[bool] = None) -> None:
        """
        初始化引擎封装

        Args:
            executable: 引擎可执行文件路径
            elevate: 提权命令
            is_root: 是否已是root，默认自动检测
        """
        self.executable = executable
        self.elevate = elevate
        self.is_root = running_as_root() if is_root is None else is_root

    def command(self, args: Sequence[str], elevated: bool = True) -> List[str]:
        """
        生成完整的命令行

        Args:
            args: 引擎参数
            elevated: 是否需要提权，已是root时忽略

        Returns:
            List[str]: 命令行参数列表

        Raises:
            PrivilegeError: 需要提权但找不到提权命令时抛出
        """
        cmd = [self.executable, *args]
        if elevated and not self.is_root:
            if shutil.which(self.elevate) is None:
                raise PrivilegeError(self.elevate)
            cmd = [self.elevate, *cmd]
        return cmd

    def passthrough(self, args: Sequence[str], elevated: bool = True) -> int:
        """
        原样转发命令，输出直接交给用户

        Returns:
            int: 引擎退出码
        """
        cmd = self.command(args, elevated)
        logger.debug(f"执行命令: {cmd}")
        try:
            return exit_status(subprocess.run(cmd).returncode)
        except OSError as e:
            logger.error(f"无法执行容器引擎: {e}")
            return launch_failure_status(e)

    def run(self, args: Sequence[str], elevated: bool = True) -> None:
        """
        执行会修改状态的引擎命令，输出不做捕获

        Raises:
            EngineError: 引擎返回非零退出码时抛出
        """
        returncode = self.passthrough(args, elevated)
        if returncode != 0:
            raise EngineError(args, returncode)

    def capture(self, args: Sequence[str], elevated: bool = True) -> str:
        """
        执行查询类引擎命令并返回标准输出

        Returns:
            str: 标准输出

        Raises:
            EngineError: 引擎返回非零退出码或无法执行时抛出
        """
        cmd = self.command(args, elevated)
        logger.debug(f"执行命令: {cmd}")
        try:
            result = subprocess.run(cmd, stdout=subprocess.PIPE, stderr=subprocess.PIPE, universal_newlines=True)
        except OSError as e:
            raise EngineError(args, launch_failure_status(e), str(e)) from e

        if result.returncode != 0:
            logger.debug(f"错误输出: {result.stderr}")
            raise EngineError(args, exit_status(result.returncode), result.stderr)
        return result.stdout
