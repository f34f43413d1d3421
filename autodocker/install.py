"""启动脚本安装模块

在系统可执行目录中写入一个与引擎同名的启动脚本，
使所有引擎命令先经过autodocker。
"""

import os
import shutil
import subprocess
import sys
import tempfile
from pathlib import Path
from typing import Optional

import typer
from loguru import logger

from .config import Settings, load_settings
from .constants import DEFAULT_INSTALL_DIR, DEFAULT_INSTALL_NAME, SHIM_ENV
from .errors import AutoDockerError, InstallError, PrivilegeError
from .log import configure_logging

SHIM_TEMPLATE = """#!/bin/sh
export {shim_env}="{target}"
exec "{python}" -m autodocker "$@"
"""

install_app = typer.Typer(
    help="安装容器引擎启动脚本",
    add_completion=False,
)


def render_shim(target: Path, python: str) -> str:
    """生成启动脚本内容"""
    return SHIM_TEMPLATE.format(shim_env=SHIM_ENV, target=target, python=python)


def install_shim(
    dest_dir: str = DEFAULT_INSTALL_DIR,
    name: str = DEFAULT_INSTALL_NAME,
    settings: Optional[Settings] = None,
    python: Optional[str] = None,
) -> Path:
    """
    安装启动脚本

    目录不可写时通过提权命令安装。

    Args:
        dest_dir: 安装目录
        name: 脚本名称
        settings: 运行配置，默认重新加载
        python: Python解释器路径，默认为当前解释器

    Returns:
        Path: 安装后的脚本路径

    Raises:
        ConfigError: 引擎路径与安装路径相同时抛出
        PrivilegeError: 需要提权但找不到提权命令时抛出
        InstallError: 安装失败时抛出
    """
    settings = settings or load_settings()
    target = Path(dest_dir).expanduser() / name
    settings.check_engine_is_not(str(target))

    if not target.parent.is_dir():
        raise InstallError(f"安装目录不存在: {target.parent}")

    fd, tmp_path = tempfile.mkstemp(text=True)
    try:
        with os.fdopen(fd, "w") as f:
            f.write(render_shim(target, python or sys.executable))
        os.chmod(tmp_path, 0o755)

        if _is_writable(target.parent):
            shutil.copyfile(tmp_path, target)
            os.chmod(target, 0o755)
        else:
            _install_elevated(tmp_path, target, settings.elevate)
    finally:
        os.unlink(tmp_path)

    logger.success(f"已安装启动脚本 {target}，引擎为 {settings.resolve_engine()}")
    return target


def _is_writable(directory: Path) -> bool:
    return os.access(directory, os.W_OK)


def _install_elevated(source: str, target: Path, elevate: str) -> None:
    if shutil.which(elevate) is None:
        raise PrivilegeError(elevate)

    cmd = [elevate, "install", "-m", "0755", source, str(target)]
    logger.debug(f"执行命令: {cmd}")
    result = subprocess.run(cmd)
    if result.returncode != 0:
        raise InstallError(f"安装启动脚本失败，退出码 {result.returncode}")


@install_app.command()
def install(
    dest: str = typer.Option(DEFAULT_INSTALL_DIR, "-d", "--dest", help="安装目录"),
    name: str = typer.Option(DEFAULT_INSTALL_NAME, "-n", "--name", help="启动脚本名称"),
):
    """安装启动脚本"""
    try:
        settings = load_settings()
        configure_logging(settings.log_level)
        install_shim(dest, name, settings)
    except AutoDockerError as e:
        logger.error(f"错误：{e}")
        raise typer.Exit(1)


def main():
    """安装入口函数"""
    install_app()


if __name__ == "__main__":
    main()
