"""CLI命令行接口模块"""

import os
import sys
from typing import List, Optional

import typer
from loguru import logger

from .commands.dispatcher import Dispatcher
from .commands.overrides import OverrideCommands, build_registry
from .config import Settings, load_settings
from .constants import SHIM_ENV
from .errors import AutoDockerError, EngineError
from .log import configure_logging
from .managers.engine import Engine

# 参数全部原样交给分发器，不做选项解析，也不提供内置 --help
CONTEXT_SETTINGS = {
    "allow_extra_args": True,
    "ignore_unknown_options": True,
    "help_option_names": [],
}

# 创建CLI应用
app = typer.Typer(
    help="容器引擎命令拦截工具",
    add_completion=False,
)


def create_dispatcher(settings: Settings) -> Dispatcher:
    """
    根据配置创建分发器

    Args:
        settings: 运行配置

    Returns:
        Dispatcher: 已注册覆盖命令的分发器
    """
    engine = Engine(settings.resolve_engine(), settings.elevate)
    commands = OverrideCommands(engine)
    return Dispatcher(build_registry(commands), engine, settings.default_command)


@app.command(context_settings=CONTEXT_SETTINGS, add_help_option=False)
def intercept(
    argv: Optional[List[str]] = typer.Argument(None, help="子命令及其参数"),
):
    """处理覆盖命令，其余命令转发给容器引擎"""
    try:
        settings = load_settings()
        configure_logging(settings.log_level)
        settings.check_engine_is_not(os.environ.get(SHIM_ENV))

        dispatcher = create_dispatcher(settings)
        exit_code = dispatcher.run(argv or [])
    except EngineError as e:
        # 引擎的输出已原样交给用户，这里只补充未输出的错误信息
        if e.stderr:
            typer.echo(e.stderr, err=True, nl=False)
            logger.debug(str(e))
        else:
            logger.error(str(e))
        exit_code = e.exit_code
    except AutoDockerError as e:
        logger.error(f"错误：{e}")
        exit_code = e.exit_code
    except KeyboardInterrupt:
        exit_code = 130

    raise typer.Exit(exit_code)


def main(argv: Optional[List[str]] = None):
    """主入口函数"""
    if argv is None:
        argv = sys.argv[1:]
    # 以 "--" 开头，后续的 "--"、"--help" 等参数都按原样保留
    app(args=["--", *argv], prog_name=os.path.basename(sys.argv[0]) or "autodocker")


if __name__ == "__main__":
    main()
