"""tfmod 命令行接口"""

import os

import click

from tfmod import __version__
from tfmod.core.config import DEFAULT_CONFIG_FILE, init_config
from tfmod.core.exceptions import TfModError
from tfmod.services.install_service import InstallService
from tfmod.utils.logger import setup_logging_from_env


@click.command()
@click.version_option(version=__version__)
@click.argument("directory", default=".")
def main(directory: str) -> None:
    """下载 DIRECTORY 中声明的全部 Terraform 模块并生成 modules.json"""
    setup_logging_from_env()
    try:
        cfg = init_config(os.getenv("TFMOD_CONFIG", DEFAULT_CONFIG_FILE))
        result = InstallService(cfg).install(directory)
    except TfModError as e:
        raise click.ClickException(f"[{e.code}] {e}") from e

    click.echo(f"全部模块已下载，清单已写入 {result.manifest_path}")
