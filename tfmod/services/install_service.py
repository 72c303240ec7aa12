"""安装服务 — 清理缓存 → 遍历依赖图 → 写清单

CLI 只负责参数和输出，完整流程在此实现。
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path

from tfmod.core.config import Config, get_config
from tfmod.core.manifest import write_manifest
from tfmod.core.models import ResolvedModule
from tfmod.core.parser import Hcl2JsonParser
from tfmod.core.protocols import ConfigurationParser
from tfmod.core.resolver import PathResolver
from tfmod.core.scanner import DeclarationScanner
from tfmod.core.walker import GraphWalker, WalkContext
from tfmod.services.fetch import GitFetcher, ModuleFetcher

logger = logging.getLogger(__name__)


@dataclass
class InstallResult:
    """一次安装的结果"""

    manifest_path: Path
    modules: list[ResolvedModule] = field(default_factory=list)
    fetch_count: int = 0


def reset_cache(cache_dir: str | Path) -> bool:
    """删除整个模块缓存目录，返回是否删除成功

    目录不存在视为无需处理；删除失败只记录日志。
    """
    p = Path(cache_dir)
    if not p.exists():
        logger.info("缓存目录不存在，无需清理: %s", p)
        return False
    try:
        shutil.rmtree(p)
    except OSError as e:
        logger.error("清理缓存目录失败 %s: %s", p, e)
        return False
    logger.info("已清理缓存目录: %s", p)
    return True


class InstallService:
    """模块安装服务"""

    def __init__(
        self,
        config: Config | None = None,
        *,
        parser: ConfigurationParser | None = None,
        fetcher: ModuleFetcher | None = None,
    ) -> None:
        self.config = config or get_config()
        if parser is None:
            parser = Hcl2JsonParser(
                self.config.converter_cmd, timeout=self.config.converter_timeout,
            )
        if fetcher is None:
            fetcher = ModuleFetcher(git=GitFetcher(
                self.config.git_cmd, timeout=self.config.clone_timeout,
            ))
        self.walker = GraphWalker(
            scanner=DeclarationScanner(parser, pattern=self.config.config_glob),
            resolver=PathResolver(self.config.cache_dir),
            fetcher=fetcher,
        )

    def install(self, root_dir: str = ".", *, clean: bool = True) -> InstallResult:
        """从 root_dir 开始安装全部模块

        clean=False 时保留已有缓存，已存在的拉取目录不会重复拉取。
        遍历中途出现致命错误时不写清单。
        """
        if clean:
            reset_cache(self.config.cache_dir)

        context = WalkContext(modules=[ResolvedModule.root(root_dir)])
        self.walker.walk(root_dir, context)

        path = write_manifest(self.config.manifest_path, context.modules)
        logger.info(
            "模块安装完成: %d 个模块, %d 次拉取", len(context.modules) - 1, context.fetch_count,
        )
        return InstallResult(
            manifest_path=path, modules=context.modules, fetch_count=context.fetch_count,
        )
