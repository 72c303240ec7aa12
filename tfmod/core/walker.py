"""模块依赖图遍历

深度优先、先序: 模块先加入结果列表，再扫描它自己的子模块。

遍历状态集中在 WalkContext 中显式传递:
  modules  - 按发现顺序追加的模块记录
  fetched  - 本次运行已处理过的 (来源类型, 拉取目录)
  keys     - 已加入结果列表的完整 key，保证清单内唯一
  stack    - 当前递归路径上的目录，用于发现循环引用
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from tfmod.core.exceptions import ClassificationError, CycleError
from tfmod.core.models import ModuleInfo, ModuleReference, ResolvedModule, SourceType

if TYPE_CHECKING:
    from tfmod.core.resolver import PathResolver
    from tfmod.core.scanner import DeclarationScanner
    from tfmod.services.fetch.dispatcher import ModuleFetcher

logger = logging.getLogger(__name__)


def _canonical(path: str) -> str:
    return os.path.normpath(os.path.abspath(path))


@dataclass
class WalkContext:
    """一次遍历的共享状态"""

    modules: list[ResolvedModule] = field(default_factory=list)
    fetched: set[tuple[SourceType, str]] = field(default_factory=set)
    keys: set[str] = field(default_factory=set)
    stack: list[str] = field(default_factory=list)
    fetch_count: int = 0


class GraphWalker:
    """递归扫描 → 解析 → 拉取 → 下钻"""

    def __init__(
        self,
        scanner: DeclarationScanner,
        resolver: PathResolver,
        fetcher: ModuleFetcher,
    ) -> None:
        self.scanner = scanner
        self.resolver = resolver
        self.fetcher = fetcher

    def walk(self, directory: str, context: WalkContext, prefix: str = "") -> None:
        """遍历 directory 声明的模块，prefix 为空或以 "." 结尾

        异常:
            ClassificationError: 遇到无法识别的来源
            CycleError: directory 已在当前递归路径上
        """
        canonical = _canonical(directory)
        if canonical in context.stack:
            raise CycleError(prefix.rstrip("."), directory)

        context.stack.append(canonical)
        try:
            for ref in self.scanner.scan(directory):
                self._visit(ref, context, prefix)
        finally:
            context.stack.pop()

    def _visit(self, ref: ModuleReference, context: WalkContext, prefix: str) -> None:
        if ref.source_type == SourceType.TERRAFORM_REGISTRY:
            # 占位拉取，不写入清单
            placeholder = ResolvedModule(
                module_info=ModuleInfo(key=f"{prefix}{ref.key}", source=ref.source),
                source_type=ref.source_type,
            )
            self.fetcher.fetch(ref.source_type, placeholder, "")
            return
        if ref.source_type == SourceType.UNKNOWN:
            raise ClassificationError(ref.source)

        module = self.resolver.resolve(ref, ref.source_type, prefix)
        if module.key in context.keys:
            logger.warning(
                "模块 key 重复，忽略后续声明: %s (%s, %s)", module.key, ref.source, ref.file,
                extra={"module_key": module.key},
            )
            return
        dest = module.download_to_dir

        # 已存在或本次已拉取过的目录不再处理（也不再下钻）
        if dest:
            marker = (module.source_type, _canonical(dest))
            if marker in context.fetched or Path(dest).exists():
                logger.info(
                    "已存在，跳过: %s -> %s", module.key, dest, extra={"module_key": module.key},
                )
                return
            context.fetched.add(marker)

        if module.source_type == SourceType.GIT_REPOSITORY:
            context.fetch_count += 1
        self.fetcher.fetch(module.source_type, module, dest)

        context.modules.append(module)
        context.keys.add(module.key)
        self.walk(module.module_info.dir, context, f"{module.key}.")
