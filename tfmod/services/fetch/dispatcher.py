"""拉取分派 — 按来源类型选择适配器"""

from __future__ import annotations

import logging

from tfmod.core.exceptions import ClassificationError
from tfmod.core.models import ResolvedModule, SourceType
from tfmod.core.protocols import SourceFetcher

logger = logging.getLogger(__name__)


class ModuleFetcher:
    """模块拉取器

    Git 交给 git 适配器，Local 无需拉取，Unknown 直接拒绝。
    Registry 引用由遍历器送到占位实现，只记录日志，不生成清单记录。
    """

    def __init__(
        self,
        git: SourceFetcher | None = None,
        registry: SourceFetcher | None = None,
    ) -> None:
        if git is None:
            from tfmod.services.fetch.sources import GitFetcher
            git = GitFetcher()
        if registry is None:
            from tfmod.services.fetch.sources import RegistryFetcher
            registry = RegistryFetcher()
        self._git = git
        self._registry = registry

    def fetch(self, source_type: SourceType, module: ResolvedModule, destination: str) -> bool:
        """拉取模块到 destination，返回是否执行了成功的拉取"""
        if source_type == SourceType.GIT_REPOSITORY:
            return self._git.fetch(module.repo_source, destination)
        if source_type == SourceType.LOCAL_PATH:
            logger.debug("本地模块无需拉取: %s", module.key)
            return False
        if source_type == SourceType.TERRAFORM_REGISTRY:
            return self._registry.fetch(module.module_info.source, destination)
        raise ClassificationError(module.module_info.source)
