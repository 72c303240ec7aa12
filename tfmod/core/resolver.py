"""模块路径解析

计算每个引用的拉取目录 (download_to_dir) 与扫描目录 (module_info.dir)。

路径规则:
  - Git:   <cache>/<prefix><key>，声明含 //subpath 时 dir 追加 /subpath
  - Local: 不下载，dir = <cache>/<prefix><key><source>（source 原样拼接）
"""

from __future__ import annotations

from tfmod.core.models import ModuleInfo, ModuleReference, ResolvedModule, SourceType

GIT_FORCE_PREFIX = "git::"


def split_git_source(source: str) -> tuple[str, str]:
    """拆分为 (仓库 URL, 子目录)

    去掉 git:: 前缀后，取 scheme 的 :// 之后第一个 // 作为分隔:
        git::https://example.com/net.git//modules/vpc
        -> ("https://example.com/net.git", "modules/vpc")
    """
    url = source
    if url.lower().startswith(GIT_FORCE_PREFIX):
        url = url[len(GIT_FORCE_PREFIX):]

    scheme_end = url.find("://")
    start = scheme_end + 3 if scheme_end != -1 else 0
    sep = url.find("//", start)
    if sep == -1:
        return url, ""
    return url[:sep], url[sep + 2:].strip("/")


class PathResolver:
    """把模块引用解析为清单记录"""

    def __init__(self, cache_dir: str = ".terraform/modules") -> None:
        self.cache_dir = cache_dir.rstrip("/") or "."

    def module_dir(self, prefix: str, key: str) -> str:
        return f"{self.cache_dir}/{prefix}{key}"

    def resolve(
        self, ref: ModuleReference, source_type: SourceType, prefix: str = "",
    ) -> ResolvedModule:
        full_key = f"{prefix}{ref.key}"

        if source_type == SourceType.GIT_REPOSITORY:
            repo, subdir = split_git_source(ref.source)
            download_to = self.module_dir(prefix, ref.key)
            return ResolvedModule(
                module_info=ModuleInfo(
                    key=full_key,
                    source=ref.source,
                    dir=f"{download_to}/{subdir}" if subdir else download_to,
                ),
                source_type=source_type,
                download_to_dir=download_to,
                repo_source=repo,
            )

        if source_type == SourceType.LOCAL_PATH:
            return ResolvedModule(
                module_info=ModuleInfo(
                    key=full_key,
                    source=ref.source,
                    dir=self.module_dir(prefix, ref.key) + ref.source,
                ),
                source_type=source_type,
            )

        raise ValueError(f"来源类型不支持路径解析: {source_type.value} ({ref.source})")
