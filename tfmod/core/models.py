"""核心数据模型

模块引用、解析结果及来源类型集中定义，
扫描器 / 解析器 / 遍历器 / 清单写入统一从此处导入。
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class SourceType(str, Enum):
    """模块来源类型（按名称序列化）"""
    LOCAL_PATH = "LocalPath"
    GIT_REPOSITORY = "GitRepository"
    TERRAFORM_REGISTRY = "TerraformRegistry"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class ModuleReference:
    """单个目录扫描得到的模块声明（key 尚未加前缀）"""

    key: str
    source: str
    source_type: SourceType = SourceType.UNKNOWN
    file: str = ""  # 声明所在的 .tf 文件，仅用于诊断


@dataclass(frozen=True)
class ModuleInfo:
    """模块在依赖树中的位置"""

    key: str = ""     # 以 "." 连接的完整 key
    source: str = ""  # 原始声明
    dir: str = ""     # 解析后的目录，作为子模块扫描根

    def to_dict(self) -> dict[str, str]:
        return {"Key": self.key, "Source": self.source, "Dir": self.dir}


@dataclass(frozen=True)
class ResolvedModule:
    """写入清单的模块记录，创建后不再修改"""

    module_info: ModuleInfo
    source_type: SourceType = SourceType.LOCAL_PATH
    download_to_dir: str = ""
    repo_source: str = ""
    repo_revision: str = ""  # 预留，当前不做 ref/tag 锁定

    @property
    def key(self) -> str:
        return self.module_info.key

    @classmethod
    def root(cls, directory: str) -> ResolvedModule:
        """根模块：key/source 为空，dir 为起始目录"""
        return cls(module_info=ModuleInfo(key="", source="", dir=directory))

    def to_dict(self) -> dict[str, Any]:
        return {
            "DownloadToDir": self.download_to_dir,
            "RepoSource": self.repo_source,
            "RepoRevision": self.repo_revision,
            "SourceType": self.source_type.value,
            "ModuleInfo": self.module_info.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ResolvedModule:
        info = data.get("ModuleInfo") or {}
        return cls(
            module_info=ModuleInfo(
                key=info.get("Key", ""),
                source=info.get("Source", ""),
                dir=info.get("Dir", ""),
            ),
            source_type=SourceType(data.get("SourceType", SourceType.LOCAL_PATH.value)),
            download_to_dir=data.get("DownloadToDir", ""),
            repo_source=data.get("RepoSource", ""),
            repo_revision=data.get("RepoRevision", ""),
        )
