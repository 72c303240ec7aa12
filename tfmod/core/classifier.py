"""模块来源分类

优先级: Git URL 前缀 > 本地路径存在 > Registry 三段式 > Unknown。
除文件存在性检查外无副作用，可并发调用。
"""

from __future__ import annotations

import re
from pathlib import Path

from tfmod.core.models import SourceType

# https / ssh 用户前缀 / ssh / git 协议 / 托管域名 / terraform 强制 git getter
_GIT_RE = re.compile(
    r"^(git::|https://|git@|ssh://|git://|github\.com|bitbucket\.org)",
    re.IGNORECASE,
)

# <namespace>/<name>/<provider>
_REGISTRY_RE = re.compile(r"^[\w\-]+/[\w\-]+/[\w\-]+$")


def is_git_repo(source: str) -> bool:
    return bool(_GIT_RE.match(source))


def is_local_path(source: str, working_dir: str | Path) -> bool:
    path = Path(working_dir) / source
    try:
        return path.is_dir() or path.is_file()
    except OSError:
        # 路径过长或含非法字符
        return False


def is_registry(source: str) -> bool:
    return bool(_REGISTRY_RE.match(source))


def classify(source: str, working_dir: str | Path) -> SourceType:
    """判定 source 的来源类型（相对 working_dir 检查本地路径）"""
    if is_git_repo(source):
        return SourceType.GIT_REPOSITORY
    if is_local_path(source, working_dir):
        return SourceType.LOCAL_PATH
    if is_registry(source):
        return SourceType.TERRAFORM_REGISTRY
    return SourceType.UNKNOWN
