"""modules.json 读写

格式:
    {
      "Modules": [
        {
          "DownloadToDir": "...", "RepoSource": "...", "RepoRevision": "",
          "SourceType": "GitRepository",
          "ModuleInfo": {"Key": "...", "Source": "...", "Dir": "..."}
        }
      ]
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from tfmod.core.models import ResolvedModule
from tfmod.utils.yaml_io import atomic_write

logger = logging.getLogger(__name__)


def write_manifest(path: str | Path, modules: list[ResolvedModule]) -> Path:
    """按给定顺序写入全部模块，覆盖已有文件"""
    p = Path(path)
    content = json.dumps(
        {"Modules": [m.to_dict() for m in modules]},
        indent=2, ensure_ascii=False,
    )
    atomic_write(p, content + "\n")
    logger.info("清单已写入: %s (%d 个模块)", p, len(modules))
    return p


def load_manifest(path: str | Path) -> list[ResolvedModule]:
    """读取清单，文件不存在返回空列表"""
    p = Path(path)
    if not p.exists():
        return []
    data = json.loads(p.read_text(encoding="utf-8"))
    return [ResolvedModule.from_dict(m) for m in data.get("Modules") or []]
