"""模块声明扫描器

职责:
- 递归查找目录下全部配置文件
- 经 ConfigurationParser 转为结构化数据
- 提取 module 块中的 (key, source) 并分类
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from tfmod.core.classifier import classify
from tfmod.core.exceptions import ConversionError
from tfmod.core.models import ModuleReference
from tfmod.core.protocols import ConfigurationParser

logger = logging.getLogger(__name__)


def extract_module_sources(doc: dict[str, Any]) -> list[tuple[str, str]]:
    """从 hcl2json 输出中提取 module 声明

    hcl2json 把每个具名块输出为实例列表:
        {"module": {"net": [{"source": "..."}]}}
    单个对象也按一个实例处理；没有字符串 source 的实例忽略。
    """
    blocks = doc.get("module")
    if not isinstance(blocks, dict):
        return []

    found: list[tuple[str, str]] = []
    for key, instances in blocks.items():
        if isinstance(instances, dict):
            instances = [instances]
        if not isinstance(instances, list):
            continue
        for inst in instances:
            if not isinstance(inst, dict):
                continue
            source = inst.get("source")
            if isinstance(source, str):
                found.append((key, source))
    return found


class DeclarationScanner:
    """扫描一个模块目录，返回其中声明的全部模块引用"""

    def __init__(self, parser: ConfigurationParser, pattern: str = "*.tf") -> None:
        self.parser = parser
        self.pattern = pattern

    def find_files(self, directory: str | Path) -> list[Path]:
        """递归查找配置文件，跳过隐藏目录（.terraform 缓存、.git 等）"""
        root = Path(directory)
        if not root.is_dir():
            return []
        return sorted(
            p for p in root.rglob(self.pattern)
            if p.is_file()
            and not any(part.startswith(".") for part in p.relative_to(root).parts[:-1])
        )

    def scan(self, directory: str | Path) -> list[ModuleReference]:
        """单个文件转换失败只跳过该文件，不中断扫描。

        Registry / Unknown 引用同样返回，由遍历器决定如何处理。
        """
        refs: list[ModuleReference] = []
        for path in self.find_files(directory):
            try:
                doc = self.parser.parse(str(path))
            except ConversionError as e:
                logger.error("%s", e)
                continue

            for key, source in extract_module_sources(doc):
                refs.append(ModuleReference(
                    key=key,
                    source=source,
                    source_type=classify(source, directory),
                    file=str(path),
                ))

        logger.debug("扫描 %s: %d 个模块声明", directory, len(refs))
        return refs
