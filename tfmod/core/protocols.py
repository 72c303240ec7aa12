"""能力协议定义

扫描器依赖 ConfigurationParser，拉取器依赖 SourceFetcher，
生产实现分别调用 hcl2json 与 git，测试注入内存假实现。

使用 typing.Protocol 而非 ABC，现有类无需继承即可满足协议。
"""

from __future__ import annotations

from typing import Any, Protocol


class ConfigurationParser(Protocol):
    """配置文件解析协议: .tf 文件 → 结构化字典"""

    def parse(self, path: str) -> dict[str, Any]:
        """解析单个文件，失败抛 ConversionError"""
        ...


class SourceFetcher(Protocol):
    """远程来源拉取协议"""

    def fetch(self, url: str, destination: str) -> bool:
        """拉取 url 到 destination，返回是否成功"""
        ...
