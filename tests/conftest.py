"""共享 fixture — 内存版 hcl2json / git，测试不依赖外部可执行文件

测试里的 .tf 文件直接写 hcl2json 的 JSON 输出，FakeParser 原样读回:

    write_tf(root / "main.tf", {"net": "git::https://example.com/net.git"})

FakeGit 按 URL 预置远端仓库内容，clone 时在目标目录生成对应 .tf 文件。
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from tfmod.core.config import Config
from tfmod.core.exceptions import ConversionError

BROKEN_MARKER = "!!broken"


def write_tf(path: Path, modules: dict[str, str] | None = None, **extra: Any) -> Path:
    """写一个 .tf 文件，内容为 hcl2json 风格的 JSON"""
    doc: dict[str, Any] = dict(extra)
    if modules:
        doc["module"] = {k: [{"source": v}] for k, v in modules.items()}
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(doc), encoding="utf-8")
    return path


class FakeParser:
    """把 .tf 文件内容当作 JSON 读取"""

    def __init__(self) -> None:
        self.parsed: list[str] = []

    def parse(self, path: str) -> dict[str, Any]:
        self.parsed.append(path)
        text = Path(path).read_text(encoding="utf-8")
        if text.startswith(BROKEN_MARKER):
            raise ConversionError(path, "rc=1 syntax error")
        return json.loads(text)


class FakeGit:
    """记录 clone 调用；remotes 中登记的仓库会被“克隆”成目录"""

    def __init__(self, remotes: dict[str, dict[str, dict[str, str]]] | None = None) -> None:
        # url -> {相对文件路径: {module key: source}}
        self.remotes = remotes or {}
        self.calls: list[tuple[str, str]] = []

    def fetch(self, url: str, destination: str) -> bool:
        self.calls.append((url, destination))
        files = self.remotes.get(url)
        if files is None:
            return False
        dest = Path(destination)
        dest.mkdir(parents=True, exist_ok=True)
        for rel, modules in files.items():
            write_tf(dest / rel, modules)
        return True


@pytest.fixture()
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """切换到临时目录，缓存目录使用默认的相对路径"""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture()
def config() -> Config:
    return Config()


@pytest.fixture()
def fake_parser() -> FakeParser:
    return FakeParser()


@pytest.fixture()
def fake_git() -> FakeGit:
    return FakeGit()


@pytest.fixture()
def tf():
    """.tf 文件写入工具，用法: tf(path, {"key": "source"})"""
    return write_tf


@pytest.fixture()
def make_git():
    """FakeGit 工厂，用法: make_git({url: {"main.tf": {...}}})"""
    return FakeGit
