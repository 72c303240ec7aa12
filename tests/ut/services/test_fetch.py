"""模块拉取单元测试"""

from __future__ import annotations

from pathlib import Path

import pytest

from tfmod.core.exceptions import ClassificationError, FetchError
from tfmod.core.models import ModuleInfo, ResolvedModule, SourceType
from tfmod.services.fetch import GitFetcher, ModuleFetcher, RegistryFetcher
from tfmod.utils.shell import CommandResult


class RecordingExecutor:
    def __init__(self, returncode: int = 0, stderr: str = "") -> None:
        self.returncode = returncode
        self.stderr = stderr
        self.calls: list[list[str]] = []

    def execute(self, args, *, cwd=None, timeout=None) -> CommandResult:  # type: ignore[no-untyped-def]
        self.calls.append(args)
        return CommandResult(self.returncode, "", self.stderr)


def _module(source_type: SourceType, source: str, repo: str = "") -> ResolvedModule:
    return ResolvedModule(
        module_info=ModuleInfo(key="m", source=source, dir="x"),
        source_type=source_type,
        repo_source=repo,
    )


class TestGitFetcher:
    def test_clone_command(self, tmp_path: Path) -> None:
        ex = RecordingExecutor()
        dest = str(tmp_path / "cache" / "net")
        assert GitFetcher(executor=ex).fetch("git::https://example.com/net.git", dest) is True
        assert ex.calls == [["git", "clone", "https://example.com/net.git", dest]]
        assert (tmp_path / "cache").is_dir()

    def test_failure_is_not_fatal(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        ex = RecordingExecutor(returncode=128, stderr="repository not found")
        ok = GitFetcher(executor=ex).fetch("https://example.com/x.git", str(tmp_path / "x"))
        assert ok is False
        assert "rc=128" in caplog.text

    def test_strict_raises(self, tmp_path: Path) -> None:
        ex = RecordingExecutor(returncode=128)
        with pytest.raises(FetchError, match="克隆失败"):
            GitFetcher(executor=ex, strict=True).fetch("https://example.com/x.git", str(tmp_path / "x"))


class TestModuleFetcher:
    def test_git_dispatch(self, fake_git) -> None:
        mod = _module(SourceType.GIT_REPOSITORY, "git::https://e.com/n.git//a", "https://e.com/n.git")
        ModuleFetcher(git=fake_git).fetch(SourceType.GIT_REPOSITORY, mod, "dest")
        assert fake_git.calls == [("https://e.com/n.git", "dest")]

    def test_local_noop(self, fake_git) -> None:
        mod = _module(SourceType.LOCAL_PATH, "./modules/local-mod")
        assert ModuleFetcher(git=fake_git).fetch(SourceType.LOCAL_PATH, mod, "") is False
        assert fake_git.calls == []

    def test_registry_placeholder(self, fake_git, caplog: pytest.LogCaptureFixture) -> None:
        mod = _module(SourceType.TERRAFORM_REGISTRY, "hashicorp/consul/aws")
        fetcher = ModuleFetcher(git=fake_git, registry=RegistryFetcher())
        assert fetcher.fetch(SourceType.TERRAFORM_REGISTRY, mod, "") is False
        assert "hashicorp/consul/aws" in caplog.text
        assert fake_git.calls == []

    def test_unknown_refused(self, fake_git) -> None:
        mod = _module(SourceType.UNKNOWN, "unknown-scheme://thing")
        with pytest.raises(ClassificationError):
            ModuleFetcher(git=fake_git).fetch(SourceType.UNKNOWN, mod, "")
