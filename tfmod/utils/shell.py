"""外部进程调用 — hcl2json / git 共用

通过 CommandExecutor 协议抽象子进程执行，测试时注入假实现即可，
无需真实的 hcl2json / git 可执行文件。
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from typing import Protocol

logger = logging.getLogger(__name__)

# 与常见 shell 约定一致
RC_NOT_FOUND = 127
RC_TIMEOUT = 124


@dataclass
class CommandResult:
    """命令执行结果（与 subprocess 解耦）"""

    returncode: int
    stdout: str
    stderr: str

    @property
    def success(self) -> bool:
        return self.returncode == 0


class CommandExecutor(Protocol):
    """命令执行器协议"""

    def execute(
        self,
        args: list[str],
        *,
        cwd: str | None = None,
        timeout: int | None = None,
    ) -> CommandResult:
        """阻塞执行命令，返回退出码和输出"""
        ...


class LocalExecutor:
    """本地子进程执行器（默认实现）

    可执行文件不存在或超时不抛异常，而是折算为退出码，
    由调用方按普通失败处理。
    """

    def execute(
        self,
        args: list[str],
        *,
        cwd: str | None = None,
        timeout: int | None = None,
    ) -> CommandResult:
        logger.debug("执行: %s", " ".join(args))
        try:
            r = subprocess.run(
                args, capture_output=True, text=True,
                cwd=cwd, check=False, timeout=timeout,
            )
        except FileNotFoundError as e:
            return CommandResult(returncode=RC_NOT_FOUND, stdout="", stderr=str(e))
        except subprocess.TimeoutExpired:
            return CommandResult(
                returncode=RC_TIMEOUT, stdout="",
                stderr=f"命令超时 ({timeout}s): {args[0]}",
            )
        return CommandResult(returncode=r.returncode, stdout=r.stdout, stderr=r.stderr)


_default_executor: CommandExecutor = LocalExecutor()


def get_executor() -> CommandExecutor:
    """获取全局默认命令执行器"""
    return _default_executor


def set_executor(executor: CommandExecutor) -> None:
    """替换全局默认命令执行器"""
    global _default_executor  # noqa: PLW0603
    _default_executor = executor
