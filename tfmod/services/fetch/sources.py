"""模块来源适配器

职责:
- Git 仓库 clone
- Terraform Registry（占位，尚未实现）
"""

from __future__ import annotations

import logging
from pathlib import Path

from tfmod.core.exceptions import FetchError
from tfmod.core.resolver import GIT_FORCE_PREFIX
from tfmod.utils.shell import CommandExecutor, get_executor

logger = logging.getLogger(__name__)


class GitFetcher:
    """`git clone <url> <destination>`

    默认失败只记录日志并返回 False，整体安装继续；
    strict=True 时改为抛 FetchError。
    """

    def __init__(
        self,
        command: str = "git",
        *,
        executor: CommandExecutor | None = None,
        timeout: int | None = None,
        strict: bool = False,
    ) -> None:
        self.command = command
        self.executor = executor or get_executor()
        self.timeout = timeout
        self.strict = strict

    def fetch(self, url: str, destination: str) -> bool:
        if url.lower().startswith(GIT_FORCE_PREFIX):
            url = url[len(GIT_FORCE_PREFIX):]

        logger.info("克隆 %s -> %s", url, destination)
        Path(destination).parent.mkdir(parents=True, exist_ok=True)
        r = self.executor.execute(
            [self.command, "clone", url, destination], timeout=self.timeout,
        )
        if r.success:
            return True

        msg = f"克隆失败 {url} -> {destination} (rc={r.returncode}): {r.stderr.strip()[:300]}"
        if self.strict:
            raise FetchError(msg)
        logger.error(msg)
        return False


class RegistryFetcher:
    """Terraform Registry 来源（占位）"""

    def fetch(self, url: str, destination: str) -> bool:
        # TODO: 接入 registry 协议 (/.well-known/terraform.json + 版本下载地址)
        logger.warning("暂不支持 Terraform Registry 模块，跳过: %s", url)
        return False
