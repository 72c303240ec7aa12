"""HCL → JSON 转换（外部 hcl2json 工具）"""

from __future__ import annotations

import json
import logging
from typing import Any

from tfmod.core.exceptions import ConversionError
from tfmod.utils.shell import CommandExecutor, get_executor

logger = logging.getLogger(__name__)


class Hcl2JsonParser:
    """调用 `hcl2json <file>`，把标准输出解析为字典

    非零退出码、stderr 有输出或输出不是 JSON 对象都视为转换失败。
    """

    def __init__(
        self,
        command: str = "hcl2json",
        *,
        executor: CommandExecutor | None = None,
        timeout: int | None = None,
    ) -> None:
        self.command = command
        self.executor = executor or get_executor()
        self.timeout = timeout

    def parse(self, path: str) -> dict[str, Any]:
        r = self.executor.execute([self.command, path], timeout=self.timeout)
        if not r.success:
            raise ConversionError(path, f"rc={r.returncode} {r.stderr.strip()[:300]}")
        if r.stderr.strip():
            raise ConversionError(path, r.stderr.strip()[:300])
        try:
            doc = json.loads(r.stdout)
        except json.JSONDecodeError as e:
            raise ConversionError(path, f"输出不是合法 JSON: {e}") from e
        if not isinstance(doc, dict):
            raise ConversionError(path, f"顶层不是对象 (实际类型: {type(doc).__name__})")
        return doc
