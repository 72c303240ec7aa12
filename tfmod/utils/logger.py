"""日志配置

人类可读文本与结构化 JSON 两种输出格式，均写 stderr。
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone

TEXT_FORMAT = "%(asctime)s [%(levelname)-7s] %(name)s: %(message)s"

ENV_LOG_LEVEL = "TFMOD_LOG_LEVEL"
ENV_LOG_JSON = "TFMOD_LOG_JSON"


class JSONFormatter(logging.Formatter):
    """单行 JSON 日志，便于 CI 流水线消费

    带有 module_key 的记录额外输出该字段，可按模块过滤。
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "function": record.funcName,
            "line": record.lineno,
        }
        # 遍历器通过 extra={"module_key": ...} 标注所属模块
        module_key = getattr(record, "module_key", None)
        if module_key is not None:
            entry["module_key"] = module_key
        if record.exc_info and record.exc_info[1]:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def setup_logging(level: str = "INFO", json_output: bool = False) -> None:
    """配置根日志器

    参数:
        level: 日志级别字符串，无法识别时回退到 INFO
        json_output: True 时输出 JSON，否则输出文本

    重复调用会先清理已有 handlers，避免日志重复输出。
    """
    reset_logging()
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JSONFormatter() if json_output else logging.Formatter(TEXT_FORMAT))
    root.addHandler(handler)


def reset_logging() -> None:
    """移除根日志器上的全部 handlers"""
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()


def setup_logging_from_env() -> None:
    """按环境变量配置日志

    TFMOD_LOG_LEVEL: 日志级别，默认 INFO
    TFMOD_LOG_JSON:  为 "1" 时输出 JSON
    """
    level = os.getenv(ENV_LOG_LEVEL, "INFO")
    setup_logging(level=level, json_output=os.getenv(ENV_LOG_JSON, "") == "1")
    logging.getLogger(__name__).debug("日志级别: %s", level.upper())
