"""集中配置管理

缓存目录、外部工具命令、超时等统一从 Config 读取。
支持从 YAML 文件加载 + 编程式覆盖。
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path

import yaml

from tfmod.core.exceptions import ConfigError
from tfmod.utils.yaml_io import load_yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = ".tfmod.yml"


@dataclass
class Config:
    """全局配置"""

    # 目录
    cache_dir: str = ".terraform/modules"
    manifest_name: str = "modules.json"
    config_glob: str = "*.tf"

    # 外部工具
    converter_cmd: str = "hcl2json"
    git_cmd: str = "git"
    converter_timeout: int | None = None  # 秒，None 表示不限
    clone_timeout: int | None = None

    # 放不到字段里的配置项
    extra: dict = field(default_factory=dict)

    @property
    def manifest_path(self) -> Path:
        return Path(self.cache_dir) / self.manifest_name

    @classmethod
    def from_file(cls, path: str = DEFAULT_CONFIG_FILE) -> Config:
        """从 YAML 文件加载配置，不存在则返回默认"""
        try:
            data = load_yaml(path)
        except (yaml.YAMLError, ValueError) as e:
            raise ConfigError(f"配置文件无效: {path} - {e}") from e
        if not data:
            return cls()
        known = {f.name for f in cls.__dataclass_fields__.values()} - {"extra"}
        matched = {k: v for k, v in data.items() if k in known}
        extra = {k: v for k, v in data.items() if k not in known}
        try:
            cfg = cls(**matched)
        except TypeError as e:
            raise ConfigError(f"配置项无效: {path} - {e}") from e
        cfg.extra = extra
        return cfg

    def to_dict(self) -> dict:
        return asdict(self)


# 首次 import 时不加载文件；由 CLI 入口显式初始化
_current: Config | None = None


def get_config() -> Config:
    """获取当前配置（未初始化则返回默认值）"""
    global _current  # noqa: PLW0603
    if _current is None:
        _current = Config()
    return _current


def init_config(path: str = DEFAULT_CONFIG_FILE) -> Config:
    """从文件初始化全局配置"""
    global _current  # noqa: PLW0603
    _current = Config.from_file(path)
    logger.debug("配置已加载: %s", path)
    return _current
