"""统一异常体系

所有业务异常继承 TfModError，CLI 层据此输出友好提示。
"""

from __future__ import annotations


class TfModError(Exception):
    """框架基础异常"""

    code: str = "UNKNOWN"

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ConfigError(TfModError):
    """配置文件缺失或内容无效"""

    code = "CONFIG_ERROR"


class ClassificationError(TfModError):
    """模块来源无法识别，无法安全拉取"""

    code = "UNKNOWN_SOURCE"

    def __init__(self, source: str) -> None:
        super().__init__(f"无法识别的模块来源: {source}")
        self.source = source


class ConversionError(TfModError):
    """HCL 转换失败（单文件级别，可恢复）"""

    code = "CONVERSION_ERROR"

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"HCL 转换失败 {path}: {message}")
        self.path = path


class FetchError(TfModError):
    """模块拉取失败"""

    code = "FETCH_ERROR"


class CycleError(TfModError):
    """模块依赖图存在环"""

    code = "CYCLE_DETECTED"

    def __init__(self, key: str, directory: str) -> None:
        super().__init__(f"检测到模块循环引用: {key} -> {directory}")
        self.key = key
        self.directory = directory
