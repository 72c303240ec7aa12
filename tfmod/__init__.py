"""tfmod - Terraform 模块依赖解析与拉取工具"""

__version__ = "0.1.0"
