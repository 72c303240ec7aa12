"""模块拉取

- sources.py: 来源适配器 Git / Registry
- dispatcher.py: 按来源类型分派
"""

from tfmod.services.fetch.dispatcher import ModuleFetcher
from tfmod.services.fetch.sources import GitFetcher, RegistryFetcher

__all__ = [
    "ModuleFetcher",
    "GitFetcher",
    "RegistryFetcher",
]
