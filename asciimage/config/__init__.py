"""
配置层 - 加载运行期配置

职责：
- 加载 asciimage.yaml（样式默认值/日志）
- 提供类型安全的配置访问接口
"""

from .runtime_config import (
    LoggingConfig,
    RuntimeConfig,
    StyleDefaults,
    get_config,
    reload_config,
)

__all__ = [
    "RuntimeConfig",
    "StyleDefaults",
    "LoggingConfig",
    "get_config",
    "reload_config",
]
