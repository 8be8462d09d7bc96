"""
运行期配置 - 读取 asciimage.yaml

职责：
- 提供图元样式默认值（填充/描边/线宽/开放路径/锯齿）
- 提供日志级别
- 提供环境变量覆盖机制（ASCIIMAGE_DEFAULTS__FILL=red）
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

DEFAULT_CONFIG_PATH = Path("asciimage.yaml")


class StyleDefaults(BaseModel):
    """图元样式默认值"""

    fill: str = "black"
    stroke: str = "black"
    stroke_width: float = 1.0
    open_path: bool = False
    aliased: bool = False


class LoggingConfig(BaseModel):
    """日志配置"""

    log_level: str = "INFO"


class RuntimeConfig(BaseSettings):
    """运行期配置（支持环境变量覆盖）"""

    defaults: StyleDefaults = Field(default_factory=StyleDefaults)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "env_prefix": "ASCIIMAGE_",
        "env_nested_delimiter": "__",
    }

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> RuntimeConfig:
        """从YAML文件加载配置"""
        path = Path(yaml_path)
        if not path.exists():
            return cls()

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        options = data.get("asciimage_options", {})

        return cls(
            defaults=StyleDefaults(**cls._extract(options, "defaults")),
            logging=LoggingConfig(**cls._extract(options, "logging")),
        )

    @staticmethod
    def _extract(data: dict[str, Any], key: str) -> dict[str, Any]:
        """提取并展平配置（支持 {default: x} 写法）"""
        section = data.get(key) or {}
        result = {}
        for k, v in section.items():
            if isinstance(v, dict) and "default" in v:
                result[k] = v["default"]
            elif not isinstance(v, dict):
                result[k] = v
        return result

    def style_defaults(self) -> dict[str, Any]:
        """样式默认值（元数据最底层）"""
        return self.defaults.model_dump()


# 全局配置实例
_config: RuntimeConfig | None = None


def get_config() -> RuntimeConfig:
    """获取全局配置（惰性加载）"""
    global _config
    if _config is None:
        _config = RuntimeConfig.from_yaml(DEFAULT_CONFIG_PATH)
    return _config


def reload_config(yaml_path: str | Path | None = None) -> RuntimeConfig:
    """重新加载配置"""
    global _config
    _config = RuntimeConfig.from_yaml(yaml_path or DEFAULT_CONFIG_PATH)
    return _config
