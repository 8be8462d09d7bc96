"""
图像模型 - 单次解析的最终结果

交给外部渲染器使用：尺寸、图元序列、已合并的全局元数据、按索引的覆盖项
元数据与覆盖项构造后为只读映射
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, Field, field_serializer, field_validator

from .element import Element


def merge_layers(*layers: Mapping[Any, Any] | None) -> dict[Any, Any]:
    """按顺序合并元数据层，后者覆盖前者"""
    merged: dict[Any, Any] = {}
    for layer in layers:
        if layer:
            merged.update(layer)
    return merged


class Image(BaseModel):
    """解析后的图像"""
    rows: int
    cols: int
    elements: tuple[Element, ...] = ()

    # 默认值 + 文档全局元数据
    metadata: Mapping[Any, Any] = Field(default_factory=dict)

    # 图元索引 → 覆盖项
    overrides: Mapping[int, Mapping[Any, Any]] = Field(default_factory=dict)

    model_config = {"frozen": True}

    @field_validator("metadata", mode="after")
    @classmethod
    def freeze_metadata(cls, value: Mapping[Any, Any]) -> Mapping[Any, Any]:
        return MappingProxyType(dict(value))

    @field_validator("overrides", mode="after")
    @classmethod
    def freeze_overrides(
        cls, value: Mapping[int, Mapping[Any, Any]]
    ) -> Mapping[int, Mapping[Any, Any]]:
        return MappingProxyType({k: MappingProxyType(dict(v)) for k, v in value.items()})

    @field_serializer("metadata")
    def dump_metadata(self, value: Mapping[Any, Any]) -> dict[Any, Any]:
        return dict(value)

    @field_serializer("overrides")
    def dump_overrides(self, value: Mapping[int, Mapping[Any, Any]]) -> dict[int, dict[Any, Any]]:
        return {k: dict(v) for k, v in value.items()}

    def effective(self, index: int) -> dict[Any, Any]:
        """图元的生效属性"""
        return merge_layers(self.metadata, self.overrides.get(index))

    def is_open_path(self, index: int) -> bool:
        return bool(self.effective(index).get("open_path", False))

    def element_properties(self) -> list[dict[Any, Any]]:
        """按图元顺序返回生效属性"""
        return [self.effective(i) for i in range(len(self.elements))]
