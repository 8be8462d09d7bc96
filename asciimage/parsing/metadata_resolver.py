"""
元数据解析 - 默认值 < 文档全局元数据 < 按图元索引的覆盖项

职责：
1. 从文档元数据中一次性拆分出按索引的覆盖项（键为非负整数，值为映射）
2. 其余键（标题/作者/任意注释等）作为全局元数据原样保留
3. 计算任一图元的生效属性

说明：
- 仅支持单个索引键（0 / "3"），索引区间（如 "3-5"）暂不支持，按全局元数据处理
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from ..models import merge_layers

_INDEX_KEY = re.compile(r"\d+")


def parse_index_key(key: Any) -> int | None:
    """键是否表示图元索引，是则返回索引"""
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key if key >= 0 else None
    if isinstance(key, str) and _INDEX_KEY.fullmatch(key):
        return int(key)
    return None


def extract_overrides(
    metadata: Mapping[Any, Any] | None,
) -> tuple[dict[str, Any], dict[int, dict[str, Any]]]:
    """
    拆分全局元数据与按索引覆盖项

    Returns:
        (全局元数据, {索引: 覆盖项})
    """
    global_meta: dict[str, Any] = {}
    overrides: dict[int, dict[str, Any]] = {}

    for key, value in (metadata or {}).items():
        index = parse_index_key(key)
        if index is not None and isinstance(value, Mapping):
            overrides.setdefault(index, {}).update(value)
        else:
            global_meta[key] = value

    return global_meta, overrides


class MetadataResolver:
    """元数据解析器"""

    def __init__(
        self,
        defaults: Mapping[str, Any],
        metadata: Mapping[Any, Any] | None = None,
    ) -> None:
        self.global_metadata, self.overrides = extract_overrides(metadata)
        self.resolved = merge_layers(defaults, self.global_metadata)

    def effective(self, index: int) -> dict[str, Any]:
        """图元的生效属性（覆盖项优先）"""
        return merge_layers(self.resolved, self.overrides.get(index))

    def is_open_path(self, index: int) -> bool:
        return bool(self.effective(index).get("open_path", False))
