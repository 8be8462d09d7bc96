"""
解析模块 - 网格归一化/图元分类/元数据解析/格式前端

子模块：
- marks: 标记目录
- grid_normalizer: 文本行 → 矩形网格
- classifier: 网格 → 图元序列
- metadata_resolver: 默认值/全局元数据/按索引覆盖
- front_end: 输入形态识别与回退
"""

from .classifier import ElementClassifier
from .front_end import ImageParser, load_documents, parse
from .grid_normalizer import GridNormalizer
from .marks import MARK_INDEX, MARKS
from .metadata_resolver import MetadataResolver, extract_overrides, parse_index_key

__all__ = [
    "MARKS",
    "MARK_INDEX",
    "GridNormalizer",
    "ElementClassifier",
    "MetadataResolver",
    "extract_overrides",
    "parse_index_key",
    "ImageParser",
    "load_documents",
    "parse",
]
