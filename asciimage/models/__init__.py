"""
数据模型层 - 定义系统核心数据结构

所有模块通过这些模型交互，实现解耦：
- Grid / Coordinate: 归一化后的字符网格
- Element / ElementKind: 几何图元
- Image: 单次解析的最终结果
"""

from .element import Element, ElementKind
from .grid import Coordinate, Grid
from .image import Image, merge_layers

__all__ = [
    "Coordinate",
    "Grid",
    "Element",
    "ElementKind",
    "Image",
    "merge_layers",
]
