"""
图元模型 - 分类器输出的几何图元

- POINT:   单个坐标
- LINE:    同一重复标记的两个坐标
- ELLIPSE: 同一重复标记的三个及以上坐标（保留原始坐标，外接范围由渲染端计算）
- PATH:    目录相邻、各出现一次的标记坐标（按目录顺序）
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, model_validator

from .grid import Coordinate


class ElementKind(str, Enum):
    """图元类型"""
    POINT = "point"
    LINE = "line"
    PATH = "path"
    ELLIPSE = "ellipse"


class Element(BaseModel):
    """单个图元"""
    kind: ElementKind
    coords: tuple[Coordinate, ...]
    marks: tuple[str, ...] = Field(default=(), description="产生该图元的目录标记")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_arity(self) -> Element:
        n = len(self.coords)
        valid = {
            ElementKind.POINT: n == 1,
            ElementKind.LINE: n == 2,
            ElementKind.PATH: n >= 2,
            ElementKind.ELLIPSE: n >= 3,
        }[self.kind]
        if not valid:
            raise ValueError(f"{self.kind.value} 不能包含 {n} 个坐标")
        return self

    def bounds(self) -> tuple[int, int, int, int]:
        """外接范围 (min_row, min_col, max_row, max_col)"""
        rows = [c.row for c in self.coords]
        cols = [c.col for c in self.coords]
        return min(rows), min(cols), max(rows), max(cols)
