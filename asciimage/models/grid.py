"""
网格模型 - 归一化后的矩形字符网格与坐标

坐标约定：(row, col)，行优先，均从 0 开始
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import NamedTuple

from pydantic import BaseModel


class Coordinate(NamedTuple):
    """网格坐标"""
    row: int
    col: int


class Grid(BaseModel):
    """矩形字符网格（每行一个字符串，已去除空白）"""
    pixels: tuple[str, ...]

    model_config = {"frozen": True}

    @property
    def rows(self) -> int:
        return len(self.pixels)

    @property
    def cols(self) -> int:
        return len(self.pixels[0]) if self.pixels else 0

    def cells(self) -> Iterator[tuple[Coordinate, str]]:
        """按行优先顺序遍历所有单元格"""
        for rn, row in enumerate(self.pixels):
            for cn, ch in enumerate(row):
                yield Coordinate(rn, cn), ch
