"""
图元分类器 - 按标记目录顺序识别图元

算法（单次遍历目录，维护"当前序列"与最后并入序列的标记索引）：
1. 当前标记出现次数 != 1，或与上一个并入标记不相邻 → 截断当前序列
   （1个坐标 → POINT，≥2个坐标 → PATH）
2. 未出现的标记直接跳过
3. 将坐标并入当前序列
4. 重复标记立即成图元（2个 → LINE，≥3个 → ELLIPSE）
遍历结束后按规则1收尾

测试要点：
- test_single_mark_point: 孤立标记 → 点
- test_adjacent_marks_path: 相邻标记 → 路径（目录顺序）
- test_repeated_twice_line: 出现两次 → 线
- test_repeated_many_ellipse: 出现三次及以上 → 椭圆
- test_partition: 每个坐标只属于一个图元
"""

from __future__ import annotations

import logging

from ..interfaces import IElementClassifier
from ..models import Coordinate, Element, ElementKind, Grid
from .marks import MARK_INDEX, MARKS

logger = logging.getLogger(__name__)


class ElementClassifier(IElementClassifier):
    """图元分类器实现"""

    def occurrences(self, grid: Grid) -> dict[str, list[Coordinate]]:
        marks: dict[str, list[Coordinate]] = {m: [] for m in MARKS}
        for coord, ch in grid.cells():
            if ch in MARK_INDEX:
                marks[ch].append(coord)
        return marks

    def classify(self, grid: Grid) -> tuple[Element, ...]:
        marks = self.occurrences(grid)
        elements: list[Element] = []

        # 当前序列（坐标与对应标记）
        current: list[Coordinate] = []
        current_marks: list[str] = []
        last_mark_idx: int | None = None

        for i, m in enumerate(MARKS):
            coords = marks[m]

            break_run = len(coords) != 1 or last_mark_idx != i - 1
            if break_run and current:
                elements.append(self._make_element(current, current_marks, multi=False))
                current, current_marks = [], []
                last_mark_idx = None

            if not coords:
                continue

            current.extend(coords)
            current_marks.append(m)
            last_mark_idx = i

            if len(coords) != 1:
                elements.append(self._make_element(current, current_marks, multi=True))
                current, current_marks = [], []
                last_mark_idx = None

        if current:
            elements.append(self._make_element(current, current_marks, multi=False))

        logger.debug(f"分类完成: {grid.rows}x{grid.cols} → {len(elements)} 个图元")
        return tuple(elements)

    @staticmethod
    def _make_element(coords: list[Coordinate], marks: list[str], multi: bool) -> Element:
        """multi 为 True 表示坐标来自同一个重复标记"""
        if len(coords) == 1:
            kind = ElementKind.POINT
        elif not multi:
            kind = ElementKind.PATH
        elif len(coords) == 2:
            kind = ElementKind.LINE
        else:
            kind = ElementKind.ELLIPSE
        return Element(kind=kind, coords=tuple(coords), marks=tuple(marks))
