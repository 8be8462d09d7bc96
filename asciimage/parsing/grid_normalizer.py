"""
网格归一化 - 原始文本行 → 矩形字符网格

规则：
1. 去除行尾换行符
2. 无输入行 → EmptyInputError
3. 原始行长度不一致 → RaggedInputError
4. 去除所有空白（空白只是列间的装饰性填充）
5. 去除空白后行长度不一致 → MisalignedPixelsError
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from ..interfaces import (
    EmptyInputError,
    IGridNormalizer,
    MisalignedPixelsError,
    RaggedInputError,
)
from ..models import Grid

_WHITESPACE = re.compile(r"\s+")


class GridNormalizer(IGridNormalizer):
    """网格归一化实现"""

    def normalize(self, lines: Sequence[str]) -> Grid:
        if not lines:
            raise EmptyInputError("没有输入行")

        raw = [line.rstrip("\r\n") for line in lines]
        raw_lengths = [len(line) for line in raw]
        if len(set(raw_lengths)) != 1:
            raise RaggedInputError(raw_lengths)

        pixels = [_WHITESPACE.sub("", line) for line in raw]
        lengths = [len(row) for row in pixels]
        if len(set(lengths)) != 1:
            raise MisalignedPixelsError(lengths)

        if lengths[0] == 0:
            raise EmptyInputError("去除空白后没有像素")

        return Grid(pixels=tuple(pixels))
