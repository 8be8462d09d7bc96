"""
模块接口契约 - 定义各模块的抽象接口与异常

设计原则：
1. 模块间通过接口通信，不直接依赖具体实现
2. 每个接口定义清晰的输入输出类型
3. 便于单元测试和mock替换

使用方式：
    from asciimage.interfaces import IElementClassifier

    class MyClassifier(IElementClassifier):
        def classify(self, grid: Grid) -> tuple[Element, ...]:
            ...
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .models import Coordinate, Element, Grid, Image


# ============================================================================
# 解析模块接口
# ============================================================================

class IGridNormalizer(ABC):
    """网格归一化接口 - 原始文本行 → 矩形字符网格"""

    @abstractmethod
    def normalize(self, lines: Sequence[str]) -> Grid:
        """
        校验并归一化文本行

        Args:
            lines: 原始文本行（可带行尾换行符）

        Returns:
            矩形字符网格

        Raises:
            EmptyInputError: 无输入行
            RaggedInputError: 原始行长度不一致
            MisalignedPixelsError: 去除空白后行长度不一致
        """
        ...


class IElementClassifier(ABC):
    """图元分类器接口 - 按标记目录顺序识别点/线/路径/椭圆"""

    @abstractmethod
    def occurrences(self, grid: Grid) -> dict[str, list[Coordinate]]:
        """
        统计每个目录标记在网格中的坐标（行优先顺序）

        Returns:
            {标记: 坐标列表}，未出现的标记对应空列表
        """
        ...

    @abstractmethod
    def classify(self, grid: Grid) -> tuple[Element, ...]:
        """
        识别网格中的所有图元

        Returns:
            按分类顺序排列的图元序列（可为空）
        """
        ...


class IImageParser(ABC):
    """格式前端接口 - 原始网格/YAML 输入 → Image"""

    @abstractmethod
    def parse(self, source: Any, overrides: Mapping[Any, Any] | None = None) -> Image:
        """
        自动识别输入形态并解析

        Args:
            source: 文本块 / 映射序列 / 文本行序列
            overrides: 调用方提供的元数据覆盖

        Returns:
            解析后的 Image

        Raises:
            AsciiImageError: 两种解释均失败时抛出最后一次的错误
        """
        ...


# ============================================================================
# 异常定义
# ============================================================================

class AsciiImageError(Exception):
    """基础异常"""
    pass


class GridError(AsciiImageError):
    """网格错误"""
    pass


class EmptyInputError(GridError):
    """无输入行"""
    pass


class RaggedInputError(GridError):
    """原始行长度不一致"""

    def __init__(self, lengths: Sequence[int]):
        self.lengths = tuple(lengths)
        super().__init__(f"输入行长度不一致: {sorted(set(self.lengths))}")


class MisalignedPixelsError(GridError):
    """去除空白后行长度不一致（空白填充不一致）"""

    def __init__(self, lengths: Sequence[int]):
        self.lengths = tuple(lengths)
        super().__init__(
            f"去除空白后行长度不一致，像素是否等宽？ {sorted(set(self.lengths))}"
        )


class DocumentError(AsciiImageError):
    """结构化文档错误"""
    pass


class DocumentSyntaxError(DocumentError):
    """YAML 语法错误"""
    pass


class NoDocumentsError(DocumentError):
    """结构化输入为空"""
    pass


class NoImageKeyError(DocumentError):
    """唯一文档缺少 image 键"""
    pass


class MultiLayerUnsupportedError(DocumentError):
    """多图层（多文档）暂不支持"""
    pass


class UnsupportedInputShapeError(DocumentError):
    """无法识别的输入形态"""
    pass
