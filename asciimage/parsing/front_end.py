"""
格式前端 - 原始网格 / YAML 输入 → Image

输入形态：
1. 单个文本块：先按 YAML 文档解析，失败再按原始网格解析
2. 映射序列（每个映射一个图层）：按结构化文档解析
3. 文本行序列：先按原始网格解析，失败再拼接为 YAML 文档解析
两种解释均失败时抛出第二次的错误；其他输入 → UnsupportedInputShapeError

结构化文档：
- 空序列 → NoDocumentsError
- 多于一个文档 → MultiLayerUnsupportedError（多图层暂不支持）
- 唯一文档缺少 image 键 → NoImageKeyError
- 文档（合并调用方覆盖后）作为全局元数据，image 文本按原始网格解析

测试要点：
- test_parse_raw_lines: 原始行解析
- test_parse_single_document: 单文档解析与元数据
- test_multi_layer_unsupported: 多文档报错
- test_text_fallback_to_raw: 文本块回退到原始网格
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

import yaml

from ..config import RuntimeConfig
from ..interfaces import (
    AsciiImageError,
    DocumentSyntaxError,
    IElementClassifier,
    IGridNormalizer,
    IImageParser,
    MultiLayerUnsupportedError,
    NoDocumentsError,
    NoImageKeyError,
    UnsupportedInputShapeError,
)
from ..models import Image, merge_layers
from .classifier import ElementClassifier
from .grid_normalizer import GridNormalizer
from .metadata_resolver import MetadataResolver

logger = logging.getLogger(__name__)

IMAGE_KEY = "image"


class ImageParser(IImageParser):
    """格式前端实现

    未指定 config 时只使用内置默认值与环境变量，不读取 asciimage.yaml
    """

    def __init__(
        self,
        config: RuntimeConfig | None = None,
        normalizer: IGridNormalizer | None = None,
        classifier: IElementClassifier | None = None,
    ) -> None:
        self.config = config or RuntimeConfig()
        self.normalizer = normalizer or GridNormalizer()
        self.classifier = classifier or ElementClassifier()

    def parse(self, source: Any, overrides: Mapping[Any, Any] | None = None) -> Image:
        if isinstance(source, str):
            return self._with_fallback(
                source, overrides, self.parse_text, self._parse_text_as_lines
            )

        if isinstance(source, Sequence) and not isinstance(source, (bytes, bytearray)):
            items = list(source)
            if items and all(isinstance(item, Mapping) for item in items):
                return self.parse_documents(items, overrides)
            if all(isinstance(item, str) for item in items):
                return self._with_fallback(
                    items, overrides, self.parse_lines, self._parse_lines_as_text
                )

        raise UnsupportedInputShapeError(f"无法识别的输入形态: {type(source).__name__}")

    # === 原始网格 ===

    def parse_lines(
        self,
        lines: Sequence[str],
        overrides: Mapping[Any, Any] | None = None,
    ) -> Image:
        """原始网格解析，overrides 作为全局元数据"""
        grid = self.normalizer.normalize(lines)
        elements = self.classifier.classify(grid)
        resolver = MetadataResolver(self.config.style_defaults(), overrides)
        return Image(
            rows=grid.rows,
            cols=grid.cols,
            elements=elements,
            metadata=resolver.resolved,
            overrides=resolver.overrides,
        )

    # === 结构化文档 ===

    def parse_documents(
        self,
        documents: Sequence[Any],
        overrides: Mapping[Any, Any] | None = None,
    ) -> Image:
        """结构化文档解析（仅支持单图层）"""
        if not documents:
            raise NoDocumentsError("没有结构化文档")
        if len(documents) > 1:
            raise MultiLayerUnsupportedError(f"暂不支持多图层: {len(documents)} 个文档")

        doc = documents[0]
        if not isinstance(doc, Mapping):
            raise UnsupportedInputShapeError(f"文档不是映射: {type(doc).__name__}")
        if IMAGE_KEY not in doc:
            raise NoImageKeyError(f"文档缺少 {IMAGE_KEY!r} 键")

        return self.parse_lines(self._image_lines(doc[IMAGE_KEY]), merge_layers(doc, overrides))

    def parse_text(
        self,
        text: str,
        overrides: Mapping[Any, Any] | None = None,
    ) -> Image:
        """将文本块按 YAML 文档流解析"""
        return self.parse_documents(load_documents(text), overrides)

    # === 回退 ===

    def _parse_text_as_lines(self, text: str, overrides: Mapping[Any, Any] | None) -> Image:
        return self.parse_lines(text.splitlines(), overrides)

    def _parse_lines_as_text(self, lines: list[str], overrides: Mapping[Any, Any] | None) -> Image:
        return self.parse_text("\n".join(line.rstrip("\r\n") for line in lines), overrides)

    @staticmethod
    def _with_fallback(
        source: Any,
        overrides: Mapping[Any, Any] | None,
        first: Callable[[Any, Mapping[Any, Any] | None], Image],
        second: Callable[[Any, Mapping[Any, Any] | None], Image],
    ) -> Image:
        """先尝试 first，失败则回退到 second（second 的错误直接抛出）"""
        try:
            return first(source, overrides)
        except AsciiImageError as e:
            logger.debug(f"{first.__name__} 解析失败，回退到 {second.__name__}: {e}")
        return second(source, overrides)

    @staticmethod
    def _image_lines(value: Any) -> list[str]:
        if isinstance(value, str):
            return value.splitlines()
        if isinstance(value, Sequence) and all(isinstance(v, str) for v in value):
            return list(value)
        raise UnsupportedInputShapeError(f"{IMAGE_KEY!r} 不是文本: {type(value).__name__}")


def load_documents(text: str) -> list[Any]:
    """YAML 文档流 → 文档列表（构造失败如非法日期也按语法错误处理）"""
    try:
        return list(yaml.safe_load_all(text))
    except (yaml.YAMLError, ValueError) as e:
        raise DocumentSyntaxError(f"YAML解析失败: {e}") from e


def parse(source: Any, overrides: Mapping[Any, Any] | None = None) -> Image:
    """使用默认配置解析"""
    return ImageParser().parse(source, overrides)
