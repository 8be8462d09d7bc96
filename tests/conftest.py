"""
pytest 配置与公共 fixtures

使用方式：
    def test_something(parser, chevron_lines):
        image = parser.parse(chevron_lines)
"""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Generator

import pytest

from asciimage.config import RuntimeConfig
from asciimage.parsing import ElementClassifier, GridNormalizer, ImageParser


# ============================================================================
# 配置 Fixtures
# ============================================================================

@pytest.fixture
def runtime_config() -> RuntimeConfig:
    """运行期配置（全部默认值）"""
    return RuntimeConfig()


@pytest.fixture
def parser(runtime_config: RuntimeConfig) -> ImageParser:
    """格式前端（不读取 asciimage.yaml）"""
    return ImageParser(config=runtime_config)


@pytest.fixture
def normalizer() -> GridNormalizer:
    return GridNormalizer()


@pytest.fixture
def classifier() -> ElementClassifier:
    return ElementClassifier()


# ============================================================================
# 样例 Fixtures
# ============================================================================

@pytest.fixture
def chevron_lines() -> list[str]:
    """箭头：1-2-3 构成路径"""
    return [
        ". . . . .\n",
        ". 1 . . .\n",
        ". . 2 . .\n",
        ". 3 . . .\n",
        ". . . . .\n",
    ]


@pytest.fixture
def mixed_lines() -> list[str]:
    """点/线/路径/椭圆混合"""
    return [
        "1 . . . 5",
        ". A . A .",
        "2 . . . 3",
        "B . # . B",
        "B . . . B",
    ]


@pytest.fixture
def styled_document() -> str:
    """带全局元数据与按索引覆盖的YAML文档"""
    return (
        "title: sample\n"
        "fill: red\n"
        "image: |\n"
        "  1 . 2\n"
        "  A . A\n"
        "1:\n"
        "  open_path: true\n"
        "  stroke: blue\n"
    )


# ============================================================================
# 文件 Fixtures
# ============================================================================

@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """临时目录"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)
