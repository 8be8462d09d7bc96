"""
图像加载器 - 读取 ASCIImage 文件（纯文本或 YAML）

文件读取属于外部协作方，解析核心本身不做 I/O
未指定 parser 时使用 get_config()（读取 asciimage.yaml）

使用方式：
    image = load_image("icons/chevron.yaml", overrides={"stroke": "red"})
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .config import get_config
from .models import Image
from .parsing import ImageParser


def load_image(
    path: str | Path,
    overrides: Mapping[Any, Any] | None = None,
    parser: ImageParser | None = None,
) -> Image:
    """加载并解析图像文件"""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"图像文件不存在: {path}")

    text = path.read_text(encoding="utf-8")
    return (parser or ImageParser(config=get_config())).parse(text, overrides)
