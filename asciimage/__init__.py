"""
ASCIImage 解码器 - 字符网格 → 几何图元

模块结构：
- config/     运行期配置（样式默认值/日志）
- models/     数据模型定义
- parsing/    网格归一化/图元分类/元数据解析/格式前端
- loader      文件读取
"""

from .loader import load_image
from .parsing import ImageParser, parse

__version__ = "0.1.0"

__all__ = ["ImageParser", "parse", "load_image"]
