"""
标记目录 - 固定有序的标记字符表

顺序：1-9, A-Z, a-n, p-z（不含小写 o，避免与数字 0 混淆）
目录顺序决定路径的相邻关系，与空间位置无关
"""

from __future__ import annotations

import string

MARKS: tuple[str, ...] = tuple(
    string.digits[1:]
    + string.ascii_uppercase
    + string.ascii_lowercase.replace("o", "")
)

MARK_INDEX: dict[str, int] = {m: i for i, m in enumerate(MARKS)}
