# File: src/gree_core/utils.py
"""
Gree 核心库 - 通用工具箱

本模块汇集了编解码层共用的 JSON 序列化与标量转换辅助函数。
"""

import json
import math
from collections.abc import Iterable, Mapping
from typing import Any

# 紧凑 JSON: 不输出任何多余空白
JSON_SEPARATORS = (",", ":")

# 32 位有符号整数范围，超出即视为无效值
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def dumps_compact(obj: Mapping[str, Any], encoding: str = "utf-8") -> bytes:
    """将对象序列化为紧凑的 JSON 字节流。

    字段顺序按字典的插入顺序输出，不排序、不缩进。
    非 ASCII 字符输出为 \\uXXXX 转义，孤立代理项 (如 "\\ud800") 也能编码。

    Args:
        obj: 待序列化的 JSON 对象。
        encoding: 输出字节编码，默认 UTF-8。

    Returns:
        bytes: 紧凑 JSON 文本的字节表示。
    """
    return json.dumps(obj, separators=JSON_SEPARATORS, ensure_ascii=True).encode(
        encoding
    )


def to_int_lenient(value: Any, default: int = 0) -> int:
    """尽力而为地把 JSON 标量转换为整数。

    只接受数值类型且必须是整数值 (如 26 或 26.0)，
    其余情况 (字符串、布尔、null、小数、NaN) 一律返回默认值。
    超出 32 位有符号整数范围的值同样返回默认值。

    Args:
        value: 从 JSON 中取出的任意值。
        default: 转换失败时返回的值。

    Returns:
        int: 转换结果。
    """
    # bool 是 int 的子类，JSON 里的 true/false 不算数值
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        result = value
    elif isinstance(value, float) and math.isfinite(value) and value.is_integer():
        result = int(value)
    else:
        return default
    if not _INT_MIN <= result <= _INT_MAX:
        return default
    return result


def to_str_lenient(value: Any, default: str = "") -> str:
    """尽力而为地把 JSON 标量转换为字符串，非字符串返回默认值。"""
    if isinstance(value, str):
        return value
    return default


def flatten_pairs(pairs: Iterable[tuple[str, int]]) -> tuple[list[str], list[int]]:
    """把有序的 (名称, 值) 序列拆分为两个位置对应的数组。

    只在序列化边界调用，内部始终以成对序列传递，避免两个数组失步。
    """
    names: list[str] = []
    values: list[int] = []
    for name, value in pairs:
        names.append(name)
        values.append(value)
    return names, values
