# File: src/gree_core/protocols/status.py
"""
Gree 状态响应解析 (Status Map Extractor)

把 t="dat" 数据包中位置对应的 cols/dat 两个数组还原为 参数名 -> 整数值 映射。

校验分两层:
- 结构校验 (包类型、数组类型、非空、长度一致) 是硬失败。
- 标量校验是宽松的: 单个值无法转换时取 0，不影响其余参数。
"""

import logging
from typing import Any

from .. import utils
from ..exceptions import StatusValidationError, ValidationReason
from ..models import Pack, ParameterMap
from .constants import Field, PackType

logger = logging.getLogger(__name__)


def read_parameter_pairs(
    pack: Pack, pack_type: str, names_field: str, values_field: str
) -> list[tuple[str, int]]:
    """校验并提取数据包中的并行数组，返回有序的 (名称, 值) 序列。

    按顺序执行以下检查，遇到第一个失败即抛出:
    1. pack.t == pack_type
    2. names_field 存在且为数组
    3. names_field 非空
    4. values_field 存在且为数组
    5. values_field 非空
    6. 两个数组长度一致

    Args:
        pack: 解密后的数据包。
        pack_type: 期望的 t 字段取值 ("dat" 或 "cmd")。
        names_field: 参数名数组的字段名。
        values_field: 参数值数组的字段名。

    Returns:
        list[tuple[str, int]]: 与线上数组顺序一致的成对序列。

    Raises:
        StatusValidationError: 任一结构检查失败。
    """
    actual_type: Any = pack.get(Field.TYPE) if isinstance(pack, dict) else None
    if actual_type != pack_type:
        raise StatusValidationError(
            ValidationReason.WRONG_PACK_TYPE,
            f"期望 {pack_type!r}，实际 {actual_type!r}",
        )

    names = pack.get(names_field)
    if not isinstance(names, list):
        raise StatusValidationError(ValidationReason.NAMES_NOT_ARRAY, names_field)
    if not names:
        raise StatusValidationError(ValidationReason.NAMES_EMPTY, names_field)

    values = pack.get(values_field)
    if not isinstance(values, list):
        raise StatusValidationError(ValidationReason.VALUES_NOT_ARRAY, values_field)
    if not values:
        raise StatusValidationError(ValidationReason.VALUES_EMPTY, values_field)

    if len(names) != len(values):
        raise StatusValidationError(
            ValidationReason.LENGTH_MISMATCH,
            f"{names_field}={len(names)}, {values_field}={len(values)}",
        )

    return [
        (utils.to_str_lenient(name), utils.to_int_lenient(value))
        for name, value in zip(names, values)
    ]


def parse_status_map(pack: Pack) -> ParameterMap:
    """[Strict] 解析状态响应包，结构错误时抛出异常。

    重复的参数名以最后一次出现为准。

    Raises:
        StatusValidationError: 结构校验失败，reason 字段指明具体原因。
    """
    return dict(read_parameter_pairs(pack, PackType.DAT, Field.COLS, Field.DAT))


def extract_status_map(pack: Pack) -> ParameterMap:
    """[Lenient] 解析状态响应包，任何结构错误都折叠为空字典。

    这是尽力而为的读取接口: 返回值无法区分 "无数据" 与 "数据损坏"，
    但每种拒绝原因都会以不同的 WARNING 日志记录。
    需要区分时请使用 parse_status_map。

    Args:
        pack: 解密后的数据包。

    Returns:
        ParameterMap: 参数映射；校验失败时为空字典。
    """
    try:
        return parse_status_map(pack)
    except StatusValidationError as e:
        logger.warning(
            f"failed to read status map from pack [{e.reason.name}]: {e}"
        )
        return {}
