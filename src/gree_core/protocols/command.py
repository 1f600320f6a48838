# File: src/gree_core/protocols/command.py
"""
Gree 控制命令包构建器 (Command Pack Builder)

把 参数名 -> 整数值 映射序列化为 t="cmd" 数据包 (opt/p 并行数组)，
与 status 模块的解析互为逆操作。
"""

import logging
from collections.abc import Mapping

from .. import utils
from ..models import Pack, ParameterMap
from .constants import Field, PackType
from .status import read_parameter_pairs

logger = logging.getLogger(__name__)


def build_command_pack(parameters: Mapping[str, int]) -> bytes:
    """构建控制命令数据包 (待加密的明文)。

    opt[k] 与 p[k] 的位置对应关系严格遵循映射的迭代顺序。

    Args:
        parameters: 参数名 -> 整数值。

    Returns:
        bytes: {"opt": [...], "p": [...], "t": "cmd"}；
        映射为空时返回 b""，表示无需发送 (调用方应视为空操作而非错误)。
    """
    if not parameters:
        return b""

    names, values = utils.flatten_pairs(parameters.items())
    logger.debug("command pack: opt=%s p=%s", names, values)

    return utils.dumps_compact(
        {
            Field.OPT: names,
            Field.P: values,
            Field.TYPE: PackType.CMD,
        }
    )


def parse_command_pack(pack: Pack) -> ParameterMap:
    """[Strict] 解析 t="cmd" 数据包，还原参数映射。

    校验规则与状态响应包相同，只是字段换成 opt/p。

    Raises:
        StatusValidationError: 结构校验失败。
    """
    return dict(read_parameter_pairs(pack, PackType.CMD, Field.OPT, Field.P))
