# src/gree_core/protocols/__init__.py
"""
Gree 协议层 (Protocol Layer)

本包负责信封与数据包的纯粹构建 (Build) 与解析 (Parse)。

- 不包含任何 socket 操作或网络 I/O。
- 不包含任何状态管理 (State)。
- 不实现加解密算法，只通过 PackCipher 接口调用外部服务。
"""

from . import constants
from .base import PackCipher
from .command import build_command_pack, parse_command_pack
from .constants import STATUS_COLUMNS
from .envelope import (
    build_binding_request,
    build_device_request,
    build_status_query_pack,
)
from .pack import read_pack, read_pack_async
from .status import extract_status_map, parse_status_map, read_parameter_pairs

# 公共 API
__all__ = [
    "constants",
    "STATUS_COLUMNS",
    "PackCipher",
    "build_binding_request",
    "build_device_request",
    "build_status_query_pack",
    "read_pack",
    "read_pack_async",
    "extract_status_map",
    "parse_status_map",
    "read_parameter_pairs",
    "build_command_pack",
    "parse_command_pack",
]
