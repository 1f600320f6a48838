# File: src/gree_core/protocols/envelope.py
"""
Gree 外层信封构建器 (Envelope Builders)

负责把协议意图 (绑定、包裹加密包、状态查询) 转换为紧凑 JSON 字节流。
本模块是无状态的 (Stateless)，不持有任何配置或会话信息。
"""

import logging
from .. import utils
from ..exceptions import PackEncodingError
from ..models import DeviceDescriptor
from .constants import (
    DEFAULT_CLIENT_ID,
    DEFAULT_UID,
    STATUS_COLUMNS,
    EnvelopeType,
    Field,
)

logger = logging.getLogger(__name__)

# =========================================================================
# Bind
# =========================================================================


def build_binding_request(device: DeviceDescriptor, uid: int = DEFAULT_UID) -> bytes:
    """构建绑定请求信封。

    device.id 原样写入 mac 字段，标识的合法性由上游负责。

    Args:
        device: 目标设备描述符。
        uid: 用户 ID，协议固定为 0。

    Returns:
        bytes: {"mac": ..., "t": "bind", "uid": 0}
    """
    return utils.dumps_compact(
        {
            Field.MAC: device.id,
            Field.TYPE: EnvelopeType.BIND,
            Field.UID: uid,
        }
    )


# =========================================================================
# Pack (加密包外壳)
# =========================================================================


def build_device_request(
    encrypted_pack: bytes,
    sequence: int,
    client_id: str = DEFAULT_CLIENT_ID,
    uid: int = DEFAULT_UID,
) -> bytes:
    """把加密后的数据包包裹进设备请求信封。

    Args:
        encrypted_pack: 加密服务输出的文本安全字节 (如 Base64)。
        sequence: 请求序号，写入 i 字段。
        client_id: 客户端标识，写入 cid 字段。
        uid: 用户 ID。

    Returns:
        bytes: {"cid": "app", "i": ..., "t": "pack", "uid": 0, "pack": "..."}

    Raises:
        PackEncodingError: encrypted_pack 不是合法的 UTF-8 文本。
    """
    try:
        pack_text = encrypted_pack.decode("utf-8")
    except UnicodeDecodeError as e:
        raise PackEncodingError(f"加密包不是合法的 UTF-8 文本: {e}") from e

    return utils.dumps_compact(
        {
            Field.CID: client_id,
            Field.SEQUENCE: sequence,
            Field.TYPE: EnvelopeType.PACK,
            Field.UID: uid,
            Field.PACK: pack_text,
        }
    )


# =========================================================================
# Status (状态查询包, 加密前的明文)
# =========================================================================


def build_status_query_pack(device_id: str) -> bytes:
    """构建状态查询数据包 (待加密的明文)。

    查询的参数目录固定为 STATUS_COLUMNS 中的 19 项，顺序不可变。

    Args:
        device_id: 设备标识，写入 mac 字段。

    Returns:
        bytes: {"cols": [...], "mac": ..., "t": "status"}
    """
    return utils.dumps_compact(
        {
            Field.COLS: list(STATUS_COLUMNS),
            Field.MAC: device_id,
            Field.TYPE: EnvelopeType.STATUS,
        }
    )
