# File: src/gree_core/models.py
"""
Gree 核心库 - 数据模型

定义编解码层使用的数据形状。
本模块不包含业务逻辑，所有对象都是按次构造、用完即弃的临时值。
"""

from dataclasses import dataclass
from typing import Any

# 参数名 -> 整数值。插入顺序即线协议中的数组顺序。
ParameterMap = dict[str, int]

# 解密后的内层 JSON 对象
Pack = dict[str, Any]


@dataclass(frozen=True)
class DeviceDescriptor:
    """目标设备描述符。

    由调用方提供，本库不对其内容做任何校验。

    Attributes:
        id: 设备的稳定标识 (类 MAC 地址字符串)，原样写入信封的 mac 字段。
        name: 可选的设备名称，仅用于日志，不参与序列化。
    """

    id: str
    name: str = ""

    def __str__(self) -> str:
        if self.name:
            return f"{self.name} ({self.id})"
        return self.id
