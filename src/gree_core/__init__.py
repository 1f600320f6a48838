# src/gree_core/__init__.py
"""
Gree-Core v1.0.0
Gree 局域网空调协议的信封与数据包编解码核心库。
"""

# 暴露核心配置
from .config import (
    GreeConfig,
    create_config_from_dict,
    load_config_from_toml,
)

# 暴露编解码门面与数据模型
from .codec import GreeCodec

# 暴露异常体系 (方便上层 try-except)
from .exceptions import (
    ConfigError,
    DecryptionError,
    GreeError,
    MalformedEnvelopeError,
    MalformedPackError,
    MissingPackFieldError,
    PackEncodingError,
    ProtocolError,
    StatusValidationError,
    ValidationReason,
)
from .models import DeviceDescriptor, Pack, ParameterMap
from .protocols import (
    STATUS_COLUMNS,
    PackCipher,
    build_binding_request,
    build_command_pack,
    build_device_request,
    build_status_query_pack,
    extract_status_map,
    parse_command_pack,
    parse_status_map,
    read_pack,
    read_pack_async,
)

__version__ = "1.0.0"

__all__ = [
    "GreeCodec",
    "GreeConfig",
    "DeviceDescriptor",
    "ParameterMap",
    "Pack",
    "PackCipher",
    "STATUS_COLUMNS",
    "create_config_from_dict",
    "load_config_from_toml",
    "build_binding_request",
    "build_device_request",
    "build_status_query_pack",
    "read_pack",
    "read_pack_async",
    "extract_status_map",
    "parse_status_map",
    "build_command_pack",
    "parse_command_pack",
    "GreeError",
    "ConfigError",
    "ProtocolError",
    "MalformedEnvelopeError",
    "MissingPackFieldError",
    "DecryptionError",
    "MalformedPackError",
    "PackEncodingError",
    "StatusValidationError",
    "ValidationReason",
]
