# File: src/gree_core/codec.py
"""
Gree 编解码门面 (Codec Facade)

职责：
1. 资源组装：Config + Cipher。
2. 把协议层的无状态函数串成完整的请求/响应流程。

不做任何网络 I/O，返回的字节由上层传输层负责收发。
"""

import logging
from collections.abc import Mapping

from . import protocols
from .config import GreeConfig
from .exceptions import ConfigError
from .models import DeviceDescriptor, ParameterMap
from .protocols.base import PackCipher

logger = logging.getLogger(__name__)


class GreeCodec:
    """Gree 协议编解码器。

    自身不持有可变状态，可在多个线程间共享。
    """

    def __init__(
        self,
        config: GreeConfig | None = None,
        cipher: PackCipher | None = None,
    ) -> None:
        """初始化编解码器。

        Args:
            config: 全局配置对象，缺省使用默认配置。
            cipher: 外部加解密服务。只构建绑定请求时可以不提供。
        """
        self.config = config or GreeConfig()
        self.cipher = cipher

    def _require_cipher(self) -> PackCipher:
        if self.cipher is None:
            raise ConfigError("未配置加解密服务 (cipher)，无法处理加密数据包")
        return self.cipher

    def _wrap(self, plain_pack: bytes, key: str, sequence: int) -> bytes:
        """加密明文数据包并包裹进设备请求信封。"""
        encrypted = self._require_cipher().encrypt(plain_pack, key)
        return protocols.build_device_request(
            encrypted,
            sequence,
            client_id=self.config.client_id,
            uid=self.config.uid,
        )

    def binding_request(self, device: DeviceDescriptor) -> bytes:
        """构建绑定请求 (明文，无需加密)。"""
        logger.debug(f"构建绑定请求: {device}")
        return protocols.build_binding_request(device, uid=self.config.uid)

    def status_request(self, device: DeviceDescriptor, key: str, sequence: int) -> bytes:
        """构建加密的状态查询请求。

        Raises:
            ConfigError: 未配置 cipher。
        """
        plain = protocols.build_status_query_pack(device.id)
        return self._wrap(plain, key, sequence)

    def command_request(
        self, parameters: Mapping[str, int], key: str, sequence: int
    ) -> bytes:
        """构建加密的控制命令请求。

        Returns:
            bytes: 请求信封；parameters 为空时返回 b""，调用方应跳过发送。

        Raises:
            ConfigError: 未配置 cipher。
        """
        plain = protocols.build_command_pack(parameters)
        if not plain:
            logger.debug("参数为空，跳过命令构建")
            return b""
        return self._wrap(plain, key, sequence)

    def read_status(self, response: bytes, key: str) -> ParameterMap:
        """读取状态响应并还原参数映射。

        strict_status 为 False 时结构错误折叠为空字典 (仅记录日志)，
        为 True 时抛出 StatusValidationError。

        Raises:
            ConfigError: 未配置 cipher。
            ProtocolError: 信封/解密/明文解析失败 (各子类)。
        """
        pack = protocols.read_pack(response, key, self._require_cipher())
        if self.config.strict_status:
            return protocols.parse_status_map(pack)
        return protocols.extract_status_map(pack)
