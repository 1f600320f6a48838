"""
Gree 加密服务基类 (Cipher Collaborator)

定义编解码层与外部加解密服务之间的窄接口。
本库不实现任何具体算法，调用方注入自己的实现即可。
"""

import abc
from collections.abc import Awaitable, Callable
from typing import Union

# 解密函数签名: (密文文本字节, 密钥) -> 明文字节，允许是协程
DecryptFunc = Callable[[bytes, str], Union[bytes, Awaitable[bytes]]]


class PackCipher(abc.ABC):
    """pack 字段加解密服务抽象基类。

    具体实现 (如 AES-ECB + Base64) 由上层提供，
    失败时 (密钥错误、密文损坏) 直接抛出任意异常，由 Pack Reader 统一包装。
    """

    @abc.abstractmethod
    def decrypt(self, ciphertext: bytes, key: str) -> bytes:
        """[Abstract] 解密信封中的 pack 文本。

        Args:
            ciphertext: pack 字段的文本字节 (已是文本安全编码)。
            key: 设备密钥。

        Returns:
            bytes: 明文 JSON 字节。
        """
        raise NotImplementedError

    @abc.abstractmethod
    def encrypt(self, plaintext: bytes, key: str) -> bytes:
        """[Abstract] 加密待发送的数据包。

        Args:
            plaintext: 紧凑 JSON 字节。
            key: 设备密钥。

        Returns:
            bytes: 文本安全的密文，可直接嵌入信封的 pack 字段。
        """
        raise NotImplementedError
