# File: src/gree_core/protocols/pack.py
"""
Gree 响应数据包读取器 (Pack Reader)

负责从设备响应信封中取出加密的 pack 字段，调用外部解密服务，
并把明文解析为数据包对象。包类型相关的校验交给下游 (如 status 模块)。
"""

import inspect
import json
import logging
from typing import Any, Union

from ..exceptions import (
    DecryptionError,
    MalformedEnvelopeError,
    MalformedPackError,
    MissingPackFieldError,
)
from ..models import Pack
from .base import DecryptFunc, PackCipher
from .constants import Field

logger = logging.getLogger(__name__)

Decryptor = Union[PackCipher, DecryptFunc]


def _resolve_decrypt(decrypt: Decryptor) -> DecryptFunc:
    """PackCipher 实例取其 decrypt 方法，普通可调用对象原样返回。"""
    if isinstance(decrypt, PackCipher):
        return decrypt.decrypt
    return decrypt


def _extract_pack_text(response: bytes) -> str:
    """步骤 1-2: 解析信封 JSON 并取出 pack 文本。"""
    logger.debug("reading pack from response: %r", response)

    try:
        envelope = json.loads(response)
    except (ValueError, TypeError) as e:
        logger.warning(f"响应不是合法的 JSON: {e}")
        raise MalformedEnvelopeError(f"响应不是合法的 JSON: {e}") from e

    # 非对象的 JSON (数组/标量) 视为没有 pack 字段
    pack_text: Any = envelope.get(Field.PACK) if isinstance(envelope, dict) else None
    if not isinstance(pack_text, str) or not pack_text:
        logger.warning("响应缺少必需的 'pack' 字段")
        raise MissingPackFieldError("响应缺少必需的 'pack' 字段")

    return pack_text


def _parse_pack(plaintext: bytes) -> Pack:
    """步骤 4: 把解密后的明文解析为数据包对象。"""
    logger.debug("decrypted pack: %r", plaintext)

    try:
        pack = json.loads(plaintext)
    except (ValueError, TypeError) as e:
        logger.warning(f"解密后的 pack 不是合法的 JSON: {e}")
        raise MalformedPackError(f"解密后的 pack 不是合法的 JSON: {e}") from e

    if not isinstance(pack, dict):
        logger.warning(f"解密后的 pack 不是 JSON 对象: {type(pack).__name__}")
        raise MalformedPackError(f"解密后的 pack 不是 JSON 对象: {type(pack).__name__}")

    return pack


def read_pack(response: bytes, decryption_key: str, decrypt: Decryptor) -> Pack:
    """从响应信封中读取并解密数据包。

    Args:
        response: 设备返回的原始信封字节。
        decryption_key: 设备密钥 (绑定前为通用密钥，绑定后为设备密钥)。
        decrypt: 外部解密服务，PackCipher 实例或 (bytes, str) -> bytes 函数。

    Returns:
        Pack: 解析后的数据包对象，不做任何类型校验。

    Raises:
        MalformedEnvelopeError: 响应不是合法的 JSON。
        MissingPackFieldError: 缺少 pack 字段，此时不会调用解密服务。
        DecryptionError: 解密服务失败，或同步接口收到了异步解密服务。
        MalformedPackError: 明文不是合法的 JSON 对象。
    """
    pack_text = _extract_pack_text(response)
    func = _resolve_decrypt(decrypt)

    logger.debug(f"尝试解密 pack ({len(pack_text)} 字符)")
    try:
        plaintext = func(pack_text.encode("utf-8"), decryption_key)
    except Exception as e:
        logger.warning(f"pack 解密失败: {e}")
        raise DecryptionError(f"pack 解密失败: {e}") from e

    if inspect.isawaitable(plaintext):
        # 关闭未等待的协程，避免 "never awaited" 警告
        if inspect.iscoroutine(plaintext):
            plaintext.close()
        raise DecryptionError("解密服务是异步的，请改用 read_pack_async")

    return _parse_pack(plaintext)


async def read_pack_async(
    response: bytes, decryption_key: str, decrypt: Decryptor
) -> Pack:
    """read_pack 的异步版本。

    解密服务既可以是同步函数，也可以返回 awaitable，
    必须在解密完成后才继续解析明文。其余行为与 read_pack 完全一致。
    """
    pack_text = _extract_pack_text(response)
    func = _resolve_decrypt(decrypt)

    logger.debug(f"尝试解密 pack ({len(pack_text)} 字符)")
    try:
        plaintext = func(pack_text.encode("utf-8"), decryption_key)
        if inspect.isawaitable(plaintext):
            plaintext = await plaintext
    except Exception as e:
        logger.warning(f"pack 解密失败: {e}")
        raise DecryptionError(f"pack 解密失败: {e}") from e

    return _parse_pack(plaintext)
