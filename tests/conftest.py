# tests/conftest.py
import base64
import json
import sys
from pathlib import Path

import pytest

# 确保 src 目录在 sys.path 中
src_path = Path(__file__).resolve().parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from gree_core.config import GreeConfig
from gree_core.models import DeviceDescriptor
from gree_core.protocols.base import PackCipher

TEST_KEY = "a3K8Bx%2r8Y7#xDh"


class FakeCipher(PackCipher):
    """测试用的可逆 "加密": Base64 + 密钥校验，不代表真实算法。"""

    def __init__(self, key: str = TEST_KEY) -> None:
        self.key = key
        self.decrypt_calls: list[tuple[bytes, str]] = []
        self.encrypt_calls: list[tuple[bytes, str]] = []

    def encrypt(self, plaintext: bytes, key: str) -> bytes:
        self.encrypt_calls.append((plaintext, key))
        if key != self.key:
            raise ValueError("bad key")
        return base64.b64encode(plaintext)

    def decrypt(self, ciphertext: bytes, key: str) -> bytes:
        self.decrypt_calls.append((ciphertext, key))
        if key != self.key:
            raise ValueError("bad key")
        return base64.b64decode(ciphertext, validate=True)


def _make_response(plain_pack: bytes, **extra) -> bytes:
    envelope = {"cid": "f4911e7aca59", "i": 0, "t": "pack", "uid": 0}
    envelope.update(extra)
    envelope["pack"] = base64.b64encode(plain_pack).decode("ascii")
    return json.dumps(envelope).encode("utf-8")


@pytest.fixture
def cipher() -> FakeCipher:
    return FakeCipher()


@pytest.fixture
def device() -> DeviceDescriptor:
    return DeviceDescriptor(id="f4911e7aca59", name="Living Room")


@pytest.fixture
def default_config() -> GreeConfig:
    return GreeConfig()


@pytest.fixture
def key() -> str:
    return TEST_KEY


@pytest.fixture
def make_response():
    """[Fixture] 构造设备响应信封的工厂 (pack 字段按 FakeCipher 的方式加密)。"""
    return _make_response
