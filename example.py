# example.py
"""
这是一个 GreeCodec API 的最小示例。

它演示了如何将 gree-core 作为一个库导入到你自己的项目中，
构建绑定/状态查询/控制命令请求，并解析设备的状态响应。

注意: gree-core 不实现加密算法。这里的 Base64Cipher 只是占位，
真实设备需要注入 AES 实现 (绑定前使用通用密钥，绑定后使用设备密钥)。

运行此示例：
1. 安装： pip install -e .
2. 从项目根目录运行： python example.py
"""

import base64
import json
import logging
import sys

# 日志配置开始
logging.basicConfig(
    level=logging.DEBUG, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("GreeExample")
# 日志配置结束

try:
    from gree_core import DeviceDescriptor, GreeCodec, GreeError, PackCipher
except ImportError as ie:
    logger.critical(f"导入 gree_core 失败: {ie}")
    logger.critical("请先执行 pip install -e .")
    sys.exit(1)


class Base64Cipher(PackCipher):
    """占位加密服务：仅做 Base64 编解码，不提供任何安全性。"""

    def encrypt(self, plaintext: bytes, key: str) -> bytes:
        return base64.b64encode(plaintext)

    def decrypt(self, ciphertext: bytes, key: str) -> bytes:
        return base64.b64decode(ciphertext)


def main() -> None:
    """
    程序主入口点。
    模拟一次 "绑定 -> 查询状态 -> 下发命令" 的报文往返 (不做网络 I/O)。
    """
    codec = GreeCodec(cipher=Base64Cipher())
    device = DeviceDescriptor(id="f4911e7aca59", name="Living Room")
    key = "a3K8Bx%2r8Y7#xDh"

    logger.info(f"绑定请求: {codec.binding_request(device).decode()}")
    logger.info(f"状态查询: {codec.status_request(device, key, 0).decode()}")
    logger.info(f"控制命令: {codec.command_request({'Pow': 1, 'SetTem': 24}, key, 1).decode()}")

    # 模拟设备返回的状态响应
    fake_pack = {"t": "dat", "mac": device.id, "r": 2, "cols": ["Pow", "SetTem"], "dat": [1, 24]}
    response = json.dumps(
        {
            "t": "pack",
            "i": 0,
            "uid": 0,
            "cid": device.id,
            "pack": base64.b64encode(json.dumps(fake_pack).encode()).decode(),
        }
    ).encode()

    try:
        status = codec.read_status(response, key)
        logger.info(f"设备状态: {status}")
    except GreeError as e:
        logger.error(f"解析状态响应失败: {e}")


# 程序入口
if __name__ == "__main__":
    main()
