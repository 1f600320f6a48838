# tests/test_envelope.py
"""
测试外层信封构建器 (bind / pack / status)。
"""

import json

import pytest

from gree_core.exceptions import PackEncodingError, ProtocolError
from gree_core.models import DeviceDescriptor
from gree_core.protocols import constants, envelope

EXPECTED_COLUMNS = [
    "Pow",
    "Mod",
    "SetTem",
    "WdSpd",
    "Air",
    "Blo",
    "Health",
    "SwhSlp",
    "Lig",
    "SwingLfRig",
    "SwUpDn",
    "Quiet",
    "Tur",
    "StHt",
    "TemUn",
    "HeatCoolType",
    "TemRec",
    "SvSt",
    "NoiseSet",
]

# =========================================================================
# Bind
# =========================================================================


def test_build_binding_request_exact_bytes():
    """验证绑定请求的紧凑 JSON 字节"""
    pkt = envelope.build_binding_request(DeviceDescriptor(id="AABBCC"))
    assert pkt == b'{"mac":"AABBCC","t":"bind","uid":0}'


def test_build_binding_request_passes_id_verbatim():
    """设备标识不做任何校验或规范化"""
    pkt = envelope.build_binding_request(DeviceDescriptor(id=" weird id "))
    assert json.loads(pkt)["mac"] == " weird id "


def test_build_binding_request_ignores_name():
    """name 只用于日志，不出现在线上"""
    pkt = envelope.build_binding_request(DeviceDescriptor(id="AABBCC", name="Bedroom"))
    assert b"Bedroom" not in pkt


def test_build_binding_request_lone_surrogate_id():
    """JSON 解码得到的孤立代理项原样写入，不抛出编码异常"""
    device_id = json.loads('"\\ud800AB"')
    pkt = envelope.build_binding_request(DeviceDescriptor(id=device_id))

    assert isinstance(pkt, bytes)
    pkt.decode("utf-8")
    assert json.loads(pkt)["mac"] == device_id


# =========================================================================
# Pack
# =========================================================================


def test_build_device_request_exact_bytes():
    pkt = envelope.build_device_request(b"LP24Ek0OaYogxs3iQLjL4A==", 7)
    assert pkt == (
        b'{"cid":"app","i":7,"t":"pack","uid":0,"pack":"LP24Ek0OaYogxs3iQLjL4A=="}'
    )


def test_build_device_request_custom_client():
    pkt = envelope.build_device_request(b"abc", 1, client_id="hass", uid=3)
    data = json.loads(pkt)
    assert data["cid"] == "hass"
    assert data["uid"] == 3
    assert data["pack"] == "abc"


def test_build_device_request_rejects_non_text():
    """非 UTF-8 字节应作为编码错误抛出"""
    with pytest.raises(PackEncodingError) as e:
        envelope.build_device_request(b"\xff\xfe\x00", 0)

    assert isinstance(e.value, ProtocolError)
    assert isinstance(e.value.__cause__, UnicodeDecodeError)


def test_build_device_request_no_whitespace():
    pkt = envelope.build_device_request(b"x", 0)
    assert b" " not in pkt
    assert b"\n" not in pkt


# =========================================================================
# Status
# =========================================================================


def test_build_status_query_pack():
    """状态查询包: 19 项固定目录 + mac + t"""
    pkt = envelope.build_status_query_pack("AA:BB:CC:DD:EE:FF")
    data = json.loads(pkt)

    assert data["cols"] == EXPECTED_COLUMNS
    assert data["mac"] == "AA:BB:CC:DD:EE:FF"
    assert data["t"] == "status"
    assert list(data) == ["cols", "mac", "t"]


def test_status_catalog_is_immutable():
    assert len(constants.STATUS_COLUMNS) == 19
    assert isinstance(constants.STATUS_COLUMNS, tuple)
    assert list(constants.STATUS_COLUMNS) == EXPECTED_COLUMNS


def test_build_status_query_pack_lone_surrogate_id():
    device_id = json.loads('"\\udfffCC"')
    pkt = envelope.build_status_query_pack(device_id)
    assert json.loads(pkt)["mac"] == device_id
