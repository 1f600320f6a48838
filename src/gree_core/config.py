"""
Gree 核心库 - 配置模块

负责编解码选项的加载、解析与强类型转换。
支持从 TOML 文件或字典中加载配置。本层不读取环境变量。
"""

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .exceptions import ConfigError
from .protocols.constants import DEFAULT_CLIENT_ID, DEFAULT_UID

logger = logging.getLogger(__name__)

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off"}

# 允许出现在配置中的字段
_KNOWN_KEYS = frozenset({"client_id", "uid", "strict_status"})


@dataclass(frozen=True)
class GreeConfig:
    """GreeCodec 的强类型配置对象。

    所有字段均为只读 (frozen=True)，确保配置在运行时不可变。
    状态查询的参数目录属于线协议约定，不可配置。

    Attributes:
        client_id: 设备请求信封中的 cid 字段。
        uid: 绑定请求与设备请求信封中的 uid 字段。
        strict_status: 为 True 时状态解析失败抛出异常，而不是返回空字典。
    """

    client_id: str = DEFAULT_CLIENT_ID
    uid: int = DEFAULT_UID
    strict_status: bool = False

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__} "
            f"cid='{self.client_id}', uid={self.uid}, "
            f"strict={self.strict_status}>"
        )


def create_config_from_dict(raw_data: dict[str, Any]) -> GreeConfig:
    """通用工厂：将字典转换为强类型配置对象。

    所有字段均为可选，缺失时使用协议默认值；出现未知字段视为配置错误，
    避免拼写错误被静默忽略。

    Args:
        raw_data: 原始配置字典 (通常来自 TOML)。

    Returns:
        GreeConfig: 验证并转换后的配置对象。

    Raises:
        ConfigError: 当字段未知或格式错误时抛出。
    """
    if not isinstance(raw_data, dict):
        raise ConfigError(f"配置必须是键值表: {type(raw_data).__name__}")

    unknown = sorted(set(raw_data) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"未知配置项: {', '.join(unknown)}")

    def _to_int(key: str, default: int) -> int:
        val = raw_data.get(key, default)
        if isinstance(val, bool):
            raise ConfigError(f"整数格式无效 '{key}': {val}")
        try:
            return int(val)
        except (TypeError, ValueError):
            raise ConfigError(f"整数格式无效 '{key}': {val}") from None

    def _to_bool(key: str, default: bool) -> bool:
        """支持 TOML 布尔值与 true/false/1/0 字符串。"""
        val = raw_data.get(key, default)
        if isinstance(val, bool):
            return val
        clean = str(val).strip().lower()
        if clean in _TRUE_STRINGS:
            return True
        if clean in _FALSE_STRINGS:
            return False
        raise ConfigError(f"布尔格式无效 '{key}': {val}")

    client_id = raw_data.get("client_id", DEFAULT_CLIENT_ID)
    if not isinstance(client_id, str) or not client_id:
        raise ConfigError(f"client_id 必须是非空字符串: {client_id!r}")

    return GreeConfig(
        client_id=client_id,
        uid=_to_int("uid", DEFAULT_UID),
        strict_status=_to_bool("strict_status", False),
    )


def load_config_from_toml(file_path: Path, profile: str | None = None) -> GreeConfig:
    """从 TOML 文件加载配置。

    查找策略:
    - 指定 profile 时，只读取 [profile.<name>]，不存在即报错。
    - 未指定时读取 [gree] 节；文件没有 [gree] 节则使用默认配置。

    Args:
        file_path: TOML 文件路径。
        profile: 配置预设名。

    Returns:
        GreeConfig: 配置对象。

    Raises:
        ConfigError: 文件读取失败、Profile 不存在或字段无效。
    """
    if not file_path.exists():
        raise ConfigError(f"配置文件未找到: {file_path}")

    try:
        with open(file_path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"读取 TOML 失败: {e}") from e

    if profile is not None:
        profiles = data.get("profile", {})
        if not isinstance(profiles, dict) or profile not in profiles:
            raise ConfigError(f"未找到预设: [profile.{profile}]")
        logger.debug(f"使用配置预设: [profile.{profile}]")
        return create_config_from_dict(profiles[profile])

    return create_config_from_dict(data.get("gree", {}))
