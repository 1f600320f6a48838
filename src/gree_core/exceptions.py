# File: src/gree_core/exceptions.py
"""
Gree 协议核心库 - 异常体系 (Exceptions)

定义库内统一使用的异常类，以便上层应用（传输层/设备管理层）能进行精细的错误处理。
"""

from enum import IntEnum


class GreeError(Exception):
    """Gree 核心库的所有内部异常的基类。

    上层应用可以通过捕获此异常来处理所有由 gree-core 抛出的已知错误。
    """

    pass


class ConfigError(GreeError):
    """配置加载或校验失败。

    触发场景:
    1. 字段格式错误 (如 uid 不是整数、列表为空)。
    2. 找不到配置文件或环境变量。
    3. 调用需要加密服务的操作时未提供 cipher。
    """

    pass


class ProtocolError(GreeError):
    """协议交互错误 (编解码级别)。

    所有信封/数据包解析失败的公共基类。此类错误对当次调用不可恢复，
    本库不做任何重试，由调用方决定如何处理。
    """

    pass


class MalformedEnvelopeError(ProtocolError):
    """响应信封不是合法的 JSON 文本。"""

    pass


class MissingPackFieldError(ProtocolError):
    """响应信封缺少必需的 'pack' 字段 (或字段为空)。"""

    pass


class DecryptionError(ProtocolError):
    """外部解密服务拒绝了密文或密钥。

    原始异常通过 ``__cause__`` 保留，本库不解释其含义。
    """

    pass


class MalformedPackError(ProtocolError):
    """解密后的明文不是合法的 JSON 对象。"""

    pass


class PackEncodingError(ProtocolError):
    """加密后的 pack 字节无法解码为文本，不能嵌入信封。"""

    pass


class ValidationReason(IntEnum):
    """数据包结构校验失败原因。

    顺序与校验执行顺序一致，遇到第一个失败即短路返回。
    """

    WRONG_PACK_TYPE = 1  # t 字段与期望的包类型不符
    NAMES_NOT_ARRAY = 2  # 参数名字段缺失或不是数组
    NAMES_EMPTY = 3  # 参数名数组为空
    VALUES_NOT_ARRAY = 4  # 参数值字段缺失或不是数组
    VALUES_EMPTY = 5  # 参数值数组为空
    LENGTH_MISMATCH = 6  # 两个数组长度不一致

    @property
    def description(self) -> str:
        """获取失败原因对应的人类可读描述。

        Returns:
            str: 对应的中文说明。
        """
        _DESC_MAP = {
            1: "包类型不匹配",
            2: "参数名字段不是数组",
            3: "参数名数组为空",
            4: "参数值字段不是数组",
            5: "参数值数组为空",
            6: "参数名与参数值数量不一致",
        }
        return _DESC_MAP.get(self.value, f"未知校验错误 (Code: {self.value})")


class StatusValidationError(ProtocolError):
    """数据包的并行数组结构校验失败。

    宽松接口 (extract_status_map) 会把此异常折叠为空字典；
    严格接口 (parse_status_map / parse_command_pack) 则直接抛出，
    供需要区分 "无数据" 与 "数据损坏" 的调用方使用。
    """

    def __init__(self, reason: ValidationReason, detail: str = "") -> None:
        """初始化校验错误。

        Args:
            reason: 失败原因枚举。
            detail: 附加诊断信息 (如实际收到的包类型)。
        """
        self.reason = reason
        self.detail = detail
        message = reason.description
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
