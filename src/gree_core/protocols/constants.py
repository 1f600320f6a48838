# src/gree_core/protocols/constants.py
"""
Gree 协议层 - 常量定义

本模块定义了所有协议相关的字段名、类型标签和固定值。
采用命名空间 (Class Namespace) 组织，不使用扁平全局变量。
"""

# =========================================================================
# 1. 字段名 (Wire Field Names, 区分大小写)
# =========================================================================


class Field:
    """信封与数据包中使用的 JSON 字段名"""

    # 信封
    TYPE = "t"
    MAC = "mac"
    UID = "uid"
    CID = "cid"
    SEQUENCE = "i"
    PACK = "pack"

    # 状态查询 / 状态响应
    COLS = "cols"
    DAT = "dat"

    # 控制命令
    OPT = "opt"
    P = "p"


# =========================================================================
# 2. 类型标签 (Type Tags)
# =========================================================================


class EnvelopeType:
    """外层信封的 t 字段取值"""

    BIND = "bind"
    PACK = "pack"
    STATUS = "status"


class PackType:
    """内层数据包的 t 字段取值"""

    DAT = "dat"  # 状态响应 (Device -> App)
    CMD = "cmd"  # 控制命令 (App -> Device)


# =========================================================================
# 3. 默认值 (Defaults)
# =========================================================================

DEFAULT_CLIENT_ID = "app"
DEFAULT_UID = 0

# =========================================================================
# 4. 状态参数目录 (Status Column Catalog)
# =========================================================================
# 顺序属于与设备的线协议约定，增删条目会影响兼容性。
STATUS_COLUMNS: tuple[str, ...] = (
    "Pow",  # 电源
    "Mod",  # 运行模式
    "SetTem",  # 设定温度
    "WdSpd",  # 风速
    "Air",  # 换气
    "Blo",  # 干燥 (吹干)
    "Health",  # 健康 (负离子)
    "SwhSlp",  # 睡眠
    "Lig",  # 面板灯
    "SwingLfRig",  # 左右摆风
    "SwUpDn",  # 上下摆风
    "Quiet",  # 静音
    "Tur",  # 强力
    "StHt",  # 8℃ 制热
    "TemUn",  # 温度单位
    "HeatCoolType",  # 冷暖类型
    "TemRec",  # 温度显示补偿位
    "SvSt",  # 节能
    "NoiseSet",  # 噪音设置
)
