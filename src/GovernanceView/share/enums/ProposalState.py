from enum import IntEnum


class ProposalState(IntEnum):
    """提案在 Governor 合约中的状态"""

    UNKNOWN = -1  # 无法识别的状态码
    PENDING = 0  # 等待开始
    ACTIVE = 1  # 投票中
    CANCELED = 2  # 已取消
    DEFEATED = 3  # 已否决
    SUCCEEDED = 4  # 已通过
    QUEUED = 5  # 排队执行中
    EXPIRED = 6  # 已过期
    EXECUTED = 7  # 已执行
    VETOED = 8  # 已被否决权驳回

    @classmethod
    def from_raw(cls, code: int | None) -> "ProposalState":
        """将原始状态码映射为枚举，未知值返回 UNKNOWN。"""
        if code is None:
            return cls.UNKNOWN
        try:
            state = cls(code)
        except ValueError:
            return cls.UNKNOWN
        return state
