from enum import IntEnum


class VoteSupport(IntEnum):
    """投票方向"""

    AGAINST = 0  # 反对
    FOR = 1  # 赞成
    ABSTAIN = 2  # 弃权

    @classmethod
    def from_raw(cls, code: int | None) -> "VoteSupport":
        """
        将链上的原始 support 值映射为投票方向。

        仅 1 和 2 有专门的含义，其余任何值（包括 0 和未知值）一律视为反对票。
        """
        if code == cls.FOR:
            return cls.FOR
        if code == cls.ABSTAIN:
            return cls.ABSTAIN
        return cls.AGAINST

    @property
    def label(self) -> str:
        """展示用的方向文本"""
        return _LABELS[self]


_LABELS = {
    VoteSupport.FOR: "for",
    VoteSupport.AGAINST: "against",
    VoteSupport.ABSTAIN: "abstained",
}
