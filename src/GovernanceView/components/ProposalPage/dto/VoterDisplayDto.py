from typing import Optional

from GovernanceView.share.BaseDto import BaseDto
from GovernanceView.share.enums.VoteSupport import VoteSupport


class VoterDisplayDto(BaseDto):
    """
    单个投票者在投票列表中的展示数据
    """

    voter: str
    display_name: str
    weight: int | float
    direction: VoteSupport
    reason: Optional[str] = None

    @property
    def direction_label(self) -> str:
        return self.direction.label

    @property
    def has_reason(self) -> bool:
        return bool(self.reason)
