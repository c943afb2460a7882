from typing import Optional

from pydantic import Field, field_validator

from GovernanceView.share.BaseDto import BaseDto
from GovernanceView.share.enums.VoteSupport import VoteSupport


class VoteDto(BaseDto):
    """
    单条链上投票记录
    """

    voter: str = Field(..., description="投票者地址")
    support: int = Field(default=0, description="原始投票方向: 1-赞成, 2-弃权, 其余-反对")
    weight: int | float = Field(default=0, description="投票权重")
    reason: Optional[str] = Field(default=None, description="投票理由")

    @field_validator("support", "weight", mode="before")
    @classmethod
    def _none_as_zero(cls, value):
        # 缺失的方向按反对处理，缺失的权重按 0 处理
        return 0 if value is None else value

    @property
    def direction(self) -> VoteSupport:
        return VoteSupport.from_raw(self.support)
