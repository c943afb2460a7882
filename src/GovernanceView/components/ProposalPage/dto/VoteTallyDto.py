from typing import Tuple

from pydantic import Field

from GovernanceView.dto.VoteDto import VoteDto
from GovernanceView.share.BaseDto import BaseDto


class VoteTallyDto(BaseDto):
    """
    按投票方向分组后的投票记录。每组内保持原始输入顺序。
    """

    voted_for: Tuple[VoteDto, ...] = Field(default=(), description="赞成票")
    voted_against: Tuple[VoteDto, ...] = Field(default=(), description="反对票")
    abstained: Tuple[VoteDto, ...] = Field(default=(), description="弃权票")

    @property
    def total_count(self) -> int:
        return len(self.voted_for) + len(self.voted_against) + len(self.abstained)
