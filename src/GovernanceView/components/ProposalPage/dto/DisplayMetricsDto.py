from pydantic import Field

from GovernanceView.dto.DateTimeDisplayDto import DateTimeDisplayDto
from GovernanceView.share.BaseDto import BaseDto


class DisplayMetricsDto(BaseDto):
    """
    提案页面上展示的各项数值
    """

    proposal_number: int = Field(default=0, description="提案序号，最早的提案为 1")
    for_percentage: int = Field(default=0, description="赞成票占比 (0-100)")
    against_percentage: int = Field(default=0, description="反对票占比 (0-100)")
    abstain_percentage: int = Field(default=0, description="弃权票占比 (0-100)")
    quorum: int = Field(default=1, description="展示用的法定票数")
    vote_start: DateTimeDisplayDto = Field(..., description="快照时间")
    vote_end: DateTimeDisplayDto = Field(..., description="截止时间")
