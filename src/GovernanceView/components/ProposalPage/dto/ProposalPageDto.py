from typing import Optional, Tuple

from pydantic import Field

from GovernanceView.dto.ProposalDto import ProposalDto
from GovernanceView.share.BaseDto import BaseDto

from .DisplayMetricsDto import DisplayMetricsDto
from .RichTextPayloadDto import RichTextPayloadDto
from .VoterDisplayDto import VoterDisplayDto
from .VoteTallyDto import VoteTallyDto


class ProposalPageDto(BaseDto):
    """
    提案页面的完整展示状态。每次刷新都会重新构建，不会在旧对象上修改。
    """

    proposal_id: str
    proposal: Optional[ProposalDto] = Field(default=None, description="未取到时为 None")
    is_loading: bool = Field(default=False, description="提案数据尚不可用")
    proposer_display: str = ""
    rich_text: RichTextPayloadDto = Field(
        default_factory=lambda: RichTextPayloadDto(title="", body_html="")
    )
    metrics: DisplayMetricsDto
    tally: VoteTallyDto = Field(default_factory=VoteTallyDto)
    voters_for: Tuple[VoterDisplayDto, ...] = ()
    voters_against: Tuple[VoterDisplayDto, ...] = ()
    voters_abstained: Tuple[VoterDisplayDto, ...] = ()
    can_vote: bool = False
