from pydantic import Field, field_validator

from GovernanceView.share.BaseDto import BaseDto

from ..share.enums.ProposalState import ProposalState


class ProposalDetailsDto(BaseDto):
    """
    提案的链上数值部分
    """

    proposer: str = Field(default="", description="提案发起人地址")
    for_votes: int = Field(default=0, ge=0, description="赞成票总权重")
    against_votes: int = Field(default=0, ge=0, description="反对票总权重")
    abstain_votes: int = Field(default=0, ge=0, description="弃权票总权重")
    vote_start: int = Field(default=0, ge=0, description="投票开始时间 (Unix 秒)")
    vote_end: int = Field(default=0, ge=0, description="投票结束时间 (Unix 秒)")
    quorum_votes: int = Field(default=0, ge=0, description="法定票数，0 表示未设置")

    @field_validator(
        "for_votes",
        "against_votes",
        "abstain_votes",
        "vote_start",
        "vote_end",
        "quorum_votes",
        mode="before",
    )
    @classmethod
    def _none_as_zero(cls, value):
        # 接口缺失的数值字段一律按 0 处理
        return 0 if value is None else value

    @field_validator("proposer", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return "" if value is None else value

    @property
    def total_votes(self) -> int:
        return self.for_votes + self.against_votes + self.abstain_votes


class ProposalDto(BaseDto):
    """
    提案的数据传输对象
    """

    proposal_id: str
    description: str = ""
    state: int = Field(default=ProposalState.UNKNOWN, description="Governor 合约的原始状态码")
    proposal: ProposalDetailsDto = Field(default_factory=ProposalDetailsDto)

    @field_validator("description", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return "" if value is None else value

    @field_validator("state", mode="before")
    @classmethod
    def _none_as_unknown(cls, value):
        return ProposalState.UNKNOWN if value is None else value

    @field_validator("proposal", mode="before")
    @classmethod
    def _none_as_empty_details(cls, value):
        return {} if value is None else value

    @property
    def state_tag(self) -> ProposalState:
        return ProposalState.from_raw(self.state)
