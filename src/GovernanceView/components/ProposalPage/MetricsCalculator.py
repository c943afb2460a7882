import logging
import math
from typing import Optional, Sequence

from GovernanceView.dto.ProposalDto import ProposalDetailsDto, ProposalDto
from GovernanceView.share.TimeUtils import TimeUtils

from .dto.DisplayMetricsDto import DisplayMetricsDto

logger = logging.getLogger(__name__)


class MetricsCalculator:
    """
    计算提案页面上展示的序号、得票占比等数值。
    """

    @staticmethod
    def find_proposal(
        proposals: Optional[Sequence[ProposalDto]], proposal_id: str
    ) -> Optional[ProposalDto]:
        """按 ID 查找提案，找不到时返回 None。"""
        if not proposals:
            return None
        return next((p for p in proposals if p.proposal_id == proposal_id), None)

    @staticmethod
    def get_proposal_number(
        proposals: Optional[Sequence[ProposalDto]], proposal_id: str
    ) -> int:
        """
        计算提案的展示序号。

        提案列表按从新到旧排列，而展示时最早的提案为 1，
        因此序号为 `列表长度 - 首个匹配项的下标`。

        Returns:
            提案序号；列表不可用或找不到该提案时返回 0。
        """
        if not proposals:
            return 0

        index = next(
            (i for i, p in enumerate(proposals) if p.proposal_id == proposal_id), None
        )
        if index is None:
            logger.warning(f"提案列表中找不到提案 {proposal_id}，序号按 0 处理。")
            return 0
        return len(proposals) - index

    @staticmethod
    def percentage(value: int | float, total: int | float) -> int:
        """
        计算百分比并四舍五入到整数，结果限定在 0 到 100 之间。

        value 或 total 为 0 时直接返回 0。
        """
        if not value or not total or value < 0 or total < 0:
            return 0

        # 以 0.5 为界向上取整，与 x.5 一律进位的显示规则保持一致
        result = math.floor(value / total * 100 + 0.5)
        return max(0, min(result, 100))

    @staticmethod
    def get_vote_percentage(vote_amount: int, details: Optional[ProposalDetailsDto]) -> int:
        """计算某一方向的票数在提案总票数中的占比。"""
        if details is None or not vote_amount:
            return 0
        return MetricsCalculator.percentage(vote_amount, details.total_votes)

    @staticmethod
    def get_quorum(details: Optional[ProposalDetailsDto]) -> int:
        """展示用的法定票数，未设置时显示为 1。"""
        if details is None:
            return 1
        return details.quorum_votes or 1

    @staticmethod
    def build_display_metrics(
        proposals: Optional[Sequence[ProposalDto]],
        proposal_id: str,
        target_tz: str | None = None,
    ) -> DisplayMetricsDto:
        """
        根据当前的提案列表重新计算全部展示数值。

        提案不存在时返回全零的结果，时间按纪元时间显示。
        """
        proposal = MetricsCalculator.find_proposal(proposals, proposal_id)
        details = proposal.proposal if proposal else None

        vote_start = details.vote_start if details else 0
        vote_end = details.vote_end if details else 0

        return DisplayMetricsDto(
            proposal_number=MetricsCalculator.get_proposal_number(proposals, proposal_id),
            for_percentage=MetricsCalculator.get_vote_percentage(
                details.for_votes if details else 0, details
            ),
            against_percentage=MetricsCalculator.get_vote_percentage(
                details.against_votes if details else 0, details
            ),
            abstain_percentage=MetricsCalculator.get_vote_percentage(
                details.abstain_votes if details else 0, details
            ),
            quorum=MetricsCalculator.get_quorum(details),
            vote_start=TimeUtils.format_timestamp(vote_start, target_tz),
            vote_end=TimeUtils.format_timestamp(vote_end, target_tz),
        )
