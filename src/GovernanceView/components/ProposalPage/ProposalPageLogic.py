import asyncio
import logging
from typing import Dict, List, Optional, Sequence

from GovernanceView.dto.ProposalDto import ProposalDto
from GovernanceView.dto.VoteDto import VoteDto
from GovernanceView.services.Sources import NameResolver, ProposalSource, VoteSource
from GovernanceView.share.StringUtils import StringUtils

from .DescriptionParser import DescriptionParser
from .dto.ProposalPageDto import ProposalPageDto
from .dto.VoterDisplayDto import VoterDisplayDto
from .EligibilityService import EligibilityService
from .MetricsCalculator import MetricsCalculator
from .qo.LoadProposalPageQo import LoadProposalPageQo
from .VoteClassifier import VoteClassifier

logger = logging.getLogger(__name__)


class ProposalPageLogic:
    """
    处理提案页面的数据加载与展示状态计算。
    """

    def __init__(
        self,
        proposal_source: ProposalSource,
        vote_source: VoteSource,
        name_resolver: NameResolver,
    ):
        self.proposal_source = proposal_source
        self.vote_source = vote_source
        self.name_resolver = name_resolver

    async def load_page(self, qo: LoadProposalPageQo) -> ProposalPageDto:
        """
        拉取最新的提案与投票数据，并重新计算整个页面。

        Raises:
            获取提案列表失败时，原样抛出数据源的异常。
        """
        try:
            proposals = await self.proposal_source.get_all_proposals(qo.governor)
        except Exception:
            logger.exception(f"获取 Governor {qo.governor} 的提案列表失败。")
            raise

        proposal = MetricsCalculator.find_proposal(proposals, qo.proposal_id)
        if proposal is None:
            logger.info(f"提案 {qo.proposal_id} 尚不可用，页面保持加载状态。")
            return self.compose_page(
                proposals, qo.proposal_id, None, qo.viewer_balance, target_tz=qo.target_tz
            )

        votes = await self._fetch_votes(qo.governor, qo.proposal_id)

        addresses = {proposal.proposal.proposer, *(vote.voter for vote in votes)}
        aliases = await self._resolve_names(addresses)

        return self.compose_page(
            proposals, qo.proposal_id, votes, qo.viewer_balance, aliases, qo.target_tz
        )

    async def _fetch_votes(self, governor: str, proposal_id: str) -> Sequence[VoteDto]:
        """获取投票记录，失败时返回空列表。"""
        try:
            return await self.vote_source.get_votes(governor, proposal_id)
        except Exception as e:
            logger.warning(f"获取提案 {proposal_id} 的投票记录失败，将显示空列表: {e}")
            return []

    async def _resolve_names(self, addresses: set) -> Dict[str, str]:
        """并行解析所有地址的别名，单个地址解析失败时跳过。"""
        ordered = [address for address in addresses if address]
        results = await asyncio.gather(
            *(self.name_resolver.resolve(address) for address in ordered),
            return_exceptions=True,
        )

        aliases = {}
        for address, result in zip(ordered, results):
            if isinstance(result, Exception):
                logger.warning(f"解析地址 {address} 的名称失败: {result}")
                continue
            if result:
                aliases[address] = result
        return aliases

    @staticmethod
    def _display_name(address: str, aliases: Dict[str, str]) -> str:
        return aliases.get(address) or StringUtils.shorten_address(address)

    @staticmethod
    def _to_voter_displays(
        votes: Sequence[VoteDto], aliases: Dict[str, str]
    ) -> List[VoterDisplayDto]:
        return [
            VoterDisplayDto(
                voter=vote.voter,
                display_name=ProposalPageLogic._display_name(vote.voter, aliases),
                weight=vote.weight,
                direction=vote.direction,
                reason=vote.reason,
            )
            for vote in votes
        ]

    @staticmethod
    def compose_page(
        proposals: Optional[Sequence[ProposalDto]],
        proposal_id: str,
        votes: Optional[Sequence[VoteDto]],
        viewer_balance: Optional[float],
        aliases: Optional[Dict[str, str]] = None,
        target_tz: Optional[str] = None,
    ) -> ProposalPageDto:
        """
        由当前的数据快照计算出完整的页面状态。

        这是一个纯函数：相同的输入总是得到相同的结果，不依赖任何之前的计算。
        提案不存在时返回加载中的页面，所有数值为 0。
        """
        aliases = aliases or {}
        proposal = MetricsCalculator.find_proposal(proposals, proposal_id)
        metrics = MetricsCalculator.build_display_metrics(proposals, proposal_id, target_tz)

        if proposal is None:
            return ProposalPageDto(proposal_id=proposal_id, is_loading=True, metrics=metrics)

        tally = VoteClassifier.tally_votes(votes)
        proposer = proposal.proposal.proposer

        return ProposalPageDto(
            proposal_id=proposal_id,
            proposal=proposal,
            proposer_display=ProposalPageLogic._display_name(proposer, aliases),
            rich_text=DescriptionParser.to_rich_text(proposal.description),
            metrics=metrics,
            tally=tally,
            voters_for=tuple(ProposalPageLogic._to_voter_displays(tally.voted_for, aliases)),
            voters_against=tuple(
                ProposalPageLogic._to_voter_displays(tally.voted_against, aliases)
            ),
            voters_abstained=tuple(
                ProposalPageLogic._to_voter_displays(tally.abstained, aliases)
            ),
            can_vote=EligibilityService.can_vote(proposal.state, viewer_balance),
        )
