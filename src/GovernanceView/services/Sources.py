from typing import Optional, Protocol, Sequence

from GovernanceView.dto.ProposalDto import ProposalDto
from GovernanceView.dto.VoteDto import VoteDto


class ProposalSource(Protocol):
    """提供某个 Governor 合约下的全部提案，按从新到旧排列。"""

    async def get_all_proposals(self, governor: str) -> Sequence[ProposalDto]: ...


class VoteSource(Protocol):
    """提供某个提案的全部投票记录。"""

    async def get_votes(self, governor: str, proposal_id: str) -> Sequence[VoteDto]: ...


class NameResolver(Protocol):
    """将地址解析为可读的别名，没有别名时返回 None。"""

    async def resolve(self, address: str) -> Optional[str]: ...
