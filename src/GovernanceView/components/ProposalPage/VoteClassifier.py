from typing import Iterable, List, Optional

from GovernanceView.dto.VoteDto import VoteDto
from GovernanceView.share.enums.VoteSupport import VoteSupport

from .dto.VoteTallyDto import VoteTallyDto


class VoteClassifier:
    """
    将投票记录按赞成 / 反对 / 弃权分组。
    """

    @staticmethod
    def tally_votes(votes: Optional[Iterable[VoteDto]]) -> VoteTallyDto:
        """
        对一组投票记录进行分组，每次调用都返回一个全新的 VoteTallyDto。

        Args:
            votes: 原始投票记录，可以为空或 None（尚未取到数据）。

        Returns:
            分组结果。support 为 1 的进入赞成组，为 2 的进入弃权组，
            其余任何值都进入反对组。
        """
        voted_for: List[VoteDto] = []
        voted_against: List[VoteDto] = []
        abstained: List[VoteDto] = []

        for vote in votes or ():
            direction = VoteSupport.from_raw(vote.support)
            if direction is VoteSupport.FOR:
                voted_for.append(vote)
            elif direction is VoteSupport.ABSTAIN:
                abstained.append(vote)
            else:
                voted_against.append(vote)

        return VoteTallyDto(
            voted_for=tuple(voted_for),
            voted_against=tuple(voted_against),
            abstained=tuple(abstained),
        )
