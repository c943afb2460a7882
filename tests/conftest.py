from typing import List, Optional

import pytest

from GovernanceView.dto.ProposalDto import ProposalDto
from GovernanceView.dto.VoteDto import VoteDto


def make_proposal(
    proposal_id: str = "p1",
    state: int = 1,
    for_votes: int = 0,
    against_votes: int = 0,
    abstain_votes: int = 0,
    description: str = "Title&&<p>Body</p>",
    proposer: str = "0x1111111111111111111111111111111111111111",
    vote_start: int = 0,
    vote_end: int = 0,
    quorum_votes: int = 0,
) -> ProposalDto:
    return ProposalDto.model_validate(
        {
            "proposalId": proposal_id,
            "description": description,
            "state": state,
            "proposal": {
                "proposer": proposer,
                "forVotes": for_votes,
                "againstVotes": against_votes,
                "abstainVotes": abstain_votes,
                "voteStart": vote_start,
                "voteEnd": vote_end,
                "quorumVotes": quorum_votes,
            },
        }
    )


def make_vote(
    support: int, weight: int = 1, voter: Optional[str] = None, reason: Optional[str] = None
) -> VoteDto:
    return VoteDto(
        voter=voter or f"0x{support:040x}",
        support=support,
        weight=weight,
        reason=reason,
    )


@pytest.fixture
def scenario_votes() -> List[VoteDto]:
    return [
        make_vote(1, 10, voter="0xaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa"),
        make_vote(0, 5, voter="0xbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbb"),
        make_vote(2, 2, voter="0xcccccccccccccccccccccccccccccccccccccccc", reason="undecided"),
    ]


@pytest.fixture
def scenario_proposals() -> List[ProposalDto]:
    # 从新到旧排列
    return [
        make_proposal("p3"),
        make_proposal(
            "p2",
            for_votes=10,
            against_votes=5,
            abstain_votes=2,
            description="Fund the grants program&&<p>Details</p><script>alert(1)</script>",
            vote_start=1699920000,
            vote_end=1700000000,
            quorum_votes=4,
        ),
        make_proposal("p1", state=7),
    ]
