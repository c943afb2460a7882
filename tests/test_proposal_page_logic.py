from typing import Dict, List, Optional

import pytest

from GovernanceView.components.ProposalPage.ProposalPageLogic import ProposalPageLogic
from GovernanceView.components.ProposalPage.qo.LoadProposalPageQo import LoadProposalPageQo
from GovernanceView.components.ProposalPage.views.ProposalPageTextBuilder import (
    ProposalPageTextBuilder,
)
from GovernanceView.dto.ProposalDto import ProposalDto
from GovernanceView.dto.VoteDto import VoteDto
from GovernanceView.services.StaticNameResolver import StaticNameResolver
from GovernanceView.share.enums.VoteSupport import VoteSupport

GOVERNOR = "0x9999999999999999999999999999999999999999"


class FakeGovernorSource:
    def __init__(self, proposals: List[ProposalDto], votes: Optional[List[VoteDto]] = None):
        self.proposals = proposals
        self.votes = votes or []
        self.vote_calls = 0
        self.fail_votes = False

    async def get_all_proposals(self, governor: str) -> List[ProposalDto]:
        assert governor == GOVERNOR
        return self.proposals

    async def get_votes(self, governor: str, proposal_id: str) -> List[VoteDto]:
        self.vote_calls += 1
        if self.fail_votes:
            raise ConnectionError("votes endpoint down")
        return self.votes


class FailingResolver:
    async def resolve(self, address: str) -> Optional[str]:
        raise RuntimeError("resolver down")


def make_logic(source: FakeGovernorSource, aliases: Optional[Dict[str, str]] = None):
    return ProposalPageLogic(source, source, StaticNameResolver(aliases))


def make_qo(proposal_id: str = "p2", balance: Optional[float] = 1) -> LoadProposalPageQo:
    return LoadProposalPageQo(
        governor=GOVERNOR, proposal_id=proposal_id, viewer_balance=balance, target_tz="UTC"
    )


@pytest.mark.asyncio
async def test_load_page_builds_full_state(scenario_proposals, scenario_votes):
    source = FakeGovernorSource(scenario_proposals, scenario_votes)
    logic = make_logic(source, {"0xAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA": "alice.eth"})

    page = await logic.load_page(make_qo())

    assert page.is_loading is False
    assert page.metrics.proposal_number == 2
    assert page.metrics.for_percentage == 59
    assert page.metrics.against_percentage == 29
    assert page.metrics.abstain_percentage == 12
    assert page.rich_text.title == "Fund the grants program"
    assert "script" not in page.rich_text.body_html
    assert page.proposer_display == "0x1111...1111"
    assert [v.display_name for v in page.voters_for] == ["alice.eth"]
    assert [v.display_name for v in page.voters_against] == ["0xbbbb...bbbb"]
    assert page.voters_abstained[0].direction is VoteSupport.ABSTAIN
    assert page.voters_abstained[0].has_reason
    assert page.can_vote is True


@pytest.mark.asyncio
async def test_missing_proposal_returns_loading_page(scenario_proposals):
    source = FakeGovernorSource(scenario_proposals)

    page = await make_logic(source).load_page(make_qo("unknown"))

    assert page.is_loading is True
    assert page.proposal is None
    assert page.metrics.proposal_number == 0
    assert page.tally.total_count == 0
    assert page.can_vote is False
    assert source.vote_calls == 0


@pytest.mark.asyncio
async def test_vote_fetch_failure_degrades_to_empty_tally(scenario_proposals):
    source = FakeGovernorSource(scenario_proposals)
    source.fail_votes = True

    page = await make_logic(source).load_page(make_qo())

    assert page.tally.total_count == 0
    assert page.metrics.for_percentage == 59


@pytest.mark.asyncio
async def test_vote_with_missing_fields_is_still_tallied(scenario_proposals):
    votes = [
        VoteDto.model_validate({"voter": "0x1", "support": 1, "weight": 3}),
        VoteDto.model_validate({"voter": "0x2", "support": None, "weight": None}),
    ]
    source = FakeGovernorSource(scenario_proposals, votes)

    page = await make_logic(source).load_page(make_qo())

    assert page.tally.total_count == 2
    assert [v.voter for v in page.tally.voted_against] == ["0x2"]
    assert page.voters_against[0].weight == 0


@pytest.mark.asyncio
async def test_name_resolution_failure_falls_back_to_short_address(
    scenario_proposals, scenario_votes
):
    source = FakeGovernorSource(scenario_proposals, scenario_votes)
    logic = ProposalPageLogic(source, source, FailingResolver())

    page = await logic.load_page(make_qo())

    assert page.voters_for[0].display_name == "0xaaaa...aaaa"


@pytest.mark.asyncio
async def test_missing_balance_hides_vote_action(scenario_proposals, scenario_votes):
    source = FakeGovernorSource(scenario_proposals, scenario_votes)

    page = await make_logic(source).load_page(make_qo(balance=None))

    assert page.can_vote is False


@pytest.mark.asyncio
async def test_inactive_proposal_hides_vote_action(scenario_proposals):
    source = FakeGovernorSource(scenario_proposals)

    page = await make_logic(source).load_page(make_qo("p1", balance=100))

    assert page.can_vote is False
    assert page.metrics.proposal_number == 1


@pytest.mark.asyncio
async def test_proposal_source_failure_propagates():
    class BrokenSource(FakeGovernorSource):
        async def get_all_proposals(self, governor: str) -> List[ProposalDto]:
            raise ConnectionError("proposals endpoint down")

    with pytest.raises(ConnectionError):
        await make_logic(BrokenSource([])).load_page(make_qo())


def test_compose_page_is_recomputed_from_scratch(scenario_proposals, scenario_votes):
    first = ProposalPageLogic.compose_page(scenario_proposals, "p2", scenario_votes[:1], 1)
    second = ProposalPageLogic.compose_page(scenario_proposals, "p2", scenario_votes, 1)

    assert first.tally.total_count == 1
    assert second.tally.total_count == 3
    assert first.metrics == second.metrics


def test_text_builder_renders_page(scenario_proposals, scenario_votes):
    page = ProposalPageLogic.compose_page(
        scenario_proposals, "p2", scenario_votes, None, target_tz="UTC"
    )

    text = ProposalPageTextBuilder.build(page)

    assert text.startswith("Proposal 2 [Active]")
    assert "Fund the grants program" in text
    assert "59%" in text
    assert "Threshold: 4 Quorum" in text
    assert "Ends:      10:13 PM, November 14, 2023" in text
    assert "reason: undecided" in text
    assert "submit a vote" not in text


def test_text_builder_renders_loading_page():
    page = ProposalPageLogic.compose_page(None, "p9", None, None)

    assert ProposalPageTextBuilder.build(page) == "Proposal p9 is loading..."
