from typing import List, Sequence

from GovernanceView.share.enums.ProposalState import ProposalState

from ..dto.ProposalPageDto import ProposalPageDto
from ..dto.VoterDisplayDto import VoterDisplayDto


class ProposalPageTextBuilder:
    """
    一个构建器类，负责把提案页面状态渲染成纯文本，供命令行输出使用
    """

    BAR_WIDTH = 20

    @staticmethod
    def _progress_line(label: str, value: int, percentage: int) -> str:
        """
        生成一行进度条，例如 "For      10 [############--------] 59%"
        """
        filled = round(ProposalPageTextBuilder.BAR_WIDTH * percentage / 100)
        bar = "#" * filled + "-" * (ProposalPageTextBuilder.BAR_WIDTH - filled)
        return f"{label:<8} {value:>8} [{bar}] {percentage}%"

    @staticmethod
    def _voter_lines(title: str, voters: Sequence[VoterDisplayDto]) -> List[str]:
        lines = [f"{title} ({len(voters)})"]
        for voter in voters:
            lines.append(
                f"  - {voter.display_name}: {voter.weight} votes {voter.direction_label.upper()}"
            )
            if voter.has_reason:
                lines.append(f"      reason: {voter.reason}")
        return lines

    @staticmethod
    def build(page: ProposalPageDto) -> str:
        """
        构建提案页面的文本输出。
        """
        if page.is_loading or page.proposal is None:
            return f"Proposal {page.proposal_id} is loading..."

        details = page.proposal.proposal
        metrics = page.metrics
        status = page.proposal.state_tag.name.capitalize()
        if page.proposal.state_tag is ProposalState.UNKNOWN:
            status = f"Unknown ({page.proposal.state})"

        lines = [
            f"Proposal {metrics.proposal_number} [{status}]",
            page.rich_text.title or "(untitled)",
            f"Proposed by {page.proposer_display}",
            "",
            ProposalPageTextBuilder._progress_line(
                "For", details.for_votes, metrics.for_percentage
            ),
            ProposalPageTextBuilder._progress_line(
                "Against", details.against_votes, metrics.against_percentage
            ),
            ProposalPageTextBuilder._progress_line(
                "Abstain", details.abstain_votes, metrics.abstain_percentage
            ),
            "",
        ]
        lines += ProposalPageTextBuilder._voter_lines("Voted for", page.voters_for)
        lines += ProposalPageTextBuilder._voter_lines("Voted against", page.voters_against)
        lines += ProposalPageTextBuilder._voter_lines("Abstained", page.voters_abstained)
        lines += [
            "",
            f"Threshold: {metrics.quorum} Quorum",
            f"Ends:      {metrics.vote_end.time}, {metrics.vote_end.date}",
            f"Snapshot:  {metrics.vote_start.time}, {metrics.vote_start.date}",
        ]
        if page.can_vote:
            lines.append("You can submit a vote on this proposal.")
        lines += ["", "Description:", page.rich_text.body_html]
        return "\n".join(lines)
