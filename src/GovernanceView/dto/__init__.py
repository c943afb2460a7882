from .DateTimeDisplayDto import DateTimeDisplayDto
from .ProposalDto import ProposalDetailsDto, ProposalDto
from .VoteDto import VoteDto

__all__ = [
    "DateTimeDisplayDto",
    "ProposalDetailsDto",
    "ProposalDto",
    "VoteDto",
]
