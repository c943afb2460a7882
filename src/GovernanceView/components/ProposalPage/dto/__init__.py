from .DisplayMetricsDto import DisplayMetricsDto
from .ParsedDescriptionDto import ParsedDescriptionDto
from .ProposalPageDto import ProposalPageDto
from .RichTextPayloadDto import RichTextPayloadDto
from .VoterDisplayDto import VoterDisplayDto
from .VoteTallyDto import VoteTallyDto

__all__ = [
    "DisplayMetricsDto",
    "ParsedDescriptionDto",
    "ProposalPageDto",
    "RichTextPayloadDto",
    "VoterDisplayDto",
    "VoteTallyDto",
]
