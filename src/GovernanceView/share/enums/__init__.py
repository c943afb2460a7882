from .ProposalState import ProposalState
from .VoteSupport import VoteSupport

__all__ = [
    "ProposalState",
    "VoteSupport",
]
