from .ProposalPageTextBuilder import ProposalPageTextBuilder

__all__ = [
    "ProposalPageTextBuilder",
]
