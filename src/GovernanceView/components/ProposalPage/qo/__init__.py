from .LoadProposalPageQo import LoadProposalPageQo

__all__ = [
    "LoadProposalPageQo",
]
