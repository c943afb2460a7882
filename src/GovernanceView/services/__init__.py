from .GovernorApiService import GovernorApiService
from .Sources import NameResolver, ProposalSource, VoteSource
from .StaticNameResolver import StaticNameResolver

__all__ = [
    "GovernorApiService",
    "NameResolver",
    "ProposalSource",
    "StaticNameResolver",
    "VoteSource",
]
