from .BaseDto import BaseDto
from .enums import ProposalState, VoteSupport
from .HttpClient import HttpClient
from .LoggingConfigurator import LoggingConfigurator
from .StringUtils import StringUtils
from .TimeUtils import TimeUtils

__all__ = [
    "BaseDto",
    "HttpClient",
    "LoggingConfigurator",
    "ProposalState",
    "StringUtils",
    "TimeUtils",
    "VoteSupport",
]
