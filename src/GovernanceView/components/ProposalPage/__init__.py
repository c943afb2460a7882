from .DescriptionParser import DescriptionParser
from .DescriptionSanitizer import DescriptionSanitizer
from .EligibilityService import EligibilityService
from .MetricsCalculator import MetricsCalculator
from .ProposalPageLogic import ProposalPageLogic
from .views.ProposalPageTextBuilder import ProposalPageTextBuilder
from .VoteClassifier import VoteClassifier

__all__ = [
    "DescriptionParser",
    "DescriptionSanitizer",
    "EligibilityService",
    "MetricsCalculator",
    "ProposalPageLogic",
    "ProposalPageTextBuilder",
    "VoteClassifier",
]
