"""Complexity scoring and tier selection."""

from .contracts import Scale, ScoreContribution, Tier, TierDecision, TierInputs, TierValidationResult
from .errors import InvalidInput
from .parser import AnswersParser, InterviewAnswers
from .scoring import ScoreCalculator
from .selector import TierSelector, compute_tier, decide
from .validator import validate_answers

__all__ = [
    "Scale",
    "ScoreContribution",
    "Tier",
    "TierDecision",
    "TierInputs",
    "TierValidationResult",
    "InvalidInput",
    "AnswersParser",
    "InterviewAnswers",
    "ScoreCalculator",
    "TierSelector",
    "compute_tier",
    "decide",
    "validate_answers",
]
