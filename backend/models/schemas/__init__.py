"""Domain records passed between the scoring services."""

from models.schemas.answers import AnswerImprovement, RefinedAnswers
from models.schemas.candidate_profile import CandidateProfile, ExperienceRole, ResumeSnapshot
from models.schemas.job_descriptor import JobDescriptor
from models.schemas.match import JobAnalysis, MatchExplanation
from models.schemas.ranking import NormalizedWeights, RankedJob, RankingWeights, ScoreBreakdown
from models.schemas.remodel import RemodelDiff, RemodelResult

__all__ = [
    "AnswerImprovement",
    "RefinedAnswers",
    "CandidateProfile",
    "ExperienceRole",
    "ResumeSnapshot",
    "JobDescriptor",
    "JobAnalysis",
    "MatchExplanation",
    "NormalizedWeights",
    "RankedJob",
    "RankingWeights",
    "ScoreBreakdown",
    "RemodelDiff",
    "RemodelResult",
]
