"""Multi-factor ranking contracts: weights, score breakdown, ranked job."""

from pydantic import BaseModel, Field

from models.schemas.job_descriptor import JobDescriptor


class RankingWeights(BaseModel):
    """Caller-supplied weight overrides. Unset fields keep their default."""
    skill_match: float | None = Field(default=None, ge=0)
    experience_fit: float | None = Field(default=None, ge=0)
    location: float | None = Field(default=None, ge=0)
    recency: float | None = Field(default=None, ge=0)


class NormalizedWeights(BaseModel):
    """Effective weights after overrides are applied; they sum to 1.0."""
    skill_match: float
    experience_fit: float
    location: float
    recency: float


class ScoreBreakdown(BaseModel):
    """Per-factor sub-scores, each an integer in [0, 100]."""
    skill_match: int = 0
    experience_fit: int = 0
    location: int = 0
    recency: int = 0


class RankedJob(JobDescriptor):
    """A job with its composite ranking score and 1-based rank."""
    ranking_score: int = 0
    score_breakdown: ScoreBreakdown = ScoreBreakdown()
    weights: NormalizedWeights
    explanation: str = ""
    rank: int = 0
