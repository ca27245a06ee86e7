from pydantic import BaseModel, Field

from models.schemas.candidate_profile import CandidateProfile, ResumeSnapshot
from models.schemas.job_descriptor import JobDescriptor
from models.schemas.ranking import RankingWeights

_JD_MIN = 50
_JD_MAX = 50000


class AnalyzeJobRequest(BaseModel):
    job_description: str = Field(..., min_length=_JD_MIN, max_length=_JD_MAX)
    resume_skills: list[str] = Field(default=[], description="Skills parsed from the stored resume")


class ExplainMatchRequest(AnalyzeJobRequest):
    experience_titles: list[str] = []


class RemodelRequest(BaseModel):
    job_description: str = Field(..., min_length=_JD_MIN, max_length=_JD_MAX)
    resume: ResumeSnapshot


class ImproveAnswerRequest(BaseModel):
    question: str = Field(..., min_length=10, max_length=1000)
    answer: str = Field(..., max_length=10000, description="Currently stored answer text")
    job_description: str = Field(..., min_length=_JD_MIN, max_length=_JD_MAX)


class RefineAnswersRequest(BaseModel):
    answers: dict[str, str] = {}
    job_description: str = Field(default="", max_length=_JD_MAX)


class RankJobsRequest(BaseModel):
    jobs: list[JobDescriptor] = Field(default=[], max_length=500)
    candidate: CandidateProfile = CandidateProfile()
    candidate_location: str = ""
    weights: RankingWeights = RankingWeights()
    min_score: int | None = Field(default=None, ge=0, le=100)
