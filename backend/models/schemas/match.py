"""Single-job match analysis and explanation contracts."""

from pydantic import BaseModel


class JobAnalysis(BaseModel):
    score: int = 0
    matched_skills: list[str] = []
    missing_skills: list[str] = []
    job_skills: list[str] = []
    resume_skills: list[str] = []
    suggestions: list[str] = []


class MatchExplanation(BaseModel):
    explanation: str = ""
    score: int = 0
    matched_skills: list[str] = []
    missing_skills: list[str] = []
    match_level: str = "low"  # high, medium, low
    suggestions: list[str] = []
