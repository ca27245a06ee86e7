"""Candidate-side inputs: stored skills, experience and resume content."""

from pydantic import BaseModel, Field


class CandidateProfile(BaseModel):
    """Skills are kept in insertion order, which is their display priority."""
    skills: list[str] = []
    years_of_experience: int = Field(default=0, ge=0)
    location: str = ""


class ExperienceRole(BaseModel):
    """A single work experience entry from the stored resume."""
    title: str = ""
    company: str = ""
    start_date: str = ""
    end_date: str = ""
    bullets: list[str] = []


class ResumeSnapshot(BaseModel):
    """Parsed resume content owned by the caller's profile store."""
    summary: str = ""
    skills: list[str] = []
    experience: list[ExperienceRole] = []
    original_text: str = ""
