"""Resume remodel output: structured diff plus the remodeled view."""

from pydantic import BaseModel

from models.schemas.candidate_profile import ExperienceRole

DEFAULT_SECTION_ORDER = ["summary", "skills", "experience"]


class RemodelDiff(BaseModel):
    """What the remodeler changed.

    ``skills_remodeled`` is always a permutation of ``skills_original``;
    ``added`` and ``removed`` exist for the wire format and stay empty.
    """
    skills_original: list[str] = []
    skills_remodeled: list[str] = []
    reordered: bool = False
    highlighted: list[str] = []
    added: list[str] = []
    removed: list[str] = []
    sections_original_order: list[str] = list(DEFAULT_SECTION_ORDER)
    sections_remodeled_order: list[str] = list(DEFAULT_SECTION_ORDER)
    summary: str = ""


class RemodeledRole(ExperienceRole):
    original_index: int = 0


class RemodeledResume(BaseModel):
    summary: str = ""
    skills: list[str] = []
    experience: list[RemodeledRole] = []


class RemodelResult(BaseModel):
    original: RemodeledResume
    remodeled: RemodeledResume
    diff: RemodelDiff
    job_skills: list[str] = []
    original_excerpt: str = ""
