"""Non-destructive resume remodeling.

Reorders the candidate's existing skills so that job-relevant ones come
first and reports what changed. Nothing is ever added or removed: the
remodeled skill list is always a permutation of the original.
"""

import logging

from models.schemas.candidate_profile import ResumeSnapshot
from models.schemas.remodel import (
    DEFAULT_SECTION_ORDER,
    RemodelDiff,
    RemodeledResume,
    RemodeledRole,
    RemodelResult,
)
from services.skill_extractor import extract_skills, normalize

logger = logging.getLogger(__name__)

MAX_BULLETS_PER_ROLE = 10
EXCERPT_CHARS = 2000
PRIORITIZED_SKILLS_SECTION = "skills (job-prioritized)"

SAFETY_NOTES = [
    "• No skills added or removed",
    "• No experience fabricated",
    "• Only reordering of existing content",
]


def prioritize_skills(candidate_skills: list[str], job_skills: list[str]) -> list[str]:
    """Sort skills by the position of their job-skill match.

    Skills with no match go last. The sort is stable, so unmatched skills
    (and any ties) keep their original relative order.
    """
    if not job_skills:
        return list(candidate_skills)

    positions = {}
    for index, skill in enumerate(job_skills):
        positions.setdefault(normalize(skill), index)
    unmatched = len(job_skills)
    return sorted(
        candidate_skills,
        key=lambda skill: positions.get(normalize(skill), unmatched),
    )


def highlighted_skills(candidate_skills: list[str], job_skills: list[str]) -> list[str]:
    """Job skills the candidate already lists, in job-skill order."""
    have = {normalize(s) for s in candidate_skills}
    return [s for s in job_skills if normalize(s) in have]


def summarize_changes(diff: RemodelDiff) -> str:
    parts = []
    if diff.reordered:
        parts.append(f"Prioritized {len(diff.highlighted)} job-relevant skills")
    if diff.sections_remodeled_order != diff.sections_original_order:
        parts.append("Reordered sections for ATS optimization")
    if not parts:
        return "No changes needed."
    return "; ".join(parts)


def build_diff(candidate_skills: list[str], job_description: str) -> RemodelDiff:
    """Compute the remodeled skill order and describe the change."""
    job_skills = extract_skills(job_description)
    original = list(candidate_skills)
    remodeled = prioritize_skills(original, job_skills)

    # Sections stay physically in place; the skills section is only labelled
    # as job-prioritized when the job names skills.
    remodeled_sections = list(DEFAULT_SECTION_ORDER)
    if job_skills:
        remodeled_sections[DEFAULT_SECTION_ORDER.index("skills")] = (
            PRIORITIZED_SKILLS_SECTION
        )

    diff = RemodelDiff(
        skills_original=original,
        skills_remodeled=remodeled,
        reordered=remodeled != original,
        highlighted=highlighted_skills(original, job_skills),
        sections_original_order=list(DEFAULT_SECTION_ORDER),
        sections_remodeled_order=remodeled_sections,
    )
    diff.summary = summarize_changes(diff)
    return diff


def remodel_resume(resume: ResumeSnapshot, job_description: str = "") -> RemodelResult:
    """Remodel a stored resume for a job using only its existing content."""
    summary = resume.summary.strip()
    diff = build_diff(resume.skills, job_description)

    original_roles = [
        RemodeledRole(**role.model_dump(), original_index=index)
        for index, role in enumerate(resume.experience)
    ]
    remodeled_roles = [
        role.model_copy(update={"bullets": role.bullets[:MAX_BULLETS_PER_ROLE]})
        for role in original_roles
    ]

    logger.debug("Remodel: %s", diff.summary)
    return RemodelResult(
        original=RemodeledResume(
            summary=summary, skills=diff.skills_original, experience=original_roles
        ),
        remodeled=RemodeledResume(
            summary=summary, skills=diff.skills_remodeled, experience=remodeled_roles
        ),
        diff=diff,
        job_skills=extract_skills(job_description),
        original_excerpt=resume.original_text[:EXCERPT_CHARS],
    )


def preview_changes(diff: RemodelDiff) -> list[str]:
    """Human-readable change list shown before the user confirms a remodel."""
    changes = []
    if diff.reordered:
        changes.append(
            f"✓ Reordered {len(diff.highlighted)} job-relevant skills to the top"
        )
        changes.append(f"  Highlighted: {', '.join(diff.highlighted)}")
    if diff.sections_remodeled_order != diff.sections_original_order:
        changes.append("✓ Optimized section order for ATS scanning")
    if not changes:
        changes.append("✓ No changes needed - your resume is already well-structured")
    return changes + SAFETY_NOTES
