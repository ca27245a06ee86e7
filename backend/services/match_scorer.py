"""Skill-overlap scoring between a job and a candidate.

Also builds the single-job analysis and the plain-language match
explanation, both derived only from skills already on the candidate's
resume.
"""

import logging

from models.schemas.match import JobAnalysis, MatchExplanation
from services.skill_extractor import extract_skills, normalize, unique

logger = logging.getLogger(__name__)

HIGH_MATCH = 70
MEDIUM_MATCH = 40
MAX_LISTED_MISSING = 5


def compute_score(job_skills: list[str], candidate_skills: list[str]) -> int:
    """Percentage of distinct job skills the candidate has. Returns 0-100.

    Comparison is exact after lowercasing. Returns 0 if either side is empty.
    """
    if not job_skills or not candidate_skills:
        return 0
    job_set = {normalize(s) for s in job_skills}
    candidate_set = {normalize(s) for s in candidate_skills}
    matched = len(job_set & candidate_set)
    score = round(matched / len(job_set) * 100)
    return max(0, min(100, score))


def _split_skills(
    job_skills: list[str], resume_skills: list[str]
) -> tuple[list[str], list[str]]:
    """Partition job skills into (matched, missing), keeping job order."""
    resume_set = {normalize(s) for s in resume_skills}
    matched = [s for s in job_skills if normalize(s) in resume_set]
    missing = [s for s in job_skills if normalize(s) not in resume_set]
    return matched, missing


def match_level(score: int) -> str:
    if score >= HIGH_MATCH:
        return "high"
    if score >= MEDIUM_MATCH:
        return "medium"
    return "low"


def analyze_job(job_description: str, resume_skills: list[str]) -> JobAnalysis:
    """Score a job description against the resume's skills."""
    job_skills = extract_skills(job_description)
    matched, missing = _split_skills(job_skills, resume_skills)
    score = compute_score(job_skills, resume_skills)

    suggestions: list[str] = []
    if score >= HIGH_MATCH:
        suggestions = ["Tailor your resume for this job", "Prepare application answers"]
    elif score >= MEDIUM_MATCH:
        suggestions = [
            "Highlight relevant experience",
            "Address missing skills in cover letter",
        ]
    elif missing:
        suggestions = [
            "Consider upskilling in key areas",
            "Look for better-matched roles",
        ]

    logger.debug(
        "Job analysis: score=%d matched=%d missing=%d", score, len(matched), len(missing)
    )
    return JobAnalysis(
        score=score,
        matched_skills=unique(matched),
        missing_skills=unique(missing),
        job_skills=job_skills,
        resume_skills=unique(resume_skills),
        suggestions=suggestions,
    )


def explain_match(
    job_description: str,
    resume_skills: list[str],
    experience_titles: list[str] | None = None,
) -> MatchExplanation:
    """Friendly explanation of a match using only existing resume data."""
    analysis = analyze_job(job_description, resume_skills)
    score = analysis.score
    matched = analysis.matched_skills
    missing = analysis.missing_skills
    level = match_level(score)

    parts: list[str] = []
    if level == "high":
        parts.append("Great match! Your resume aligns well with this position.")
    elif level == "medium":
        parts.append("Moderate match. You have some relevant skills for this role.")
    else:
        parts.append("Limited match based on the skills detected.")

    if matched:
        parts.append(f"Your resume shows experience with: {', '.join(matched)}.")

    if 0 < len(missing) <= MAX_LISTED_MISSING:
        parts.append(
            f"The job mentions: {', '.join(missing)}, "
            "which aren't highlighted in your current resume."
        )
    elif len(missing) > MAX_LISTED_MISSING:
        parts.append(
            f"The job mentions several skills ({', '.join(missing[:3])}, and more) "
            "that aren't currently highlighted."
        )

    titles = [t for t in (experience_titles or []) if t]
    if titles:
        suffix = " and related roles" if len(titles) > 1 else ""
        parts.append(f"Based on your background as {titles[0]}{suffix}.")

    if level == "high":
        suggestions = ["Apply now", "Tailor resume", "Prepare answers"]
    elif level == "medium":
        suggestions = ["Strengthen resume", "Highlight transferable skills"]
    else:
        suggestions = ["Explore other roles", "Consider upskilling"]

    return MatchExplanation(
        explanation=" ".join(parts),
        score=score,
        matched_skills=matched,
        missing_skills=missing,
        match_level=level,
        suggestions=suggestions,
    )
