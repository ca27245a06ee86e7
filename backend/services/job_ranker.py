"""Multi-factor job ranking.

Each job gets four independent 0-100 sub-scores:
1. Skill match (vocabulary skills of the description vs. candidate skills)
2. Experience fit (required years parsed from the description)
3. Location fit (city / region comparison, remote-aware)
4. Recency (days since posting)

The sub-scores are combined with normalized weights into a single ranking
score, jobs are stable-sorted by it (descending) and numbered from 1.
"""

import logging
import re
from datetime import datetime, timezone

from models.schemas.candidate_profile import CandidateProfile
from models.schemas.job_descriptor import JobDescriptor
from models.schemas.ranking import (
    NormalizedWeights,
    RankedJob,
    RankingWeights,
    ScoreBreakdown,
)
from services.skill_extractor import extract_skills, normalize

logger = logging.getLogger(__name__)

DEFAULT_WEIGHTS = NormalizedWeights(
    skill_match=0.4,
    experience_fit=0.25,
    location=0.2,
    recency=0.15,
)

REQUIRED_YEARS_RE = re.compile(r"(\d+)\+?\s*years?\s+of\s+experience", re.IGNORECASE)

NEUTRAL_SCORE = 50
NO_REQUIREMENT_SCORE = 75
REMOTE_SCORE = 80

# (max days since posting, score); older postings decay linearly
_RECENCY_TIERS = ((7, 100), (30, 85), (60, 70), (90, 50))
_RECENCY_FLOOR = 20


def _clamp(score: float) -> int:
    return max(0, min(100, round(score)))


# ---------------------------------------------------------------------------
# Sub-scorers
# ---------------------------------------------------------------------------


def skill_match_score(job_description: str, candidate_skills: list[str]) -> int:
    """Share of the job's vocabulary skills the candidate covers.

    Matching is loose: a job skill counts when either lowercased string
    contains the other, so "node" and "Node.js" meet.
    """
    skills = [normalize(s).strip() for s in candidate_skills]
    skills = [s for s in skills if s]
    job_skills = extract_skills(job_description)
    if not job_skills or not skills:
        return 0

    matched = [
        job_skill
        for job_skill in job_skills
        if any(job_skill in skill or skill in job_skill for skill in skills)
    ]
    return _clamp(len(matched) / len(job_skills) * 100)


def extract_required_years(job_description: str) -> int:
    """Years from the first "N years of experience" phrase, or 0."""
    match = REQUIRED_YEARS_RE.search(job_description or "")
    return int(match.group(1)) if match else 0


def experience_fit_score(job_description: str, years_of_experience: int = 0) -> int:
    """Score the candidate's years against the job's stated requirement."""
    required = extract_required_years(job_description)
    if required == 0:
        return NO_REQUIREMENT_SCORE

    gap = required - years_of_experience
    if gap <= 0:
        return 100
    if gap == 1:
        return 85
    if gap == 2:
        return 70
    return _clamp(max(30, 100 - 15 * gap))


def _city(location: str) -> str:
    return location.partition(",")[0].strip()


def _region(location: str) -> str:
    # Second comma-separated part only: "austin, tx, usa" -> "tx"
    parts = location.split(",")
    return parts[1].strip() if len(parts) > 1 else ""


def location_fit_score(job_location: str, candidate_location: str) -> int:
    """100 same place or city, 80 remote, 70 same region, 40 otherwise.

    Missing locations on either side score a neutral 50.
    """
    if not job_location or not candidate_location:
        return NEUTRAL_SCORE

    job_loc = normalize(job_location).strip()
    user_loc = normalize(candidate_location).strip()

    if "remote" in job_loc or "remote" in user_loc:
        return REMOTE_SCORE
    if job_loc == user_loc or _city(job_loc) == _city(user_loc):
        return 100
    # Region only counts when both sides actually name one
    if _region(job_loc) and _region(job_loc) == _region(user_loc):
        return 70
    return 40


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def days_since_posted(posted_date: datetime, now: datetime | None = None) -> int:
    """Whole days elapsed since posting (negative for future dates)."""
    now = _as_utc(now or datetime.now(timezone.utc))
    return (now - _as_utc(posted_date)).days


def recency_score(posted_date: datetime | None, now: datetime | None = None) -> int:
    """Fresher postings score higher; unknown dates score a neutral 50."""
    if posted_date is None:
        return NEUTRAL_SCORE

    days = days_since_posted(posted_date, now)
    for max_days, score in _RECENCY_TIERS:
        if days <= max_days:
            return score
    return _clamp(max(_RECENCY_FLOOR, 100 - days / 3))


# ---------------------------------------------------------------------------
# Weighting
# ---------------------------------------------------------------------------


def normalize_weights(overrides: RankingWeights | None = None) -> NormalizedWeights:
    """Apply overrides on top of the defaults and scale them to sum to 1.0.

    If the effective weights sum to zero the defaults are used instead.
    """
    weights = DEFAULT_WEIGHTS.model_dump()
    if overrides is not None:
        weights.update(overrides.model_dump(exclude_none=True))

    total = sum(weights.values())
    if total <= 0:
        logger.warning("Ranking weights sum to %s, falling back to defaults", total)
        return DEFAULT_WEIGHTS.model_copy()

    return NormalizedWeights(**{key: value / total for key, value in weights.items()})


def weighted_score(breakdown: ScoreBreakdown, weights: NormalizedWeights) -> int:
    total = (
        breakdown.skill_match * weights.skill_match
        + breakdown.experience_fit * weights.experience_fit
        + breakdown.location * weights.location
        + breakdown.recency * weights.recency
    )
    return _clamp(total)


# ---------------------------------------------------------------------------
# Explanation
# ---------------------------------------------------------------------------


def build_explanation(
    breakdown: ScoreBreakdown,
    experience_gap: int = 0,
    days_posted: int | None = None,
) -> str:
    """Advisory text for a breakdown; not used for ordering."""
    parts: list[str] = []

    skill = breakdown.skill_match
    if skill >= 80:
        parts.append(f"Strong skill match ({skill}% of job skills found in your resume)")
    elif skill >= 60:
        parts.append(f"Good skill match ({skill}% of job skills)")
    elif skill >= 40:
        parts.append(f"Some relevant skills ({skill}%)")
    else:
        parts.append(f"Limited skill overlap ({skill}%)")

    experience = breakdown.experience_fit
    if experience >= 90:
        parts.append("Your experience meets or exceeds job requirements")
    elif experience >= 70:
        parts.append("Your experience is close to job requirements")
    else:
        parts.append(f"Experience gap of {experience_gap} years")

    location = breakdown.location
    if location == 100:
        parts.append("Perfect location match")
    elif location >= 70:
        parts.append("Good location fit")
    elif location >= 40:
        parts.append("Location may require relocation")

    recency = breakdown.recency
    if recency >= 85:
        parts.append("Recently posted - high priority")
    elif recency < 40 and days_posted is not None:
        parts.append(f"Posted {days_posted} days ago")

    return " • ".join(parts)


# ---------------------------------------------------------------------------
# Ranking
# ---------------------------------------------------------------------------


def score_job(
    job: JobDescriptor,
    candidate: CandidateProfile,
    candidate_location: str,
    weights: NormalizedWeights,
    now: datetime | None = None,
) -> RankedJob:
    """Score one job. The returned rank is 0 until the list is sorted."""
    description = job.description or ""
    breakdown = ScoreBreakdown(
        skill_match=skill_match_score(description, candidate.skills),
        experience_fit=experience_fit_score(description, candidate.years_of_experience),
        location=location_fit_score(job.location, candidate_location),
        recency=recency_score(job.posted_date, now),
    )

    gap = max(0, extract_required_years(description) - candidate.years_of_experience)
    days = days_since_posted(job.posted_date, now) if job.posted_date else None

    return RankedJob(
        **job.model_dump(),
        ranking_score=weighted_score(breakdown, weights),
        score_breakdown=breakdown,
        weights=weights,
        explanation=build_explanation(breakdown, experience_gap=gap, days_posted=days),
    )


def rank_jobs(
    jobs: list[JobDescriptor],
    candidate: CandidateProfile,
    candidate_location: str = "",
    weight_overrides: RankingWeights | None = None,
    now: datetime | None = None,
) -> list[RankedJob]:
    """Rank jobs for a candidate, best first.

    Ties keep their input order. ``candidate_location`` falls back to the
    profile's location when empty.
    """
    if not jobs:
        return []

    weights = normalize_weights(weight_overrides)
    location = candidate_location or candidate.location
    now = now or datetime.now(timezone.utc)

    scored = [score_job(job, candidate, location, weights, now) for job in jobs]
    # sorted() is stable, so equal scores stay in input order
    ranked = sorted(scored, key=lambda job: job.ranking_score, reverse=True)
    for position, job in enumerate(ranked, start=1):
        job.rank = position

    logger.info(
        "Ranked %d jobs (top score %d)", len(ranked), ranked[0].ranking_score
    )
    return ranked
