from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_now
from config import settings
from models.requests import (
    AnalyzeJobRequest,
    ExplainMatchRequest,
    ImproveAnswerRequest,
    RankJobsRequest,
    RefineAnswersRequest,
    RemodelRequest,
)
from models.responses import AIResponse, ImprovedAnswer, RankedJobsPage, RemodelPreview
from services import answer_improver, job_ranker, match_scorer, resume_remodeler
from services.skill_extractor import KNOWN_SKILLS

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


def _check_job_description(job_description: str) -> None:
    if len(job_description) > settings.max_job_description_chars:
        raise HTTPException(
            status_code=400,
            detail=f"Job description too long (max {settings.max_job_description_chars} chars)",
        )


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "vocabulary_size": len(KNOWN_SKILLS),
    }


@router.post("/ai/analyze-job", response_model=AIResponse)
@limiter.limit(settings.rate_limit)
async def analyze_job(request: Request, body: AnalyzeJobRequest):
    _check_job_description(body.job_description)
    analysis = match_scorer.analyze_job(body.job_description, body.resume_skills)
    return AIResponse(
        type="analysis",
        message=(
            f"Match score: {analysis.score}%. "
            f"Found {len(analysis.matched_skills)} matching skills."
        ),
        data=analysis,
        suggested_actions=analysis.suggestions,
        context={"has_resume": bool(body.resume_skills), "analysis_type": "skill-overlap"},
    )


@router.post("/ai/explain-match", response_model=AIResponse)
@limiter.limit(settings.rate_limit)
async def explain_match(request: Request, body: ExplainMatchRequest):
    _check_job_description(body.job_description)
    result = match_scorer.explain_match(
        body.job_description, body.resume_skills, body.experience_titles
    )
    return AIResponse(
        type="explanation",
        message=result.explanation,
        data=result,
        suggested_actions=result.suggestions,
        context={"use_only_existing_data": True, "match_level": result.match_level},
    )


@router.post("/ai/remodel-preview", response_model=AIResponse)
@limiter.limit(settings.rate_limit)
async def remodel_preview(request: Request, body: RemodelRequest):
    _check_job_description(body.job_description)
    result = resume_remodeler.remodel_resume(body.resume, body.job_description)
    preview = RemodelPreview(
        before=result.original,
        after=result.remodeled,
        changes=resume_remodeler.preview_changes(result.diff),
        diff=result.diff,
    )
    return AIResponse(
        type="remodel",
        message="Resume reordered for ATS optimization using existing data only.",
        data={"result": result, "preview": preview},
        suggested_actions=["Download tailored resume", "Review before applying"],
        context={
            "job_skills_count": len(result.job_skills),
            "reordered_skills": result.diff.reordered,
            "changes_made": result.diff.summary,
        },
    )


@router.post("/ai/improve-answer", response_model=AIResponse)
@limiter.limit(settings.rate_limit)
async def improve_answer(request: Request, body: ImproveAnswerRequest):
    _check_job_description(body.job_description)
    if not body.answer.strip():
        raise HTTPException(status_code=400, detail="No stored answer provided for this question")

    improvement = answer_improver.improve_answer(body.answer, body.job_description)
    applied = (
        improvement.confidence >= settings.answer_apply_threshold
        and improvement.improved != body.answer
    )
    data = ImprovedAnswer(
        **improvement.model_dump(), question=body.question, applied=applied
    )
    return AIResponse(
        type="improvement",
        message=f"Answer improved. Confidence: {improvement.confidence}%",
        data=data,
        suggested_actions=["Review improved version", "Use improved answer", "Keep original"],
        context={
            "used_existing_data_only": True,
            "job_skills_mentioned": len(improvement.mentioned_job_skills),
            "improvement_type": "tone-and-relevance",
        },
    )


@router.post("/ai/refine-answers", response_model=AIResponse)
@limiter.limit(settings.rate_limit)
async def refine_answers(request: Request, body: RefineAnswersRequest):
    _check_job_description(body.job_description)
    refined = answer_improver.refine_application_answers(body.answers, body.job_description)
    return AIResponse(
        type="refinement",
        message=refined.note,
        data=refined,
        context={"answers_count": len(refined.answers)},
    )


@router.post("/jobs/rank", response_model=RankedJobsPage)
@limiter.limit(settings.rate_limit)
async def rank_jobs(
    request: Request,
    body: RankJobsRequest,
    now: datetime = Depends(get_now),
):
    ranked = job_ranker.rank_jobs(
        body.jobs,
        body.candidate,
        body.candidate_location,
        body.weights,
        now=now,
    )
    if body.min_score is not None:
        ranked = [job for job in ranked if job.ranking_score >= body.min_score]
    return RankedJobsPage(jobs=ranked, total=len(ranked))
