from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field

from models.schemas.answers import AnswerImprovement
from models.schemas.ranking import RankedJob
from models.schemas.remodel import RemodelDiff, RemodeledResume


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AIResponse(BaseModel):
    """Chat-ready envelope shared by every AI endpoint."""
    type: str  # analysis, explanation, remodel, improvement, refinement, ranking
    message: str = ""
    data: Any = None
    timestamp: datetime = Field(default_factory=_utcnow)
    suggested_actions: list[str] = []
    context: dict[str, Any] = {}


class RemodelPreview(BaseModel):
    before: RemodeledResume
    after: RemodeledResume
    changes: list[str] = []
    diff: RemodelDiff
    requires_confirmation: bool = True
    confirmation_message: str = (
        "Review the changes above and confirm to save this tailored version."
    )


class ImprovedAnswer(AnswerImprovement):
    question: str = ""
    applied: bool = False


class RankedJobsPage(BaseModel):
    jobs: list[RankedJob] = []
    total: int = 0
