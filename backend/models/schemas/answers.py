"""Application-answer contracts: single improvement and bulk refinement."""

from pydantic import BaseModel


class AnswerImprovement(BaseModel):
    """Result of improving one stored answer.

    Every word of ``improved`` also appears in ``original``; when a
    transformation would break that, ``improved`` is reverted to ``original``.
    """
    original: str = ""
    improved: str = ""
    confidence: int = 0  # 0-100
    changes: list[str] = []
    mentioned_job_skills: list[str] = []
    reverted: bool = False


class RefinedAnswers(BaseModel):
    ordered_keys: list[str] = []
    answers: dict[str, str] = {}
    job_skills: list[str] = []
    note: str = ""
