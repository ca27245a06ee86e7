"""Application-answer improvement without new claims.

The improver only reorders sentences and tidies whitespace. A final safety
check compares the words of the result with the words of the original
answer; if anything new slipped in, the original answer is returned.
"""

import logging
import re

from models.schemas.answers import AnswerImprovement, RefinedAnswers
from services.skill_extractor import extract_skills, mentions_any, normalize

logger = logging.getLogger(__name__)

BASE_CONFIDENCE = 50
MAX_SKILL_BONUS = 20
SKILL_BONUS = 5
REORDER_BONUS = 10
HIGH_RELEVANCE_SKILLS = 3
MIN_CHECKED_WORD_LEN = 2

# Naive on purpose: abbreviations like "Dr." split too; the safety check
# bounds what that can do to the answer.
_SENTENCE_SPLIT_RE = re.compile(r"(?<=[.!?])\s+")
_WHITESPACE_RE = re.compile(r"\s+")
_TERMINAL_SPACING_RE = re.compile(r"([.!?])\s*([a-z])")

REFINE_NOTE = (
    "Answers are trimmed and reordered by overlap with job skills; "
    "no new answers or claims added."
)


def split_sentences(text: str) -> list[str]:
    return [s for s in _SENTENCE_SPLIT_RE.split(text) if s]


def clean_formatting(text: str) -> str:
    """Collapse whitespace and keep one space after terminal punctuation."""
    text = _WHITESPACE_RE.sub(" ", text.strip())
    return _TERMINAL_SPACING_RE.sub(r"\1 \2", text)


def _words(text: str) -> set[str]:
    # Raw tokens: "1." and "1.x" are different words
    return set(normalize(text).split())


def introduces_new_words(original: str, improved: str) -> bool:
    """True if ``improved`` has a word (2+ chars) that ``original`` lacks."""
    known = _words(original)
    return any(
        len(word) >= MIN_CHECKED_WORD_LEN and word not in known
        for word in _words(improved)
    )


def _prioritize_sentences(
    sentences: list[str], skills: list[str]
) -> list[str] | None:
    """Skill-mentioning sentences first, or None when nothing would move."""
    if len(sentences) < 2 or not skills:
        return None
    with_skills = [s for s in sentences if mentions_any(s, skills)]
    others = [s for s in sentences if not mentions_any(s, skills)]
    if not with_skills or len(with_skills) == len(sentences):
        return None
    return with_skills + others


def improve_answer(original_answer: str | None, job_description: str) -> AnswerImprovement:
    """Improve relevance and formatting of a stored answer.

    Never raises for content; empty or non-string input returns a
    zero-confidence record. The formatting note is only recorded when the
    whitespace cleanup itself changes the text, not for a reorder alone.
    """
    if not original_answer or not isinstance(original_answer, str):
        return AnswerImprovement(
            original="",
            improved="",
            confidence=0,
            changes=[],
        )

    answer = original_answer.strip()
    answer_lower = normalize(answer)
    mentioned = [s for s in extract_skills(job_description) if normalize(s) in answer_lower]

    improved = answer
    changes: list[str] = []
    confidence = BASE_CONFIDENCE + min(MAX_SKILL_BONUS, SKILL_BONUS * len(mentioned))

    reordered = _prioritize_sentences(split_sentences(answer), mentioned)
    if reordered is not None:
        improved = " ".join(reordered)
        changes.append(
            f"Reordered sentences to highlight {len(mentioned)} job-relevant skill(s) first"
        )
        confidence += REORDER_BONUS

    cleaned = clean_formatting(improved)
    if cleaned != improved:
        changes.append("Cleaned up formatting and spacing")
        improved = cleaned

    if not mentioned:
        confidence = max(30, confidence - 20)
        changes.append("No job skills mentioned - improvement limited")
    elif len(mentioned) >= HIGH_RELEVANCE_SKILLS:
        confidence = min(95, confidence + 15)
        changes.append("Answer is highly relevant to job description")

    reverted = False
    if introduces_new_words(answer, improved):
        logger.warning("Answer improvement introduced new words, reverting")
        improved = answer
        reverted = True
        confidence = max(20, confidence - 30)
        changes.append("Safety check: reverted to the original answer")

    if not changes:
        changes.append("Answer is already well-optimized")
        confidence += 10

    return AnswerImprovement(
        original=answer,
        improved=improved,
        confidence=max(0, min(100, confidence)),
        changes=changes,
        mentioned_job_skills=mentioned,
        reverted=reverted,
    )


def refine_application_answers(
    answers: dict[str, str], job_description: str = ""
) -> RefinedAnswers:
    """Trim stored answers and list questions whose answers mention job skills first."""
    job_skills = extract_skills(job_description)
    refined = {key: (value or "").strip() for key, value in (answers or {}).items()}
    # Stable: keys keep their order within each group
    ordered = sorted(refined, key=lambda key: 0 if mentions_any(refined[key], job_skills) else 1)
    return RefinedAnswers(
        ordered_keys=ordered,
        answers=refined,
        job_skills=job_skills,
        note=REFINE_NOTE,
    )
