"""Vocabulary-based skill extraction for job descriptions.

Maps free text onto a fixed, ordered vocabulary of known skill tokens by
case-insensitive substring containment. There is no stemming and no word
boundary check, so a token that sits inside an unrelated word still matches
("java" inside "javascript", "go" inside "google"). Downstream thresholds
were tuned with that behaviour, so it is kept as is.
"""

import logging

logger = logging.getLogger(__name__)

# Ordered: extraction results follow this order, and the remodeler uses the
# position of a skill in that result as its priority.
KNOWN_SKILLS: tuple[str, ...] = (
    "javascript",
    "typescript",
    "node",
    "react",
    "vue",
    "angular",
    "express",
    "mongo",
    "mongodb",
    "sql",
    "postgres",
    "mysql",
    "python",
    "django",
    "flask",
    "java",
    "c#",
    "go",
    "ruby",
    "php",
    "aws",
    "gcp",
    "azure",
    "docker",
    "kubernetes",
    "terraform",
    "ci",
    "cd",
    "git",
    "testing",
    "jest",
    "cypress",
    "playwright",
    "html",
    "css",
    "sass",
    "less",
    "graphql",
    "rest",
)


def normalize(text: str | None) -> str:
    """Lowercase a possibly-missing string."""
    return (text or "").lower()


def unique(items: list[str]) -> list[str]:
    """Drop exact duplicates, keeping first occurrence order."""
    return list(dict.fromkeys(items))


def extract_skills(text: str | None) -> list[str]:
    """Return the vocabulary tokens contained in ``text``.

    The result is a duplicate-free list in vocabulary order. Empty or
    missing text yields an empty list.
    """
    lowered = normalize(text)
    if not lowered:
        return []
    found = [skill for skill in KNOWN_SKILLS if skill in lowered]
    logger.debug("Extracted %d skills from %d chars", len(found), len(lowered))
    return found


def mentions_any(text: str, skills: list[str]) -> bool:
    """True if the normalized text contains any of the normalized skills."""
    lowered = normalize(text)
    return any(normalize(skill) in lowered for skill in skills)
