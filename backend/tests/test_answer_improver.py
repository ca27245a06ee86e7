"""Tests for answer improvement and answer refinement."""

import pytest

from services.answer_improver import (
    clean_formatting,
    improve_answer,
    introduces_new_words,
    refine_application_answers,
    split_sentences,
)


def _words(text):
    return set(text.lower().split())


def test_improve_empty_answer():
    result = improve_answer("", "any job desc")
    assert result.improved == ""
    assert result.confidence == 0
    assert result.changes == []


def test_improve_missing_answer():
    result = improve_answer(None, "any job desc")
    assert result.improved == ""
    assert result.confidence == 0


def test_improve_non_string_answer():
    result = improve_answer(123, "python job")
    assert result.original == ""
    assert result.improved == ""
    assert result.confidence == 0
    assert result.changes == []


def test_improve_reverts_fragmented_version_numbers():
    answer = "I used Python 1.x and 2.x daily"
    result = improve_answer(answer, "python role")
    assert result.improved == answer
    assert result.reverted is True


def test_improve_reorders_skill_sentences_first():
    answer = "I enjoy working with teams. I built APIs in Python. I also used Docker daily."
    result = improve_answer(answer, "Python and Docker engineer needed for backend work")
    assert result.mentioned_job_skills == ["python", "docker"]
    assert result.improved == (
        "I built APIs in Python. I also used Docker daily. I enjoy working with teams."
    )
    assert result.changes == [
        "Reordered sentences to highlight 2 job-relevant skill(s) first"
    ]
    # 50 base + 2*5 skills + 10 reorder
    assert result.confidence == 70


def test_improve_without_job_skills_lowers_confidence():
    result = improve_answer(
        "I love building things.", "Python developer wanted, with extensive experience"
    )
    assert result.improved == "I love building things."
    assert result.confidence == 30
    assert result.changes == ["No job skills mentioned - improvement limited"]


def test_improve_cleans_whitespace():
    result = improve_answer("  I use   Python  daily. ", "Python developer with a passion for it")
    assert result.original == "I use   Python  daily."
    assert result.improved == "I use Python daily."
    assert result.changes == ["Cleaned up formatting and spacing"]
    assert result.confidence == 55


def test_improve_reverts_when_new_words_appear():
    answer = "I know node.js and docker well."
    result = improve_answer(answer, "Node and Docker role for our team members")
    assert result.improved == answer
    assert result.reverted is True
    assert result.changes[-1] == "Safety check: reverted to the original answer"
    # 50 + 2*5, then -30
    assert result.confidence == 30


def test_improve_already_optimized():
    result = improve_answer(
        "I have shipped Python services.", "Python engineer needed to build services for clients"
    )
    assert result.changes == ["Answer is already well-optimized"]
    assert result.confidence == 65


def test_improve_highly_relevant():
    result = improve_answer(
        "Python, Docker and AWS are my daily tools.", "Python Docker AWS team"
    )
    assert result.changes == ["Answer is highly relevant to job description"]
    assert result.confidence == 80


@pytest.mark.parametrize(
    "answer,job_description",
    [
        ("I know node.js and docker well.", "Node and Docker"),
        ("Dr. Smith hired me. I wrote Python.  I like cats!", "python"),
        ("Used React.So fast.and fun", "react"),
        ("A. B. C.", "anything"),
        ("Deployed to AWS! Wrote Terraform? Yes.", "aws terraform docker"),
        ("I used Python 1.x and 2.x daily", "python role"),
        ("Version 3.y shipped.And it worked", "python"),
    ],
)
def test_improved_answer_never_adds_words(answer, job_description):
    result = improve_answer(answer, job_description)
    new_words = {w for w in _words(result.improved) if len(w) >= 2} - _words(result.original)
    assert new_words == set()
    assert 0 <= result.confidence <= 100


def test_split_sentences():
    assert split_sentences("One. Two! Three? Four") == ["One.", "Two!", "Three?", "Four"]


def test_clean_formatting():
    assert clean_formatting("  a   b.c  ") == "a b. c"


def test_introduces_new_words():
    assert introduces_new_words("node.js rocks", "node. js rocks")
    assert not introduces_new_words("Python rocks.", "python  rocks.")
    assert introduces_new_words("v1.x", "v1. x")
    assert not introduces_new_words("x", "x y")


def test_refine_application_answers():
    refined = refine_application_answers(
        {"why_us": "  I like cats. ", "stack": "I write Python daily", "empty": ""},
        "Python developer needed for the platform",
    )
    assert refined.ordered_keys == ["stack", "why_us", "empty"]
    assert refined.answers["why_us"] == "I like cats."
    assert refined.job_skills == ["python"]
    assert "no new answers" in refined.note
