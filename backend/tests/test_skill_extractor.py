"""Tests for vocabulary skill extraction."""

from services.skill_extractor import KNOWN_SKILLS, extract_skills, mentions_any


def test_extract_skills_finds_known_tokens():
    skills = extract_skills("Experience with Python and JavaScript")
    assert "python" in skills
    assert "javascript" in skills


def test_extract_skills_keeps_substring_matches():
    # No word boundaries: "java" sits inside "javascript"
    assert "java" in extract_skills("Proficient in JavaScript")
    assert extract_skills("Google") == ["go"]


def test_extract_skills_follows_vocabulary_order():
    assert extract_skills("python react") == ["react", "python"]


def test_extract_skills_case_insensitive():
    assert extract_skills("DOCKER") == ["docker"]


def test_extract_skills_empty_input():
    assert extract_skills("") == []
    assert extract_skills(None) == []


def test_extract_skills_no_duplicates():
    skills = extract_skills("react react REACT")
    assert skills == ["react"]


def test_vocabulary_has_no_duplicates():
    lowered = [s.lower() for s in KNOWN_SKILLS]
    assert len(set(lowered)) == len(lowered)


def test_mentions_any():
    assert mentions_any("I shipped Docker images", ["docker"])
    assert not mentions_any("I shipped images", ["docker"])
    assert not mentions_any("anything", [])
