"""Tests for non-destructive resume remodeling."""

import pytest

from models.schemas.candidate_profile import ExperienceRole, ResumeSnapshot
from services.resume_remodeler import (
    SAFETY_NOTES,
    build_diff,
    highlighted_skills,
    preview_changes,
    prioritize_skills,
    remodel_resume,
)


def test_prioritize_skills_orders_by_job_skill_position():
    result = prioritize_skills(["python", "react", "docker"], ["react", "docker"])
    assert result == ["react", "docker", "python"]


def test_prioritize_skills_keeps_unmatched_order():
    result = prioritize_skills(["figma", "sketch", "React", "notion"], ["react"])
    assert result == ["React", "figma", "sketch", "notion"]


def test_prioritize_skills_without_job_skills():
    skills = ["b", "a"]
    assert prioritize_skills(skills, []) == ["b", "a"]


def test_highlighted_skills_follow_job_order():
    assert highlighted_skills(["Python", "React"], ["react", "docker", "python"]) == [
        "react",
        "python",
    ]


def test_build_diff_reorders_and_summarizes():
    diff = build_diff(["Python", "React", "Figma"], "We use react and python daily")
    assert diff.skills_remodeled == ["React", "Python", "Figma"]
    assert diff.reordered is True
    assert diff.highlighted == ["react", "python"]
    assert diff.added == [] and diff.removed == []
    assert diff.sections_original_order == ["summary", "skills", "experience"]
    assert diff.sections_remodeled_order == ["summary", "skills (job-prioritized)", "experience"]
    assert diff.summary == (
        "Prioritized 2 job-relevant skills; Reordered sections for ATS optimization"
    )


def test_build_diff_without_job_skills():
    diff = build_diff(["b", "a"], "Marketing lead wanted")
    assert diff.skills_remodeled == ["b", "a"]
    assert diff.reordered is False
    assert diff.highlighted == []
    assert diff.sections_remodeled_order == diff.sections_original_order
    assert diff.summary == "No changes needed."


def test_build_diff_already_ordered():
    diff = build_diff(["React", "Python"], "react and python")
    assert diff.reordered is False
    assert diff.summary == "Reordered sections for ATS optimization"


@pytest.mark.parametrize(
    "skills,job_description",
    [
        ([], "react python docker"),
        (["Docker", "docker", "React"], "react and docker"),
        (["a", "b", "c"], ""),
        (["sql", "mysql", "SQL", "graphql", "postgres"], "MySQL, Postgres and GraphQL"),
        (["Go", "Rust", "Kotlin", "go"], "Go services on GCP"),
    ],
)
def test_remodeled_skills_are_a_permutation(skills, job_description):
    diff = build_diff(skills, job_description)
    assert sorted(diff.skills_remodeled) == sorted(skills)
    assert diff.skills_original == skills


def test_remodel_resume_keeps_content():
    resume = ResumeSnapshot(
        summary="  Frontend engineer.  ",
        skills=["Python", "React"],
        experience=[
            ExperienceRole(title="Engineer", company="Acme", bullets=[f"b{i}" for i in range(12)]),
            ExperienceRole(title="Intern", company="Beta"),
        ],
        original_text="x" * 2500,
    )
    result = remodel_resume(resume, "React developer")

    assert result.remodeled.summary == "Frontend engineer."
    assert result.original.summary == result.remodeled.summary
    assert result.remodeled.skills == ["React", "Python"]
    assert result.original.skills == ["Python", "React"]
    assert len(result.original.experience[0].bullets) == 12
    assert len(result.remodeled.experience[0].bullets) == 10
    assert [r.original_index for r in result.remodeled.experience] == [0, 1]
    assert result.job_skills == ["react"]
    assert len(result.original_excerpt) == 2000


def test_preview_changes_lists_highlights_and_safety_notes():
    diff = build_diff(["Python", "React"], "React developer")
    changes = preview_changes(diff)
    assert changes[0] == "✓ Reordered 1 job-relevant skills to the top"
    assert changes[1] == "  Highlighted: react"
    assert "✓ Optimized section order for ATS scanning" in changes
    assert changes[-3:] == SAFETY_NOTES


def test_preview_changes_nothing_to_do():
    changes = preview_changes(build_diff(["a"], "Marketing lead wanted"))
    assert changes[0] == "✓ No changes needed - your resume is already well-structured"
