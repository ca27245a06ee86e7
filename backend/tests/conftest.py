"""Shared test fixtures."""

from datetime import datetime, timezone

import pytest

from models.schemas.candidate_profile import CandidateProfile

FIXED_NOW = datetime(2024, 6, 30, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def react_candidate() -> CandidateProfile:
    return CandidateProfile(skills=["react"], years_of_experience=3, location="")
