"""Job posting record consumed by the scorers and the ranker."""

from datetime import date, datetime, time

from pydantic import BaseModel, field_validator


class JobDescriptor(BaseModel):
    """A single job posting. Only ``description`` feeds skill extraction."""
    id: str = ""
    title: str = ""
    company: str = ""
    location: str = ""
    description: str = ""
    posted_date: datetime | None = None

    @field_validator("posted_date", mode="before")
    @classmethod
    def _coerce_date(cls, value):
        # Bare dates ("2024-05-01") are treated as midnight of that day
        if isinstance(value, datetime):
            return value
        if isinstance(value, date):
            return datetime.combine(value, time.min)
        if isinstance(value, str):
            value = value.strip()
            if not value:
                return None
            if len(value) == 10:
                return datetime.combine(date.fromisoformat(value), time.min)
        return value
