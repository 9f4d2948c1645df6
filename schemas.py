"""
Database Schemas

MongoDB collection shapes for the portfolio, as Pydantic models.

- Project -> "projects" collection (seeded, read-only to the API)
- ContactForm -> "forms" collection (append-only, written by /sendForm)
"""

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field

PROJECT_FIELDS = ("id", "title", "shortDescription", "overview", "technologies", "github")
CONTACT_FIELDS = ("name", "email", "message")


class Project(BaseModel):
    """
    Projects collection schema
    Collection name: "projects"
    """
    id: Optional[str] = Field(None, description="Human-assigned slug, e.g. 'portfolio'")
    title: Optional[str] = Field(None, description="Project title")
    shortDescription: Optional[str] = Field(None, description="One-line summary for cards")
    overview: Optional[str] = Field(None, description="Longer free-text description")
    technologies: Optional[List[str]] = Field(None, description="Technologies used, in display order")
    github: Optional[str] = Field(None, description="GitHub URL")


class ContactForm(BaseModel):
    """
    Contact submissions collection schema
    Collection name: "forms"
    """
    name: str = Field(..., min_length=1, description="Sender name")
    email: str = Field(..., min_length=1, description="Sender email, not format-checked")
    message: str = Field(..., min_length=1, description="Message body")
    submittedDateTime: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Set by the server at insert time",
    )


def project_view(doc: dict) -> dict:
    # Allow-listed fields only; stored values pass through untouched.
    return {k: doc.get(k) for k in PROJECT_FIELDS}
