"""Pydantic models for project submissions and view models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ProjectCreate(BaseModel):
    """Raw project submission.

    Only presence and JSON types are checked here; length, charset, tag and
    URL rules run in :mod:`collab.services.project_validator` so that clients
    get a single, ordered error message. Client-supplied ``id``,
    ``creator_id`` and ``date_created`` are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    name: str
    description: str
    handle: str | None = None
    tags: list[str] | None = None
    live_url: str | None = None
    trello_url: str | None = None
    github_url: str | None = None


class VacancyView(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    project_id: int
    user_id: int | None = None
    title: str
    description: str
    skills: list[str] = Field(default_factory=list)


class ProjectView(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    handle: str
    description: str
    creator_id: int
    date_created: datetime
    tags: list[str] = Field(default_factory=list)
    live_url: str | None = None
    trello_url: str | None = None
    github_url: str | None = None
    vacancies: list[VacancyView] = Field(default_factory=list)


class ProjectDetailView(ProjectView):
    user_role: str | None = Field(None, serialization_alias="userRole")
