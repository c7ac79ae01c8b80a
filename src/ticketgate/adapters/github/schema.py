"""Pydantic models for the parts of GitHub payloads the check reads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GitHubBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class HeadRef(GitHubBaseModel):
    ref: str


class PullRequestPayload(GitHubBaseModel):
    number: int
    title: str
    body: str = ""
    head: HeadRef | None = None

    @field_validator("body", mode="before")
    @classmethod
    def _null_body_to_empty(cls, value: object) -> object:
        return "" if value is None else value


class RepositoryPayload(GitHubBaseModel):
    full_name: str


class PullRequestEvent(GitHubBaseModel):
    """``pull_request`` / ``pull_request_target`` webhook event."""

    action: str | None = None
    pull_request: PullRequestPayload
    repository: RepositoryPayload | None = None


class CommentPayload(GitHubBaseModel):
    id: int
    html_url: str | None = Field(default=None)
