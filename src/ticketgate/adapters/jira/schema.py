"""Pydantic models describing the Jira issue API payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class JiraBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class IssueFields(JiraBaseModel):
    summary: str | None = None


class IssuePayload(JiraBaseModel):
    id: str
    key: str
    fields: IssueFields = Field(default_factory=IssueFields)


class ErrorResponse(JiraBaseModel):
    error_messages: list[str] = Field(default_factory=list, alias="errorMessages")
    errors: dict[str, str] = Field(default_factory=dict)

    def describe(self) -> str:
        messages = [*self.error_messages, *(f"{k}: {v}" for k, v in self.errors.items())]
        return "; ".join(messages)


def parse_error_text(text: str) -> str | None:
    """Return the human-readable part of a Jira error body, if it is one."""

    try:
        payload = ErrorResponse.model_validate_json(text)
    except ValidationError:
        return None
    return payload.describe() or None
