"""Public interface for the Jira adapter."""

from __future__ import annotations

from .client import JiraClient, basic_authorization
from .schema import ErrorResponse, IssuePayload, parse_error_text

__all__ = [
    "ErrorResponse",
    "IssuePayload",
    "JiraClient",
    "basic_authorization",
    "parse_error_text",
]
