"""Application configuration helpers."""

from __future__ import annotations

from .env import get_input, input_env_name, require_env_vars, require_inputs
from .errors import ConfigurationError, MissingConfigurationError
from .github import GitHubConfig, get_github_config
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .jira import JiraConfig, get_jira_config, normalize_domain
from .logging import configure_logging

__all__ = [
    "ConfigurationError",
    "GitHubConfig",
    "JiraConfig",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "configure_logging",
    "get_github_config",
    "get_input",
    "get_jira_config",
    "input_env_name",
    "normalize_domain",
    "require_env_vars",
    "require_inputs",
]
