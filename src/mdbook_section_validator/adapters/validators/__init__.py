"""Remote link validators."""

from mdbook_section_validator.adapters.validators.github_validator import GitHubIssueValidator

__all__ = ["GitHubIssueValidator"]
