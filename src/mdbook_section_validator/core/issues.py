"""Classify reference links into tracker items or opaque links."""

import re

from mdbook_section_validator.core.entities import Identity, IssueKind, OpaqueLink, TrackerItem

GITHUB_ISSUE_PATTERN = re.compile(
    r"github\.com/(.+?)/(.+?)/(issues|pull)/(\d+)$",
    re.IGNORECASE,
)


def issue_from_url(url: str) -> Identity:
    """
    Classify a URL.
    
    Matches `github.com/<owner>/<repo>/(issues|pull)/<number>` at the end of
    the URL. Anything else, including the same path shape on another host,
    is an opaque link. Never raises.
    """
    match = GITHUB_ISSUE_PATTERN.search(url)
    if not match:
        return OpaqueLink(source_url=url)
    
    owner, repo, kind, number = match.groups()
    return TrackerItem(
        owner=owner,
        repo=repo,
        number=number,
        kind=IssueKind(kind.lower()),
        source_url=url,
    )
