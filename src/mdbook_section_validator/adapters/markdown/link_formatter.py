"""Render reference links as Markdown."""

from mdbook_section_validator.core import OpaqueLink, TrackerItem, issue_from_url


def markdown_single(link: str) -> str:
    """Render one link, using `owner/repo#number` for tracker items."""
    issue = issue_from_url(link)
    if isinstance(issue, TrackerItem):
        return f"[`{issue.owner}/{issue.repo}#{issue.number}`]({issue.source_url})"
    if isinstance(issue, OpaqueLink):
        return f"[`{issue.source_url}`]({issue.source_url})"
    raise TypeError(f"Unknown identity: {issue!r}")


def markdown_many(links: list[str]) -> str:
    """
    Render links as an "and" list.
    
    One link renders as itself, two as "A, and B", more as "A, B, and C".
    """
    markdown_links = [markdown_single(link) for link in links]
    if len(markdown_links) <= 2:
        return ", and ".join(markdown_links)
    return ", and ".join([", ".join(markdown_links[:-1]), markdown_links[-1]])
