"""Core domain entities."""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class IssueKind(str, Enum):
    """Kind of tracker item, valued by its URL path segment."""
    
    ISSUE = "issues"
    PULL_REQUEST = "pull"
    
    @property
    def api_resource(self) -> str:
        """Resource name used by the GitHub REST API (note: "pulls", not "pull")."""
        if self is IssueKind.ISSUE:
            return "issues"
        return "pulls"


@dataclass(frozen=True)
class TrackerItem:
    """An issue or pull request on a tracker-style hosting path."""
    
    owner: str
    repo: str
    number: str
    kind: IssueKind
    source_url: str


@dataclass(frozen=True)
class OpaqueLink:
    """Any other URL; validated only by a liveness probe."""
    
    source_url: str


Identity = Union[TrackerItem, OpaqueLink]


class Verdict(str, Enum):
    """Outcome of checking a link (or a whole section)."""
    
    STILL_VALID = "still_valid"
    NO_LONGER_VALID = "no_longer_valid"


@dataclass(frozen=True)
class PlainSpan:
    """Text outside any conditional section, kept verbatim."""
    
    text: str


@dataclass(frozen=True)
class ConditionalSpan:
    """A delimited section whose inclusion depends on its links."""
    
    links: tuple[str, ...]
    body: str
    
    def __post_init__(self) -> None:
        if not self.links:
            raise ValueError("Conditional section must name at least one link")
    
    @property
    def joined_links(self) -> str:
        return ",".join(self.links)


Span = Union[PlainSpan, ConditionalSpan]
