"""Core domain layer."""

from mdbook_section_validator.core.entities import (
    ConditionalSpan,
    Identity,
    IssueKind,
    OpaqueLink,
    PlainSpan,
    Span,
    TrackerItem,
    Verdict,
)
from mdbook_section_validator.core.errors import (
    MalformedLinkError,
    SectionParseError,
    SectionValidatorError,
    UnterminatedSectionError,
)
from mdbook_section_validator.core.interfaces import IssueValidator
from mdbook_section_validator.core.issues import issue_from_url
from mdbook_section_validator.core.sections import validation_sections

__all__ = [
    "ConditionalSpan",
    "Identity",
    "IssueKind",
    "IssueValidator",
    "MalformedLinkError",
    "OpaqueLink",
    "PlainSpan",
    "SectionParseError",
    "SectionValidatorError",
    "Span",
    "TrackerItem",
    "UnterminatedSectionError",
    "Verdict",
    "issue_from_url",
    "validation_sections",
]
