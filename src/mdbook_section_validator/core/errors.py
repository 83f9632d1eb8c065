"""Errors that abort a document pass."""

from typing import Optional


class SectionValidatorError(Exception):
    """Base error for the preprocessor."""


class SectionParseError(SectionValidatorError, ValueError):
    """Document text could not be split into sections."""
    
    def __init__(self, message: str, line: Optional[int] = None) -> None:
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class MalformedLinkError(SectionParseError):
    """A section opener names something that is not an absolute URL."""
    
    def __init__(self, link: str, line: Optional[int] = None) -> None:
        self.link = link
        super().__init__(f"invalid link in section opener: {link!r}", line)


class UnterminatedSectionError(SectionParseError):
    """A section opener has no matching closing `!!!` line."""
    
    def __init__(self, line: Optional[int] = None) -> None:
        super().__init__("section opened here is never closed with '!!!'", line)
