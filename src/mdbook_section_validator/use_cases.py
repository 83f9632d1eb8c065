"""Business logic use cases."""

import asyncio
import html
from typing import Any, Iterator, Optional

import structlog

from mdbook_section_validator.adapters.markdown import markdown_many
from mdbook_section_validator.config import PREPROCESSOR_NAME, ValidatorOptions
from mdbook_section_validator.core import (
    ConditionalSpan,
    IssueValidator,
    PlainSpan,
    Verdict,
    issue_from_url,
    validation_sections,
)

logger = structlog.get_logger(__name__)

SUPPORTED_RENDERERS = ("html",)


def combine_verdicts(verdicts: list[Verdict]) -> Verdict:
    """A section is still valid only if every one of its links is."""
    if verdicts and all(verdict is Verdict.STILL_VALID for verdict in verdicts):
        return Verdict.STILL_VALID
    return Verdict.NO_LONGER_VALID


class ValidatorProcessor:
    """Rewrite chapters according to the state of their sections' links."""
    
    name = PREPROCESSOR_NAME
    
    def __init__(self, validator: IssueValidator) -> None:
        self.validator = validator
    
    def supports_renderer(self, renderer: str) -> bool:
        return renderer in SUPPORTED_RENDERERS
    
    async def is_section_valid(self, links: tuple[str, ...]) -> Verdict:
        """Check every link concurrently and combine the results."""
        verdicts = await asyncio.gather(
            *(self.validator.validate(issue_from_url(link)) for link in links)
        )
        return combine_verdicts(list(verdicts))
    
    async def process_chapter(self, raw_content: str, options: ValidatorOptions) -> str:
        """Return the chapter text with every conditional section resolved."""
        content: list[str] = []
        
        for section in validation_sections(raw_content):
            if isinstance(section, PlainSpan):
                content.append(section.text)
                continue
            
            verdict = await self.is_section_valid(section.links)
            if options.hide_invalid and verdict is Verdict.NO_LONGER_VALID:
                logger.info("Hiding section", links=section.joined_links)
                continue
            
            content.append(self._render_section(section, verdict, options))
        
        return "".join(content)
    
    async def run(self, book: dict[str, Any], options: ValidatorOptions) -> dict[str, Any]:
        """Process every chapter of an mdbook book in place."""
        for chapter in iter_chapters(book):
            content = chapter.get("content")
            if not isinstance(content, str):
                continue
            
            structlog.contextvars.bind_contextvars(chapter=chapter.get("name"))
            try:
                chapter["content"] = await self.process_chapter(content, options)
            finally:
                structlog.contextvars.unbind_contextvars("chapter")
        
        return book
    
    @staticmethod
    def _render_section(section: ConditionalSpan, verdict: Verdict, options: ValidatorOptions) -> str:
        if verdict is Verdict.NO_LONGER_VALID:
            message = options.invalid_message
        else:
            is_or_are = "is" if len(section.links) == 1 else "are"
            message = f"⚠️ This is only valid while {markdown_many(list(section.links))} {is_or_are} open"
        
        links = html.escape(section.joined_links, quote=True)
        return (
            f'<div class="validated-content" links="{links}">\n\n'
            f"{message}{section.body}\n</div>"
        )


def iter_chapters(book: dict[str, Any]) -> Iterator[dict[str, Any]]:
    """Yield every chapter of a serialized book, depth first.
    
    Separators and part titles are skipped. Both the `sections` (mdbook 0.4)
    and `items` (mdbook 0.5) spellings of the top-level list are accepted.
    """
    items: Optional[list] = book.get("sections")
    if items is None:
        items = book.get("items") or []
    yield from _iter_items(items)


def _iter_items(items: list) -> Iterator[dict[str, Any]]:
    for item in items:
        if not isinstance(item, dict):
            continue
        chapter = item.get("Chapter")
        if not isinstance(chapter, dict):
            continue
        yield chapter
        yield from _iter_items(chapter.get("sub_items") or [])
