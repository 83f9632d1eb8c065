"""Split chapter text into plain and conditional spans.

A conditional section opens on a line consisting of `!!!` immediately
followed by a comma-separated list of absolute URLs, and closes on the next
line consisting of exactly `!!!`:

    !!!https://github.com/owner/repo/issues/1,https://example.com

    Content that is only true while the links above are open.

    !!!

The body of a section runs from the end of the opener line up to the closing
marker, so it keeps its leading and trailing newlines. Lines may end in
either `\\n` or `\\r\\n`; a `\\r` is never part of a marker or a link.
"""

import re

import httpx

from mdbook_section_validator.core.entities import ConditionalSpan, PlainSpan, Span
from mdbook_section_validator.core.errors import MalformedLinkError, UnterminatedSectionError

OPENER_PATTERN = re.compile(r"^!!!([^\r\n]+)(?=\r?$)", re.MULTILINE)
CLOSER_PATTERN = re.compile(r"^!!!(?=\r?$)", re.MULTILINE)


def validation_sections(raw_content: str) -> list[Span]:
    """Scan text into spans covering all of it, in document order."""
    sections: list[Span] = []
    position = 0
    
    while True:
        opener = OPENER_PATTERN.search(raw_content, position)
        if opener is None:
            break
        
        line = _line_number(raw_content, opener.start())
        closer = CLOSER_PATTERN.search(raw_content, opener.end())
        if closer is None:
            raise UnterminatedSectionError(line)
        
        if opener.start() > position:
            sections.append(PlainSpan(raw_content[position:opener.start()]))
        
        sections.append(
            ConditionalSpan(
                links=links_to_check(opener.group(1), line),
                body=raw_content[opener.end():closer.start()],
            )
        )
        position = closer.end()
    
    if not sections:
        return [PlainSpan(raw_content)]
    
    if position < len(raw_content):
        sections.append(PlainSpan(raw_content[position:]))
    
    return sections


def links_to_check(links: str, line: int = 0) -> tuple[str, ...]:
    """Parse the comma-separated link list of a section opener."""
    parsed = []
    for text in links.split(","):
        link = text.strip()
        if not _is_absolute_url(link):
            raise MalformedLinkError(link, line or None)
        parsed.append(link)
    return tuple(parsed)


def _is_absolute_url(link: str) -> bool:
    if not link:
        return False
    # Reading .host decodes IDNA labels and can raise too
    try:
        url = httpx.URL(link)
        return bool(url.scheme) and bool(url.host)
    except (httpx.InvalidURL, UnicodeError):
        return False


def _line_number(text: str, offset: int) -> int:
    return text.count("\n", 0, offset) + 1
