"""Markdown rendering adapters."""

from mdbook_section_validator.adapters.markdown.link_formatter import markdown_many, markdown_single

__all__ = ["markdown_many", "markdown_single"]
