"""Tests for splitting chapter text into sections."""

import pytest

from mdbook_section_validator.core import (
    ConditionalSpan,
    MalformedLinkError,
    PlainSpan,
    UnterminatedSectionError,
    validation_sections,
)


def test_validation_sections_single_link() -> None:
    """Test a section surrounded by plain text."""
    content = (
        "whatever\n"
        "!!!https://github.com/example/example/issues/1\n"
        "\n"
        "some content to be conditionally included.\n"
        "\n"
        "!!!\n"
        "\n"
        "other content"
    )
    
    sections = validation_sections(content)
    
    assert sections == [
        PlainSpan("whatever\n"),
        ConditionalSpan(
            links=("https://github.com/example/example/issues/1",),
            body="\n\nsome content to be conditionally included.\n\n",
        ),
        PlainSpan("\n\nother content"),
    ]


def test_validation_sections_multiple() -> None:
    """Test several sections with no leading or trailing text."""
    content = (
        "!!!https://github.com/example/example/issues/1\n"
        "\n"
        "some content to be conditionally included.\n"
        "\n"
        "!!!\n"
        "\n"
        "other content\n"
        "\n"
        "!!!https://github.com/example/example/issues/1,https://github.com/example/example/issues/2\n"
        "\n"
        "other content to be conditionally included.\n"
        "\n"
        "!!!"
    )
    
    sections = validation_sections(content)
    
    assert sections == [
        ConditionalSpan(
            links=("https://github.com/example/example/issues/1",),
            body="\n\nsome content to be conditionally included.\n\n",
        ),
        PlainSpan("\n\nother content\n\n"),
        ConditionalSpan(
            links=(
                "https://github.com/example/example/issues/1",
                "https://github.com/example/example/issues/2",
            ),
            body="\n\nother content to be conditionally included.\n\n",
        ),
    ]


def test_validation_sections_adjacent_sections() -> None:
    """Test that no empty plain span sits between back-to-back sections."""
    content = "!!!https://a.example\none\n!!!\n!!!https://b.example\ntwo\n!!!"
    
    sections = validation_sections(content)
    
    assert sections == [
        ConditionalSpan(links=("https://a.example",), body="\none\n"),
        PlainSpan("\n"),
        ConditionalSpan(links=("https://b.example",), body="\ntwo\n"),
    ]


def test_validation_sections_no_sections() -> None:
    """Test that text without markers is one plain span."""
    content = "# Title\n\nJust text, with !!! in the middle of a line.\n"
    
    assert validation_sections(content) == [PlainSpan(content)]


def test_validation_sections_empty_text() -> None:
    assert validation_sections("") == [PlainSpan("")]


def test_validation_sections_stray_closer_is_plain() -> None:
    """Test that a bare marker with no opener is left alone."""
    content = "before\n!!!\nafter"
    
    assert validation_sections(content) == [PlainSpan(content)]


def test_validation_sections_strips_spaces_around_links() -> None:
    content = "!!!https://a.example, https://b.example\nbody\n!!!"
    
    sections = validation_sections(content)
    
    assert sections[0].links == ("https://a.example", "https://b.example")


def test_validation_sections_reconstructs_text() -> None:
    """Test that spans plus markers reproduce the input exactly."""
    content = (
        "intro\n"
        "!!!https://github.com/o/r/issues/1,https://example.com/page\n"
        "  indented body  \n"
        "\n"
        "!!!\n"
        "middle\n"
        "!!!https://example.com/other\n"
        "second\n"
        "!!!\n"
        "outro\n"
    )
    
    rebuilt = []
    for section in validation_sections(content):
        if isinstance(section, PlainSpan):
            rebuilt.append(section.text)
        else:
            rebuilt.append(f"!!!{section.joined_links}{section.body}!!!")
    
    assert "".join(rebuilt) == content


def test_validation_sections_crlf_line_endings() -> None:
    """Test that Windows line endings close sections and survive intact."""
    content = "x\r\n!!!https://github.com/o/r/issues/1\r\nbody\r\n!!!\r\ny"

    sections = validation_sections(content)

    assert sections == [
        PlainSpan("x\r\n"),
        ConditionalSpan(links=("https://github.com/o/r/issues/1",), body="\r\nbody\r\n"),
        PlainSpan("\r\ny"),
    ]

    rebuilt = []
    for section in sections:
        if isinstance(section, PlainSpan):
            rebuilt.append(section.text)
        else:
            rebuilt.append(f"!!!{section.joined_links}{section.body}!!!")

    assert "".join(rebuilt) == content


def test_validation_sections_crlf_unterminated() -> None:
    with pytest.raises(UnterminatedSectionError):
        validation_sections("!!!https://example.com\r\nbody\r\n")


def test_validation_sections_undecodable_host() -> None:
    """Test that a host that fails IDNA decoding is reported as a bad link."""
    content = "intro\n!!!https://xn--/\nbody\n!!!"

    with pytest.raises(MalformedLinkError) as exc_info:
        validation_sections(content)

    assert exc_info.value.link == "https://xn--/"
    assert exc_info.value.line == 2


def test_validation_sections_unterminated() -> None:
    """Test that an opener without a closer aborts with its line number."""
    content = "one\ntwo\n!!!https://example.com\nnever closed\n"
    
    with pytest.raises(UnterminatedSectionError) as exc_info:
        validation_sections(content)
    
    assert exc_info.value.line == 3


def test_validation_sections_malformed_link() -> None:
    """Test that a non-URL link aborts the pass."""
    content = "!!!https://example.com,not a url\nbody\n!!!"
    
    with pytest.raises(MalformedLinkError) as exc_info:
        validation_sections(content)
    
    assert exc_info.value.link == "not a url"
    assert exc_info.value.line == 1


def test_validation_sections_empty_link_segment() -> None:
    with pytest.raises(MalformedLinkError):
        validation_sections("!!!https://example.com,\nbody\n!!!")


def test_conditional_span_requires_links() -> None:
    with pytest.raises(ValueError, match="at least one link"):
        ConditionalSpan(links=(), body="body")
