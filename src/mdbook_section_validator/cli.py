"""CLI entry point for the section validator preprocessor."""

import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Optional, TextIO

import structlog
import typer

from mdbook_section_validator.adapters.validators import GitHubIssueValidator
from mdbook_section_validator.config import get_settings, settings_from_context
from mdbook_section_validator.core import SectionValidatorError
from mdbook_section_validator.log import configure_logging
from mdbook_section_validator.use_cases import ValidatorProcessor

logger = structlog.get_logger(__name__)

# mdbook release line the book JSON layout was written against
MDBOOK_VERSION = "0.4"

app = typer.Typer(
    add_completion=False,
    help="A preprocessor that validates sections that could change in the future.",
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Read [context, book] JSON from stdin and write the processed book to stdout."""
    # Standalone runs print the result; keep stderr to warnings unless asked
    configure_logging(verbose=verbose, quiet=ctx.invoked_subcommand == "process")
    if ctx.invoked_subcommand is not None:
        return

    try:
        asyncio.run(handle_preprocessing(sys.stdin, sys.stdout))
    except (SectionValidatorError, ValueError) as e:
        logger.error("Preprocessing failed", error=str(e))
        raise typer.Exit(code=1)


@app.command()
def supports(renderer: str = typer.Argument(..., help="Renderer name")) -> None:
    """Check whether a renderer is supported by this preprocessor."""
    processor = ValidatorProcessor(GitHubIssueValidator())
    raise typer.Exit(code=0 if processor.supports_renderer(renderer) else 1)


@app.command()
def process(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Markdown file"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write here instead of stdout"),
) -> None:
    """Validate the sections of a single Markdown file."""
    settings = get_settings(config)
    processor = ValidatorProcessor(GitHubIssueValidator(settings))

    try:
        content = asyncio.run(
            processor.process_chapter(path.read_text(encoding="utf-8"), settings.options)
        )
    except SectionValidatorError as e:
        logger.error("Processing failed", path=str(path), error=str(e))
        raise typer.Exit(code=1)

    if output is None:
        sys.stdout.write(content)
    else:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(content, encoding="utf-8")
        logger.info("Wrote processed file", path=str(output))


async def handle_preprocessing(
    stdin: TextIO,
    stdout: TextIO,
    processor: Optional[ValidatorProcessor] = None,
) -> None:
    """Run the mdbook preprocessor protocol over the given streams."""
    context, book = parse_input(stdin)
    check_version(context)

    settings = settings_from_context(context)
    if processor is None:
        processor = ValidatorProcessor(GitHubIssueValidator(settings))

    processed_book = await processor.run(book, settings.options)
    json.dump(processed_book, stdout, ensure_ascii=False)


def parse_input(stdin: TextIO) -> tuple[dict[str, Any], dict[str, Any]]:
    """Parse the `[context, book]` pair mdbook sends on stdin."""
    data = json.load(stdin)
    if (
        not isinstance(data, list)
        or len(data) != 2
        or not isinstance(data[0], dict)
        or not isinstance(data[1], dict)
    ):
        raise ValueError("expected a JSON array of [context, book] on stdin")
    return data[0], data[1]


def check_version(context: dict[str, Any]) -> None:
    """Warn when called from an mdbook release other than the one we target."""
    version = str(context.get("mdbook_version", ""))
    if version.split(".")[:2] != MDBOOK_VERSION.split("."):
        logger.warning(
            "Plugin was built for a different mdbook version",
            plugin=ValidatorProcessor.name,
            built_against=MDBOOK_VERSION,
            called_from=version,
        )


if __name__ == "__main__":
    app()
