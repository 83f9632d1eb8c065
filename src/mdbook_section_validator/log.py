"""structlog setup.

mdbook reads the processed book from stdout, so every log line goes to stderr.
"""

import logging
import sys

import structlog

PACKAGE_LOGGER = "mdbook_section_validator"


def log_level(*, verbose: bool = False, quiet: bool = False) -> int:
    """DEBUG with --verbose, WARNING for quiet runs, INFO otherwise."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def configure_logging(*, verbose: bool = False, quiet: bool = False) -> None:
    """Render this package's structlog events to stderr.

    Args:
        verbose: Also show each link check (DEBUG). Wins over ``quiet``.
        quiet: Only show warnings and errors, e.g. for standalone file runs.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers[:] = [handler]
    package_logger.setLevel(log_level(verbose=verbose, quiet=quiet))
    package_logger.propagate = False

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
