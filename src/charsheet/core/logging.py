"""Structured logging for the character sheet rules core.

The core emits few events: debug lines for each coin broken while making
change, warnings for lenient out-of-domain lookups, and info lines when a
coin update is rejected. Callers working on one sheet wrap their calls in
``sheet_context`` so those events carry the ruleset and character they
belong to.

Example:
    >>> from charsheet.core.logging import get_logger, sheet_context
    >>> logger = get_logger(__name__)
    >>> with sheet_context(ruleset="srd52", character_id="c-1"):
    ...     logger.info("Coins updated", delta_cp=-250)
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum
from typing import TYPE_CHECKING

import structlog
from structlog.types import Processor


if TYPE_CHECKING:
    from structlog.types import EventDict, WrappedLogger


def add_app_context(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Stamp the package name and normalise an enum ``ruleset`` to its id."""
    event_dict["app"] = "charsheet"
    ruleset = event_dict.get("ruleset")
    if isinstance(ruleset, Enum):
        event_dict["ruleset"] = ruleset.value
    return event_dict


def configure_logging(*, level: str = "INFO", json_format: bool = False) -> None:
    """Configure structlog for the process.

    Args:
        level: The logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_format: If True, output logs in JSON format for production.

    Example:
        >>> configure_logging(level="DEBUG", json_format=False)
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_context,
    ]

    if json_format:
        processors: list[Processor] = [*shared_processors, structlog.processors.JSONRenderer()]
    else:
        processors = [*shared_processors, structlog.dev.ConsoleRenderer(colors=True)]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level.upper(), logging.INFO)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_from_settings() -> None:
    """Configure logging from the application settings."""
    from charsheet.core.config import get_settings

    settings = get_settings()
    configure_logging(level=settings.log_level, json_format=settings.log_json)


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structlog logger, typically for ``__name__``."""
    return structlog.get_logger(name)


@contextmanager
def sheet_context(
    *,
    ruleset: Enum | str | None = None,
    character_id: str | None = None,
) -> Iterator[None]:
    """Tag every event logged inside the block with the sheet it concerns.

    Only the values given are bound, and whatever was bound before is
    restored on exit, so contexts nest.

    Args:
        ruleset: Ruleset the sheet is built under.
        character_id: Identifier of the character sheet.

    Example:
        >>> with sheet_context(ruleset="srd51"):
        ...     structlog.contextvars.get_contextvars()["ruleset"]
        'srd51'
    """
    context: dict[str, str] = {}
    if ruleset is not None:
        context["ruleset"] = ruleset.value if isinstance(ruleset, Enum) else ruleset
    if character_id is not None:
        context["character_id"] = character_id
    with structlog.contextvars.bound_contextvars(**context):
        yield


__all__ = [
    "add_app_context",
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "sheet_context",
]
