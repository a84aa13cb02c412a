"""
Error handling module for command operations.

This module provides centralized error handling with user-facing
messages and detailed error logging with unique error IDs.
"""

import logging
import typer
from stamplog.core.exceptions import StampLogError

logger = logging.getLogger(__name__)


def handle_error(error: Exception, context: str = "") -> None:
    """
    Report a failed command and exit with status 1.

    Expected domain errors (StampLogError) are shown with their
    user-facing message and logged at WARNING. Anything else gets a
    unique error ID, a full traceback in the log file, and a short
    message on stderr referencing the ID.

    Args:
        error: Exception instance that was raised
        context: Optional context description (e.g., "while exporting")
            to help identify error source

    Raises:
        typer.Exit: always, with exit code 1

    Example:
        >>> try:
        ...     exporter.export()
        ... except Exception as e:
        ...     handle_error(e, "while exporting")
    """
    if isinstance(error, StampLogError):
        logger.warning(f"{type(error).__name__} {context}: {error.internal_details}")
        typer.secho(error.user_message, err=True, fg=typer.colors.YELLOW)
        raise typer.Exit(code=1)

    # Generate unique 6-digit error ID from exception hash for tracking
    error_id = f"ERR-{hash(error) % 1000000:06d}"

    # Log full error with traceback for debugging
    logger.error(
        f"[{error_id}] Error {context}\n"
        f"Type: {type(error).__name__}\n"
        f"Details: {str(error)}",
        exc_info=error
    )

    typer.secho(
        f"An error occurred {context}. Error ID: {error_id}\n"
        "Details have been written to the log file.",
        err=True,
        fg=typer.colors.RED,
    )
    raise typer.Exit(code=1)
