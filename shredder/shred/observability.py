"""Structured log events for the shredding lifecycle.

Usage
-----
>>> event_logger = ShredEventLogger()
>>> event_logger.log_shred_started(event_id="e1")

"""

from __future__ import annotations

import enum
import typing as typ

from shredder.logging import get_logger, log_debug, log_info, log_warning

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .errors import ShredError
    from .models import ShreddedPair

logger = get_logger(__name__)


class ShredEventType(enum.StrEnum):
    """Structured log event types for one event's shred run."""

    SHRED_STARTED = "shred.event.started"
    SHRED_COMPLETED = "shred.event.completed"
    SHRED_FAILED = "shred.event.failed"


class ShredEventLogger:
    """Emit structured shred events via femtologging."""

    def log_shred_started(self, *, event_id: str) -> None:
        """Log the start of shredding for one event."""
        log_debug(logger, "[%s] event_id=%s", ShredEventType.SHRED_STARTED, event_id)

    def log_shred_completed(
        self, *, event_id: str, pairs: cabc.Sequence[ShreddedPair]
    ) -> None:
        """Log a successful shred with the number of rows per table."""
        tables = sorted({pair.table for pair in pairs})
        log_info(
            logger,
            "[%s] event_id=%s pair_count=%d tables=%s",
            ShredEventType.SHRED_COMPLETED,
            event_id,
            len(pairs),
            ",".join(tables),
        )

    def log_shred_failed(
        self, *, event_id: str, errors: cabc.Sequence[ShredError]
    ) -> None:
        """Log a failed shred with the error count and categories.

        Parameters
        ----------
        event_id
            Identifier of the event that failed to shred.
        errors
            Every error found in the event.

        """
        kinds = sorted({str(error.kind) for error in errors})
        log_warning(
            logger,
            "[%s] event_id=%s error_count=%d kinds=%s first_error=%s",
            ShredEventType.SHRED_FAILED,
            event_id,
            len(errors),
            ",".join(kinds),
            errors[0] if errors else None,
        )
