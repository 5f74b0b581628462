"""
Background email sender - defers delivery until after the response.

Wraps another EmailSender and schedules each message on FastAPI's
BackgroundTasks, so the HTTP response of a registration never waits on,
or fails because of, mail delivery.
"""

import logging

from fastapi import BackgroundTasks

from src.domain.ports import EmailMessage, EmailSender

logger = logging.getLogger(__name__)


class BackgroundEmailSender:
    """Implements EmailSender protocol by scheduling delivery as a background task."""

    def __init__(self, background_tasks: BackgroundTasks, delegate: EmailSender) -> None:
        self._background_tasks = background_tasks
        self._delegate = delegate

    def send(self, message: EmailMessage) -> None:
        self._background_tasks.add_task(self._deliver, message)

    def _deliver(self, message: EmailMessage) -> None:
        try:
            self._delegate.send(message)
        except Exception:
            logger.exception("Background delivery to %s failed", message.to)
