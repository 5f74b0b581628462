"""
Console email sender adapter - Implements EmailSender protocol.

This module provides a console-based implementation of the domain's
email sender port, logging outbound messages for demo purposes.
"""

import logging

from src.domain.ports import EmailMessage

logger = logging.getLogger(__name__)


class ConsoleEmailSender:
    """
    Implements EmailSender protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    For demo/development purposes - prints confirmation links to stdout.
    """

    def __init__(self, from_address: str = "no-reply@localhost") -> None:
        self.from_address = from_address

    def send(self, message: EmailMessage) -> None:
        """
        Log the message to console (simulates email delivery).

        In production, this would be replaced with an SMTP adapter.
        The message is logged at INFO level to be visible in docker-compose logs.

        Args:
            message: Recipient, subject and HTML body
        """
        logger.info(
            "[CONFIRMATION] From: %s To: %s Subject: %s Body: %s",
            self.from_address,
            message.to,
            message.subject,
            message.html,
        )
