"""Email sender adapters."""

from .background import BackgroundEmailSender
from .console import ConsoleEmailSender

__all__ = ["BackgroundEmailSender", "ConsoleEmailSender"]
