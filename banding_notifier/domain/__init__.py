"""Domain layer: channel-specific decision logic."""

from .bot import send_bot_notification
from .email import send_email_notification

__all__ = [
    "send_bot_notification",
    "send_email_notification",
]
