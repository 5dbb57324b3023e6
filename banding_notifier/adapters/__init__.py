"""Adapter layer: request mapping, HTTP transport and sender implementations."""

from .fake_senders import send_bot_message_via_console, send_email_via_console
from .http_app import create_app
from .payload import InvalidNumberError, clean_phone_number, parse_submission
from .real_senders import send_bot_message_via_telegram, send_email_via_smtp

__all__ = [
    "InvalidNumberError",
    "clean_phone_number",
    "create_app",
    "parse_submission",
    "send_bot_message_via_console",
    "send_bot_message_via_telegram",
    "send_email_via_console",
    "send_email_via_smtp",
]
