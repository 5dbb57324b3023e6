"""Compatibility facade for notification functions.

Module layout by abstraction layer:
- adapters: payload cleaning, HTTP transport and sender adapters
- domain: bot/email decision logic
- application: orchestration across channels
"""

from .adapters.fake_senders import send_bot_message_via_console, send_email_via_console
from .adapters.http_app import create_app
from .adapters.payload import InvalidNumberError, clean_phone_number, parse_submission
from .adapters.real_senders import send_bot_message_via_telegram, send_email_via_smtp
from .application.process import dispatch_notification
from .config import load_channel_config, min_digits_from
from .domain.bot import send_bot_notification
from .domain.email import send_email_notification

__all__ = [
    "InvalidNumberError",
    "clean_phone_number",
    "create_app",
    "dispatch_notification",
    "load_channel_config",
    "min_digits_from",
    "parse_submission",
    "send_bot_message_via_console",
    "send_bot_message_via_telegram",
    "send_bot_notification",
    "send_email_notification",
    "send_email_via_console",
    "send_email_via_smtp",
]
