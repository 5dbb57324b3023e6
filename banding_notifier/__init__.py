"""WhatsApp appeal form notifier: one endpoint, two best-effort channels."""

from .channels import (
    InvalidNumberError,
    clean_phone_number,
    create_app,
    dispatch_notification,
    load_channel_config,
    min_digits_from,
    parse_submission,
    send_bot_message_via_console,
    send_bot_message_via_telegram,
    send_bot_notification,
    send_email_notification,
    send_email_via_console,
    send_email_via_smtp,
)

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
