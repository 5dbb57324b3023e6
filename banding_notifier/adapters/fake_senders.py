"""Fake sender adapters for local smoke tests.

Mental model refresher:
- This is outbound adapter code.
- In production, this is where the Telegram/SMTP calls live (see real_senders).
- Domain code calls these through injected functions; domain does not know which
  implementation is underneath.
"""

from __future__ import annotations

from typing import Any


def send_bot_message_via_console(*, token: str, chat_id: str, text: str, **_: Any) -> None:
    _ = token
    print("[BOT]")
    print(f"chat_id={chat_id}")
    print(f"text={text}")


def send_email_via_console(
    *, from_header: str, to_email: str, subject: str, html: str, **_: Any
) -> None:
    print("[EMAIL]")
    print(f"from={from_header}")
    print(f"to={to_email}")
    print(f"subject={subject}")
    print(f"html={html}")
