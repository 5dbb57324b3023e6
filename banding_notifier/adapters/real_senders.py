"""Real provider adapters for production sending.

Mental model refresher:
- This module is an outbound adapter.
- It talks to the Telegram Bot API over HTTPS and to a mail relay over SMTP.
- Domain/application code only sees simple callable sender functions; every
  credential is passed in explicitly by the caller.
- Failures are raised as `RuntimeError` with context; the domain layer decides
  what a failure means for the request.
"""

from __future__ import annotations

import json
import smtplib
import ssl
import urllib.error
import urllib.request
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from ..config import (
    DEFAULT_SMTP_HOST,
    DEFAULT_SMTP_PORT,
    DEFAULT_SMTP_TIMEOUT_SECONDS,
    DEFAULT_TELEGRAM_API_BASE_URL,
    DEFAULT_TELEGRAM_TIMEOUT_SECONDS,
)

SMTP_SSL_PORT = 465


def send_bot_message_via_telegram(
    *,
    token: str,
    chat_id: str,
    text: str,
    base_url: str = DEFAULT_TELEGRAM_API_BASE_URL,
    timeout_seconds: float = DEFAULT_TELEGRAM_TIMEOUT_SECONDS,
) -> None:
    """Send a Markdown text message via the Telegram Bot API `sendMessage` method."""
    endpoint = f"{base_url.rstrip('/')}/bot{token}/sendMessage"
    payload = json.dumps(
        {"chat_id": chat_id, "text": text, "parse_mode": "Markdown"}
    ).encode("utf-8")

    request = urllib.request.Request(endpoint, data=payload, method="POST")
    request.add_header("Content-Type", "application/json")

    # Error text must not echo `endpoint`: the token is part of the path.
    try:
        with urllib.request.urlopen(request, timeout=timeout_seconds) as response:
            status = int(response.getcode())
            if status < 200 or status >= 300:
                raise RuntimeError(f"Telegram sendMessage failed with status {status}")
            response.read()
    except urllib.error.HTTPError as exc:
        details = exc.read().decode("utf-8", errors="replace")
        raise RuntimeError(
            f"Telegram sendMessage failed HTTP {exc.code}: {details[:300]}"
        ) from exc
    except urllib.error.URLError as exc:
        raise RuntimeError(f"Telegram sendMessage failed: {exc.reason}") from exc


def send_email_via_smtp(
    *,
    username: str,
    password: str,
    from_header: str,
    to_email: str,
    subject: str,
    html: str,
    host: str = DEFAULT_SMTP_HOST,
    port: int = DEFAULT_SMTP_PORT,
    timeout: float = DEFAULT_SMTP_TIMEOUT_SECONDS,
) -> None:
    """Send an HTML email through an authenticated SMTP relay.

    Port 465 uses implicit TLS; any other port upgrades with STARTTLS.
    """
    message = MIMEMultipart("alternative")
    message["Subject"] = subject
    message["From"] = from_header
    message["To"] = to_email
    message.attach(MIMEText(html, "html", "utf-8"))

    context = ssl.create_default_context()
    try:
        if port == SMTP_SSL_PORT:
            with smtplib.SMTP_SSL(host, port, timeout=timeout, context=context) as server:
                server.login(username, password)
                server.sendmail(username, [to_email], message.as_string())
        else:
            with smtplib.SMTP(host, port, timeout=timeout) as server:
                server.starttls(context=context)
                server.login(username, password)
                server.sendmail(username, [to_email], message.as_string())
    except smtplib.SMTPException as exc:
        raise RuntimeError(f"SMTP send via {host}:{port} failed: {exc}") from exc
    except OSError as exc:
        raise RuntimeError(f"SMTP connection to {host}:{port} failed: {exc}") from exc
