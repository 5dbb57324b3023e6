"""Email channel decision logic.

Mental model refresher:
- Domain modules hold channel/business rules.
- They decide what should happen for this channel:
  - is the channel configured?
  - what subject and body should be sent?
  - what does a failure mean for the request?
- They do not parse HTTP requests or build responses.
"""

from __future__ import annotations

from ..config import smtp_transport
from ..types import ChannelConfig, ChannelResult, SendEmailFn

NOTE_CONFIG_MISSING = "Email Config Missing (Diabaikan jika hanya menggunakan Telegram)."
NOTE_FAILED = "Email Gagal. Cek log server untuk detailnya."

SENDER_NAME = "Notifikasi WA Banding"


def build_email_subject(number: str) -> str:
    return f"[URGENT] Permintaan Banding WhatsApp Baru: {number}"


def build_email_html(number: str) -> str:
    return f"""
    <h2>Permintaan Banding WhatsApp Baru</h2>
    <p>Telah diterima permintaan banding baru dari website.</p>
    <p><strong>Nomor WhatsApp:</strong> {number}</p>
    <p><strong>Pesan Banding Otomatis:</strong></p>
    <pre style="background: #f4f4f4; padding: 10px; border: 1px solid #ddd;">
      Kepada WhatsApp Support,

      Saya mengalami masalah saat login akun WhatsApp.
      Pesan yang muncul: "Login not available"
      Nomor saya: {number}
      Mohon bantuan dan konfirmasinya.
      Terima kasih.

      — Dikirim via Web Banding WhatsApp
    </pre>
"""


def send_email_notification(
    number: str,
    config: ChannelConfig,
    send_email: SendEmailFn,
) -> ChannelResult:
    """Run email-channel rules and return a plain channel result dictionary."""
    username = config.get("email_user")
    password = config.get("email_pass")
    target_email = config.get("target_email")
    if not (username and password and target_email):
        return {
            "channel": "email",
            "configured": False,
            "success": False,
            "error": None,
            "note": NOTE_CONFIG_MISSING,
        }

    try:
        host, port, timeout = smtp_transport(config)
        send_email(
            username=username,
            password=password,
            from_header=f"{SENDER_NAME} <{username}>",
            to_email=target_email,
            subject=build_email_subject(number),
            html=build_email_html(number),
            host=host,
            port=port,
            timeout=timeout,
        )
    except Exception as exc:
        return {
            "channel": "email",
            "configured": True,
            "success": False,
            "error": str(exc),
            "note": NOTE_FAILED,
        }

    return {"channel": "email", "configured": True, "success": True, "error": None, "note": None}
