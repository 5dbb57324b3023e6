"""Bot-message channel decision logic.

Mental model refresher:
- Domain modules hold channel/business rules.
- They decide what should happen for this channel:
  - is the channel configured?
  - what message content should be sent?
  - what does a failure mean for the request?
- They do not parse HTTP requests or build responses.
"""

from __future__ import annotations

from ..config import telegram_transport
from ..types import ChannelConfig, ChannelResult, SendBotMessageFn

NOTE_CONFIG_MISSING = "Telegram Config Missing (Diabaikan jika hanya menggunakan Email)."
NOTE_FAILED = "Telegram Gagal."


def build_bot_text(number: str) -> str:
    return f"[PEMBERITAHUAN BARU] Permintaan Banding\nNomor: `{number}`"


def send_bot_notification(
    number: str,
    config: ChannelConfig,
    send_bot_message: SendBotMessageFn,
) -> ChannelResult:
    """Run bot-channel rules and return a plain channel result dictionary."""
    token = config.get("tele_token")
    chat_id = config.get("chat_id")
    if not (token and chat_id):
        return {
            "channel": "bot",
            "configured": False,
            "success": False,
            "error": None,
            "note": NOTE_CONFIG_MISSING,
        }

    try:
        base_url, timeout_seconds = telegram_transport(config)
        send_bot_message(
            token=token,
            chat_id=chat_id,
            text=build_bot_text(number),
            base_url=base_url,
            timeout_seconds=timeout_seconds,
        )
    except Exception as exc:
        return {
            "channel": "bot",
            "configured": True,
            "success": False,
            "error": str(exc),
            "note": NOTE_FAILED,
        }

    return {"channel": "bot", "configured": True, "success": True, "error": None, "note": None}
