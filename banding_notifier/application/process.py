"""Application orchestration for notification channel execution.

Mental model refresher:
- Application layer coordinates use-case flow across domain modules.
- In this project it:
  1) calls bot-message domain logic
  2) calls email domain logic
  3) aggregates a single "at least one channel delivered" signal
- The two channels run one after the other and fail independently.
"""

from __future__ import annotations

import logging

from ..domain.bot import send_bot_notification
from ..domain.email import send_email_notification
from ..types import ChannelConfig, DispatchResult, SendBotMessageFn, SendEmailFn

logger = logging.getLogger(__name__)


def dispatch_notification(
    number: str,
    config: ChannelConfig,
    send_bot_message: SendBotMessageFn,
    send_email: SendEmailFn,
) -> DispatchResult:
    """Execute the notification use-case for one cleaned number."""
    bot_result = send_bot_notification(number, config, send_bot_message)
    email_result = send_email_notification(number, config, send_email)
    channel_results = [bot_result, email_result]

    for item in channel_results:
        if not item["configured"]:
            logger.warning("[SKIP] channel=%s note=%s", item["channel"], item["note"])
        elif not item["success"]:
            logger.error("[CHANNEL ERROR] channel=%s error=%s", item["channel"], item["error"])

    bot_success = bool(bot_result["success"])
    email_success = bool(email_result["success"])
    any_succeeded = bot_success or email_success
    notes = [item["note"] for item in channel_results if item["note"]]

    logger.info(
        "[DISPATCH] bot_success=%s email_success=%s notes=%s",
        bot_success,
        email_success,
        notes,
    )
    logger.debug("[DISPATCH] number=%s", number)

    return {
        "number": number,
        "bot_success": bot_success,
        "email_success": email_success,
        "any_succeeded": any_succeeded,
        "channel_results": channel_results,
        "notes": notes,
    }
