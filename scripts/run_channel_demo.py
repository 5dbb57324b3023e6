#!/usr/bin/env python3
"""Run the dispatch flow locally with console senders.

Nothing leaves the machine: both channels print what they would send. Pass
`--no-bot` or `--no-email` to see how a missing channel config is handled.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Allow running this file directly from repository root.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from banding_notifier.channels import (  # noqa: E402
    InvalidNumberError,
    dispatch_notification,
    load_channel_config,
    min_digits_from,
    parse_submission,
    send_bot_message_via_console,
    send_email_via_console,
)


def main() -> int:
    args = parse_args()
    settings = demo_settings(args)
    config = load_channel_config(settings.get)

    try:
        number = parse_submission({"nomor": args.nomor}, min_digits=min_digits_from(settings.get))
    except InvalidNumberError as exc:
        print(f"[REJECTED] {exc}")
        return 2

    result = dispatch_notification(
        number,
        config,
        send_bot_message=send_bot_message_via_console,
        send_email=send_email_via_console,
    )

    print("")
    print("[SUMMARY]")
    print(f"number={result['number']}")
    for item in result["channel_results"]:
        print(
            f"channel={item['channel']} configured={item['configured']} "
            f"success={item['success']} note={item['note']}"
        )
    print(f"any_succeeded={result['any_succeeded']}")
    return 0 if result["any_succeeded"] else 1


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Execute bot/email channel logic with console senders."
    )
    parser.add_argument("--nomor", default="+62 812-3456-7890")
    parser.add_argument("--no-bot", action="store_true", help="Leave bot config empty.")
    parser.add_argument("--no-email", action="store_true", help="Leave email config empty.")
    return parser.parse_args()


def demo_settings(args: argparse.Namespace) -> dict[str, str]:
    settings: dict[str, str] = {}
    if not args.no_bot:
        settings |= {"TELE_TOKEN": "demo-token", "CHAT_ID": "-100123"}
    if not args.no_email:
        settings |= {
            "EMAIL_USER": "sender@example.com",
            "EMAIL_PASS": "demo-pass",
            "TARGET_EMAIL": "support@example.com",
        }
    return settings


if __name__ == "__main__":
    sys.exit(main())
