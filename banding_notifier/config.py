"""Configuration provider for channel secrets and tuning knobs.

Mental model refresher:
- Everything process-wide comes in through a lookup callable (`os.getenv` by
  default), so tests can hand in a plain `dict.get` instead of patching the
  real environment.
- Secrets are optional one by one; a channel decides for itself whether its
  subset is complete.
- Tuning knobs are kept raw here and parsed by each channel's transport
  helper, so a bad email knob fails only the email channel.
"""

from __future__ import annotations

import os
from typing import Any

from .types import ChannelConfig, ConfigLookup

DEFAULT_TELEGRAM_API_BASE_URL = "https://api.telegram.org"
DEFAULT_TELEGRAM_TIMEOUT_SECONDS = 10.0
DEFAULT_SMTP_HOST = "smtp.gmail.com"
DEFAULT_SMTP_PORT = 465
DEFAULT_SMTP_TIMEOUT_SECONDS = 15.0
DEFAULT_MIN_DIGITS = 12


def load_channel_config(lookup: ConfigLookup | None = None) -> ChannelConfig:
    """Read channel configuration through `lookup` (defaults to the environment)."""
    get = lookup if lookup is not None else os.getenv

    return {
        "tele_token": _optional(get("TELE_TOKEN")),
        "chat_id": _optional(get("CHAT_ID")),
        "email_user": _optional(get("EMAIL_USER")),
        "email_pass": _optional(get("EMAIL_PASS")),
        "target_email": _optional(get("TARGET_EMAIL")),
        "telegram_api_base_url": _optional(get("TELEGRAM_API_BASE_URL")),
        "telegram_timeout_seconds": _optional(get("TELEGRAM_TIMEOUT_SECONDS")),
        "smtp_host": _optional(get("SMTP_HOST")),
        "smtp_port": _optional(get("SMTP_PORT")),
        "smtp_timeout_seconds": _optional(get("SMTP_TIMEOUT_SECONDS")),
    }


def telegram_transport(config: ChannelConfig) -> tuple[str, float]:
    """Return `(base_url, timeout_seconds)` for the bot channel."""
    base_url = _optional(config.get("telegram_api_base_url")) or DEFAULT_TELEGRAM_API_BASE_URL
    timeout_seconds = _positive_float(
        config.get("telegram_timeout_seconds"),
        "TELEGRAM_TIMEOUT_SECONDS",
        DEFAULT_TELEGRAM_TIMEOUT_SECONDS,
    )
    return base_url.rstrip("/"), timeout_seconds


def smtp_transport(config: ChannelConfig) -> tuple[str, int, float]:
    """Return `(host, port, timeout_seconds)` for the email channel."""
    host = _optional(config.get("smtp_host")) or DEFAULT_SMTP_HOST
    port = _positive_int(config.get("smtp_port"), "SMTP_PORT", DEFAULT_SMTP_PORT)
    timeout_seconds = _positive_float(
        config.get("smtp_timeout_seconds"), "SMTP_TIMEOUT_SECONDS", DEFAULT_SMTP_TIMEOUT_SECONDS
    )
    return host, port, timeout_seconds


def min_digits_from(lookup: ConfigLookup | None = None) -> int:
    """Return the validation threshold for the cleaned number."""
    get = lookup if lookup is not None else os.getenv
    return _positive_int(get("BANDING_MIN_DIGITS"), "BANDING_MIN_DIGITS", DEFAULT_MIN_DIGITS)


def _optional(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _positive_int(value: Any, name: str, default: int) -> int:
    raw = _optional(value)
    if raw is None:
        return default
    try:
        parsed = int(raw)
    except ValueError as exc:
        raise RuntimeError(f"Invalid integer value for {name}: {raw!r}") from exc
    if parsed <= 0:
        raise RuntimeError(f"{name} must be > 0")
    return parsed


def _positive_float(value: Any, name: str, default: float) -> float:
    raw = _optional(value)
    if raw is None:
        return default
    try:
        parsed = float(raw)
    except ValueError as exc:
        raise RuntimeError(f"Invalid number value for {name}: {raw!r}") from exc
    if parsed <= 0:
        raise RuntimeError(f"{name} must be > 0")
    return parsed
