"""Shared type aliases for the banding notifier package."""

from __future__ import annotations

from typing import Any, Callable, Mapping

Payload = Mapping[str, Any]
ChannelConfig = dict[str, Any]
ChannelResult = dict[str, Any]
DispatchResult = dict[str, Any]

ConfigLookup = Callable[[str], "str | None"]
SendBotMessageFn = Callable[..., None]
SendEmailFn = Callable[..., None]
