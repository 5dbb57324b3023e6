"""HTTP adapter: the single form-submission endpoint.

Mental model refresher:
- This is the controller-like entrypoint for the web form.
- Flow:
  request -> method check -> payload adapter -> application use-case -> JSON response
- It owns transport behavior (status codes, response bodies), not channel
  business rules. Dispatch notes and error details stay in the server log.
"""

from __future__ import annotations

import logging
from typing import Any

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException, MethodNotAllowed

from ..application.process import dispatch_notification
from ..config import load_channel_config, min_digits_from
from ..types import ConfigLookup, SendBotMessageFn, SendEmailFn
from .payload import InvalidNumberError, parse_submission
from .real_senders import send_bot_message_via_telegram, send_email_via_smtp

logger = logging.getLogger(__name__)

ROUTES = ("/api/kirim", "/")
ROUTED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

MESSAGE_METHOD_NOT_ALLOWED = "Method Not Allowed. Hanya POST."
MESSAGE_SUCCESS = "Pengiriman notifikasi berhasil (minimal salah satu)."
MESSAGE_TOTAL_FAILURE = "Gagal total mengirim ke Telegram dan Email. Cek log server."
MESSAGE_INTERNAL_ERROR = "Terjadi kesalahan pada server. Cek log server."


def create_app(
    *,
    config_lookup: ConfigLookup | None = None,
    send_bot_message: SendBotMessageFn | None = None,
    send_email: SendEmailFn | None = None,
) -> Flask:
    """Build the Flask app; every collaborator can be swapped for tests."""
    app = Flask(__name__)
    bot_sender = send_bot_message or send_bot_message_via_telegram
    email_sender = send_email or send_email_via_smtp

    def kirim() -> Any:
        if request.method != "POST":
            return _json_response(False, MESSAGE_METHOD_NOT_ALLOWED, 405)

        try:
            number = parse_submission(
                _get_request_payload(), min_digits=min_digits_from(config_lookup)
            )
        except InvalidNumberError as exc:
            logger.info("[REJECTED] reason=invalid_number min_digits=%s", exc.min_digits)
            return _json_response(False, str(exc), 400)

        # Read per request; nothing is cached on the app.
        config = load_channel_config(config_lookup)
        result = dispatch_notification(
            number,
            config,
            send_bot_message=bot_sender,
            send_email=email_sender,
        )

        if result["any_succeeded"]:
            return _json_response(True, MESSAGE_SUCCESS, 200)
        return _json_response(False, MESSAGE_TOTAL_FAILURE, 500)

    for rule in ROUTES:
        app.add_url_rule(rule, endpoint=f"kirim:{rule}", view_func=kirim, methods=ROUTED_METHODS)

    @app.errorhandler(MethodNotAllowed)
    def handle_unrouted_method(exc: MethodNotAllowed) -> Any:
        return _json_response(False, MESSAGE_METHOD_NOT_ALLOWED, 405)

    @app.errorhandler(HTTPException)
    def handle_http_error(exc: HTTPException) -> Any:
        return _json_response(False, exc.description or exc.name, exc.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected_error(exc: Exception) -> Any:
        logger.exception("[HANDLER ERROR] error=%s", exc)
        return _json_response(False, MESSAGE_INTERNAL_ERROR, 500)

    return app


def _get_request_payload() -> dict[str, Any]:
    payload = request.get_json(silent=True)
    if isinstance(payload, dict):
        return payload
    if request.form:
        return request.form.to_dict()
    return {}


def _json_response(success: bool, message: str, status: int) -> Any:
    return jsonify({"success": success, "message": message}), status
