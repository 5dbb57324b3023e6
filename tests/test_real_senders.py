from __future__ import annotations

import io
import json
import smtplib
import unittest
import urllib.error
from unittest import mock

from banding_notifier.adapters.real_senders import (
    send_bot_message_via_telegram,
    send_email_via_smtp,
)


def email_kwargs(**overrides: object) -> dict[str, object]:
    base: dict[str, object] = {
        "username": "sender@example.com",
        "password": "app-password",
        "from_header": "Notifikasi WA Banding <sender@example.com>",
        "to_email": "support@example.com",
        "subject": "[URGENT] Permintaan Banding WhatsApp Baru: 628123456789",
        "html": "<p>628123456789</p>",
        "host": "smtp.gmail.com",
        "port": 465,
        "timeout": 15.0,
    }
    return base | overrides


class TelegramAdapterTests(unittest.TestCase):
    @mock.patch("banding_notifier.adapters.real_senders.urllib.request.urlopen")
    def test_send_bot_message_via_telegram_posts_json(self, urlopen_mock: mock.Mock) -> None:
        response = urlopen_mock.return_value.__enter__.return_value
        response.getcode.return_value = 200
        response.read.return_value = b'{"ok":true}'

        send_bot_message_via_telegram(
            token="123:abc",
            chat_id="-100987",
            text="hello `628123456789`",
            timeout_seconds=5,
        )

        request_obj = urlopen_mock.call_args.args[0]
        self.assertEqual(request_obj.full_url, "https://api.telegram.org/bot123:abc/sendMessage")
        self.assertEqual(request_obj.get_method(), "POST")
        self.assertEqual(request_obj.get_header("Content-type"), "application/json")
        self.assertEqual(urlopen_mock.call_args.kwargs["timeout"], 5)

        body = json.loads((request_obj.data or b"").decode("utf-8"))
        self.assertEqual(
            body,
            {"chat_id": "-100987", "text": "hello `628123456789`", "parse_mode": "Markdown"},
        )

    @mock.patch("banding_notifier.adapters.real_senders.urllib.request.urlopen")
    def test_send_bot_message_via_telegram_surfaces_http_error(
        self, urlopen_mock: mock.Mock
    ) -> None:
        urlopen_mock.side_effect = urllib.error.HTTPError(
            url="https://api.telegram.org/bot123:abc/sendMessage",
            code=401,
            msg="Unauthorized",
            hdrs=None,
            fp=io.BytesIO(b'{"ok":false,"description":"Unauthorized"}'),
        )

        with self.assertRaises(RuntimeError) as exc:
            send_bot_message_via_telegram(token="123:abc", chat_id="-100987", text="x")

        self.assertIn("HTTP 401", str(exc.exception))
        self.assertNotIn("123:abc", str(exc.exception))

    @mock.patch("banding_notifier.adapters.real_senders.urllib.request.urlopen")
    def test_send_bot_message_via_telegram_surfaces_network_error(
        self, urlopen_mock: mock.Mock
    ) -> None:
        urlopen_mock.side_effect = urllib.error.URLError("connection refused")

        with self.assertRaises(RuntimeError) as exc:
            send_bot_message_via_telegram(token="123:abc", chat_id="-100987", text="x")

        self.assertIn("connection refused", str(exc.exception))


class SmtpAdapterTests(unittest.TestCase):
    @mock.patch("banding_notifier.adapters.real_senders.smtplib.SMTP_SSL")
    def test_send_email_via_smtp_uses_implicit_tls_on_465(self, smtp_ssl_mock: mock.Mock) -> None:
        server = smtp_ssl_mock.return_value.__enter__.return_value

        send_email_via_smtp(**email_kwargs())

        self.assertEqual(smtp_ssl_mock.call_args.args, ("smtp.gmail.com", 465))
        self.assertEqual(smtp_ssl_mock.call_args.kwargs["timeout"], 15.0)
        server.login.assert_called_once_with("sender@example.com", "app-password")
        from_addr, to_addrs, raw_message = server.sendmail.call_args.args
        self.assertEqual(from_addr, "sender@example.com")
        self.assertEqual(to_addrs, ["support@example.com"])
        self.assertIn("Subject: [URGENT] Permintaan Banding WhatsApp Baru", raw_message)
        self.assertIn("text/html", raw_message)

    @mock.patch("banding_notifier.adapters.real_senders.smtplib.SMTP")
    def test_send_email_via_smtp_uses_starttls_on_other_ports(self, smtp_mock: mock.Mock) -> None:
        server = smtp_mock.return_value.__enter__.return_value

        send_email_via_smtp(**email_kwargs(host="smtp.example.com", port=587))

        self.assertEqual(smtp_mock.call_args.args, ("smtp.example.com", 587))
        server.starttls.assert_called_once()
        server.login.assert_called_once_with("sender@example.com", "app-password")
        server.sendmail.assert_called_once()

    @mock.patch("banding_notifier.adapters.real_senders.smtplib.SMTP_SSL")
    def test_send_email_via_smtp_surfaces_auth_error(self, smtp_ssl_mock: mock.Mock) -> None:
        server = smtp_ssl_mock.return_value.__enter__.return_value
        server.login.side_effect = smtplib.SMTPAuthenticationError(535, b"Bad credentials")

        with self.assertRaises(RuntimeError) as exc:
            send_email_via_smtp(**email_kwargs())

        self.assertIn("smtp.gmail.com:465", str(exc.exception))
        self.assertNotIn("app-password", str(exc.exception))

    @mock.patch("banding_notifier.adapters.real_senders.smtplib.SMTP_SSL")
    def test_send_email_via_smtp_surfaces_connection_error(
        self, smtp_ssl_mock: mock.Mock
    ) -> None:
        smtp_ssl_mock.side_effect = ConnectionRefusedError("refused")

        with self.assertRaises(RuntimeError) as exc:
            send_email_via_smtp(**email_kwargs())

        self.assertIn("connection", str(exc.exception))


if __name__ == "__main__":
    unittest.main()
