import threading
import time
import unittest
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from unittest.mock import Mock, patch

import requests

from status_checker.checks.http_check import run_http
from status_checker.checks.results import Failure, Success


class _SlowBodyHandler(BaseHTTPRequestHandler):
    body_delay_s = 1.0

    def do_GET(self) -> None:
        self.send_response(200)
        self.send_header("Content-Length", "5")
        self.end_headers()
        time.sleep(self.body_delay_s)
        try:
            self.wfile.write(b"hello")
        except OSError:
            pass

    def log_message(self, format, *args) -> None:
        pass


class HttpCheckTests(unittest.TestCase):
    def test_timeout_pair_and_outcome(self) -> None:
        cases = [
            ({}, (3, 3)),
            ({"connect_timeout_s": 9.0}, (9.0, 3)),
        ]
        for kwargs, expected_timeout in cases:
            response = Mock(status_code=301)
            with patch(
                "status_checker.checks.http_check.requests.get", return_value=response
            ) as mock_get:
                res = run_http("http://example.local/health", timeout_s=3, **kwargs)

            mock_get.assert_called_once_with(
                "http://example.local/health", timeout=expected_timeout, stream=True
            )
            response.close.assert_called_once_with()
            self.assertIsInstance(res.outcome, Success)
            self.assertEqual(res.outcome.status_code, 301)
            self.assertGreaterEqual(res.latency_ms, 0)

    def test_run_http_uses_given_session(self) -> None:
        session = Mock()
        session.get.return_value = Mock(status_code=204)
        with patch("status_checker.checks.http_check.requests.get") as mock_get:
            res = run_http("http://example.local/", timeout_s=2, session=session)

        mock_get.assert_not_called()
        session.get.assert_called_once_with("http://example.local/", timeout=(2, 2), stream=True)
        self.assertEqual(res.outcome, Success(204))

    def test_slow_body_after_prompt_headers_is_success(self) -> None:
        server = ThreadingHTTPServer(("127.0.0.1", 0), _SlowBodyHandler)
        thread = threading.Thread(target=server.serve_forever, daemon=True)
        thread.start()
        try:
            host, port = server.server_address[:2]
            res = run_http(f"http://{host}:{port}/", timeout_s=0.3)
        finally:
            server.shutdown()
            server.server_close()

        self.assertEqual(res.outcome, Success(200))
        self.assertLess(res.latency_ms, 1000)

    def test_error_status_is_passed_through_as_success(self) -> None:
        for code in (404, 500, 503):
            with patch(
                "status_checker.checks.http_check.requests.get",
                return_value=Mock(status_code=code),
            ):
                res = run_http("http://example.local/missing", timeout_s=1)
            self.assertEqual(res.outcome, Success(code))

    def test_connection_error_is_failure(self) -> None:
        with patch(
            "status_checker.checks.http_check.requests.get",
            side_effect=requests.ConnectionError("connection refused"),
        ):
            res = run_http("http://example.local/", timeout_s=1)

        self.assertIsInstance(res.outcome, Failure)
        self.assertIn("connection refused", res.outcome.message)

    def test_timeout_is_failure(self) -> None:
        with patch(
            "status_checker.checks.http_check.requests.get",
            side_effect=requests.Timeout("read timed out"),
        ):
            res = run_http("http://example.local/slow", timeout_s=1)

        self.assertEqual(res.outcome, Failure("read timed out"))

    def test_empty_exception_message_falls_back_to_class_name(self) -> None:
        with patch(
            "status_checker.checks.http_check.requests.get",
            side_effect=requests.ConnectionError(),
        ):
            res = run_http("http://example.local/", timeout_s=1)

        self.assertEqual(res.outcome, Failure("ConnectionError"))

    def test_malformed_urls_fail_without_network(self) -> None:
        for url in ("", "not a url", "ftp//missing-colon"):
            res = run_http(url, timeout_s=1)
            self.assertIsInstance(res.outcome, Failure, url)
            self.assertTrue(res.outcome.message)

    def test_unexpected_errors_propagate(self) -> None:
        with patch(
            "status_checker.checks.http_check.requests.get",
            side_effect=KeyError("boom"),
        ):
            with self.assertRaises(KeyError):
                run_http("http://example.local/", timeout_s=1)


if __name__ == "__main__":
    unittest.main()
