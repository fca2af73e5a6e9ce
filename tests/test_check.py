import unittest
from unittest.mock import MagicMock, patch
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import requests

from fakes import make_response
from oneview_check.check import check_alerts
from oneview_check.errors import AuthenticationError, HttpError, InvariantError
from oneview_check.models import Status

HOST = "oneview.example.test"

class FakeOneView:
    """Routes requests by method and path, recording every call."""

    def __init__(self, login=None, alerts=None, logout=None):
        if login is None:
            login = make_response(200, headers={"sessionID": "LTE4NjA1MTEy"})
        if alerts is None:
            alerts = make_response(200, body={"count": 0, "members": []})
        if logout is None:
            logout = make_response(204)
        self.routes = {
            ("POST", "login-sessions"): login,
            ("GET", "alerts"): alerts,
            ("DELETE", "login-sessions"): logout,
        }
        self.calls = []

    def __call__(self, method, url, **kwargs):
        path = url.split("/rest/", 1)[1]
        self.calls.append((method, path))
        result = self.routes[(method, path)]
        if isinstance(result, Exception):
            raise result
        return result

class TestCheckAlerts(unittest.TestCase):
    def run_check(self, fake, **kwargs):
        client = MagicMock()
        client.request.side_effect = fake
        with patch('oneview_check.check.build_client', return_value=client) as mock_build:
            verdict = check_alerts(HOST, "monitor", "s3cret", **kwargs)
        return verdict, client, mock_build

    def test_no_alerts(self):
        fake = FakeOneView()
        verdict, client, _ = self.run_check(fake)

        self.assertEqual(verdict.status, Status.OK)
        self.assertEqual(verdict.message, "No uncleared alerts found")
        self.assertEqual(fake.calls, [("POST", "login-sessions"), ("GET", "alerts"), ("DELETE", "login-sessions")])
        client.close.assert_called_once()

    def test_critical_alerts(self):
        body = {"count": 5, "members": [{"severity": s} for s in ("critical", "ok", "warning", "critical", "ok")]}
        verdict, _, _ = self.run_check(FakeOneView(alerts=make_response(200, body=body)))

        self.assertEqual(verdict.status, Status.CRITICAL)
        self.assertEqual(verdict.message, "2 critical alerts found, 1 warning alerts found, 2 harmless alerts found")

    def test_client_config_is_passed_through(self):
        _, _, mock_build = self.run_check(FakeOneView(), ca_certificate=b"PEM", insecure=True)

        config = mock_build.call_args.args[0]
        self.assertEqual(config.target_host, HOST)
        self.assertEqual(config.ca_certificate, b"PEM")
        self.assertTrue(config.insecure_mode)

    def test_failed_login_stops_pipeline(self):
        fake = FakeOneView(login=make_response(200))

        with self.assertRaises(AuthenticationError):
            self.run_check(fake)
        # no alert fetch, and no session to release
        self.assertEqual(fake.calls, [("POST", "login-sessions")])

    def test_logout_failure_does_not_change_verdict(self):
        body = {"count": 1, "members": [{"severity": "Warning"}]}
        fake = FakeOneView(alerts=make_response(200, body=body), logout=requests.ConnectionError("gone"))

        verdict, _, _ = self.run_check(fake)

        self.assertEqual(verdict.status, Status.WARNING)
        self.assertEqual(fake.calls[-1], ("DELETE", "login-sessions"))

    def test_logout_runs_after_fetch_failure(self):
        fake = FakeOneView(alerts=make_response(500))

        with self.assertRaises(HttpError):
            self.run_check(fake)
        self.assertEqual(fake.calls[-1], ("DELETE", "login-sessions"))

    def test_unknown_severity_fails_loudly(self):
        body = {"count": 1, "members": [{"severity": "weird"}]}
        fake = FakeOneView(alerts=make_response(200, body=body))

        with self.assertRaises(InvariantError):
            self.run_check(fake)
        self.assertEqual(fake.calls[-1], ("DELETE", "login-sessions"))

if __name__ == '__main__':
    unittest.main()
