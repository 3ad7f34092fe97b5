import io
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

from portal import cli
from portal.flow.scheduler import ManualClock, Scheduler
from portal.state.persistence.memory import MemoryStore

from tests.helpers import fake_response


class TestCli(unittest.TestCase):
    def setUp(self):
        self.store = MemoryStore()
        # Keep every run on the in-process store and a clock that never blocks
        clock = ManualClock()
        patcher = patch.multiple(
            "portal.flow.context",
            create_store=lambda: self.store,
            Scheduler=lambda: Scheduler(clock)
        )
        patcher.start()
        self.addCleanup(patcher.stop)
        sleep_patcher = patch("portal.flow.scheduler.time.sleep", clock.advance)
        sleep_patcher.start()
        self.addCleanup(sleep_patcher.stop)
        logging_patcher = patch("portal.cli.configure_logging")
        logging_patcher.start()
        self.addCleanup(logging_patcher.stop)

    def run_cli(self, *argv):
        out = io.StringIO()
        with redirect_stdout(out):
            code = cli.main(["--api-url", "http://backend.test", *argv])
        return code, out.getvalue()

    @patch("portal.api.client.requests.request")
    def test_login(self, mock_request):
        mock_request.return_value = fake_response(200, {
            "success": True,
            "token": "xyz",
            "user": {"name": "Asha"}
        })

        code, output = self.run_cli("login", "AB123456", "--password", "abc12345")

        self.assertEqual(code, 0)
        self.assertIn("[success] Welcome back, Asha!", output)
        self.assertIn("Redirecting to dashboard.html", output)
        self.assertEqual(self.store.get("token"), "xyz")

    @patch("portal.api.client.requests.request")
    def test_signup_validation_error(self, mock_request):
        code, output = self.run_cli(
            "signup", "--name", "Asha", "--father-name", "Ramesh",
            "--course", "UG", "--department", "HISTORY",
            "--reg-no", "AB123456", "--year", "2019",
            "--password", "abc12345", "--confirm-password", "abc00000"
        )
        self.assertEqual(code, 1)
        self.assertIn("[error] Passwords do not match", output)
        mock_request.assert_not_called()

    def test_signup_department_outside_course(self):
        code, output = self.run_cli(
            "signup", "--name", "Asha", "--father-name", "Ramesh",
            "--course", "PG", "--department", "BCA",
            "--reg-no", "AB123456", "--year", "2019", "--password", "abc12345"
        )
        self.assertEqual(code, 2)
        self.assertIn("Error:", output)

    def test_status_and_logout(self):
        self.assertEqual(self.run_cli("status"), (1, "Not signed in\n"))
        self.store.set("token", "xyz")
        self.assertEqual(self.run_cli("status"), (0, "Signed in\n"))
        self.assertEqual(self.run_cli("logout"), (0, "Signed out\n"))
        self.assertEqual(self.run_cli("logout"), (0, "No active session\n"))


if __name__ == "__main__":
    unittest.main()
