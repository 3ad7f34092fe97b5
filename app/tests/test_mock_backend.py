"""Controller against the mock backend over real HTTP"""
import threading
import unittest

from mock.server import create_server
from portal.api.client import ApiClient
from portal.flow.context import build_context
from portal.flow.events import FormSubmitted, create_dispatcher
from portal.flow.scheduler import ManualClock, Scheduler
from portal.state.persistence.memory import MemoryStore

from tests.helpers import fill_signup


class TestMockBackend(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.server = create_server(port=0)
        cls.thread = threading.Thread(target=cls.server.serve_forever, daemon=True)
        cls.thread.start()
        host, port = cls.server.server_address
        cls.base_url = f"http://{host}:{port}"

    @classmethod
    def tearDownClass(cls):
        cls.server.shutdown()
        cls.server.server_close()
        cls.thread.join(timeout=5)

    def setUp(self):
        self.context = build_context(
            store=MemoryStore(),
            api=ApiClient(self.base_url),
            scheduler=Scheduler(ManualClock())
        )
        self.dispatcher = create_dispatcher(self.context)

    def test_register_then_login(self):
        fill_signup(self.context, registrationNumber="MOCK12345")
        success, message = self.dispatcher.dispatch(FormSubmitted("signup"))
        self.assertTrue(success, message)

        self.context.scheduler.advance(2)
        self.assertEqual(self.context.forms.mode, "login")

        self.context.view.login_form.fill(registrationNumber="MOCK12345", password="abc12345")
        success, message = self.dispatcher.dispatch(FormSubmitted("login"))

        self.assertTrue(success)
        self.assertEqual(message, "Welcome back, Asha Kumari!")
        self.assertTrue(self.context.tokens.is_authenticated())

    def test_wrong_password(self):
        self.context.view.login_form.fill(registrationNumber="NOBODY123", password="abc12345")
        success, message = self.dispatcher.dispatch(FormSubmitted("login"))
        self.assertFalse(success)
        self.assertEqual(message, "Invalid registration number or password")

    def test_duplicate_registration_rejected_by_backend(self):
        fill_signup(self.context, registrationNumber="TWICE12345")
        self.assertTrue(self.dispatcher.dispatch(FormSubmitted("signup"))[0])

        # A fresh client has no local record, so the backend decides
        other = build_context(
            store=MemoryStore(),
            api=ApiClient(self.base_url),
            scheduler=Scheduler(ManualClock())
        )
        fill_signup(other, registrationNumber="TWICE12345")
        success, message = create_dispatcher(other).dispatch(FormSubmitted("signup"))
        self.assertFalse(success)
        self.assertEqual(message, "Registration number already exists")


if __name__ == "__main__":
    unittest.main()
