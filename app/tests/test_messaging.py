import unittest
from unittest.mock import MagicMock

from portal.flow.scheduler import ManualClock, Scheduler
from portal.messaging.service import MessageService
from portal.messaging.types import MessageKind
from portal.ui.widgets import MessageArea


class TestScheduler(unittest.TestCase):
    def setUp(self):
        self.scheduler = Scheduler(ManualClock())

    def test_runs_in_due_order(self):
        calls = []
        self.scheduler.call_later(2, calls.append, "second")
        self.scheduler.call_later(1, calls.append, "first")

        self.assertEqual(self.scheduler.advance(0.5), 0)
        self.assertEqual(self.scheduler.advance(2), 2)
        self.assertEqual(calls, ["first", "second"])

    def test_cancelled_task_never_runs(self):
        callback = MagicMock()
        task = self.scheduler.call_later(1, callback)
        task.cancel()
        self.scheduler.advance(5)
        callback.assert_not_called()
        self.assertIsNone(self.scheduler.next_due())

    def test_run_until_idle_sleeps_between_tasks(self):
        clock = self.scheduler.clock
        calls = []
        self.scheduler.call_later(1.5, calls.append, "redirect")

        self.scheduler.run_until_idle(sleep=clock.advance)

        self.assertEqual(calls, ["redirect"])
        self.assertEqual(clock(), 1.5)

    def test_advance_needs_manual_clock(self):
        with self.assertRaises(TypeError):
            Scheduler().advance(1)


class TestMessageService(unittest.TestCase):
    def setUp(self):
        self.area = MessageArea()
        self.scheduler = Scheduler(ManualClock())
        self.messages = MessageService(self.area, self.scheduler)

    def test_show_success(self):
        self.messages.show("Saved", "success")
        self.assertTrue(self.area.visible)
        self.assertEqual(self.area.text, "Saved")
        self.assertEqual(self.area.kind, "success")
        self.assertEqual(self.area.icon, "fa-check-circle")

    def test_show_error_icon(self):
        self.messages.error("Nope")
        self.assertEqual(self.area.kind, MessageKind.ERROR.value)
        self.assertEqual(self.area.icon, "fa-exclamation-circle")

    def test_auto_hide_after_five_seconds(self):
        self.messages.success("Saved")
        self.scheduler.advance(4.5)
        self.assertTrue(self.area.visible)
        self.scheduler.advance(0.5)
        self.assertFalse(self.area.visible)

    def test_new_message_replaces_timer(self):
        self.messages.success("first")
        self.scheduler.advance(4)
        self.messages.error("second")
        self.assertEqual(len(self.scheduler.pending()), 1)

        self.scheduler.advance(4)
        self.assertTrue(self.area.visible)
        self.assertEqual(self.area.text, "second")

        self.scheduler.advance(1)
        self.assertFalse(self.area.visible)

    def test_hide_is_immediate(self):
        self.messages.success("Saved")
        self.messages.hide()
        self.assertFalse(self.area.visible)
        self.assertEqual(self.scheduler.pending(), [])

    def test_unknown_kind(self):
        with self.assertRaises(ValueError):
            self.messages.show("x", "warning")


if __name__ == "__main__":
    unittest.main()
