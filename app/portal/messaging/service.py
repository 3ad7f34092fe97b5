"""Transient message banner

Only one message is visible at a time. Each show() replaces the text and
reschedules the auto-hide; the previous hide timer is cancelled, never
stacked.
"""
import logging
from typing import Optional, Union

from portal.config.timing import MESSAGE_DISPLAY_SECONDS
from portal.flow.scheduler import ScheduledTask, Scheduler
from portal.ui.widgets import MessageArea

from .types import MessageKind

logger = logging.getLogger(__name__)


class MessageService:
    """Drives a MessageArea"""

    def __init__(
        self,
        area: MessageArea,
        scheduler: Scheduler,
        display_seconds: float = MESSAGE_DISPLAY_SECONDS
    ):
        self.area = area
        self.scheduler = scheduler
        self.display_seconds = display_seconds
        self._hide_task: Optional[ScheduledTask] = None

    def show(self, text: str, kind: Union[MessageKind, str] = MessageKind.SUCCESS) -> None:
        kind = MessageKind(kind)
        self.area.text = text
        self.area.kind = kind.value
        self.area.icon = kind.icon
        self.area.visible = True

        if kind is MessageKind.ERROR:
            logger.warning(f"Message shown: {text}")
        else:
            logger.info(f"Message shown: {text}")

        self._cancel_hide()
        self._hide_task = self.scheduler.call_later(self.display_seconds, self.hide)

    def success(self, text: str) -> None:
        self.show(text, MessageKind.SUCCESS)

    def error(self, text: str) -> None:
        self.show(text, MessageKind.ERROR)

    def hide(self) -> None:
        self._cancel_hide()
        self.area.visible = False

    def _cancel_hide(self) -> None:
        if self._hide_task is not None:
            self._hide_task.cancel()
            self._hide_task = None
