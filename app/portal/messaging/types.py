"""Message kinds"""
from enum import Enum


class MessageKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"

    @property
    def icon(self) -> str:
        return MESSAGE_ICONS[self]


MESSAGE_ICONS = {
    MessageKind.SUCCESS: "fa-check-circle",
    MessageKind.ERROR: "fa-exclamation-circle",
}
