"""Navigation targets"""
import logging
from abc import ABC, abstractmethod
from typing import List, Optional

logger = logging.getLogger(__name__)


class NavigatorInterface(ABC):
    """Changes the current location of the host"""

    @abstractmethod
    def navigate(self, url: str) -> None:
        pass


class RecordingNavigator(NavigatorInterface):
    """Keeps the location in memory"""

    def __init__(self):
        self.history: List[str] = []

    @property
    def location(self) -> Optional[str]:
        return self.history[-1] if self.history else None

    def navigate(self, url: str) -> None:
        logger.info(f"Navigating to {url}")
        self.history.append(url)
