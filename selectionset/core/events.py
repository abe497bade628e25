from loguru import logger
from typing import Callable, List


class Signal:
    """
    A simple observer pattern implementation (Synchronous).
    Subscribers are called in connection order, each one running to completion
    before the next. Past emissions are not replayed to new subscribers.
    """
    def __init__(self, name: str = "Signal"):
        self.name = name
        self._subscribers: List[Callable] = []

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def connect(self, callback: Callable):
        """Connect a callback function to this signal."""
        if callback not in self._subscribers:
            self._subscribers.append(callback)

    def disconnect(self, callback: Callable):
        """Disconnect a callback function from this signal."""
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def disconnect_all(self):
        """Drop every subscriber (owner teardown)."""
        self._subscribers.clear()

    def emit(self, *args, **kwargs):
        """Broadcast arguments to all subscribers synchronously."""
        # Iterate a copy so handlers may disconnect themselves mid-dispatch
        for sub in list(self._subscribers):
            try:
                sub(*args, **kwargs)
            except Exception as e:
                logger.error(f"Signal '{self.name}' error in subscriber '{sub}': {e}")
