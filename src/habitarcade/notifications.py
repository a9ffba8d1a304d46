"""User-visible notifications (toasts) fed from the event bus."""

from dataclasses import dataclass
import logging
import time
from typing import Callable, List, Optional

from habitarcade.core.events import Event, EventBus, EventType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Toast:
    title: str
    message: str
    created_at: float


class ToastCenter:
    """Collects XP notifications for the host to display.

    Toasts expire ``duration_s`` after they were raised; hosts that never
    call ``visible()`` can still read ``history``.
    """

    def __init__(self, event_bus: EventBus, duration_s: float = 4.0, max_history: int = 20):
        self.duration_s = duration_s
        self._max_history = max_history
        self._toasts: List[Toast] = []
        self._unsubscribe: Optional[Callable[[], None]] = event_bus.subscribe(
            EventType.XP_AWARDED, self._on_xp_awarded
        )

    @property
    def history(self) -> List[Toast]:
        return list(self._toasts)

    def visible(self, now: Optional[float] = None) -> List[Toast]:
        now = time.time() if now is None else now
        return [t for t in self._toasts if now - t.created_at < self.duration_s]

    def close(self) -> None:
        if self._unsubscribe:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_xp_awarded(self, event: Event) -> None:
        toast = Toast(
            title=event.data.get("title", "Game Complete!"),
            message=event.data.get("message", f"You earned {event.data.get('xp', 0)} XP!"),
            created_at=event.timestamp,
        )
        self._toasts.append(toast)
        if len(self._toasts) > self._max_history:
            self._toasts.pop(0)
        logger.info(f"Notification: {toast.title} {toast.message}")
