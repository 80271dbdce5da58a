"""Observer fan-out for call participant changes. Sync, unit-testable."""

from __future__ import annotations

import logging
from typing import Collection

from callroster.core.protocols import CallParticipantObserver
from callroster.core.types import Participant

logger = logging.getLogger(__name__)


class CallParticipantListNotifier:
    """
    Broadcasts participant changes to the registered observers.

    Observers are notified in registration order. A failing observer is
    logged and skipped so the rest still get the notification.
    """

    def __init__(self):
        # dict as an insertion-ordered set
        self._observers: dict[CallParticipantObserver, None] = {}

    @property
    def observers(self) -> list[CallParticipantObserver]:
        """Get registered observers (copy)."""
        return list(self._observers)

    def add_observer(self, observer: CallParticipantObserver) -> None:
        self._observers[observer] = None

    def remove_observer(self, observer: CallParticipantObserver) -> None:
        self._observers.pop(observer, None)

    def notify_changed(
        self,
        joined: Collection[Participant],
        updated: Collection[Participant],
        left: Collection[Participant],
        unchanged: Collection[Participant],
    ) -> None:
        for observer in list(self._observers):
            try:
                observer.on_call_participants_changed(joined, updated, left, unchanged)
            except Exception as e:
                logger.error(
                    f"on_call_participants_changed error in {observer!r}: {e}",
                    exc_info=True,
                )

    def notify_call_ended_for_all(self) -> None:
        for observer in list(self._observers):
            try:
                observer.on_call_ended_for_all()
            except Exception as e:
                logger.error(
                    f"on_call_ended_for_all error in {observer!r}: {e}",
                    exc_info=True,
                )
