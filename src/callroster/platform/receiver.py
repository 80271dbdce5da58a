"""
ParticipantListReceiver - in-process source of participant list messages.

The transport feeds decoded events in with dispatch(); registered listeners
(usually a ParticipantReconciler) receive them synchronously.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from callroster.core.protocols import ParticipantListMessageListener

from .event import (
    AllParticipantsUpdateEvent,
    ParticipantListEvent,
    ParticipantsUpdateEvent,
    UsersInRoomEvent,
)

logger = logging.getLogger(__name__)


class ParticipantListReceiver:
    """
    Dispatches participant list events to listeners.

    Example:
        receiver = ParticipantListReceiver()
        call_participants = CallParticipantList(receiver)

        receiver.dispatch(
            UsersInRoomEvent(participants=parse_participants(payload["users"]))
        )
    """

    def __init__(self):
        self._listeners: dict[ParticipantListMessageListener, None] = {}

    @property
    def listeners(self) -> list[ParticipantListMessageListener]:
        """Get registered listeners (copy)."""
        return list(self._listeners)

    def add_listener(self, listener: ParticipantListMessageListener) -> None:
        self._listeners[listener] = None

    def remove_listener(self, listener: ParticipantListMessageListener) -> None:
        self._listeners.pop(listener, None)

    def dispatch(self, event: ParticipantListEvent) -> None:
        """Route an event to every registered listener."""
        match event:
            case UsersInRoomEvent(participants=participants):
                self._fan_out(
                    "on_users_in_room",
                    lambda listener: listener.on_users_in_room(participants),
                )
            case ParticipantsUpdateEvent(participants=participants):
                self._fan_out(
                    "on_participants_update",
                    lambda listener: listener.on_participants_update(participants),
                )
            case AllParticipantsUpdateEvent(in_call=in_call):
                self._fan_out(
                    "on_all_participants_update",
                    lambda listener: listener.on_all_participants_update(in_call),
                )
            case _:
                logger.warning(f"Unknown participant list event: {event!r}")

    def _fan_out(
        self,
        name: str,
        call: Callable[[ParticipantListMessageListener], Any],
    ) -> None:
        for listener in list(self._listeners):
            try:
                call(listener)
            except Exception as e:
                logger.error(f"{name} error in {listener!r}: {e}", exc_info=True)
