"""
CallParticipantList - keeps track of the participants in a call.

Registers a ParticipantReconciler with the signaling receiver as soon as it
is created and tracks the call participants until destroyed. Changes can be
received by adding an observer; no sorting is guaranteed on the
participants.
"""

from __future__ import annotations

import logging

from callroster.core.protocols import CallParticipantObserver, SignalingMessageReceiver
from callroster.core.types import Participant

from .notifier import CallParticipantListNotifier
from .reconciler import ParticipantReconciler
from .types import CallConfig

logger = logging.getLogger(__name__)


class CallParticipantList:
    """
    Lifecycle wrapper around the reconciler.

    Example:
        class Roster:
            def on_call_participants_changed(self, joined, updated, left, unchanged):
                for participant in left:
                    print(f"{participant.display_name} left the call")

            def on_call_ended_for_all(self):
                print("Call ended")

        call_participants = CallParticipantList(receiver)
        call_participants.add_observer(Roster())
        ...
        call_participants.destroy()
    """

    def __init__(
        self,
        signaling_message_receiver: SignalingMessageReceiver,
        config: CallConfig | None = None,
    ):
        self.config = config or CallConfig()
        self._signaling_message_receiver = signaling_message_receiver
        self._notifier = CallParticipantListNotifier()
        self._reconciler = ParticipantReconciler(
            self._notifier, room_token=self.config.room_token
        )
        self._destroyed = False

        self._signaling_message_receiver.add_listener(self._reconciler)
        logger.info(f"Call {self.config.room_token}: Tracking call participants")

    def __enter__(self) -> CallParticipantList:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if not self._destroyed:
            self.destroy()

    @property
    def is_destroyed(self) -> bool:
        return self._destroyed

    @property
    def participants(self) -> list[Participant]:
        """Get current call participants (snapshots)."""
        return self._reconciler.participants

    def destroy(self) -> None:
        """Stop tracking: unregister from the signaling receiver."""
        if self._destroyed:
            logger.warning(
                f"Call {self.config.room_token}: CallParticipantList already destroyed"
            )
            return

        self._signaling_message_receiver.remove_listener(self._reconciler)
        self._destroyed = True
        logger.info(
            f"Call {self.config.room_token}: Stopped tracking call participants"
        )

    def add_observer(self, observer: CallParticipantObserver) -> None:
        self._notifier.add_observer(observer)

    def remove_observer(self, observer: CallParticipantObserver) -> None:
        self._notifier.remove_observer(observer)
