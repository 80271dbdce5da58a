"""Protocols at the edges of the participant list: signaling in, observers out."""

from __future__ import annotations

from typing import TYPE_CHECKING, Collection, Protocol, runtime_checkable

if TYPE_CHECKING:
    from callroster.core.types import Participant


@runtime_checkable
class CallParticipantObserver(Protocol):
    """
    Receives changes of the call participants.

    Callbacks run synchronously on the signaling delivery path: they must
    return quickly and must not add or remove observers.
    """

    def on_call_participants_changed(
        self,
        joined: Collection[Participant],
        updated: Collection[Participant],
        left: Collection[Participant],
        unchanged: Collection[Participant],
    ) -> None:
        """
        Called when participants joined, left or changed their call flags.

        No ordering is guaranteed inside any of the collections. Every
        participant is a snapshot owned by the receiver.
        """
        ...

    def on_call_ended_for_all(self) -> None:
        """Called when the call was ended for everyone."""
        ...


@runtime_checkable
class ParticipantListMessageListener(Protocol):
    """
    Listener for participant list messages from the signaling server.

    Receivers ignore return values; implementations may return a result
    (ParticipantReconciler returns a ParticipantDiff).
    """

    def on_users_in_room(self, participants: list[Participant]) -> object:
        """Full list of the participants in the room."""
        ...

    def on_participants_update(self, participants: list[Participant]) -> object:
        """Only the participants whose state changed."""
        ...

    def on_all_participants_update(self, in_call: int) -> object:
        """All participants were set to the given in-call flags."""
        ...


@runtime_checkable
class SignalingMessageReceiver(Protocol):
    """Source of participant list messages."""

    def add_listener(self, listener: ParticipantListMessageListener) -> None: ...

    def remove_listener(self, listener: ParticipantListMessageListener) -> None: ...
