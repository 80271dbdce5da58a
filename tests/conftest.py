"""
Pytest fixtures for callroster tests.

Provides participant factories and a wired-up reconciler so tests drive the
participant list with plain signaling payloads, no transport needed.
"""

from typing import Any

import pytest

from callroster.core.types import ActorType, InCallFlags, Participant
from callroster.runtime.notifier import CallParticipantListNotifier
from callroster.runtime.reconciler import ParticipantReconciler
from callroster.testing import FakeSignalingReceiver, RecordingObserver

IN_CALL = int(InCallFlags.IN_CALL)
IN_CALL_WITH_AUDIO = int(InCallFlags.IN_CALL | InCallFlags.WITH_AUDIO)
DISCONNECTED = int(InCallFlags.DISCONNECTED)


def make_participant(
    session_id: str | None = "session-1",
    in_call: int = IN_CALL,
    session_ids: list[str] | None = None,
    actor_type: ActorType | None = None,
    actor_id: str | None = None,
    user_id: str | None = None,
    display_name: str | None = None,
    **extra: Any,
) -> Participant:
    """Create a Participant with sensible defaults."""
    return Participant(
        session_id=session_id,
        session_ids=session_ids if session_ids is not None else [],
        actor_type=actor_type,
        actor_id=actor_id,
        user_id=user_id,
        in_call=in_call,
        display_name=display_name,
        **extra,
    )


def make_user(
    session_id: str,
    user_id: str,
    in_call: int = IN_CALL,
    session_ids: list[str] | None = None,
    display_name: str | None = None,
) -> Participant:
    """Create a logged-in user participant (actor and user keys set)."""
    return make_participant(
        session_id=session_id,
        in_call=in_call,
        session_ids=session_ids,
        actor_type=ActorType.USERS,
        actor_id=user_id,
        user_id=user_id,
        display_name=display_name or user_id.title(),
    )


@pytest.fixture
def observer() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture
def notifier(observer) -> CallParticipantListNotifier:
    notifier = CallParticipantListNotifier()
    notifier.add_observer(observer)
    return notifier


@pytest.fixture
def reconciler(notifier) -> ParticipantReconciler:
    return ParticipantReconciler(notifier, room_token="room-123")


@pytest.fixture
def receiver() -> FakeSignalingReceiver:
    return FakeSignalingReceiver()
