"""Core types, identity resolution and protocols."""

from callroster.core.identity import (
    IdentityIndex,
    Resolution,
    build_actor_key,
    build_user_key,
)
from callroster.core.protocols import (
    CallParticipantObserver,
    ParticipantListMessageListener,
    SignalingMessageReceiver,
)
from callroster.core.types import (
    ActorType,
    InCallFlags,
    Participant,
    copy_session_ids,
)

__all__ = [
    "ActorType",
    "CallParticipantObserver",
    "IdentityIndex",
    "InCallFlags",
    "Participant",
    "ParticipantListMessageListener",
    "Resolution",
    "SignalingMessageReceiver",
    "build_actor_key",
    "build_user_key",
    "copy_session_ids",
]
