"""
callroster - Track who is in a call from signaling participant lists.

Core Layer:
    Participant: Participant record from the signaling server
    InCallFlags: Bit flags of the inCall field
    IdentityIndex: Resolves records to tracked participants (session, alias, actor, user)

Runtime Layer:
    CallParticipantList: Registers with the signaling receiver, owns the lifecycle
    ParticipantReconciler: Turns participant lists into joined/updated/left/unchanged
    CallParticipantListNotifier: Fans changes out to observers

Platform Layer:
    ParticipantListReceiver: In-process signaling receiver
    ParticipantListEvent: Typed participant list events

Configuration:
    CallConfig: Per-call configuration
    load_call_config: Load CallConfig from call_config.yaml

Example:
    from callroster import CallParticipantList, ParticipantListReceiver
    from callroster.platform import UsersInRoomEvent, parse_participants

    class PrintingObserver:
        def on_call_participants_changed(self, joined, updated, left, unchanged):
            for participant in joined:
                print(f"{participant.display_name} joined")

        def on_call_ended_for_all(self):
            print("Call ended")

    receiver = ParticipantListReceiver()
    call_participants = CallParticipantList(receiver)
    call_participants.add_observer(PrintingObserver())

    receiver.dispatch(UsersInRoomEvent(participants=parse_participants(users)))
    call_participants.destroy()
"""

# Core layer
from .core import (
    ActorType,
    CallParticipantObserver,
    IdentityIndex,
    InCallFlags,
    Participant,
    ParticipantListMessageListener,
    SignalingMessageReceiver,
)

# Runtime layer
from .runtime import (
    CallConfig,
    CallParticipantList,
    CallParticipantListNotifier,
    ParticipantDiff,
    ParticipantReconciler,
)

# Platform layer
from .platform import ParticipantListEvent, ParticipantListReceiver

# Configuration
from .config import load_call_config
from .logging_setup import setup_logging

__all__ = [
    # Core
    "ActorType",
    "CallParticipantObserver",
    "IdentityIndex",
    "InCallFlags",
    "Participant",
    "ParticipantListMessageListener",
    "SignalingMessageReceiver",
    # Runtime
    "CallConfig",
    "CallParticipantList",
    "CallParticipantListNotifier",
    "ParticipantDiff",
    "ParticipantReconciler",
    # Platform
    "ParticipantListEvent",
    "ParticipantListReceiver",
    # Configuration
    "load_call_config",
    "setup_logging",
]

__version__ = "0.0.1"
