"""
Signaling side of the participant list.

Components:
    ParticipantListReceiver: Dispatches participant list events to listeners
    ParticipantListEvent: Union of the participant list event types
"""

from .event import (
    AllParticipantsUpdateEvent,
    ParticipantListEvent,
    ParticipantsUpdateEvent,
    UsersInRoomEvent,
    parse_participants,
)
from .receiver import ParticipantListReceiver

__all__ = [
    "AllParticipantsUpdateEvent",
    "ParticipantListEvent",
    "ParticipantListReceiver",
    "ParticipantsUpdateEvent",
    "UsersInRoomEvent",
    "parse_participants",
]
