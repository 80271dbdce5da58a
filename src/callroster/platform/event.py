"""
Participant list events using tagged union pattern.

The transport decodes signaling messages into these events; the receiver
dispatches them to its listeners with pattern matching.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from callroster.core.types import InCallFlags, Participant


@dataclass
class UsersInRoomEvent:
    """Full list of the participants in the room."""

    type: Literal["users_in_room"] = "users_in_room"
    participants: list[Participant] = field(default_factory=list)
    raw: dict[str, Any] | None = None


@dataclass
class ParticipantsUpdateEvent:
    """Participants whose state changed."""

    type: Literal["participants_update"] = "participants_update"
    participants: list[Participant] = field(default_factory=list)
    raw: dict[str, Any] | None = None


@dataclass
class AllParticipantsUpdateEvent:
    """In-call flags set for every participant at once."""

    type: Literal["all_participants_update"] = "all_participants_update"
    in_call: int = int(InCallFlags.DISCONNECTED)
    raw: dict[str, Any] | None = None


# Union type for all participant list events
ParticipantListEvent = (
    UsersInRoomEvent | ParticipantsUpdateEvent | AllParticipantsUpdateEvent
)


def parse_participants(raw: list[dict[str, Any]]) -> list[Participant]:
    """
    Validate decoded participant payloads (camelCase keys).

    Raises:
        pydantic.ValidationError: If an entry is not a valid participant
    """
    return [Participant.model_validate(item) for item in raw]
