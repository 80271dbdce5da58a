"""
Participant data model for call signaling.

Participants arrive from the signaling layer as decoded payload dicts
(camelCase keys) and are validated into ``Participant`` models. The model is
mutable on purpose: the reconciler owns its stored instances and refreshes
them in place between notifications.
"""

from __future__ import annotations

from enum import Enum, IntFlag
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class InCallFlags(IntFlag):
    """Bit flags of the ``inCall`` field."""

    DISCONNECTED = 0
    IN_CALL = 1
    WITH_AUDIO = 2
    WITH_VIDEO = 4
    WITH_PHONE = 8


class ActorType(str, Enum):
    """Kinds of actors that can take part in a call."""

    USERS = "users"
    GROUPS = "groups"
    GUESTS = "guests"
    EMAILS = "emails"
    CIRCLES = "circles"
    BRIDGED = "bridged"
    FEDERATED_USERS = "federated_users"
    PHONES = "phones"


class Participant(BaseModel):
    """Participant record as reported by the signaling server."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="allow",  # Keep fields the signaling server adds later
    )

    session_id: Optional[str] = Field(default=None, alias="sessionId")
    session_ids: Optional[list[str]] = Field(
        default_factory=list, alias="sessionIds"
    )
    actor_type: Optional[ActorType] = Field(default=None, alias="actorType")
    actor_id: Optional[str] = Field(default=None, alias="actorId")
    user_id: Optional[str] = Field(default=None, alias="userId")
    in_call: int = Field(default=int(InCallFlags.DISCONNECTED), alias="inCall")
    display_name: Optional[str] = Field(default=None, alias="displayName")
    internal: Optional[bool] = None
    last_ping: int = Field(default=0, alias="lastPing")
    type: Optional[int] = Field(default=None, alias="participantType")

    @property
    def is_disconnected(self) -> bool:
        return self.in_call == InCallFlags.DISCONNECTED

    def snapshot(self) -> Participant:
        """
        Return an independent copy of this participant.

        Deep copy, including extra fields the server sent (which may hold
        nested dicts or lists), so neither copy sees mutations made through
        the other. A ``None`` session id list becomes ``[]``.
        """
        copied = self.model_copy(deep=True)
        if copied.session_ids is None:
            copied.session_ids = []
        return copied


def copy_session_ids(participant: Participant) -> list[str]:
    """Copy the session aliases of a participant; ``None`` becomes ``[]``."""
    if participant.session_ids is None:
        return []
    return list(participant.session_ids)
