"""
Identity resolution for incoming participant records.

Signaling updates reference participants by session id, which can rotate or
be aggregated across devices. ``IdentityIndex`` resolves an incoming record
to an already tracked participant by trying, in order: the primary session
id, the known session aliases, the actor key and the user key.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Mapping, Optional

from .types import ActorType, Participant

USER_KEY_PREFIX = "user:"


def build_actor_key(
    actor_type: Optional[ActorType], actor_id: Optional[str]
) -> Optional[str]:
    """Build the ``TYPE:id`` actor key, or None if either part is missing."""
    if actor_type is None or actor_id is None:
        return None
    return f"{actor_type.name}:{actor_id}"


def build_user_key(user_id: Optional[str]) -> Optional[str]:
    """Build the ``user:id`` key, or None if the user id is missing."""
    if user_id is None:
        return None
    return USER_KEY_PREFIX + user_id


@dataclass(frozen=True)
class Resolution:
    """
    Result of resolving one incoming record.

    Attributes:
        participant: Tracked participant the record refers to, None if new
        alias_match: True if the record describes a secondary session of the
            tracked participant rather than its primary one
        matched_by: Name of the strategy that matched, None if unresolved
    """

    participant: Optional[Participant] = None
    alias_match: bool = False
    matched_by: Optional[str] = None

    @property
    def resolved(self) -> bool:
        return self.participant is not None


UNRESOLVED = Resolution()


class IdentityIndex:
    """
    Lookup tables over the tracked participants, rebuilt for every batch.

    Example:
        index = IdentityIndex.build(tracked)
        resolution = index.resolve(incoming)
        if resolution.resolved and not resolution.alias_match:
            ...
    """

    def __init__(
        self,
        by_session: Mapping[str, Participant],
        by_alias: dict[str, Participant],
        by_actor: dict[str, Participant],
        by_user: dict[str, Participant],
    ):
        self._by_session = by_session
        self._by_alias = by_alias
        self._by_actor = by_actor
        self._by_user = by_user

        # First match wins
        self._strategies: list[
            tuple[str, Callable[[Participant], Optional[Participant]]]
        ] = [
            ("session", self._match_session),
            ("alias", self._match_alias),
            ("actor", self._match_actor),
            ("user", self._match_user),
        ]

    @classmethod
    def build(cls, tracked: Mapping[str, Participant]) -> IdentityIndex:
        """
        Build the alias, actor and user tables from tracked participants.

        The session table is the tracked mapping itself, not a copy, so
        participants added while a batch is processed resolve directly.
        """
        by_alias: dict[str, Participant] = {}
        by_actor: dict[str, Participant] = {}
        by_user: dict[str, Participant] = {}

        for participant in tracked.values():
            for alias in participant.session_ids or []:
                by_alias[alias] = participant

            actor_key = build_actor_key(participant.actor_type, participant.actor_id)
            if actor_key is not None:
                by_actor[actor_key] = participant

            user_key = build_user_key(participant.user_id)
            if user_key is not None:
                by_user[user_key] = participant

        return cls(tracked, by_alias, by_actor, by_user)

    def resolve(self, incoming: Participant) -> Resolution:
        """Find the tracked participant an incoming record refers to."""
        for name, strategy in self._strategies:
            tracked = strategy(incoming)
            if tracked is None:
                continue

            alias_match = False
            if name != "session":
                alias_match = (
                    incoming.session_id is not None
                    and incoming.session_id != tracked.session_id
                )
            return Resolution(tracked, alias_match, name)

        return UNRESOLVED

    def _match_session(self, incoming: Participant) -> Optional[Participant]:
        if incoming.session_id is None:
            return None
        return self._by_session.get(incoming.session_id)

    def _match_alias(self, incoming: Participant) -> Optional[Participant]:
        if incoming.session_id is None:
            return None
        return self._by_alias.get(incoming.session_id)

    def _match_actor(self, incoming: Participant) -> Optional[Participant]:
        key = build_actor_key(incoming.actor_type, incoming.actor_id)
        if key is None:
            return None
        return self._by_actor.get(key)

    def _match_user(self, incoming: Participant) -> Optional[Participant]:
        key = build_user_key(incoming.user_id)
        if key is None:
            return None
        return self._by_user.get(key)
