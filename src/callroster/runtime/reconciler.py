"""
ParticipantReconciler - tracks who is in the call from signaling messages.

Consumes full snapshots (users in room), incremental updates (participants
update) and the "all participants" broadcast, and turns each of them into a
diff of joined, updated, left and unchanged participants.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from callroster.core.identity import IdentityIndex
from callroster.core.types import InCallFlags, Participant, copy_session_ids

from .notifier import CallParticipantListNotifier

logger = logging.getLogger(__name__)


@dataclass
class ParticipantDiff:
    """Result of processing one participant list message."""

    joined: list[Participant] = field(default_factory=list)
    updated: list[Participant] = field(default_factory=list)
    left: list[Participant] = field(default_factory=list)
    unchanged: list[Participant] = field(default_factory=list)

    @property
    def has_changes(self) -> bool:
        """True if anyone joined, left or changed their call flags."""
        return bool(self.joined or self.updated or self.left)


class ParticipantReconciler:
    """
    Owns the participants currently in the call, keyed by primary session id.

    Implements ParticipantListMessageListener, so it can be registered
    directly with a signaling receiver. Stored participants are never handed
    out: observers, the returned diffs and the read accessors only ever get
    snapshots, except for participants that left, which are no longer
    tracked and are handed over as they are.

    Example:
        notifier = CallParticipantListNotifier()
        reconciler = ParticipantReconciler(notifier, room_token="abc123")

        diff = reconciler.on_participants_update(participants)
        for participant in diff.joined:
            print(f"{participant.display_name} joined")
    """

    def __init__(self, notifier: CallParticipantListNotifier, room_token: str = ""):
        self._notifier = notifier
        self._room_token = room_token
        self._participants: dict[str, Participant] = {}

    # --- Read access ---

    @property
    def participants(self) -> list[Participant]:
        """Get current call participants (snapshots)."""
        return [p.snapshot() for p in self._participants.values()]

    def get(self, session_id: str) -> Participant | None:
        """Get a snapshot of the participant tracked under a session id."""
        participant = self._participants.get(session_id)
        return participant.snapshot() if participant is not None else None

    def __len__(self) -> int:
        return len(self._participants)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._participants

    # --- ParticipantListMessageListener ---

    def on_users_in_room(self, participants: list[Participant]) -> ParticipantDiff:
        return self._process_participant_list(participants, is_full_list=True)

    def on_participants_update(
        self, participants: list[Participant]
    ) -> ParticipantDiff:
        return self._process_participant_list(participants, is_full_list=False)

    def on_all_participants_update(self, in_call: int) -> ParticipantDiff:
        """
        Handle in-call flags set for everyone at once.

        Only a mass disconnect is meaningful here (the call was ended for
        everyone); any other value is ignored.
        """
        diff = ParticipantDiff()
        if in_call != InCallFlags.DISCONNECTED:
            logger.debug(
                f"Call {self._room_token}: Ignoring all participants update "
                f"with in_call={in_call}"
            )
            return diff

        logger.info(f"Call {self._room_token}: Call ended for all")
        self._notifier.notify_call_ended_for_all()

        for participant in self._participants.values():
            # Not copied, it is no longer tracked
            participant.in_call = InCallFlags.DISCONNECTED
            diff.left.append(participant)
        self._participants.clear()

        if diff.left:
            self._notifier.notify_changed(
                diff.joined, diff.updated, diff.left, diff.unchanged
            )
        return diff

    # --- Reconciliation ---

    def _process_participant_list(
        self, participants: list[Participant], is_full_list: bool
    ) -> ParticipantDiff:
        diff = ParticipantDiff()
        index = IdentityIndex.build(self._participants)

        # Keyed by id() so matching is by instance, not by field equality
        not_seen = {id(p): p for p in self._participants.values()}

        for incoming in participants:
            resolution = index.resolve(incoming)
            tracked = resolution.participant

            if tracked is None:
                if incoming.is_disconnected:
                    logger.debug(
                        f"Call {self._room_token}: Ignoring disconnect of unknown "
                        f"session {incoming.session_id}"
                    )
                    continue

                self._participants[incoming.session_id] = incoming.snapshot()
                diff.joined.append(incoming.snapshot())
                logger.debug(
                    f"Call {self._room_token}: Session {incoming.session_id} joined"
                )
                continue

            not_seen.pop(id(tracked), None)

            if incoming.is_disconnected and not resolution.alias_match:
                self._participants.pop(tracked.session_id, None)
                # Not copied, it is no longer tracked
                tracked.in_call = InCallFlags.DISCONNECTED
                diff.left.append(tracked)
                logger.debug(
                    f"Call {self._room_token}: Session {tracked.session_id} left"
                )
            elif incoming.is_disconnected:
                # A secondary session of a participant still in the call went
                # away; the participant itself stays in the call.
                tracked.session_ids = copy_session_ids(incoming)
                tracked.display_name = incoming.display_name
                logger.debug(
                    f"Call {self._room_token}: Alias {incoming.session_id} of "
                    f"session {tracked.session_id} disconnected "
                    f"(matched by {resolution.matched_by})"
                )
            else:
                in_call_changed = tracked.in_call != incoming.in_call
                tracked.in_call = incoming.in_call
                tracked.session_ids = copy_session_ids(incoming)
                tracked.display_name = incoming.display_name

                if in_call_changed:
                    diff.updated.append(tracked.snapshot())
                else:
                    diff.unchanged.append(tracked.snapshot())

        if is_full_list:
            # Incremental updates only carry the participants that changed,
            # so only a full list implies that missing participants left.
            for tracked in not_seen.values():
                self._participants.pop(tracked.session_id, None)
                # Not copied, it is no longer tracked
                tracked.in_call = InCallFlags.DISCONNECTED
                diff.left.append(tracked)

        if diff.has_changes:
            logger.debug(
                f"Call {self._room_token}: {len(diff.joined)} joined, "
                f"{len(diff.updated)} updated, {len(diff.left)} left, "
                f"{len(diff.unchanged)} unchanged"
            )
            self._notifier.notify_changed(
                diff.joined, diff.updated, diff.left, diff.unchanged
            )
        return diff
