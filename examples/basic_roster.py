"""
Basic call roster.

Feeds a few signaling payloads through a ParticipantListReceiver and prints
who joined, changed their call flags or left.

Run with (after copying call_config.yaml.example to call_config.yaml):
    python examples/basic_roster.py
"""

import logging

from callroster import (
    CallParticipantList,
    InCallFlags,
    ParticipantListReceiver,
    load_call_config,
    setup_logging,
)
from callroster.platform import (
    AllParticipantsUpdateEvent,
    ParticipantsUpdateEvent,
    UsersInRoomEvent,
    parse_participants,
)

logger = logging.getLogger("callroster.examples.basic_roster")


class PrintingObserver:
    def on_call_participants_changed(self, joined, updated, left, unchanged):
        for participant in joined:
            logger.info(f"{participant.display_name} joined")
        for participant in updated:
            flags = InCallFlags(participant.in_call)
            logger.info(f"{participant.display_name} is now {flags!r}")
        for participant in left:
            logger.info(f"{participant.display_name} left")

    def on_call_ended_for_all(self):
        logger.info("Call ended for everyone")


def main():
    config = load_call_config("team_call")
    setup_logging(config.level)

    receiver = ParticipantListReceiver()
    with CallParticipantList(receiver, config) as roster:
        roster.add_observer(PrintingObserver())

        receiver.dispatch(
            UsersInRoomEvent(
                participants=parse_participants(
                    [
                        {
                            "sessionId": "s1",
                            "actorType": "users",
                            "actorId": "alice",
                            "userId": "alice",
                            "inCall": 1,
                            "displayName": "Alice",
                        },
                        {
                            "sessionId": "s2",
                            "actorType": "guests",
                            "actorId": "g1",
                            "inCall": 3,
                            "displayName": "Guest",
                        },
                    ]
                )
            )
        )

        # Alice joins from her phone; the new session is matched to her by actor
        receiver.dispatch(
            ParticipantsUpdateEvent(
                participants=parse_participants(
                    [
                        {
                            "sessionId": "s3",
                            "sessionIds": ["s1", "s3"],
                            "actorType": "users",
                            "actorId": "alice",
                            "inCall": 7,
                            "displayName": "Alice",
                        }
                    ]
                )
            )
        )

        receiver.dispatch(AllParticipantsUpdateEvent(in_call=0))


if __name__ == "__main__":
    main()
