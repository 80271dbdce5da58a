"""
Call participant runtime.

Components:
    ParticipantReconciler: Tracks call participants from signaling messages
    CallParticipantListNotifier: Fans changes out to observers
    CallParticipantList: Lifecycle wrapper registering with the signaling receiver

Types:
    ParticipantDiff: Joined/updated/left/unchanged result of one message
    CallConfig: Per-call configuration
"""

from .types import CallConfig
from .notifier import CallParticipantListNotifier
from .reconciler import ParticipantDiff, ParticipantReconciler
from .call_participant_list import CallParticipantList

__all__ = [
    "CallConfig",
    "CallParticipantList",
    "CallParticipantListNotifier",
    "ParticipantDiff",
    "ParticipantReconciler",
]
