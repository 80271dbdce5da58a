"""Testing utilities for code that observes call participants."""

from callroster.testing.fakes import (
    FakeSignalingReceiver,
    ParticipantsChange,
    RecordingObserver,
)

__all__ = ["FakeSignalingReceiver", "ParticipantsChange", "RecordingObserver"]
