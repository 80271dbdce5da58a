"""Unit tests for CallParticipantListNotifier."""

import logging
from unittest.mock import MagicMock

from callroster.core.protocols import CallParticipantObserver
from callroster.runtime.notifier import CallParticipantListNotifier
from callroster.testing import RecordingObserver

from tests.conftest import make_participant


class TestCallParticipantListNotifier:
    def test_starts_without_observers(self):
        notifier = CallParticipantListNotifier()
        assert notifier.observers == []

    def test_add_observer(self):
        notifier = CallParticipantListNotifier()
        observer = RecordingObserver()

        notifier.add_observer(observer)

        assert notifier.observers == [observer]

    def test_add_observer_twice_registers_once(self):
        notifier = CallParticipantListNotifier()
        observer = RecordingObserver()

        notifier.add_observer(observer)
        notifier.add_observer(observer)
        notifier.notify_call_ended_for_all()

        assert notifier.observers == [observer]
        assert observer.call_ended_count == 1

    def test_remove_observer(self):
        notifier = CallParticipantListNotifier()
        observer = RecordingObserver()
        notifier.add_observer(observer)

        notifier.remove_observer(observer)
        notifier.notify_call_ended_for_all()

        assert notifier.observers == []
        assert observer.call_ended_count == 0

    def test_remove_unknown_observer_is_noop(self):
        notifier = CallParticipantListNotifier()
        notifier.remove_observer(RecordingObserver())
        assert notifier.observers == []

    def test_observers_returns_copy(self):
        notifier = CallParticipantListNotifier()
        notifier.add_observer(RecordingObserver())

        notifier.observers.clear()

        assert len(notifier.observers) == 1

    def test_notify_changed_reaches_all_observers(self):
        notifier = CallParticipantListNotifier()
        first, second = RecordingObserver(), RecordingObserver()
        notifier.add_observer(first)
        notifier.add_observer(second)
        joined = [make_participant("s1")]

        notifier.notify_changed(joined, [], [], [])

        for observer in (first, second):
            assert observer.last_change.joined == joined
            assert observer.last_change.updated == []

    def test_notify_changed_passes_collections_in_order(self):
        notifier = CallParticipantListNotifier()
        observer = MagicMock()
        notifier.add_observer(observer)
        joined, updated, left, unchanged = [1], [2], [3], [4]

        notifier.notify_changed(joined, updated, left, unchanged)

        observer.on_call_participants_changed.assert_called_once_with(
            joined, updated, left, unchanged
        )

    def test_notifies_in_registration_order(self):
        notifier = CallParticipantListNotifier()
        calls = []
        for name in ("a", "b", "c"):
            observer = MagicMock()
            observer.on_call_ended_for_all.side_effect = lambda n=name: calls.append(n)
            notifier.add_observer(observer)

        notifier.notify_call_ended_for_all()

        assert calls == ["a", "b", "c"]

    def test_failing_observer_does_not_block_others(self, caplog):
        """An observer error is logged and the next observer still runs."""
        notifier = CallParticipantListNotifier()
        failing = MagicMock()
        failing.on_call_participants_changed.side_effect = RuntimeError("boom")
        failing.on_call_ended_for_all.side_effect = RuntimeError("boom")
        healthy = RecordingObserver()
        notifier.add_observer(failing)
        notifier.add_observer(healthy)

        with caplog.at_level(logging.ERROR, logger="callroster.runtime.notifier"):
            notifier.notify_changed([make_participant("s1")], [], [], [])
            notifier.notify_call_ended_for_all()

        assert len(healthy.changes) == 1
        assert healthy.call_ended_count == 1
        assert "on_call_participants_changed error" in caplog.text
        assert "on_call_ended_for_all error" in caplog.text

    def test_recording_observer_is_an_observer(self):
        assert isinstance(RecordingObserver(), CallParticipantObserver)
