"""Tests for the event emitter component."""

from dataclasses import dataclass

import pytest

from neo_files.core.shared import Event, EventEmitter, subscribed


class Emitter(EventEmitter):
    pass


@dataclass
class DataclassEmitter(EventEmitter):
    """Dataclass whose generated __init__ skips EventEmitter.__init__."""
    name: str = "file"


class TestEventEmitter:
    """Test cases for EventEmitter."""

    def test_trigger_calls_handlers_in_order(self):
        emitter = Emitter()
        calls = []
        emitter.on("saved", lambda event: calls.append("first"))
        emitter.on("saved", lambda event: calls.append("second"))

        event = emitter.trigger("saved")

        assert calls == ["first", "second"]
        assert event.name == "saved"
        assert event.sender is emitter

    def test_trigger_stops_when_handled(self):
        emitter = Emitter()
        calls = []

        def stop(event):
            calls.append("stop")
            event.handled = True

        emitter.on("saved", stop)
        emitter.on("saved", lambda event: calls.append("skipped"))

        event = emitter.trigger("saved", Event())

        assert calls == ["stop"]
        assert event.handled is True

    def test_trigger_keeps_explicit_sender(self):
        emitter = Emitter()
        sender = object()

        event = emitter.trigger("saved", Event(sender=sender))

        assert event.sender is sender

    def test_handler_error_propagates(self):
        emitter = Emitter()

        def fail(event):
            raise RuntimeError("handler failed")

        emitter.on("saved", fail)

        with pytest.raises(RuntimeError, match="handler failed"):
            emitter.trigger("saved")

    def test_off_specific_handler(self):
        emitter = Emitter()

        def handler(event):
            pass

        emitter.on("saved", handler)

        assert emitter.off("saved", handler) is True
        assert emitter.has_handlers("saved") is False
        assert emitter.off("saved", handler) is False

    def test_off_removes_one_registration(self):
        emitter = Emitter()
        calls = []

        def handler(event):
            calls.append(event.name)

        emitter.on("saved", handler)
        emitter.on("saved", handler)
        emitter.off("saved", handler)
        emitter.trigger("saved")

        assert calls == ["saved"]

    def test_off_all_handlers(self):
        emitter = Emitter()
        emitter.on("saved", lambda event: None)
        emitter.on("saved", lambda event: None)

        assert emitter.off("saved") is True
        assert emitter.has_handlers("saved") is False

    def test_handler_may_detach_itself(self):
        emitter = Emitter()
        calls = []

        def once(event):
            calls.append("once")
            emitter.off("saved", once)

        emitter.on("saved", once)
        emitter.trigger("saved")
        emitter.trigger("saved")

        assert calls == ["once"]

    def test_dataclass_emitter(self):
        emitter = DataclassEmitter()
        calls = []
        emitter.on("saved", lambda event: calls.append(event.sender.name))

        emitter.trigger("saved")

        assert calls == ["file"]


class TestSubscribed:
    """Test cases for the subscribed context manager."""

    def test_handler_attached_inside_block_only(self):
        emitter = Emitter()
        calls = []

        def handler(event):
            calls.append(event.name)

        with subscribed(emitter, "changed", handler):
            assert emitter.has_handlers("changed")
            emitter.trigger("changed")

        assert not emitter.has_handlers("changed")
        emitter.trigger("changed")
        assert calls == ["changed"]

    def test_handler_detached_when_block_raises(self):
        emitter = Emitter()

        with pytest.raises(ValueError):
            with subscribed(emitter, "changed", lambda event: None):
                raise ValueError("inner failure")

        assert not emitter.has_handlers("changed")

    def test_keeps_other_handlers(self):
        emitter = Emitter()

        def existing(event):
            pass

        emitter.on("changed", existing)
        with subscribed(emitter, "changed", lambda event: None):
            pass

        assert emitter._event_handlers["changed"] == [existing]

    def test_lookups_do_not_create_entries(self):
        emitter = Emitter()

        assert emitter.has_handlers("unknown") is False
        assert emitter.off("unknown") is False
        emitter.trigger("unknown")

        assert "unknown" not in emitter._event_handlers

    def test_removing_last_handler_drops_entry(self):
        emitter = Emitter()

        def handler(event):
            pass

        emitter.on("saved", handler)
        emitter.off("saved", handler)

        assert "saved" not in emitter._event_handlers
